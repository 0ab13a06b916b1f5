"""HTTP API: Telegram webhook, health and metrics."""
