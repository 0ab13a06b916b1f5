"""Prometheus metrics for monitoring."""

from prometheus_client import Counter, Gauge, Histogram

# Webhook metrics
webhook_updates_total = Counter(
    "telegram_webhook_updates_total", "Total number of webhook updates received", ["update_type"]
)

# Response time metrics
api_request_duration = Histogram(
    "api_request_duration_seconds", "API request duration in seconds", ["method", "endpoint", "status"]
)

# Match metrics
match_requests_total = Counter("match_requests_total", "Total number of match requests", ["action"])

matches_created_total = Counter("matches_created_total", "Total number of successful matches")

match_queue_size = Gauge("match_queue_size", "Current size of the waiting queue")

active_sessions = Gauge("active_sessions", "Number of users currently paired")

# Relay metrics
messages_relayed_total = Counter("messages_relayed_total", "Total number of relayed messages", ["kind"])

relay_failures_total = Counter("relay_failures_total", "Total number of relays the transport rejected")

history_retractions_total = Counter(
    "history_retractions_total", "Delivered messages retracted on re-pairing", ["outcome"]
)

# Safety & Moderation metrics
reports_total = Counter("reports_total", "Total number of reports filed")

blocks_total = Counter("blocks_total", "Total number of blocks imposed", ["term"])
