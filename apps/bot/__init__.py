"""Telegram bot: handlers, keyboards and Bot API transport."""
