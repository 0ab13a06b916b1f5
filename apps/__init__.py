"""Runnable services."""
