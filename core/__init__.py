"""Core modules for the application: configuration and metrics."""
