"""Bot middlewares."""
