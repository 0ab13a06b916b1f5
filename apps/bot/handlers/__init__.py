"""Bot command, callback and relay handlers."""
