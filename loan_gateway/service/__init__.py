"""Decision services."""
