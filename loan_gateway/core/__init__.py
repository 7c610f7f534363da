"""Core application wiring: configuration, logging, metrics and dependencies."""
