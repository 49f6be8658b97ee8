"""Configuration, databases, request context and dependency wiring."""
