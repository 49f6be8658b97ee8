"""Request logging to the service database."""
