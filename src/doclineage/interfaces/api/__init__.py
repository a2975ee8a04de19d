"""REST API (Falcon ASGI)."""
