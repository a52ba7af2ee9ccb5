"""Request logging, structlog setup and an in-memory metrics snapshot."""
