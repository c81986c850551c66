"""Infrastructure adapters for databases, settings and logging."""
