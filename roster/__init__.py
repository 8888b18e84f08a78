"""Character roster service."""
