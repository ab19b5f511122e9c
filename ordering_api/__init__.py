"""HTTP API for the order service."""
