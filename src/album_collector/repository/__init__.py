"""Persistence helpers used by the REST and GraphQL handlers."""
