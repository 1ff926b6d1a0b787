"""GraphQL collection service."""
