"""Domain layer — request-scoped value types and pure classification rules."""
