"""Domain layer - schema types, typed values, identities and exceptions."""
