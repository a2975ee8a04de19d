"""Domain layer: entities, value objects and policies."""
