"""Domain layer: entities, repository interfaces and exceptions."""
