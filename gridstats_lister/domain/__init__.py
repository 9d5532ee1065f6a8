"""Domain layer: models, repository interfaces and scoring services."""
