"""Domain layer: value objects, exceptions and ports."""
