"""Storage gateway core: entities, value objects, exceptions and protocols."""
