"""HTTP surface of the storage gateway."""
