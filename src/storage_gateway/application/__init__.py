"""Storage gateway application layer."""
