"""Version information for storage-gateway."""

__version__ = "0.3.0"
