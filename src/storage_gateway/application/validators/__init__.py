"""Upload validators."""

from .file_size_validator import FileSizeValidator, create_file_size_validator

__all__ = ["FileSizeValidator", "create_file_size_validator"]
