"""Custom exceptions for the processing module."""

from typing import Any


class DeclarationProcessingError(Exception):
    """Raised when errors are encountered during YAML declarations processing."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__("Errors encountered during YAML declarations processing.")
        self.errors = errors
