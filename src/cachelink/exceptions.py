"""
cachelink Exceptions.

Custom exception hierarchy for the configuration layer.
"""

from typing import Any


class CacheLinkError(Exception):
    """Base exception for all cachelink errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)


class ConfigError(CacheLinkError):
    """Raised when a configuration value cannot be used."""

    pass


class MalformedAddressError(ConfigError):
    """Raised when a server address cannot be parsed into an endpoint."""

    def __init__(self, message: str, address: str | None = None, code: int | None = None):
        self.address = address
        super().__init__(message, code)


class ConfigValidationError(ConfigError):
    """Raised by the explicit validation step when a rule is violated.

    ``errors`` holds the individual rule failures as reported by pydantic.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        code: int | None = None,
    ):
        self.errors = errors or []
        super().__init__(message, code)
