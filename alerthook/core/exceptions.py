"""Custom exceptions for the alerthook application."""


class AlertHookException(Exception):
    """Base exception for all alerthook errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        """Initialize exception with message and optional details.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationException(AlertHookException):
    """Configuration error."""

    pass


class ValidationException(AlertHookException):
    """Data validation failed."""

    pass


class WebException(AlertHookException):
    """Exceptions related to outbound web requests."""

    pass


class RequestLimitException(WebException):
    """Maximum number of web requests exceeded."""

    def __init__(self, limit: int, details: dict | None = None) -> None:
        """Initialize with the request budget that was exceeded."""
        super().__init__("Maximum number of web requests exceeded!", details={"limit": limit, **(details or {})})
        self.limit = limit
