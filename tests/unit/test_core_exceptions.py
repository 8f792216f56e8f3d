"""Tests for core exceptions module."""

from alerthook.core.exceptions import (
    AlertHookException,
    ConfigurationException,
    RequestLimitException,
    ValidationException,
    WebException,
)


def test_base_exception() -> None:
    """Test base AlertHookException."""
    exc = AlertHookException("Test error", details={"key": "value"})

    assert str(exc) == "Test error"
    assert exc.message == "Test error"
    assert exc.details == {"key": "value"}


def test_base_exception_no_details() -> None:
    """Test base exception without details."""
    exc = AlertHookException("Test error")

    assert exc.details == {}


def test_exception_hierarchy() -> None:
    """Test exception hierarchy."""
    assert isinstance(ConfigurationException("bad"), AlertHookException)
    assert isinstance(ValidationException("bad"), AlertHookException)
    assert isinstance(WebException("bad"), AlertHookException)
    assert isinstance(RequestLimitException(1), WebException)


def test_request_limit_exception() -> None:
    """Test RequestLimitException carries the limit."""
    exc = RequestLimitException(5, details={"url": "https://example.com"})

    assert exc.limit == 5
    assert exc.message == "Maximum number of web requests exceeded!"
    assert exc.details == {"limit": 5, "url": "https://example.com"}
