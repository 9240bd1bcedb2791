"""Exception hierarchy for shuttle.

Every error raised by the loading pipeline derives from ``ShuttleError`` so
the CLI and the TUI can surface it with a single except clause, while call
sites that care (the cache fallback, the aggregator) catch the specific type.

Exception Hierarchy:
    ShuttleError (base)
    ├── ParseError - raw item value was empty
    ├── ProviderError - one provider failed to load its batch
    ├── AggregationError - fail-fast result of loading all providers
    ├── CacheError - item cache snapshot operations
    │   ├── CacheReadError
    │   └── CacheWriteError
    └── ConfigurationError - settings/configuration issues

Usage:
    from shuttle.exceptions import ProviderError

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise ProviderError("Request failed", provider=self.title()) from e
"""

from typing import Any, Optional


class ShuttleError(Exception):
    """Base exception for all shuttle errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., provider, path)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ParseError(ShuttleError):
    """A raw value could not be turned into an item."""

    def __init__(
        self,
        message: str = "Cannot build an item from an empty value",
        *,
        raw: Optional[str] = None,
        **context: Any,
    ) -> None:
        if raw is not None:
            context["raw"] = raw
        super().__init__(message, **context)


# =============================================================================
# Loading Errors
# =============================================================================


class ProviderError(ShuttleError):
    """A provider failed to load its items."""

    def __init__(
        self,
        message: str = "Provider failed to load items",
        *,
        provider: Optional[str] = None,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        if provider:
            context["provider"] = provider
        super().__init__(message, retryable=retryable, **context)


class AggregationError(ShuttleError):
    """Loading from all providers failed because one of them failed."""

    def __init__(
        self,
        message: str = "Loading items failed",
        *,
        provider: Optional[str] = None,
        **context: Any,
    ) -> None:
        if provider:
            context["provider"] = provider
        super().__init__(message, retryable=True, **context)


# =============================================================================
# Cache Errors
# =============================================================================


class CacheError(ShuttleError):
    """Base exception for item cache operations."""

    pass


class CacheReadError(CacheError):
    """The cache snapshot exists but could not be read or decoded."""

    def __init__(
        self,
        message: str = "Failed to read item cache",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class CacheWriteError(CacheError):
    """The cache snapshot could not be written."""

    def __init__(
        self,
        message: str = "Failed to write item cache",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ShuttleError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
