"""Custom exception hierarchy for fragQL.

All public errors inherit from FragQLError so callers can catch the base
class for any fragQL-specific failure.
"""
from __future__ import annotations

from typing import Any


class FragQLError(Exception):
    """Base exception for all fragQL errors."""


class ParameterError(FragQLError):
    """Raised when query parameters cannot be turned into a fragment.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. UNSUPPORTED_PARAMETER).
        details: Extra context describing the offending input.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for diagnostics."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class UnsupportedParameterError(ParameterError):
    """Raised when a parameter is outside the supported value set.

    Supported values are numbers, dates, strings, and flat sequences of
    those.  ``None``, booleans, mappings and nested sequences are rejected.
    """

    def __init__(self, value: Any, index: int | None = None) -> None:
        type_name = type(value).__name__
        where = f" at position {index}" if index is not None else ""
        super().__init__(
            f"Unsupported parameter type '{type_name}'{where}.",
            code="UNSUPPORTED_PARAMETER",
            details={"index": index, "type": type_name},
        )


class PlaceholderCountError(ParameterError):
    """Raised when placeholder markers and parameters do not line up."""

    def __init__(self, expected: int, received: int) -> None:
        super().__init__(
            f"Expected {expected} parameter(s) for the placeholders in the "
            f"template, received {received}.",
            code="PLACEHOLDER_COUNT_MISMATCH",
            details={"expected": expected, "received": received},
        )


class ConfigError(FragQLError):
    """Raised when a BuilderConfig is misconfigured.

    Detected when the config is constructed, before any fragment is built,
    so the developer gets a clear message instead of a mangled template.

    Args:
        message: Human-readable description.
        field: Name of the offending config field.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class PlaceholderLocationError(ParameterError):
    """Raised when a supplied placeholder offset does not point at a marker."""

    def __init__(self, location: int, placeholder: str) -> None:
        super().__init__(
            f"Location {location} does not point at a {placeholder!r} placeholder "
            f"in the template.",
            code="INVALID_PLACEHOLDER_LOCATION",
            details={"location": location, "placeholder": placeholder},
        )
