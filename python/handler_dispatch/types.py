"""Pydantic models for handler dispatch.

This module provides the typed result and logging context models used
across the package, using Pydantic v2 for validation and serialization.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class HandlerKind(str, Enum):
    """Shape of a canonical handler form."""

    FUNCTION = "function"
    """Single-element form: a free function."""

    METHOD = "method"
    """Two-element form: a type and a method name."""


class ErrorType(str, Enum):
    """Standard error types for failure results.

    Targets may use these values, or any string of their own, when they
    return InvocationResult.failure().
    """

    HANDLER_ERROR = "handler_error"
    """Generic failure reported by the target."""

    VALIDATION_ERROR = "validation_error"
    """The arguments passed to the target were rejected."""

    UNEXPECTED_ERROR = "unexpected_error"
    """The target raised an exception."""


class LogContext(BaseModel):
    """Context fields for structured logging.

    Example:
        >>> context = LogContext(descriptor="Billing@charge", operation="resolve")
        >>> log_debug("Resolved handler", context)
    """

    descriptor: str | None = Field(
        default=None,
        description="Descriptor being resolved or invoked.",
    )
    type_name: str | None = Field(
        default=None,
        description="Type name of a two-element handler.",
    )
    method_name: str | None = Field(
        default=None,
        description="Method name of a two-element handler.",
    )
    lookup: str | None = Field(
        default=None,
        description="Name of the lookup that answered.",
    )
    operation: str | None = Field(
        default=None,
        description="Current operation name.",
    )


class InvocationResult(BaseModel):
    """Explicit success/failure outcome of a handler.

    Handlers that need to report failure without raising return
    ``InvocationResult.failure(...)``. Any value that is not an
    InvocationResult is treated as a successful return, so ``False``,
    ``None`` and ``0`` are ordinary results.

    Example:
        >>> def parse_amount(text):
        ...     if not text.isdigit():
        ...         return InvocationResult.failure(
        ...             "not a number", error_type=ErrorType.VALIDATION_ERROR
        ...         )
        ...     return InvocationResult.success(int(text))
    """

    # Named `is_success` to avoid clashing with the `success()` classmethod;
    # serialized as "success".
    is_success: bool = Field(
        alias="success",
        description="Whether the handler executed successfully.",
    )
    value: Any = Field(
        default=None,
        description="Handler return value (success case).",
    )
    error_message: str | None = Field(
        default=None,
        description="Error message (failure case).",
    )
    error_type: str | None = Field(
        default=None,
        description="Error category. Use ErrorType values where they fit.",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional execution metadata.",
    )

    model_config = {"populate_by_name": True}

    @classmethod
    def success(
        cls,
        value: Any = None,
        metadata: dict[str, Any] | None = None,
    ) -> InvocationResult:
        """Create a successful result.

        Args:
            value: The handler's return value.
            metadata: Optional additional metadata.

        Returns:
            An InvocationResult indicating success.
        """
        return cls(
            is_success=True,  # type: ignore[call-arg]  # populate_by_name=True allows this
            value=value,
            metadata=metadata or {},
        )

    @classmethod
    def failure(
        cls,
        message: str,
        error_type: str | ErrorType = ErrorType.HANDLER_ERROR,
        metadata: dict[str, Any] | None = None,
    ) -> InvocationResult:
        """Create a failure result.

        Args:
            message: Human-readable error message.
            error_type: Error category.
            metadata: Optional additional metadata.

        Returns:
            An InvocationResult indicating failure.
        """
        error_type_str = error_type.value if isinstance(error_type, ErrorType) else error_type
        return cls(
            is_success=False,  # type: ignore[call-arg]  # populate_by_name=True allows this
            error_message=message,
            error_type=error_type_str,
            metadata=metadata or {},
        )


__all__ = [
    "HandlerKind",
    "ErrorType",
    "LogContext",
    "InvocationResult",
]
