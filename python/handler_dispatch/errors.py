"""Error classes for handler dispatch.

All errors raised by resolution and invocation inherit from HandlerError,
so callers can catch every dispatch failure with a single except clause.

Error kinds:
- InvalidDescriptorError: empty, malformed, or unrecognized descriptor
- TargetNotFoundError: a named function, type, or method does not exist
- InvocationError: the target was located but its execution failed

None of these are retried. They propagate directly to the caller with a
message naming the offending descriptor, type, or method.

Example:
    >>> from handler_dispatch.errors import HandlerError, TargetNotFoundError
    >>>
    >>> try:
    ...     resolve(["MissingClass", "run"])
    ... except TargetNotFoundError as e:
    ...     print(e.metadata["type_name"])
    MissingClass
"""

from __future__ import annotations

from typing import Any


class HandlerError(Exception):
    """Base class for all handler dispatch errors.

    Attributes:
        message: Human-readable error message
        metadata: Additional error context (descriptor, type or method names)
    """

    def __init__(
        self,
        message: str,
        *,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Error message
            metadata: Additional context
        """
        super().__init__(message)
        self.message = message
        self.metadata = metadata or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or serialization.

        Returns:
            Dictionary with error details
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "metadata": self.metadata,
        }


class InvalidDescriptorError(HandlerError):
    """The handler descriptor is empty or has an unrecognized shape.

    Example:
        >>> raise InvalidDescriptorError("Invalid handler.")
    """

    pass


class TargetNotFoundError(HandlerError):
    """A function, type, or method named by the descriptor does not exist.

    The metadata carries ``type_name`` and/or ``method_name`` (or
    ``function_name``) identifying what was missing.

    Example:
        >>> raise TargetNotFoundError(
        ...     'Handler class "Billing" not found.',
        ...     metadata={"type_name": "Billing"},
        ... )
    """

    pass


class InvocationError(HandlerError):
    """The target was located but executing it failed.

    Raised when the target raises, or when it returns a failure
    InvocationResult. The underlying exception, if any, is chained
    as ``__cause__``.

    Example:
        >>> raise InvocationError('Handler execution error: ["parse"]')
    """

    pass


__all__ = [
    "HandlerError",
    "InvalidDescriptorError",
    "TargetNotFoundError",
    "InvocationError",
]
