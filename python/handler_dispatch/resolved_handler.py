"""Canonical handler form produced by the resolver.

A ResolvedHandler is the validated, normalized version of a handler
descriptor. It has one of two shapes:

- ``(function,)``: a free function, given by name or as the callable itself
- ``(type, method_name)``: a type, given by name or as the class itself,
  plus the name of a method on it
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .types import HandlerKind


@dataclass(frozen=True)
class ResolvedHandler:
    """Validated canonical form of a handler descriptor.

    Only the resolver builds these, and only after the lookup confirmed
    that the referenced function, or type and method, exist.

    Attributes:
        parts: One-element ``(function,)`` or two-element
            ``(type, method_name)`` tuple.

    Example:
        >>> handler = ResolvedHandler.for_method("Billing", "charge")
        >>> handler.parts
        ('Billing', 'charge')
        >>> handler.kind
        <HandlerKind.METHOD: 'method'>
    """

    parts: tuple[Any, ...]

    def __post_init__(self) -> None:
        if len(self.parts) not in (1, 2):
            raise ValueError(
                f"ResolvedHandler must have one or two parts, got {len(self.parts)}"
            )

    @classmethod
    def for_function(cls, function: Any) -> ResolvedHandler:
        """Build the single-element form.

        Args:
            function: Function name or callable.

        Returns:
            ResolvedHandler with one part.
        """
        return cls(parts=(function,))

    @classmethod
    def for_method(cls, type_ref: Any, method_name: str) -> ResolvedHandler:
        """Build the two-element form.

        Args:
            type_ref: Type name or class object.
            method_name: Method to invoke on it.

        Returns:
            ResolvedHandler with two parts.
        """
        return cls(parts=(type_ref, method_name))

    @property
    def kind(self) -> HandlerKind:
        """Shape of this handler."""
        return HandlerKind.FUNCTION if len(self.parts) == 1 else HandlerKind.METHOD

    def is_function(self) -> bool:
        return self.kind is HandlerKind.FUNCTION

    def is_method(self) -> bool:
        return self.kind is HandlerKind.METHOD

    @property
    def function(self) -> Any:
        """The function part of a single-element handler.

        Raises:
            AttributeError: If this is a two-element handler.
        """
        if not self.is_function():
            raise AttributeError("Two-element handler has no function part")
        return self.parts[0]

    @property
    def type_ref(self) -> Any:
        """The type part of a two-element handler.

        Raises:
            AttributeError: If this is a single-element handler.
        """
        if not self.is_method():
            raise AttributeError("Single-element handler has no type part")
        return self.parts[0]

    @property
    def method_name(self) -> str:
        """The method part of a two-element handler.

        Raises:
            AttributeError: If this is a single-element handler.
        """
        if not self.is_method():
            raise AttributeError("Single-element handler has no method part")
        return self.parts[1]

    def describe(self) -> str:
        """JSON rendering of the parts, used in error messages.

        Callables and classes render by qualified name.

        Example:
            >>> ResolvedHandler.for_function("str_to_lower").describe()
            '["str_to_lower"]'
        """
        return json.dumps([describe_part(p) for p in self.parts])

    def __len__(self) -> int:
        return len(self.parts)


def describe_part(part: Any) -> Any:
    """Render one descriptor element for messages and logs.

    Strings pass through; callables and classes become their qualified
    name; anything else becomes its repr.
    """
    if isinstance(part, str):
        return part
    qualname = getattr(part, "__qualname__", None)
    if qualname is not None:
        module = getattr(part, "__module__", None)
        return f"{module}.{qualname}" if module else qualname
    return repr(part)


def describe_descriptor(descriptor: Any) -> str:
    """JSON rendering of a raw descriptor, used in error messages.

    Example:
        >>> describe_descriptor("InvalidHandler")
        '"InvalidHandler"'
        >>> describe_descriptor(["missing_function"])
        '["missing_function"]'
    """
    if isinstance(descriptor, (list, tuple)):
        return json.dumps([describe_part(p) for p in descriptor])
    return json.dumps(describe_part(descriptor))


__all__ = ["ResolvedHandler", "describe_descriptor", "describe_part"]
