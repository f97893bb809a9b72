"""Abstract base class for handler lookups.

A lookup is the resolver's read-only view of the host program's
functions and types. Resolution never touches globals directly; it asks
a lookup, which keeps the resolver testable with a fake registry.

Lookup Contract:
1. name - Human-readable identifier for logging/debugging
2. priority - Lower numbers = consulted first in a LookupChain
3. get_function() - Return the function registered under a name, or None
4. get_type() - Return the class registered under a name, or None

The existence checks (function_exists, type_exists, method_exists) are
derived from the accessors and only need overriding for lookups that can
answer them more cheaply.

Example Implementation:
    class SettingsLookup(BaseLookup):
        @property
        def name(self) -> str:
            return "settings"

        @property
        def priority(self) -> int:
            return 50

        def get_function(self, name: str) -> Callable[..., Any] | None:
            return SETTINGS_HOOKS.get(name)

        def get_type(self, name: str) -> type | None:
            return None
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class BaseLookup(ABC):
    """Abstract base class for function/type lookups."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this lookup (for logging/debugging).

        Returns:
            The lookup name.
        """
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lookup priority (lower = consulted first).

        Standard priorities:
        - 10: Namespace (explicitly registered names)
        - 100: Import (dotted module paths)

        Returns:
            The priority value.
        """
        ...

    @abstractmethod
    def get_function(self, name: str) -> Callable[..., Any] | None:
        """Return the free function known under ``name``.

        Args:
            name: Function name.

        Returns:
            The function, or None if this lookup does not know it.
        """
        ...

    @abstractmethod
    def get_type(self, name: str) -> type | None:
        """Return the class known under ``name``.

        Args:
            name: Type name.

        Returns:
            The class, or None if this lookup does not know it.
        """
        ...

    def function_exists(self, name: str) -> bool:
        return self.get_function(name) is not None

    def type_exists(self, name: str) -> bool:
        return self.get_type(name) is not None

    def method_exists(self, type_name: str, method_name: str) -> bool:
        """Check that ``type_name`` exists and has a callable ``method_name``.

        Args:
            type_name: Type name.
            method_name: Method name.

        Returns:
            True if the method can be called on the type or its instances.
        """
        handler_type = self.get_type(type_name)
        if handler_type is None:
            return False
        return has_method(handler_type, method_name)

    def registered_names(self) -> list[str]:
        """Return all names this lookup knows about.

        Used for debugging and introspection.

        Returns:
            List of registered names.
        """
        return []


def is_function(candidate: Any) -> bool:
    """A function is anything callable that is not a class."""
    return callable(candidate) and not isinstance(candidate, type)


def has_method(handler_type: type, method_name: Any) -> bool:
    """Check that a class exposes a callable attribute ``method_name``."""
    if not isinstance(method_name, str) or not method_name:
        return False
    return callable(getattr(handler_type, method_name, None))
