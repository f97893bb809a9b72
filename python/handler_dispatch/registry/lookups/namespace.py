"""Namespace lookup (priority 10).

Explicit name → function and name → type mappings. This is the highest
priority lookup in the default chain and the one tests and applications
use to expose handlers under short names.

Example:
    >>> lookup = NamespaceLookup()
    >>> lookup.register_function("str_to_lower", str.lower)
    >>> lookup.register_type("Billing", Billing)
    >>> lookup.function_exists("str_to_lower")
    True
    >>> lookup.method_exists("Billing", "charge")
    True
"""

from __future__ import annotations

import threading
from typing import Any, Callable

from ...logging import log_debug, log_warn
from ..base_lookup import BaseLookup, is_function


class NamespaceLookup(BaseLookup):
    """Lookup for explicitly registered functions and types.

    Functions and types live in separate namespaces, so the same name
    may be registered once as each.

    Thread-safe for concurrent registration and lookup.
    """

    def __init__(
        self,
        name: str = "namespace",
        functions: dict[str, Callable[..., Any]] | None = None,
        types: dict[str, type] | None = None,
    ) -> None:
        """Initialize the lookup.

        Args:
            name: Lookup name for identification.
            functions: Initial function mapping.
            types: Initial type mapping.
        """
        self._name = name
        self._functions: dict[str, Callable[..., Any]] = {}
        self._types: dict[str, type] = {}
        self._lock = threading.RLock()

        for key, fn in (functions or {}).items():
            self.register_function(key, fn)
        for key, handler_type in (types or {}).items():
            self.register_type(key, handler_type)

    @property
    def name(self) -> str:
        """Return the lookup name."""
        return self._name

    @property
    def priority(self) -> int:
        """Return the lookup priority (10 = highest)."""
        return 10

    def get_function(self, name: str) -> Callable[..., Any] | None:
        return self._functions.get(name)

    def get_type(self, name: str) -> type | None:
        return self._types.get(name)

    def register_function(self, name: str, fn: Callable[..., Any]) -> None:
        """Register a free function.

        Args:
            name: Name the function is resolved by.
            fn: Any callable that is not a class.

        Raises:
            ValueError: If fn is a class or not callable.
        """
        if not is_function(fn):
            raise ValueError(f"fn must be a callable that is not a class, got {fn!r}")

        with self._lock:
            if name in self._functions:
                log_warn(f"NamespaceLookup: Overwriting existing function: {name}")
            self._functions[name] = fn
        log_debug(f"NamespaceLookup: Registered function: {name}")

    def register_type(self, name: str, handler_type: type) -> None:
        """Register a class.

        Args:
            name: Name the type is resolved by.
            handler_type: The class.

        Raises:
            ValueError: If handler_type is not a class.
        """
        if not isinstance(handler_type, type):
            raise ValueError(f"handler_type must be a class, got {handler_type!r}")

        with self._lock:
            if name in self._types:
                log_warn(f"NamespaceLookup: Overwriting existing type: {name}")
            self._types[name] = handler_type
        log_debug(f"NamespaceLookup: Registered type: {name} -> {handler_type.__name__}")

    def unregister(self, name: str) -> bool:
        """Remove a name from both namespaces.

        Args:
            name: Function or type name to remove.

        Returns:
            True if anything was removed, False if not found.
        """
        with self._lock:
            removed_fn = self._functions.pop(name, None) is not None
            removed_type = self._types.pop(name, None) is not None
        return removed_fn or removed_type

    def clear(self) -> None:
        """Remove every registration. Primarily for testing."""
        with self._lock:
            self._functions.clear()
            self._types.clear()

    def registered_names(self) -> list[str]:
        """Return all registered function and type names."""
        return sorted(set(self._functions) | set(self._types))
