"""Lookup Chain - Priority-Ordered Function/Type Lookup.

The LookupChain answers lookups by asking its members in priority order
until one knows the name. It is itself a BaseLookup, so the resolver
never needs to know whether it talks to one registry or several.

Default Chain (when using .default()):
- Priority 10:  NamespaceLookup - registered names
- Priority 100: ImportLookup    - dotted module paths

Usage:
    chain = LookupChain.default()
    chain.register_function("str_to_lower", str.lower)

    # Or build a custom chain
    chain = LookupChain()
    chain.add_lookup(NamespaceLookup())
    chain.add_lookup(SettingsLookup())
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Callable

from ..logging import log_trace
from .base_lookup import BaseLookup

if TYPE_CHECKING:
    from .lookups import NamespaceLookup


class LookupChain(BaseLookup):
    """Priority-ordered chain of lookups.

    Attributes:
        lookups: Member lookups in priority order.
    """

    def __init__(self) -> None:
        """Initialize an empty lookup chain."""
        self._lookups: list[BaseLookup] = []
        self._lookups_by_name: dict[str, BaseLookup] = {}
        self._lock = threading.RLock()

    @classmethod
    def default(
        cls,
        *,
        import_lookup: bool = True,
        allow_builtins: bool = False,
    ) -> LookupChain:
        """Create a chain with the default lookups.

        Args:
            import_lookup: Include ImportLookup after the namespace.
            allow_builtins: Let ImportLookup resolve bare builtin names.

        Returns:
            Chain with Namespace (+ Import) lookups.
        """
        from .lookups import ImportLookup, NamespaceLookup

        chain = cls()
        chain.add_lookup(NamespaceLookup())
        if import_lookup:
            chain.add_lookup(ImportLookup(allow_builtins=allow_builtins))
        return chain

    @property
    def name(self) -> str:
        return "chain"

    @property
    def priority(self) -> int:
        return 0

    def add_lookup(self, lookup: BaseLookup) -> LookupChain:
        """Add a lookup to the chain.

        Lookups are kept sorted by priority (lower = first).

        Args:
            lookup: Lookup to add.

        Returns:
            Self for method chaining.
        """
        with self._lock:
            # Readers iterate without the lock, so the list is replaced, never mutated.
            self._lookups = sorted([*self._lookups, lookup], key=lambda lk: lk.priority)
            self._lookups_by_name[lookup.name] = lookup
        return self

    def remove_lookup(self, name: str) -> BaseLookup | None:
        """Remove a lookup by name.

        Args:
            name: Lookup name to remove.

        Returns:
            Removed lookup or None if not found.
        """
        with self._lock:
            lookup = self._lookups_by_name.pop(name, None)
            if lookup:
                self._lookups = [lk for lk in self._lookups if lk is not lookup]
            return lookup

    def get_lookup(self, name: str) -> BaseLookup | None:
        return self._lookups_by_name.get(name)

    @property
    def namespace(self) -> NamespaceLookup | None:
        """Get the namespace lookup (convenience accessor).

        Returns:
            NamespaceLookup or None.
        """
        return self._lookups_by_name.get("namespace")  # type: ignore[return-value]

    def get_function(self, name: str) -> Callable[..., Any] | None:
        for lookup in self._lookups:
            fn = lookup.get_function(name)
            if fn is not None:
                log_trace(f"LookupChain: Function '{name}' found via '{lookup.name}'")
                return fn
        return None

    def get_type(self, name: str) -> type | None:
        for lookup in self._lookups:
            handler_type = lookup.get_type(name)
            if handler_type is not None:
                log_trace(f"LookupChain: Type '{name}' found via '{lookup.name}'")
                return handler_type
        return None

    def register_function(self, name: str, fn: Callable[..., Any]) -> LookupChain:
        """Register a function on the namespace lookup.

        Args:
            name: Function name.
            fn: The function.

        Returns:
            Self for method chaining.

        Raises:
            RuntimeError: If no NamespaceLookup in chain.
        """
        self._require_namespace().register_function(name, fn)
        return self

    def register_type(self, name: str, handler_type: type) -> LookupChain:
        """Register a class on the namespace lookup.

        Args:
            name: Type name.
            handler_type: The class.

        Returns:
            Self for method chaining.

        Raises:
            RuntimeError: If no NamespaceLookup in chain.
        """
        self._require_namespace().register_type(name, handler_type)
        return self

    def registered_names(self) -> list[str]:
        names: set[str] = set()
        for lookup in self._lookups:
            names.update(lookup.registered_names())
        return sorted(names)

    @property
    def lookup_names(self) -> list[str]:
        """Names of member lookups in priority order."""
        return [lk.name for lk in self._lookups]

    def __len__(self) -> int:
        """Return number of lookups in chain."""
        return len(self._lookups)

    def _require_namespace(self) -> NamespaceLookup:
        namespace = self.namespace
        if namespace is None:
            raise RuntimeError("No NamespaceLookup in chain")
        return namespace
