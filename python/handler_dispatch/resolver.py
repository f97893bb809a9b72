"""Handler descriptor resolution.

The resolver turns a loosely-typed handler descriptor into a validated
ResolvedHandler. Classification is a single pass; the first matching
rule wins:

1. A string longer than two characters containing exactly one separator
   (``"Type@method"``) is split into a type/method pair and validated
   as in rule 3.
2. A descriptor that names an existing free function becomes the
   one-element form: a function name string, a one-element list holding
   a function name, or a function value (bare or in a one-element list).
3. A two-element list or tuple ``[type, method]`` becomes the
   two-element form once the type and the method are confirmed to exist.
4. Anything else is rejected as an invalid descriptor.

Existence checks go through an injectable lookup (see
``handler_dispatch.registry``), and results are memoized in a
ResolutionCache so a repeated descriptor is not validated again.

Example:
    >>> resolver = HandlerResolver()
    >>> resolver.lookup.register_type("Billing", Billing)
    >>> resolver.resolve("Billing@charge").parts
    ('Billing', 'charge')
    >>> resolver.resolve(["json.dumps"]).parts
    ('json.dumps',)
"""

from __future__ import annotations

from typing import Any

from .cache import ResolutionCache
from .errors import InvalidDescriptorError, TargetNotFoundError
from .logging import log_debug, log_warn
from .registry import BaseLookup, LookupChain, has_method, is_function
from .resolved_handler import ResolvedHandler, describe_descriptor, describe_part
from .types import LogContext


class HandlerResolver:
    """Classifies and validates handler descriptors.

    Attributes:
        lookup: The function/type lookup used for existence checks.
        cache: The resolution cache, or None when caching is disabled.
        separator: Character splitting "Type@method" strings.
    """

    def __init__(
        self,
        lookup: BaseLookup | None = None,
        cache: ResolutionCache | None = None,
        *,
        separator: str = "@",
        cache_enabled: bool = True,
    ) -> None:
        """Initialize the resolver.

        Args:
            lookup: Lookup service, defaults to LookupChain.default().
            cache: Cache to use, a fresh one is created when omitted.
            separator: Type/method separator, exactly one character.
            cache_enabled: Set False to validate on every call.

        Raises:
            ValueError: If separator is not a single character.
        """
        if len(separator) != 1:
            raise ValueError(f"separator must be exactly one character, got {separator!r}")

        self._lookup = lookup if lookup is not None else LookupChain.default()
        self._cache: ResolutionCache | None = None
        if cache_enabled:
            self._cache = cache if cache is not None else ResolutionCache()
        self._separator = separator

    @property
    def lookup(self) -> BaseLookup:
        return self._lookup

    @property
    def cache(self) -> ResolutionCache | None:
        return self._cache

    @property
    def separator(self) -> str:
        return self._separator

    def resolve(self, descriptor: Any) -> ResolvedHandler:
        """Resolve a descriptor into its canonical form.

        Args:
            descriptor: Function name, "Type@method" string, callable,
                or one/two-element list.

        Returns:
            The validated ResolvedHandler.

        Raises:
            InvalidDescriptorError: If the descriptor is empty or has an
                unrecognized shape.
            TargetNotFoundError: If a named type or method does not exist.
        """
        if _is_empty(descriptor):
            raise InvalidDescriptorError(
                "Invalid handler.", metadata={"descriptor": repr(descriptor)}
            )

        if self._cache is not None:
            cached = self._cache.get(descriptor)
            if cached is not None:
                return cached

        resolved = self._classify(descriptor)

        log_debug(
            f"HandlerResolver: Resolved {describe_descriptor(descriptor)} -> {resolved.describe()}",
            LogContext(operation="resolve", descriptor=describe_descriptor(descriptor)),
        )

        if self._cache is not None:
            resolved = self._cache.set(descriptor, resolved)
        return resolved

    def is_resolvable(self, descriptor: Any) -> bool:
        """Check whether a descriptor resolves, without raising.

        Args:
            descriptor: Raw handler descriptor.

        Returns:
            True if resolve() would succeed.
        """
        try:
            self.resolve(descriptor)
        except (InvalidDescriptorError, TargetNotFoundError):
            return False
        return True

    def _classify(self, descriptor: Any) -> ResolvedHandler:
        candidate = descriptor

        if (
            isinstance(descriptor, str)
            and len(descriptor) > 2
            and descriptor.count(self._separator) == 1
        ):
            candidate = descriptor.split(self._separator, 1)
        else:
            function = self._as_function(descriptor)
            if function is not None:
                return ResolvedHandler.for_function(function)

        if isinstance(candidate, (list, tuple)) and len(candidate) == 2:
            type_ref, method_name = candidate
            return self._validate_method(type_ref, method_name, descriptor)

        log_warn(f"HandlerResolver: Unrecognized handler {describe_descriptor(descriptor)}")
        raise InvalidDescriptorError(
            f"Handler {describe_descriptor(descriptor)} not found.",
            metadata={"descriptor": describe_descriptor(descriptor)},
        )

    def _as_function(self, descriptor: Any) -> Any | None:
        """Return the function part if the descriptor names a free function."""
        if isinstance(descriptor, (list, tuple)):
            if len(descriptor) != 1:
                return None
            descriptor = descriptor[0]

        if isinstance(descriptor, str):
            return descriptor if self._lookup.function_exists(descriptor) else None

        if is_function(descriptor):
            return descriptor
        return None

    def _validate_method(
        self, type_ref: Any, method_name: Any, descriptor: Any
    ) -> ResolvedHandler:
        if not isinstance(method_name, str) or not isinstance(type_ref, (str, type)):
            raise InvalidDescriptorError(
                f"Handler {describe_descriptor(descriptor)} not found.",
                metadata={"descriptor": describe_descriptor(descriptor)},
            )

        type_name = describe_part(type_ref)

        if isinstance(type_ref, type):
            method_found = has_method(type_ref, method_name)
        else:
            if not self._lookup.type_exists(type_ref):
                log_warn(
                    f"HandlerResolver: Type '{type_name}' not found",
                    LogContext(operation="resolve", type_name=type_name),
                )
                raise TargetNotFoundError(
                    f'Handler class "{type_name}" not found.',
                    metadata={"type_name": type_name},
                )
            method_found = self._lookup.method_exists(type_ref, method_name)

        if not method_found:
            log_warn(
                f"HandlerResolver: Method '{method_name}' not found on '{type_name}'",
                LogContext(operation="resolve", type_name=type_name, method_name=method_name),
            )
            raise TargetNotFoundError(
                f'Handler method "{method_name}" in class "{type_name}" not found.',
                metadata={"type_name": type_name, "method_name": method_name},
            )

        return ResolvedHandler.for_method(type_ref, method_name)


def _is_empty(descriptor: Any) -> bool:
    if descriptor is None:
        return True
    return isinstance(descriptor, (str, list, tuple)) and len(descriptor) == 0


__all__ = ["HandlerResolver"]
