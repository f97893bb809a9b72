"""Handler dispatch - resolve a descriptor, then invoke it.

Invocation contract:
- One-element handlers are called as free functions with ``*args``.
- Two-element handlers construct a new, default-constructed instance of
  the type and call the method on it. If construction or the call
  fails, the method is called on the type itself (static or class
  method). If that fails too, InvocationError is raised.
- A target fails when it raises, or when it returns a failure
  InvocationResult. A success InvocationResult is unwrapped to its
  value; any other return value, falsy or not, is the result.

One instance is constructed per call. Constructors run once per
invocation and never receive arguments.

Example:
    >>> dispatcher = Dispatcher()
    >>> dispatcher.lookup.register_function("strToLower", str.lower)
    >>> dispatcher.invoke("strToLower", ["HELLO"])
    'hello'
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .config import DispatchConfig
from .errors import InvocationError, TargetNotFoundError
from .logging import configure_logging, log_debug, log_warn
from .registry import BaseLookup, LookupChain, is_function
from .resolved_handler import ResolvedHandler, describe_descriptor
from .resolver import HandlerResolver
from .types import ErrorType, InvocationResult, LogContext


class Dispatcher:
    """Resolves handler descriptors and invokes them.

    Attributes:
        resolver: The HandlerResolver used for classification.
        lookup: Shortcut to the resolver's lookup service.
    """

    def __init__(self, resolver: HandlerResolver | None = None) -> None:
        self._resolver = resolver if resolver is not None else HandlerResolver()

    @classmethod
    def from_config(
        cls,
        config: DispatchConfig | None = None,
        lookup: BaseLookup | None = None,
        *,
        configure_logs: bool = False,
    ) -> Dispatcher:
        """Build a dispatcher from a DispatchConfig.

        Args:
            config: Configuration, defaults to DispatchConfig.from_env().
            lookup: Lookup service; the default chain is built from the
                config when omitted.
            configure_logs: Install a log handler at config.log_level.

        Returns:
            A configured Dispatcher.
        """
        config = config if config is not None else DispatchConfig.from_env()
        if configure_logs:
            configure_logging(config.log_level)

        if lookup is None:
            lookup = LookupChain.default(
                import_lookup=config.import_lookup,
                allow_builtins=config.allow_builtins,
            )

        resolver = HandlerResolver(
            lookup,
            separator=config.separator,
            cache_enabled=config.cache_enabled,
        )
        return cls(resolver)

    @property
    def resolver(self) -> HandlerResolver:
        return self._resolver

    @property
    def lookup(self) -> Any:
        return self._resolver.lookup

    def resolve(self, descriptor: Any) -> ResolvedHandler:
        """Resolve a descriptor (see HandlerResolver.resolve)."""
        return self._resolver.resolve(descriptor)

    def invoke(self, descriptor: Any, args: Sequence[Any] | None = None) -> Any:
        """Resolve a descriptor and invoke it with ``args``.

        Args:
            descriptor: Handler descriptor.
            args: Positional arguments for the target.

        Returns:
            The target's return value.

        Raises:
            InvalidDescriptorError: If the descriptor is malformed.
            TargetNotFoundError: If the named target does not exist.
            InvocationError: If the target failed.
        """
        resolved = self._resolver.resolve(descriptor)
        call_args = tuple(args or ())

        if resolved.is_function():
            return self._invoke_function(resolved, call_args)
        return self._invoke_method(resolved, call_args)

    def simple_invoke(self, descriptor: Any, args: Sequence[Any] | None = None) -> Any:
        """Invoke a descriptor without resolution, validation, or caching.

        Callables are called directly, strings and one-element lists are
        looked up as functions, two-element lists instantiate the type and
        call the method on the instance. "Type@method" strings are not
        split. Errors raised by the target propagate unchanged.

        Args:
            descriptor: Handler descriptor.
            args: Positional arguments for the target.

        Returns:
            The target's return value.

        Raises:
            TypeError: If the descriptor does not name anything callable.
        """
        target = self._simple_target(descriptor)
        return target(*tuple(args or ()))

    def _invoke_function(self, resolved: ResolvedHandler, args: tuple[Any, ...]) -> Any:
        function = resolved.function
        if isinstance(function, str):
            name = function
            function = self.lookup.get_function(name)
            if function is None:
                raise TargetNotFoundError(
                    f'Handler function "{name}" not found.',
                    metadata={"function_name": name},
                )

        result, exc = self._attempt(function, args)
        if not result.is_success:
            raise self._invocation_error(resolved, result, exc)
        return result.value

    def _invoke_method(self, resolved: ResolvedHandler, args: tuple[Any, ...]) -> Any:
        handler_type = self._load_type(resolved)
        method_name = resolved.method_name

        result, exc = self._attempt_on_instance(handler_type, method_name, args)
        if result.is_success:
            return result.value

        log_debug(
            f"Dispatcher: Instance call failed for {resolved.describe()}, retrying on the type",
            LogContext(operation="invoke", method_name=method_name),
        )
        result, exc = self._attempt(handler_type, args, method_name)
        if not result.is_success:
            raise self._invocation_error(resolved, result, exc)
        return result.value

    def _load_type(self, resolved: ResolvedHandler) -> type:
        type_ref = resolved.type_ref
        if isinstance(type_ref, type):
            return type_ref

        handler_type = self.lookup.get_type(type_ref)
        if handler_type is None:
            raise TargetNotFoundError(
                f'Handler class "{type_ref}" not found.',
                metadata={"type_name": type_ref},
            )
        return handler_type

    def _attempt_on_instance(
        self, handler_type: type, method_name: str, args: tuple[Any, ...]
    ) -> tuple[InvocationResult, Exception | None]:
        try:
            instance = handler_type()
        except Exception as e:
            return (
                InvocationResult.failure(
                    f"Could not construct {handler_type.__name__}: {e}",
                    ErrorType.UNEXPECTED_ERROR,
                ),
                e,
            )
        return self._attempt(instance, args, method_name)

    @staticmethod
    def _attempt(
        target: Any, args: tuple[Any, ...], method_name: str | None = None
    ) -> tuple[InvocationResult, Exception | None]:
        """Call target, or its ``method_name`` attribute, normalizing the outcome."""
        try:
            if method_name is not None:
                target = getattr(target, method_name)
            value = target(*args)
        except Exception as e:
            return InvocationResult.failure(str(e), ErrorType.UNEXPECTED_ERROR), e

        if isinstance(value, InvocationResult):
            return value, None
        return InvocationResult.success(value), None

    @staticmethod
    def _invocation_error(
        resolved: ResolvedHandler,
        result: InvocationResult,
        exc: Exception | None,
    ) -> InvocationError:
        handler = resolved.describe()
        log_warn(
            f"Dispatcher: Handler execution error: {handler}",
            {"error_type": result.error_type, "error": result.error_message},
        )
        error = InvocationError(
            f"Handler execution error: {handler}",
            metadata={
                "handler": handler,
                "error_type": result.error_type,
                "error_message": result.error_message,
            },
        )
        error.__cause__ = exc
        return error

    def _simple_target(self, descriptor: Any) -> Any:
        if isinstance(descriptor, (list, tuple)) and len(descriptor) == 1:
            descriptor = descriptor[0]

        if isinstance(descriptor, str):
            function = self.lookup.get_function(descriptor)
            if function is not None:
                return function
        elif isinstance(descriptor, (list, tuple)) and len(descriptor) == 2:
            type_ref, method_name = descriptor
            handler_type = (
                type_ref if isinstance(type_ref, type) else self.lookup.get_type(type_ref)
            )
            if handler_type is not None:
                return getattr(handler_type(), method_name)
        elif is_function(descriptor):
            return descriptor

        raise TypeError(f"Handler {describe_descriptor(descriptor)} is not callable")


_default_dispatcher: Dispatcher | None = None


def get_dispatcher() -> Dispatcher:
    """Get the process-wide default dispatcher, creating it if needed.

    The default dispatcher is configured from ``HANDLER_DISPATCH_*``
    environment variables on first use.
    """
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = Dispatcher.from_config()
    return _default_dispatcher


def reset_dispatcher() -> None:
    """Drop the default dispatcher. Primarily for testing."""
    global _default_dispatcher
    _default_dispatcher = None


def resolve(descriptor: Any) -> ResolvedHandler:
    """Resolve a descriptor with the default dispatcher."""
    return get_dispatcher().resolve(descriptor)


def invoke(descriptor: Any, args: Sequence[Any] | None = None) -> Any:
    """Invoke a descriptor with the default dispatcher.

    Example:
        >>> invoke("json.dumps", [{"a": 1}])
        '{"a": 1}'
    """
    return get_dispatcher().invoke(descriptor, args)


def simple_invoke(descriptor: Any, args: Sequence[Any] | None = None) -> Any:
    """Invoke a descriptor with the default dispatcher, skipping resolution."""
    return get_dispatcher().simple_invoke(descriptor, args)


__all__ = [
    "Dispatcher",
    "get_dispatcher",
    "reset_dispatcher",
    "resolve",
    "invoke",
    "simple_invoke",
]
