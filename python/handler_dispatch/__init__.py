"""
Handler Dispatch

Resolve loosely-typed handler descriptors into a validated canonical form
and invoke them.

A descriptor may be:
- a function name: ``"str_to_lower"`` or ``"json.dumps"``
- a ``"Type@method"`` string
- a callable value (function, lambda, bound method)
- a one-element list naming a function: ``["str_to_lower"]``
- a two-element list naming a type and a method: ``["Billing", "charge"]``

Example:
    >>> import handler_dispatch
    >>>
    >>> dispatcher = handler_dispatch.Dispatcher()
    >>> dispatcher.lookup.register_function("strToLower", str.lower)
    >>> dispatcher.resolve("strToLower").parts
    ('strToLower',)
    >>> dispatcher.invoke("strToLower", ["HELLO"])
    'hello'

    >>> # Two-element handlers construct the type once per call
    >>> dispatcher.lookup.register_type("Greeter", Greeter)
    >>> dispatcher.invoke("Greeter@greet", ["Ada"])
    'Hello, Ada'

    >>> # Module-level helpers use a default dispatcher
    >>> handler_dispatch.invoke("json.dumps", [[1, 2]])
    '[1, 2]'
"""

from __future__ import annotations

from handler_dispatch.cache import ResolutionCache, cache_key
from handler_dispatch.config import DispatchConfig
from handler_dispatch.dispatcher import (
    Dispatcher,
    get_dispatcher,
    invoke,
    reset_dispatcher,
    resolve,
    simple_invoke,
)
from handler_dispatch.errors import (
    HandlerError,
    InvalidDescriptorError,
    InvocationError,
    TargetNotFoundError,
)
from handler_dispatch.logging import (
    configure_logging,
    log_debug,
    log_error,
    log_info,
    log_trace,
    log_warn,
)
from handler_dispatch.registry import (
    BaseLookup,
    ImportLookup,
    LookupChain,
    NamespaceLookup,
)
from handler_dispatch.resolved_handler import ResolvedHandler
from handler_dispatch.resolver import HandlerResolver
from handler_dispatch.types import (
    ErrorType,
    HandlerKind,
    InvocationResult,
    LogContext,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Resolution and dispatch
    "Dispatcher",
    "HandlerResolver",
    "ResolvedHandler",
    "ResolutionCache",
    "cache_key",
    "get_dispatcher",
    "reset_dispatcher",
    "resolve",
    "invoke",
    "simple_invoke",
    # Lookups
    "BaseLookup",
    "LookupChain",
    "NamespaceLookup",
    "ImportLookup",
    # Types
    "HandlerKind",
    "ErrorType",
    "InvocationResult",
    "LogContext",
    # Configuration
    "DispatchConfig",
    # Errors
    "HandlerError",
    "InvalidDescriptorError",
    "TargetNotFoundError",
    "InvocationError",
    # Logging
    "configure_logging",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]
