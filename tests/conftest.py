"""pytest configuration and fixtures for handler_dispatch tests.

This module provides shared fixtures: a namespace lookup pre-loaded with
the example handlers, a counting lookup that observes existence checks,
and resolvers/dispatchers built on top of them.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any, Callable

import pytest

from handler_dispatch import (
    BaseLookup,
    Dispatcher,
    HandlerResolver,
    LookupChain,
    NamespaceLookup,
    reset_dispatcher,
)
from handler_dispatch.logging import LOGGER_NAME
from tests.handlers.examples import example_handlers as examples


class CountingLookup(BaseLookup):
    """Lookup wrapper that counts existence checks.

    Used to observe that cached descriptors are not validated again.
    """

    def __init__(self, inner: BaseLookup) -> None:
        self.inner = inner
        self.calls: dict[str, int] = {
            "function_exists": 0,
            "type_exists": 0,
            "method_exists": 0,
        }

    @property
    def name(self) -> str:
        return "counting"

    @property
    def priority(self) -> int:
        return self.inner.priority

    def get_function(self, name: str) -> Callable[..., Any] | None:
        return self.inner.get_function(name)

    def get_type(self, name: str) -> type | None:
        return self.inner.get_type(name)

    def function_exists(self, name: str) -> bool:
        self.calls["function_exists"] += 1
        return self.inner.function_exists(name)

    def type_exists(self, name: str) -> bool:
        self.calls["type_exists"] += 1
        return self.inner.type_exists(name)

    def method_exists(self, type_name: str, method_name: str) -> bool:
        self.calls["method_exists"] += 1
        return self.inner.method_exists(type_name, method_name)

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())


@pytest.fixture
def namespace() -> NamespaceLookup:
    """Provide a NamespaceLookup with the example handlers registered."""
    return NamespaceLookup(
        functions={
            "strToLower": examples.str_to_lower,
            "example_function": examples.example_function,
            "example_function_no_vars": examples.example_function_no_vars,
            "always_false": examples.always_false,
            "always_none": examples.always_none,
            "raising_function": examples.raising_function,
            "failing_function": examples.failing_function,
            "succeeding_function": examples.succeeding_function,
        },
        types={
            "ExampleClass": examples.ExampleClass,
            "StaticOnlyHandler": examples.StaticOnlyHandler,
            "ReportingHandler": examples.ReportingHandler,
            "CountingHandler": examples.CountingHandler,
        },
    )


@pytest.fixture
def lookup_chain(namespace: NamespaceLookup) -> LookupChain:
    """Provide the default chain shape (namespace + import) using the example namespace."""
    from handler_dispatch import ImportLookup

    chain = LookupChain()
    chain.add_lookup(namespace)
    chain.add_lookup(ImportLookup())
    return chain


@pytest.fixture
def counting_lookup(lookup_chain: LookupChain) -> CountingLookup:
    """Provide a lookup that counts existence checks."""
    return CountingLookup(lookup_chain)


@pytest.fixture
def resolver(lookup_chain: LookupChain) -> HandlerResolver:
    """Provide a caching resolver over the example handlers."""
    return HandlerResolver(lookup_chain)


@pytest.fixture
def dispatcher(resolver: HandlerResolver) -> Dispatcher:
    """Provide a dispatcher over the example handlers."""
    return Dispatcher(resolver)


@pytest.fixture(autouse=True)
def _reset_default_dispatcher() -> Generator[None, None, None]:
    """Give every test a fresh module-level default dispatcher."""
    reset_dispatcher()
    yield
    reset_dispatcher()


@pytest.fixture
def counting_handler() -> Generator[type, None, None]:
    """Provide CountingHandler with its construction counter reset."""
    examples.CountingHandler.constructed = 0
    yield examples.CountingHandler
    examples.CountingHandler.constructed = 0


@pytest.fixture
def clean_logger() -> Generator[logging.Logger, None, None]:
    """Provide the package logger and restore its handlers and level afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
