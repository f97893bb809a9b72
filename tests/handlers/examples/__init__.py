"""Example handlers used across the test suite.

- example_handlers: free functions and classes for every descriptor shape
"""

from .example_handlers import (
    CountingHandler,
    ExampleClass,
    ReportingHandler,
    StaticOnlyHandler,
    always_false,
    always_none,
    example_function,
    example_function_no_vars,
    failing_function,
    raising_function,
    str_to_lower,
    succeeding_function,
)

__all__ = [
    "CountingHandler",
    "ExampleClass",
    "ReportingHandler",
    "StaticOnlyHandler",
    "always_false",
    "always_none",
    "example_function",
    "example_function_no_vars",
    "failing_function",
    "raising_function",
    "str_to_lower",
    "succeeding_function",
]
