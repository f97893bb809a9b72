"""Public API surface tests."""

from __future__ import annotations

import handler_dispatch


def test_all_symbols_importable():
    for name in handler_dispatch.__all__:
        assert hasattr(handler_dispatch, name), name


def test_version():
    assert handler_dispatch.__version__ == "0.1.0"


def test_module_helpers_exported():
    for name in ("resolve", "invoke", "simple_invoke", "get_dispatcher", "reset_dispatcher"):
        assert callable(getattr(handler_dispatch, name))
