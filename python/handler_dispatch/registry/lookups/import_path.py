"""Import lookup (priority 100).

Finds functions and classes from dotted paths using importlib:

- "package.module.function" → import package.module, get function
- "package.module.ClassName" → import package.module, get ClassName

Bare names (no dot) are looked up among the builtins when
``allow_builtins`` is set, and are otherwise unknown to this lookup.

Example:
    >>> lookup = ImportLookup()
    >>> lookup.function_exists("json.dumps")
    True
    >>> lookup.method_exists("collections.OrderedDict", "popitem")
    True
"""

from __future__ import annotations

import builtins
import importlib
import re
from typing import Any, Callable

from ...logging import log_trace, log_warn
from ..base_lookup import BaseLookup, is_function


class ImportLookup(BaseLookup):
    """Lookup that imports modules to find dotted-path targets.

    Priority 100 - consulted last in the default chain.

    Import failures mean "not found"; they never escape to the resolver.
    """

    # module.path.attribute, at least one dot
    PATH_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*(\.[a-zA-Z_][a-zA-Z0-9_]*)+$")
    NAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")

    def __init__(self, allow_builtins: bool = False) -> None:
        """Initialize the lookup.

        Args:
            allow_builtins: Resolve bare names against the builtins module.
        """
        self._allow_builtins = allow_builtins

    @property
    def name(self) -> str:
        """Return the lookup name."""
        return "import_path"

    @property
    def priority(self) -> int:
        """Return the lookup priority (100 = inferential)."""
        return 100

    @property
    def allow_builtins(self) -> bool:
        return self._allow_builtins

    def get_function(self, name: str) -> Callable[..., Any] | None:
        target = self._load(name)
        return target if is_function(target) else None

    def get_type(self, name: str) -> type | None:
        target = self._load(name)
        return target if isinstance(target, type) else None

    def _load(self, path: str) -> Any | None:
        """Load the object a dotted path (or builtin name) refers to.

        Args:
            path: Full path (e.g., "module.function") or bare name.

        Returns:
            The object or None if not found.
        """
        if not isinstance(path, str):
            return None

        if self.NAME_PATTERN.match(path):
            if not self._allow_builtins:
                return None
            return getattr(builtins, path, None)

        if not self.PATH_PATTERN.match(path):
            return None

        module_path, attr_name = path.rsplit(".", 1)

        try:
            module = importlib.import_module(module_path)
        except ImportError:
            log_trace(f"ImportLookup: Module not found for '{path}'")
            return None
        except Exception as e:
            # Broken module (syntax error, failing import-time code). Treated
            # as not found; register the target explicitly if it must resolve.
            log_warn(
                f"ImportLookup: Importing '{module_path}' failed",
                {"error_type": type(e).__name__, "error": e},
            )
            return None

        return getattr(module, attr_name, None)
