r"""Function/type lookup infrastructure.

The resolver checks existence through a lookup instead of reaching into
globals. Lookups are combined in a priority-ordered LookupChain.

Built-in Lookups:
- NamespaceLookup (priority 10): explicitly registered names
- ImportLookup (priority 100): dotted module paths via importlib

Custom Lookups:
Extend BaseLookup and add it to a chain:

    from handler_dispatch.registry import BaseLookup, LookupChain

    class PluginLookup(BaseLookup):
        @property
        def name(self) -> str:
            return "plugins"

        @property
        def priority(self) -> int:
            return 50

        def get_function(self, name):
            return PLUGINS.get(name)

        def get_type(self, name):
            return None

    chain = LookupChain.default().add_lookup(PluginLookup())
"""

from __future__ import annotations

from .base_lookup import BaseLookup, has_method, is_function
from .lookup_chain import LookupChain
from .lookups import ImportLookup, NamespaceLookup

__all__ = [
    "BaseLookup",
    "LookupChain",
    "NamespaceLookup",
    "ImportLookup",
    "has_method",
    "is_function",
]
