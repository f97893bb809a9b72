"""Built-in lookup implementations.

- NamespaceLookup (priority 10): explicitly registered names
- ImportLookup (priority 100): dotted module paths via importlib
"""

from __future__ import annotations

from .import_path import ImportLookup
from .namespace import NamespaceLookup

__all__ = [
    "NamespaceLookup",
    "ImportLookup",
]
