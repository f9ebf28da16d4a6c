"""
Equipment Tracker - Organize personal gear into named lists

Features:
- Lists of items, where every item can hold further items
- Whole-catalog persistence to a single JSON file
- Markdown export and import
- Interactive menu and scriptable CLI
"""

from ._version import __version__
from .catalog import Catalog
from .errors import DuplicateNameError, InvalidNameError, PersistenceError, TrackerError
from .node import Node, TreeView
from .store import Store

__all__ = [
    "__version__",
    "Catalog",
    "Node",
    "TreeView",
    "Store",
    "TrackerError",
    "DuplicateNameError",
    "InvalidNameError",
    "PersistenceError",
]
