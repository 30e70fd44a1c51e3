"""pbstree: a persistent (immutable) binary search tree.

Quick Start
-----------
>>> from pbstree import Tree
>>>
>>> tree = Tree.new().insert(8, "eight").insert(9, "nine")
>>> tree.get(8)
'eight'
>>> tree.get(1) is None
True
>>> tree.insert(8, "other").get(8)  # first write wins
'eight'

Classes
-------
Tree : Linked representation with `Empty` and `Node` variants.
ArenaTree : Same operations over numpy index arrays (``-1`` is empty).
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("pbstree")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.1.0"

from .api import TREE_BACKENDS, new_tree
from .config import RuntimeConfig, reset_runtime_config_cache, runtime_config
from .core import (
    EMPTY,
    NIL,
    ArenaTree,
    Empty,
    Node,
    SliceUpdate,
    Tree,
    clone_array_segment,
)

__all__ = [
    "__version__",
    "Tree",
    "Empty",
    "Node",
    "EMPTY",
    "ArenaTree",
    "NIL",
    "new_tree",
    "TREE_BACKENDS",
    "RuntimeConfig",
    "runtime_config",
    "reset_runtime_config_cache",
    "SliceUpdate",
    "clone_array_segment",
]
