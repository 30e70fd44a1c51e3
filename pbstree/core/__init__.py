"""Core data structures and persistence primitives for the persistent BST."""

from .arena import NIL, ArenaTree
from .persistence import SliceUpdate, clone_array_segment, rebuild_search_path
from .tree import EMPTY, Empty, Node, Tree

__all__ = [
    "EMPTY",
    "NIL",
    "ArenaTree",
    "Empty",
    "Node",
    "Tree",
    "SliceUpdate",
    "clone_array_segment",
    "rebuild_search_path",
]
