from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Generic, Iterable, List, Optional, Tuple, TypeVar

from pbstree import config as bst_config
from pbstree.core.persistence import rebuild_search_path
from pbstree.logging import get_logger

LOGGER = get_logger("core.tree")

K = TypeVar("K")
V = TypeVar("V")

_UNBOUNDED = object()


class Tree(Generic[K, V]):
    """Persistent binary search tree with two variants, `Empty` and `Node`.

    Trees are never modified after construction. `insert` returns a new tree
    that shares every sub-tree off the search path with the original.
    """

    __slots__ = ()

    @staticmethod
    def new() -> "Tree[K, V]":
        return EMPTY

    @classmethod
    def from_items(cls, items: Iterable[Tuple[K, V]]) -> "Tree[K, V]":
        tree: Tree[K, V] = EMPTY
        for key, value in items:
            tree = tree.insert(key, value)
        return tree

    def is_empty(self) -> bool:
        return isinstance(self, Empty)

    def insert(self, key: K, value: V) -> "Tree[K, V]":
        """Return a tree with `key` bound to `value`.

        An existing binding for an equal key wins: the tree is returned
        unchanged and `value` is dropped.
        """

        path: List[Tuple[Node[K, V], bool]] = []
        current: Tree[K, V] = self
        while isinstance(current, Node):
            if key == current.key:
                LOGGER.debug("Key %r already bound; keeping existing value.", key)
                return self
            went_left = key < current.key
            path.append((current, went_left))
            current = current.left if went_left else current.right

        leaf = Node(left=EMPTY, right=EMPTY, key=key, value=value)
        result = rebuild_search_path(path, leaf)
        if bst_config.runtime_config().validate_inserts:
            result.validate()
        return result

    def _find(self, key: K) -> Optional["Node[K, V]"]:
        current: Tree[K, V] = self
        while isinstance(current, Node):
            if key == current.key:
                return current
            current = current.left if key < current.key else current.right
        return None

    def get(self, key: K) -> Optional[V]:
        """Return the value bound to `key`, or ``None`` when it is absent."""

        node = self._find(key)
        return None if node is None else node.value

    def contains(self, key: K) -> bool:
        return self._find(key) is not None

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def validate(self) -> None:
        """Raise ``ValueError`` if the BST order or key uniqueness is broken."""

        stack: List[Tuple[Tree[K, V], Any, Any]] = [(self, _UNBOUNDED, _UNBOUNDED)]
        while stack:
            current, lower, upper = stack.pop()
            if not isinstance(current, Node):
                continue
            key = current.key
            if lower is not _UNBOUNDED and not lower < key:
                LOGGER.debug("Order check failed: %r is not above %r.", key, lower)
                raise ValueError(f"Key {key!r} must be greater than {lower!r}.")
            if upper is not _UNBOUNDED and not key < upper:
                LOGGER.debug("Order check failed: %r is not below %r.", key, upper)
                raise ValueError(f"Key {key!r} must be less than {upper!r}.")
            stack.append((current.left, lower, key))
            stack.append((current.right, key, upper))


@dataclass(frozen=True)
class Empty(Tree[K, V]):
    """The tree with no bindings."""

    __slots__ = ()


# Identity semantics; structural equality would recurse through the whole tree.
@dataclass(frozen=True, eq=False, repr=False)
class Node(Tree[K, V]):
    left: Tree[K, V]
    right: Tree[K, V]
    key: K
    value: V

    def replace(self, **changes: Any) -> "Node[K, V]":
        return dataclasses.replace(self, **changes)

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, value={self.value!r})"


EMPTY: Tree[Any, Any] = Empty()
