"""Arena-backed persistent BST.

Nodes live in flat index arrays; ``NIL`` (-1) marks a missing child. Inserting
appends one node and rewrites a single child slot of the parent through a
copy-on-write clone, so every earlier `ArenaTree` keeps seeing its own arrays.
Lookups and inserts never recurse.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Generic, Iterable, List, Optional, Tuple

import numpy as np

from pbstree import config as bst_config
from pbstree.core.persistence import SliceUpdate, clone_array_segment
from pbstree.core.tree import K, V
from pbstree.logging import get_logger

LOGGER = get_logger("core.arena")

NIL = -1


def _empty_index() -> np.ndarray:
    return clone_array_segment(np.empty((0,), dtype=np.int64))


@dataclass(frozen=True, eq=False)
class ArenaTree(Generic[K, V]):
    left: np.ndarray
    right: np.ndarray
    keys: Tuple[K, ...]
    values: Tuple[V, ...]
    root: int = NIL

    @classmethod
    def new(cls) -> "ArenaTree[K, V]":
        return cls(
            left=_empty_index(),
            right=_empty_index(),
            keys=(),
            values=(),
            root=NIL,
        )

    @classmethod
    def from_items(cls, items: Iterable[Tuple[K, V]]) -> "ArenaTree[K, V]":
        tree: ArenaTree[K, V] = cls.new()
        for key, value in items:
            tree = tree.insert(key, value)
        return tree

    @property
    def num_nodes(self) -> int:
        return len(self.keys)

    def is_empty(self) -> bool:
        return self.root == NIL

    def _search(self, key: K) -> Tuple[int, int, bool]:
        """Return ``(match, parent, went_left)`` for the search path of `key`."""

        parent = NIL
        went_left = False
        current = self.root
        while current != NIL:
            node_key = self.keys[current]
            if key == node_key:
                return current, parent, went_left
            parent = current
            went_left = key < node_key
            current = int(self.left[current] if went_left else self.right[current])
        return NIL, parent, went_left

    def insert(self, key: K, value: V) -> "ArenaTree[K, V]":
        """Return a tree with `key` bound to `value`; an existing binding wins."""

        match, parent, went_left = self._search(key)
        if match != NIL:
            LOGGER.debug("Key %r already bound at node %d; keeping existing value.", key, match)
            return self

        index = self.num_nodes
        left_updates: List[SliceUpdate] = []
        right_updates: List[SliceUpdate] = []
        if parent != NIL:
            (left_updates if went_left else right_updates).append(
                SliceUpdate(index=parent, value=index)
            )

        result = replace(
            self,
            left=clone_array_segment(self.left, left_updates, append=(NIL,)),
            right=clone_array_segment(self.right, right_updates, append=(NIL,)),
            keys=self.keys + (key,),
            values=self.values + (value,),
            root=index if parent == NIL else self.root,
        )
        if bst_config.runtime_config().validate_inserts:
            result.validate()
        return result

    def get(self, key: K) -> Optional[V]:
        """Return the value bound to `key`, or ``None`` when it is absent."""

        match, _, _ = self._search(key)
        return None if match == NIL else self.values[match]

    def contains(self, key: K) -> bool:
        match, _, _ = self._search(key)
        return match != NIL

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def validate(self) -> None:
        """Check array shapes, reachability and the BST order invariant."""

        size = self.num_nodes
        if self.left.shape != (size,) or self.right.shape != (size,):
            raise ValueError("Child index arrays must have one entry per node.")
        if len(self.values) != size:
            raise ValueError("`values` must align with `keys`.")
        if not (self.root == NIL or 0 <= self.root < size):
            raise ValueError(f"Root index {self.root} is out of range.")

        visited = set()
        stack: List[Tuple[int, Any, Any]] = [(self.root, None, None)]
        while stack:
            index, lower, upper = stack.pop()
            if index == NIL:
                continue
            if not 0 <= index < size:
                raise ValueError(f"Child index {index} is out of range.")
            if index in visited:
                raise ValueError(f"Node {index} is reachable along more than one path.")
            visited.add(index)
            key = self.keys[index]
            if lower is not None and not self.keys[lower] < key:
                LOGGER.debug("Order check failed at node %d.", index)
                raise ValueError(f"Key {key!r} must be greater than {self.keys[lower]!r}.")
            if upper is not None and not key < self.keys[upper]:
                LOGGER.debug("Order check failed at node %d.", index)
                raise ValueError(f"Key {key!r} must be less than {self.keys[upper]!r}.")
            stack.append((int(self.left[index]), lower, index))
            stack.append((int(self.right[index]), index, upper))
