from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Sequence, Tuple

import numpy as np

if TYPE_CHECKING:  # pragma: no cover
    from pbstree.core.tree import Node, Tree


@dataclass(frozen=True)
class SliceUpdate:
    """Descriptor for a copy-on-write update applied to a single array."""

    index: int
    value: Any


def clone_array_segment(
    source: Any,
    updates: Iterable[SliceUpdate] = (),
    *,
    append: Sequence[Any] = (),
    dtype: Any = np.int64,
) -> np.ndarray:
    """Clone `source`, extend it with `append` and apply `updates`.

    The original array is never written; the returned array is read-only.
    """

    target = np.array(source, dtype=dtype, copy=True)
    if len(append):
        target = np.concatenate([target, np.asarray(append, dtype=dtype)])
    for update in updates:
        target[update.index] = update.value
    target.setflags(write=False)
    return target


def rebuild_search_path(
    path: Sequence[Tuple["Node", bool]], subtree: "Tree"
) -> "Tree":
    """Rebuild the nodes on a root-to-leaf search path around `subtree`.

    `path` lists `(node, went_left)` pairs from the root downwards. Each node
    is replaced by a copy whose followed child is the rebuilt sub-tree; its
    other child is reused as-is.
    """

    for node, went_left in reversed(path):
        if went_left:
            subtree = node.replace(left=subtree)
        else:
            subtree = node.replace(right=subtree)
    return subtree
