import numpy as np
import pytest

from pbstree.core.persistence import SliceUpdate, clone_array_segment, rebuild_search_path
from pbstree.core.tree import EMPTY, Node


def test_clone_array_segment_leaves_source_untouched():
    source = np.asarray([0, 1, 2], dtype=np.int64)
    clone = clone_array_segment(source, [SliceUpdate(index=1, value=9)], append=(-1,))

    assert source.tolist() == [0, 1, 2]
    assert clone.tolist() == [0, 9, 2, -1]
    assert clone.dtype == np.int64


def test_clone_array_segment_returns_read_only_array():
    clone = clone_array_segment(np.zeros(2, dtype=np.int64))
    with pytest.raises(ValueError):
        clone[0] = 1


def test_clone_array_segment_updates_appended_slot():
    clone = clone_array_segment(np.empty((0,), dtype=np.int64), [SliceUpdate(index=0, value=4)], append=(-1,))
    assert clone.tolist() == [4]


def test_rebuild_search_path_reuses_siblings():
    sibling = Node(left=EMPTY, right=EMPTY, key=1, value="a")
    root = Node(left=sibling, right=EMPTY, key=2, value="b")
    leaf = Node(left=EMPTY, right=EMPTY, key=3, value="c")

    rebuilt = rebuild_search_path([(root, False)], leaf)

    assert rebuilt is not root
    assert rebuilt.left is sibling
    assert rebuilt.right is leaf
    assert (rebuilt.key, rebuilt.value) == (2, "b")
    assert root.right is EMPTY


def test_rebuild_search_path_without_ancestors_returns_subtree():
    leaf = Node(left=EMPTY, right=EMPTY, key=3, value="c")
    assert rebuild_search_path([], leaf) is leaf
