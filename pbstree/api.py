from __future__ import annotations

from typing import Any, Dict, Union

from pbstree import config as bst_config
from pbstree.core.arena import ArenaTree
from pbstree.core.tree import Tree

TREE_BACKENDS: Dict[str, Any] = {
    "linked": Tree,
    "arena": ArenaTree,
}


def new_tree(backend: str | None = None) -> Union[Tree, ArenaTree]:
    """Return an empty tree of the requested (or configured) representation."""

    name = backend if backend is not None else bst_config.runtime_config().backend
    try:
        factory = TREE_BACKENDS[name]
    except KeyError as exc:
        raise ValueError(f"Unsupported backend '{name}'. Expected one of {set(TREE_BACKENDS)}.") from exc
    return factory.new()
