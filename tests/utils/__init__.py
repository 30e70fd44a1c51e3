"""Shared test utilities for pbstree."""

from .strategies import bindings, distinct_bindings, tree_classes

__all__ = ["bindings", "distinct_bindings", "tree_classes"]
