"""Presentation shapes for the route index (tree nodes, pick items)."""

from urlindex.presentation.picker import PickItem, RouteChoice, build_choices, format_choice
from urlindex.presentation.tree import (
    LinkedCommand,
    TreeNode,
    build_tree,
    get_children,
    render_tree,
)

__all__ = [
    "LinkedCommand",
    "PickItem",
    "RouteChoice",
    "TreeNode",
    "build_choices",
    "build_tree",
    "format_choice",
    "get_children",
    "render_tree",
]
