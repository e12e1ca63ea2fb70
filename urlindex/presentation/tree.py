"""Two-level tree view of an index snapshot.

Level 0 is one node per routing module; level 1 is that module's routes.
Leaf nodes carry a command descriptor that a host UI can bind to its
"copy snippet" action.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from urlindex.constants import COPY_SNIPPET_COMMAND
from urlindex.index.snapshot import IndexSnapshot


@dataclass(frozen=True)
class LinkedCommand:
    """Command to run when a node is selected."""

    target: str
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class TreeNode:
    """A node in the route tree."""

    label: str
    has_children: bool
    path: Optional[str] = None
    linked_command: Optional[LinkedCommand] = None
    children: tuple["TreeNode", ...] = field(default=(), compare=False)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"label": self.label, "has_children": self.has_children}
        if self.path is not None:
            result["path"] = self.path
        if self.linked_command is not None:
            result["linked_command"] = {
                "target": self.linked_command.target,
                "args": list(self.linked_command.args),
            }
        if self.children:
            result["children"] = [c.to_dict() for c in self.children]
        return result


def get_children(snapshot: IndexSnapshot, node: Optional[TreeNode] = None) -> list[TreeNode]:
    """Children of ``node``, or the file nodes when ``node`` is None."""
    if node is None:
        return [
            TreeNode(label=record.label, has_children=True, path=record.file_path)
            for record in snapshot.files()
        ]
    if node.path is None:
        return []
    return [
        TreeNode(
            label=entry.label,
            has_children=False,
            linked_command=LinkedCommand(
                target=COPY_SNIPPET_COMMAND,
                args=(node.path, entry.url_path, entry.name),
            ),
        )
        for entry in snapshot.entries_for(node.path)
    ]


def build_tree(snapshot: IndexSnapshot) -> list[TreeNode]:
    """The whole tree, file nodes with their route nodes attached."""
    roots = []
    for file_node in get_children(snapshot):
        children = tuple(get_children(snapshot, file_node))
        roots.append(
            TreeNode(
                label=file_node.label,
                has_children=file_node.has_children,
                path=file_node.path,
                children=children,
            )
        )
    return roots


def render_tree(nodes: list[TreeNode]) -> str:
    """Plain-text rendering for terminals."""
    lines = []
    for file_node in nodes:
        lines.append(file_node.label)
        for i, child in enumerate(file_node.children):
            branch = "└──" if i == len(file_node.children) - 1 else "├──"
            lines.append(f"  {branch} {child.label}")
    return "\n".join(lines)
