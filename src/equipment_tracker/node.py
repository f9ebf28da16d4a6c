"""
Tree of named items.

A Node has a name and an ordered list of children. add_child keeps sibling
names unique (exact, case-sensitive match). Each node owns its children outright, so the
structure is always a plain tree.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .errors import DuplicateNameError, PersistenceError, validate_name

# Spaces added per depth level when rendering a tree
INDENT_STEP = 2


@dataclass
class Node:
    """
    A named item that may contain other items.

    Attributes:
        name: Item name (unique among its siblings)
        children: Child items, in insertion order
    """
    name: str
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        validate_name(self.name)

    def __contains__(self, name: object) -> bool:
        return self.find_child(name) is not None

    def find_child(self, name: object) -> Node | None:
        """Return the direct child called name, or None."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def child_names(self) -> list[str]:
        return [child.name for child in self.children]

    def add_child(self, item: Node) -> Node:
        """
        Append item to the end of the children.

        Raises:
            DuplicateNameError: If a child with the same name exists. The
                children are left untouched.
        """
        if item.name in self:
            raise DuplicateNameError(item.name)
        self.children.append(item)
        return item

    def remove_child(self, name: str) -> None:
        """Remove every direct child called name. Missing names are ignored."""
        self.children = [child for child in self.children if child.name != name]

    def rename(self, new_name: str) -> None:
        """Replace this node's name. Sibling collisions are the caller's concern."""
        self.name = validate_name(new_name)

    def rename_child(self, old_name: str, new_name: str) -> bool:
        """
        Rename the first direct child called old_name.

        No check is made against the other children, so this can leave two
        siblings sharing a name (list renames do check; see Catalog.rename_list).

        Returns:
            True if a child was renamed, False if none matched.
        """
        child = self.find_child(old_name)
        if child is None:
            return False
        child.rename(new_name)
        return True

    def display(self, indent: int = INDENT_STEP) -> TreeView:
        """Return a restartable pre-order view of (depth, name) pairs."""
        return TreeView(self, indent)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "children": [child.to_dict() for child in self.children]}

    @classmethod
    def from_dict(cls, data: Any) -> Node:
        """
        Rebuild a tree from the structure produced by to_dict().

        Siblings sharing a name are loaded as they are, since rename_child can
        produce them.

        Raises:
            PersistenceError: If the structure is malformed or a name is invalid.
        """
        if not isinstance(data, dict):
            raise PersistenceError(f"Expected an object for a node, got {type(data).__name__}")
        name = data.get("name")
        raw_children = data.get("children", [])
        if not isinstance(raw_children, list):
            raise PersistenceError(f"Children of {name!r} must be a list")
        try:
            node = cls(name)
        except ValueError as e:
            raise PersistenceError(str(e)) from e
        node.children = [cls.from_dict(raw_child) for raw_child in raw_children]
        return node


class TreeView:
    """
    Depth-first, pre-order view over a Node.

    Iterating starts a new walk every time, so the same view can be consumed
    repeatedly. The view reflects the tree as it is when iterated.
    """

    def __init__(self, root: Node, indent: int = INDENT_STEP):
        self.root = root
        self.indent = indent

    def __iter__(self) -> Iterator[tuple[int, str]]:
        return _walk(self.root, 0)

    def lines(self) -> list[str]:
        """Render each node on its own line, indented by depth."""
        return [" " * (depth * self.indent) + name for depth, name in self]

    def __str__(self) -> str:
        return "\n".join(self.lines())


def _walk(node: Node, depth: int) -> Iterator[tuple[int, str]]:
    yield depth, node.name
    for child in node.children:
        yield from _walk(child, depth + 1)


def resolve_path(root: Node, path: list[str]) -> Node | None:
    """
    Follow a sequence of child names down from root.

    Returns:
        The node at the end of the path (root itself for an empty path),
        or None if any step is missing.
    """
    node = root
    for name in path:
        node = node.find_child(name)
        if node is None:
            return None
    return node
