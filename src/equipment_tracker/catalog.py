"""
The catalog: every list the user has, keyed by list name.

Each list is a root Node whose name always matches its key.
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .errors import DuplicateNameError, PersistenceError, validate_name
from .node import Node


class Catalog:
    """Mapping from list name to the root Node of that list."""

    def __init__(self) -> None:
        self.lists: dict[str, Node] = {}

    def __len__(self) -> int:
        return len(self.lists)

    def __contains__(self, name: object) -> bool:
        return name in self.lists

    def __repr__(self) -> str:
        return f"Catalog(lists={sorted(self.lists)!r})"

    def items(self) -> Iterator[tuple[str, Node]]:
        return iter(self.lists.items())

    def create_list(self, name: str) -> Node:
        """
        Add a new, empty list.

        Raises:
            DuplicateNameError: If a list called name already exists.
        """
        validate_name(name)
        if name in self.lists:
            raise DuplicateNameError(name, kind="list")
        root = Node(name)
        self.lists[name] = root
        return root

    def rename_list(self, old_name: str, new_name: str) -> None:
        """
        Move a list to a new name, keeping the root node's name in step.

        Renaming a list that does not exist does nothing.

        Raises:
            DuplicateNameError: If new_name is already taken. Checked before
                old_name is looked up.
        """
        validate_name(new_name)
        if new_name in self.lists:
            raise DuplicateNameError(new_name, kind="list")
        root = self.lists.pop(old_name, None)
        if root is None:
            return
        root.rename(new_name)
        self.lists[new_name] = root

    def delete_list(self, name: str) -> None:
        self.lists.pop(name, None)

    def get_list(self, name: str) -> Node | None:
        """Return the root node of the named list, or None if there is none."""
        return self.lists.get(name)

    def list_names(self) -> set[str]:
        return set(self.lists)

    def to_dict(self) -> dict[str, Any]:
        return {"lists": [root.to_dict() for root in self.lists.values()]}

    @classmethod
    def from_dict(cls, data: Any) -> Catalog:
        """
        Rebuild a catalog from the structure produced by to_dict().

        Raises:
            PersistenceError: If the structure is malformed or two lists share
                a name.
        """
        if not isinstance(data, dict) or not isinstance(data.get("lists"), list):
            raise PersistenceError("Catalog data must be an object with a 'lists' array")
        catalog = cls()
        for raw_root in data["lists"]:
            root = Node.from_dict(raw_root)
            if root.name in catalog.lists:
                raise PersistenceError(f"Duplicate list name: {root.name!r}")
            catalog.lists[root.name] = root
        return catalog
