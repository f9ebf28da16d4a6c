"""
Markdown export and import for catalogs.

Each list is a level-1 heading and its items are nested bullets:

    # Camping

    * Tent
      * Pegs
    * Stove
"""
from __future__ import annotations

from . import md_adapter
from .catalog import Catalog
from .node import Node


def export_markdown(catalog: Catalog) -> str:
    """Render the catalog as markdown, lists sorted by name."""
    blocks = []
    for name in sorted(catalog.list_names()):
        root = catalog.get_list(name)
        lines = [f"# {root.name}", ""]
        for depth, item_name in root.display():
            if depth == 0:
                continue
            lines.append("  " * (depth - 1) + f"* {item_name}")
        blocks.append("\n".join(lines).rstrip())
    return "\n\n".join(blocks) + "\n" if blocks else ""


def import_markdown(text: str) -> Catalog:
    """
    Build a catalog from markdown in the export_markdown() layout.

    Only level-1 headings start lists; bullets under deeper headings are
    attached to the enclosing list.

    Raises:
        DuplicateNameError: If two lists, or two siblings, share a name.
        InvalidNameError: If a heading or bullet is empty.
    """
    catalog = Catalog()
    for md_list in md_adapter.parse_lists(text):
        root = catalog.create_list(md_list.title.strip())
        _add_items(root, md_list.items)
    return catalog


def _add_items(parent: Node, items: list[md_adapter.MarkdownItem]) -> None:
    for item in items:
        child = parent.add_child(Node(item.text.strip()))
        _add_items(child, item.children)
