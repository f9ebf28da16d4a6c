"""
Adapter for markdown-it-py library.

Reads the lists-and-items layout used for catalog import: every level-1
heading opens a list, and the bullet (or numbered) lists that follow it,
under any deeper heading, hold its items.
"""
from dataclasses import dataclass, field

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

LIST_TYPES = ('bullet_list', 'ordered_list')


@dataclass
class MarkdownItem:
    """A list entry's first line of text and the entries nested under it."""
    text: str
    children: list['MarkdownItem'] = field(default_factory=list)


@dataclass
class MarkdownList:
    """An H1 heading and the items collected below it."""
    title: str
    items: list[MarkdownItem] = field(default_factory=list)


def parse_lists(content: str) -> list[MarkdownList]:
    """
    Parse markdown into one MarkdownList per level-1 heading.

    Items that appear before the first level-1 heading are dropped.
    """
    document = SyntaxTreeNode(MarkdownIt().parse(content))
    lists: list[MarkdownList] = []
    for block in document.children:
        if block.type == 'heading' and block.tag == 'h1':
            lists.append(MarkdownList(title=_inline_text(block)))
        elif block.type in LIST_TYPES and lists:
            lists[-1].items.extend(_read_items(block))
    return lists


def _read_items(list_node: SyntaxTreeNode) -> list[MarkdownItem]:
    items = []
    for entry in list_node.children:
        item = MarkdownItem(text='')
        for block in entry.children:
            # Only the entry's first paragraph names it
            if block.type == 'paragraph' and not item.text:
                item.text = _inline_text(block)
            elif block.type in LIST_TYPES:
                item.children.extend(_read_items(block))
        items.append(item)
    return items


def _inline_text(node: SyntaxTreeNode) -> str:
    return ''.join(child.content for child in node.children if child.type == 'inline')
