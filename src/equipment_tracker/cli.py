#!/usr/bin/env python3
# PYTHON_ARGCOMPLETE_OK
"""
Command-line interface for Equipment Tracker
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import argcomplete

from . import markdown_io, shell
from ._version import __version__
from .catalog import Catalog
from .config import Config
from .errors import TrackerError
from .node import INDENT_STEP, Node, resolve_path
from .store import Store

logger = logging.getLogger(__name__)


def _load(store: Store) -> Catalog:
    catalog = store.load()
    if store.recovered:
        print(f"⚠️  Could not read {store.path} ({store.last_error}); using an empty catalog", file=sys.stderr)
    return catalog


def _save(store: Store, catalog: Catalog) -> int:
    if store.save(catalog):
        return 0
    print(f"❌ Could not save to {store.path}: {store.last_error}", file=sys.stderr)
    return 1


def _locate(catalog: Catalog, list_name: str, under: list[str] | None) -> Node | None:
    """Find the node a command targets: the list root, or a nested item below it."""
    root = catalog.get_list(list_name)
    if root is None:
        print(f"❌ List not found: {list_name}")
        return None
    node = resolve_path(root, under or [])
    if node is None:
        print(f"❌ Item not found: {' / '.join([list_name, *(under or [])])}")
    return node


def lists_command(store: Store) -> int:
    """Print the names of all lists."""
    shell.display_lists(_load(store))
    return 0


def show_command(store: Store, name: str, indent: int = INDENT_STEP) -> int:
    """Print a list and all its items as an indented tree."""
    root = _load(store).get_list(name)
    if root is None:
        print(f"❌ List not found: {name}")
        return 1
    print(root.display(indent))
    return 0


def create_command(store: Store, name: str) -> int:
    catalog = _load(store)
    try:
        catalog.create_list(name)
    except TrackerError as e:
        print(f"❌ {e}")
        return 1
    print(f"✅ Created list {name}")
    return _save(store, catalog)


def rename_command(store: Store, old_name: str, new_name: str) -> int:
    catalog = _load(store)
    if old_name not in catalog:
        # Catalog.rename_list ignores a missing source; tell the user anyway
        print(f"⚠️  List not found: {old_name}")
    try:
        catalog.rename_list(old_name, new_name)
    except TrackerError as e:
        print(f"❌ {e}")
        return 1
    if new_name in catalog and old_name not in catalog:
        print(f"✅ Renamed list {old_name} → {new_name}")
    return _save(store, catalog)


def delete_command(store: Store, name: str) -> int:
    catalog = _load(store)
    if name in catalog:
        catalog.delete_list(name)
        print(f"✅ Deleted list {name}")
    else:
        print(f"⚠️  List not found: {name}")
    return _save(store, catalog)


def add_command(store: Store, list_name: str, item_name: str, under: list[str] | None = None) -> int:
    """Add an item to a list, optionally below a nested item."""
    catalog = _load(store)
    parent = _locate(catalog, list_name, under)
    if parent is None:
        return 1
    try:
        parent.add_child(Node(item_name))
    except TrackerError as e:
        print(f"❌ {e}")
        return 1
    print(f"✅ Added {item_name} to {parent.name}")
    return _save(store, catalog)


def remove_command(store: Store, list_name: str, item_name: str, under: list[str] | None = None) -> int:
    catalog = _load(store)
    parent = _locate(catalog, list_name, under)
    if parent is None:
        return 1
    if item_name in parent:
        parent.remove_child(item_name)
        print(f"✅ Removed {item_name} from {parent.name}")
    else:
        print(f"⚠️  No item {item_name} in {parent.name}")
    return _save(store, catalog)


def rename_item_command(store: Store, list_name: str, old_name: str, new_name: str,
                        under: list[str] | None = None) -> int:
    catalog = _load(store)
    parent = _locate(catalog, list_name, under)
    if parent is None:
        return 1
    try:
        renamed = parent.rename_child(old_name, new_name)
    except TrackerError as e:
        print(f"❌ {e}")
        return 1
    if not renamed:
        print(f"⚠️  No item {old_name} in {parent.name}")
        return 1
    print(f"✅ Renamed {old_name} → {new_name}")
    return _save(store, catalog)


def export_command(store: Store, output: Path | None = None) -> int:
    """Write the catalog as markdown to output, or stdout."""
    text = markdown_io.export_markdown(_load(store))
    if output is None:
        sys.stdout.write(text)
        return 0
    try:
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        print(f"❌ Could not write {output}: {e}", file=sys.stderr)
        return 1
    print(f"✅ Exported to {output}")
    return 0


def import_command(store: Store, md_file: Path, replace: bool = False) -> int:
    """
    Read lists from a markdown file into the catalog.

    Without replace, imported lists are added alongside the existing ones and
    a name clash aborts the whole import.
    """
    if not md_file.exists():
        print(f"❌ Error: {md_file} not found!")
        return 1
    try:
        imported = markdown_io.import_markdown(md_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, TrackerError) as e:
        print(f"❌ Could not import {md_file}: {e}")
        return 1

    if replace:
        catalog = imported
    else:
        catalog = _load(store)
        clashes = sorted(catalog.list_names() & imported.list_names())
        if clashes:
            print(f"❌ Lists already exist: {', '.join(clashes)} (use --replace to overwrite everything)")
            return 1
        for name, root in imported.items():
            catalog.lists[name] = root

    print(f"✅ Imported {len(imported)} list(s) from {md_file}")
    return _save(store, catalog)


def config_command(config: Config, show: bool = False, show_path: bool = False) -> int:
    """Show configuration information."""
    if show_path:
        print(config.path if config.path else "No configuration file found")
        return 0

    if config.path:
        print(f"# Configuration loaded from: {config.path}")
    else:
        print("# No configuration file found, showing defaults")
    print()
    print(json.dumps(config.data, indent=2))
    return 0


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser_cli = argparse.ArgumentParser(
        prog="equipment-tracker",
        description="Equipment Tracker - Organize personal gear into named lists",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive menu (default)
  equipment-tracker

  # Create a list and add nested items
  equipment-tracker create Camping
  equipment-tracker add Camping Tent
  equipment-tracker add Camping Pegs --under Tent

  # Show a list as a tree
  equipment-tracker show Camping

  # Export everything as markdown
  equipment-tracker export -o gear.md
        """
    )
    parser_cli.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser_cli.add_argument('--data-file', type=Path, default=None,
                            help=f'Catalog file (default: {config.data_file})')
    parser_cli.add_argument('--verbose', '-v', action='store_true', help='Show debug logging')

    subparsers = parser_cli.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('shell', help='Interactive menu (default)')
    subparsers.add_parser('lists', help='Show all list names')

    show_parser = subparsers.add_parser('show', help='Show a list as a tree')
    show_parser.add_argument('name', help='List name')

    create_parser = subparsers.add_parser('create', help='Create a list')
    create_parser.add_argument('name', help='List name')

    rename_parser = subparsers.add_parser('rename', help='Rename a list')
    rename_parser.add_argument('old_name', help='Current list name')
    rename_parser.add_argument('new_name', help='New list name')

    delete_parser = subparsers.add_parser('delete', help='Delete a list')
    delete_parser.add_argument('name', help='List name')

    under_help = 'Path of nested item names below the list root (repeatable)'

    add_parser = subparsers.add_parser('add', help='Add an item to a list')
    add_parser.add_argument('list_name', help='List name')
    add_parser.add_argument('item', help='Item name')
    add_parser.add_argument('--under', '-u', action='append', metavar='ITEM', help=under_help)

    remove_parser = subparsers.add_parser('remove', help='Remove an item from a list')
    remove_parser.add_argument('list_name', help='List name')
    remove_parser.add_argument('item', help='Item name')
    remove_parser.add_argument('--under', '-u', action='append', metavar='ITEM', help=under_help)

    rename_item_parser = subparsers.add_parser('rename-item', help='Rename an item in a list')
    rename_item_parser.add_argument('list_name', help='List name')
    rename_item_parser.add_argument('old_name', help='Current item name')
    rename_item_parser.add_argument('new_name', help='New item name')
    rename_item_parser.add_argument('--under', '-u', action='append', metavar='ITEM', help=under_help)

    export_parser = subparsers.add_parser('export', help='Export the catalog as markdown')
    export_parser.add_argument('--output', '-o', type=Path, help='Output file (default: stdout)')

    import_parser = subparsers.add_parser('import', help='Import lists from a markdown file')
    import_parser.add_argument('file', type=Path, help='Markdown file')
    import_parser.add_argument('--replace', action='store_true', help='Replace the whole catalog')

    config_parser = subparsers.add_parser('config', help='Show configuration')
    config_parser.add_argument('--show', action='store_true', help='Show merged configuration')
    config_parser.add_argument('--path', action='store_true', help='Show config file path')

    return parser_cli


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    config = Config()
    parser_cli = build_parser(config)

    # Enable shell tab completion
    argcomplete.autocomplete(parser_cli)

    args = parser_cli.parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    store = Store(args.data_file or config.data_file)
    indent = config.display_indent
    logger.debug("Using catalog file %s", store.path)

    if args.command in (None, 'shell'):
        return shell.run_shell(store.load(), store, indent=indent)
    elif args.command == 'lists':
        return lists_command(store)
    elif args.command == 'show':
        return show_command(store, args.name, indent)
    elif args.command == 'create':
        return create_command(store, args.name)
    elif args.command == 'rename':
        return rename_command(store, args.old_name, args.new_name)
    elif args.command == 'delete':
        return delete_command(store, args.name)
    elif args.command == 'add':
        return add_command(store, args.list_name, args.item, args.under)
    elif args.command == 'remove':
        return remove_command(store, args.list_name, args.item, args.under)
    elif args.command == 'rename-item':
        return rename_item_command(store, args.list_name, args.old_name, args.new_name, args.under)
    elif args.command == 'export':
        return export_command(store, args.output)
    elif args.command == 'import':
        return import_command(store, args.file, args.replace)
    elif args.command == 'config':
        return config_command(config, show=args.show, show_path=args.path)
    else:
        parser_cli.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
