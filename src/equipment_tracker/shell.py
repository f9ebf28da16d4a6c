"""
Interactive menu for managing lists and their items.

The catalog and store are passed in; every command that changes the catalog
is followed by a save.
"""
from __future__ import annotations

from collections.abc import Callable

from .catalog import Catalog
from .errors import TrackerError
from .node import INDENT_STEP, Node
from .store import Store

InputFn = Callable[[str], str]

MAIN_MENU = """
Main Menu
1. Display Lists
2. Create a List
3. Rename a List
4. Delete a List
5. Select a List
6. Exit"""

LIST_MENU = """1. Add Item
2. Remove Item
3. Rename Item
4. Return to Main Menu"""


def display_lists(catalog: Catalog) -> None:
    names = catalog.list_names()
    if not names:
        print("No lists available.")
        return
    print("Available Lists:")
    for name in sorted(names):
        print(name)


def run_shell(catalog: Catalog, store: Store, input_fn: InputFn | None = None, indent: int = INDENT_STEP) -> int:
    """
    Run the main menu until the user exits or input ends.

    Returns:
        0, the process exit status.
    """
    input_fn = input_fn or input
    if store.recovered:
        print(f"⚠️  Could not read {store.path} ({store.last_error}); started with an empty catalog.")
        print("   The file will be overwritten on the next change.")

    try:
        while True:
            print(MAIN_MENU)
            option = input_fn("Choose an option: ").strip()

            if option == "1":
                display_lists(catalog)
            elif option == "2":
                name = input_fn("Enter list name: ")
                _apply(store, catalog, lambda: catalog.create_list(name))
            elif option == "3":
                old_name = input_fn("Enter old list name: ")
                new_name = input_fn("Enter new list name: ")
                _apply(store, catalog, lambda: catalog.rename_list(old_name, new_name))
            elif option == "4":
                name = input_fn("Enter list name to delete: ")
                _apply(store, catalog, lambda: catalog.delete_list(name))
            elif option == "5":
                name = input_fn("Enter list name to select: ")
                root = catalog.get_list(name)
                if root is None:
                    print("List not found.")
                else:
                    manage_items(catalog, store, root, input_fn, indent)
            elif option == "6":
                return 0
            else:
                print("Invalid option. Please try again.")
    except EOFError:
        print()
        return 0


def manage_items(catalog: Catalog, store: Store, root: Node, input_fn: InputFn | None = None, indent: int = INDENT_STEP) -> None:
    """Run the item menu for one list until the user returns to the main menu."""
    input_fn = input_fn or input
    while True:
        print(f"\nManaging List: {root.name}")
        print(root.display(indent))
        print(LIST_MENU)
        choice = input_fn("Choose an option: ").strip()

        if choice == "1":
            name = input_fn("Enter item name: ")
            _apply(store, catalog, lambda: root.add_child(Node(name)))
        elif choice == "2":
            name = input_fn("Enter item name to remove: ")
            _apply(store, catalog, lambda: root.remove_child(name))
        elif choice == "3":
            old_name = input_fn("Enter old item name: ")
            new_name = input_fn("Enter new item name: ")
            _apply(store, catalog, lambda: root.rename_child(old_name, new_name))
        elif choice == "4":
            return
        else:
            print("Invalid option. Please try again.")


def _apply(store: Store, catalog: Catalog, command: Callable[[], object]) -> None:
    """Run a mutating command, report domain errors, then persist."""
    try:
        command()
    except TrackerError as e:
        print(f"❌ {e}. Please choose another name.")
        return
    if not store.save(catalog):
        print(f"⚠️  Changes could not be saved to {store.path}: {store.last_error}")
