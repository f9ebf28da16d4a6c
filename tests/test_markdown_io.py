"""Tests for markdown export and import."""
import pytest

from equipment_tracker import markdown_io
from equipment_tracker.catalog import Catalog
from equipment_tracker.errors import DuplicateNameError, InvalidNameError
from equipment_tracker.node import Node


def sample_catalog() -> Catalog:
    catalog = Catalog()
    camping = catalog.create_list("Camping")
    tent = camping.add_child(Node("Tent"))
    tent.add_child(Node("Pegs"))
    camping.add_child(Node("Stove"))
    catalog.create_list("Archery")
    return catalog


class TestExport:
    """Tests for export_markdown."""

    def test_export(self):
        text = markdown_io.export_markdown(sample_catalog())

        assert text == """# Archery

# Camping

* Tent
  * Pegs
* Stove
"""

    def test_export_empty(self):
        assert markdown_io.export_markdown(Catalog()) == ""


class TestImport:
    """Tests for import_markdown."""

    def test_import_export_output(self):
        """Test that exported markdown imports to the same catalog."""
        original = sample_catalog()
        imported = markdown_io.import_markdown(markdown_io.export_markdown(original))

        assert imported.list_names() == original.list_names()
        assert imported.get_list("Camping") == original.get_list("Camping")

    def test_deeper_headings_attach_to_list(self):
        text = """# Garage

## Shelf

* Drill
* Saw
"""
        catalog = markdown_io.import_markdown(text)

        assert catalog.list_names() == {"Garage"}
        assert catalog.get_list("Garage").child_names() == ["Drill", "Saw"]

    def test_duplicate_items_rejected(self):
        with pytest.raises(DuplicateNameError):
            markdown_io.import_markdown("# A\n\n* x\n* x\n")

    def test_duplicate_lists_rejected(self):
        with pytest.raises(DuplicateNameError):
            markdown_io.import_markdown("# A\n\n# A\n")

    def test_empty_heading_rejected(self):
        with pytest.raises(InvalidNameError):
            markdown_io.import_markdown("#\n\n* x\n")
