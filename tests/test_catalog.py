"""Tests for catalog module."""
import pytest

from equipment_tracker.catalog import Catalog
from equipment_tracker.errors import DuplicateNameError, InvalidNameError, PersistenceError
from equipment_tracker.node import Node


class TestCreateList:
    """Tests for Catalog.create_list."""

    def test_create(self):
        catalog = Catalog()
        root = catalog.create_list("Camping")

        assert catalog.list_names() == {"Camping"}
        assert root.name == "Camping"
        assert len(root.children) == 0

    def test_create_duplicate(self):
        """Test that creating a list twice keeps one entry and raises."""
        catalog = Catalog()
        first = catalog.create_list("Camping")
        first.add_child(Node("Tent"))

        with pytest.raises(DuplicateNameError) as exc_info:
            catalog.create_list("Camping")

        assert exc_info.value.kind == "list"
        assert len(catalog) == 1
        assert catalog.get_list("Camping") is first
        assert catalog.get_list("Camping").child_names() == ["Tent"]

    def test_create_blank_name(self):
        catalog = Catalog()
        with pytest.raises(InvalidNameError):
            catalog.create_list("")
        assert len(catalog) == 0


class TestRenameList:
    """Tests for Catalog.rename_list."""

    def test_rename(self):
        """Test that the key and the root name move together."""
        catalog = Catalog()
        root = catalog.create_list("A")
        root.add_child(Node("Item"))

        catalog.rename_list("A", "C")

        assert catalog.list_names() == {"C"}
        assert catalog.get_list("C") is root
        assert root.name == "C"
        assert root.child_names() == ["Item"]

    def test_rename_onto_existing(self):
        """Test that renaming onto a taken name fails and changes nothing."""
        catalog = Catalog()
        a = catalog.create_list("A")
        b = catalog.create_list("B")

        with pytest.raises(DuplicateNameError):
            catalog.rename_list("A", "B")

        assert catalog.get_list("A") is a
        assert catalog.get_list("B") is b
        assert a.name == "A"
        assert b.name == "B"

    def test_rename_missing_is_silent(self):
        catalog = Catalog()
        catalog.create_list("A")

        catalog.rename_list("Nope", "C")

        assert catalog.list_names() == {"A"}

    def test_rename_missing_onto_existing_still_raises(self):
        """Test that the collision check happens before the source lookup."""
        catalog = Catalog()
        catalog.create_list("A")

        with pytest.raises(DuplicateNameError):
            catalog.rename_list("Nope", "A")

    def test_keys_match_root_names(self):
        catalog = Catalog()
        catalog.create_list("A")
        catalog.create_list("B")
        catalog.rename_list("A", "Z")

        for key, root in catalog.items():
            assert root.name == key


class TestDeleteAndGet:
    """Tests for Catalog.delete_list and Catalog.get_list."""

    def test_delete(self):
        catalog = Catalog()
        catalog.create_list("A")
        catalog.delete_list("A")

        assert "A" not in catalog
        assert catalog.get_list("A") is None

    def test_delete_missing(self):
        catalog = Catalog()
        catalog.create_list("A")
        catalog.delete_list("B")

        assert catalog.list_names() == {"A"}

    def test_get_empty_list_is_truthy(self):
        catalog = Catalog()
        catalog.create_list("Empty")

        assert catalog.get_list("Empty")

    def test_get_missing_does_not_create(self):
        catalog = Catalog()

        assert catalog.get_list("Ghost") is None
        assert len(catalog) == 0


class TestDictConversion:
    """Tests for Catalog.to_dict and Catalog.from_dict."""

    def test_from_dict_roundtrip(self):
        catalog = Catalog()
        camping = catalog.create_list("Camping")
        camping.add_child(Node("Tent")).add_child(Node("Pegs"))
        catalog.create_list("Climbing")

        restored = Catalog.from_dict(catalog.to_dict())

        assert restored.list_names() == {"Camping", "Climbing"}
        assert restored.get_list("Camping") == camping

    def test_from_dict_duplicate_lists(self):
        data = {"lists": [{"name": "A"}, {"name": "A"}]}
        with pytest.raises(PersistenceError):
            Catalog.from_dict(data)

    @pytest.mark.parametrize("data", [None, [], {}, {"lists": {}}])
    def test_from_dict_malformed(self, data):
        with pytest.raises(PersistenceError):
            Catalog.from_dict(data)
