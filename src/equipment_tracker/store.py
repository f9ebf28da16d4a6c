"""
Persistence for the catalog.

The whole catalog lives in one JSON file. Saving rewrites the file; loading
never fails. A missing file and a file that cannot be decoded both give an
empty catalog, and the latter is flagged through Store.recovered so the
caller can warn the user that data was discarded.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from .catalog import Catalog
from .errors import PersistenceError

logger = logging.getLogger(__name__)

FORMAT_NAME = "equipment-tracker"
FORMAT_VERSION = 1

DEFAULT_DATA_FILE = Path("database.json")


def encode_catalog(catalog: Catalog) -> str:
    """
    Serialize a catalog to the saved document text.

    Raises:
        PersistenceError: If the tree is nested too deeply to serialize.
    """
    document = {"format": FORMAT_NAME, "version": FORMAT_VERSION}
    try:
        document.update(catalog.to_dict())
        return json.dumps(document, ensure_ascii=False, indent=2)
    except RecursionError as e:
        raise PersistenceError("Catalog nesting too deep") from e


def decode_catalog(text: str) -> Catalog:
    """
    Parse a saved document back into a Catalog.

    Raises:
        PersistenceError: If the text is not a catalog document this version
            understands.
    """
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise PersistenceError(f"Not valid JSON: {e}") from e
    if not isinstance(document, dict) or document.get("format") != FORMAT_NAME:
        raise PersistenceError("Not an equipment-tracker catalog")
    version = document.get("version")
    if not isinstance(version, int) or isinstance(version, bool) or not 1 <= version <= FORMAT_VERSION:
        raise PersistenceError(f"Unsupported catalog version: {version!r}")
    try:
        return Catalog.from_dict(document)
    except RecursionError as e:
        raise PersistenceError("Catalog nesting too deep") from e


class Store:
    """Loads and saves a Catalog at a fixed path."""

    def __init__(self, path: Path | str = DEFAULT_DATA_FILE):
        self.path = Path(path)
        self.recovered = False
        self.last_error: str | None = None

    def load(self) -> Catalog:
        """
        Read the catalog from disk.

        Returns:
            The stored catalog, or an empty one if the file is absent or
            cannot be decoded.
        """
        self.recovered = False
        self.last_error = None

        if not self.path.exists():
            logger.debug("No catalog at %s, starting empty", self.path)
            return Catalog()

        try:
            text = self.path.read_text(encoding="utf-8")
            catalog = decode_catalog(text)
        except (OSError, UnicodeDecodeError, PersistenceError) as e:
            self.recovered = True
            self.last_error = str(e)
            logger.warning("Error loading data from %s: %s; starting with an empty catalog", self.path, e)
            return Catalog()

        logger.info("Loaded %d list(s) from %s", len(catalog), self.path)
        return catalog

    def save(self, catalog: Catalog) -> bool:
        """
        Write the catalog to disk, replacing the previous file.

        The data goes to a temporary file beside the target which is then
        moved into place, so a failed save leaves the old file intact.

        Returns:
            True on success, False if the write failed (the failure is logged).
        """
        tmp_name = None
        try:
            text = encode_catalog(catalog)
            directory = self.path.parent
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.write("\n")
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError, ValueError, PersistenceError) as e:
            self.last_error = str(e)
            logger.error("Error saving data to %s: %s", self.path, e)
            return False
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError as e:
                    logger.debug("Could not remove temp file %s: %s", tmp_name, e)

        logger.debug("Saved %d list(s) to %s", len(catalog), self.path)
        return True
