"""
Document store for the cats collection.

``CatRepository`` is the capability the rest of the code depends on:
insert, lookup by id, list everything and delete by id. Two backends
ship with the package:

* ``InMemoryCatRepository`` keeps documents in a dict. It is what the
  tests use and what ``CATS_STORE_BACKEND=memory`` selects.

* ``JsonFileCatRepository`` persists documents to a JSON file on disk
  (``data/cats.json`` by default). The file holds a mapping from cat
  IDs to documents in their wire shape. All reads and writes are
  synchronised with a ``threading.Lock`` so that each operation is
  atomic for concurrent requests served by the same process.

Each operation is independent: there are no transactions spanning
several documents and no partial updates.
"""

from __future__ import annotations

import abc
import json
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from ..errors import StoreUnavailable
from .schemas import Cat


logger = logging.getLogger(__name__)


class CatRepository(abc.ABC):
    """Persistent collection of ``Cat`` documents keyed by ``id``."""

    @abc.abstractmethod
    def insert(self, cat: Cat) -> Cat:
        """Store a complete cat and return it unchanged.

        The id must not exist yet; callers mint unique ids before
        inserting. A duplicate raises ``StoreUnavailable``.
        """

    @abc.abstractmethod
    def find_by_id(self, cat_id: str) -> Optional[Cat]:
        """Return the cat with this exact id, or ``None``."""

    @abc.abstractmethod
    def find_all(self) -> List[Cat]:
        """Return every stored cat, in insertion order."""

    @abc.abstractmethod
    def delete_by_id(self, cat_id: str) -> None:
        """Remove the cat if present. Deleting a missing id is a no-op."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Drop every document."""


class InMemoryCatRepository(CatRepository):
    def __init__(self) -> None:
        self._cats: Dict[str, Cat] = {}
        self._lock = threading.Lock()

    def insert(self, cat: Cat) -> Cat:
        with self._lock:
            if cat.id in self._cats:
                raise StoreUnavailable(f"Duplicate cat id {cat.id}")
            self._cats[cat.id] = cat
        return cat

    def find_by_id(self, cat_id: str) -> Optional[Cat]:
        with self._lock:
            return self._cats.get(cat_id)

    def find_all(self) -> List[Cat]:
        with self._lock:
            return list(self._cats.values())

    def delete_by_id(self, cat_id: str) -> None:
        with self._lock:
            self._cats.pop(cat_id, None)

    def clear(self) -> None:
        with self._lock:
            self._cats.clear()


class JsonFileCatRepository(CatRepository):
    """Cats persisted as JSON documents in a single file.

    Parameters
    ----------
    path : Path
        Location of the JSON file. It is created, along with its parent
        directory, on the first write. A missing file reads as an empty
        collection.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    # Callers must hold self._lock for the two helpers below.

    def _load(self) -> Dict[str, dict]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error("Error reading cat store %s: %s", self.path, exc)
            raise StoreUnavailable(f"Cannot read cat store: {exc}") from exc
        if not isinstance(data, dict):
            raise StoreUnavailable(f"Malformed cat store {self.path}")
        return data

    def _save(self, data: Dict[str, dict]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            tmp_path.replace(self.path)
        except OSError as exc:
            logger.error("Error writing cat store %s: %s", self.path, exc)
            raise StoreUnavailable(f"Cannot write cat store: {exc}") from exc

    @staticmethod
    def _to_cat(document: dict) -> Cat:
        try:
            return Cat.model_validate(document)
        except ValidationError as exc:
            raise StoreUnavailable(f"Malformed cat document: {exc}") from exc

    def insert(self, cat: Cat) -> Cat:
        with self._lock:
            data = self._load()
            if cat.id in data:
                raise StoreUnavailable(f"Duplicate cat id {cat.id}")
            data[cat.id] = cat.model_dump(mode="json", by_alias=True)
            self._save(data)
        return cat

    def find_by_id(self, cat_id: str) -> Optional[Cat]:
        with self._lock:
            document = self._load().get(cat_id)
        if document is None:
            return None
        return self._to_cat(document)

    def find_all(self) -> List[Cat]:
        with self._lock:
            documents = list(self._load().values())
        return [self._to_cat(d) for d in documents]

    def delete_by_id(self, cat_id: str) -> None:
        with self._lock:
            data = self._load()
            if data.pop(cat_id, None) is not None:
                self._save(data)

    def clear(self) -> None:
        with self._lock:
            self._save({})
