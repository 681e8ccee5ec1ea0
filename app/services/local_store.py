"""
File-backed data store that persists across process restarts.
Replaces Firestore with a JSON-file-backed dict store.
Used when no Firebase credentials are found, and by the test suite.
"""

import copy
import json
import threading
import uuid
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from google.api_core.exceptions import AlreadyExists, NotFound
from google.cloud.firestore import ArrayUnion

from app.utils.logger import get_logger

logger = get_logger(__name__)


def _json_serial(obj):
    """JSON serializer for objects not serializable by default."""
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Type {type(obj)} not serializable")


def _sort_key(value):
    # Timestamps reloaded from disk are ISO strings; compare everything as such
    if isinstance(value, datetime):
        return value.isoformat()
    return "" if value is None else value


def _apply_transforms(current: dict, data: dict) -> dict:
    """Resolve Firestore field transforms against the stored document."""
    resolved = {}
    for key, value in data.items():
        if isinstance(value, ArrayUnion):
            existing = list(current.get(key) or [])
            for item in value.values:
                if item not in existing:
                    existing.append(item)
            resolved[key] = existing
        else:
            resolved[key] = value
    return resolved


class LocalStore:
    """File-backed data store that mimics Firestore operations."""

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        self.collections: dict[str, dict[str, dict]] = {}
        self._lock = threading.Lock()

        # None keeps the store purely in memory
        self._data_dir = Path(data_dir) if data_dir else None
        if self._data_dir is not None:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            self._load_data()

    def _load_data(self):
        """Load every persisted collection from the data dir."""
        for path in sorted(self._data_dir.glob("*.json")):
            with open(path) as f:
                items = json.load(f)
            self.collections[path.stem] = {
                item.get("id", str(uuid.uuid4())): item for item in items
            }
            logger.info("Loaded %d documents into '%s'", len(items), path.stem)

    def _persist_collection(self, name: str):
        """Write a collection to disk as JSON."""
        path = self._data_dir / f"{name}.json"
        items = list(self.collections.get(name, {}).values())
        with open(path, "w") as f:
            json.dump(items, f, indent=2, default=_json_serial)

    def _persist(self, collection_name: str):
        """Thread-safe persist after write operations."""
        if self._data_dir is None:
            return
        with self._lock:
            try:
                self._persist_collection(collection_name)
            except OSError as e:
                logger.warning("Failed to persist '%s': %s", collection_name, e)

    def collection(self, name: str) -> "CollectionRef":
        if name not in self.collections:
            self.collections[name] = {}
        return CollectionRef(self, name)

    def get_all(self, references: Iterable["DocumentRef"]) -> list["DocumentSnapshot"]:
        """Batch read, mirroring ``firestore.Client.get_all``."""
        return [ref.get() for ref in references]

    def close(self):
        if self._data_dir is None:
            return
        for name in list(self.collections):
            self._persist(name)


class CollectionRef:
    """Mimics Firestore collection reference."""

    def __init__(self, store: LocalStore, name: str):
        self._store = store
        self._data = store.collections[name]
        self._name = name
        self._filters = []
        self._order_by = None
        self._limit_val = None

    def _copy(self) -> "CollectionRef":
        new_ref = CollectionRef(self._store, self._name)
        new_ref._filters = list(self._filters)
        new_ref._order_by = self._order_by
        new_ref._limit_val = self._limit_val
        return new_ref

    def document(self, doc_id: Optional[str] = None) -> "DocumentRef":
        if doc_id is None:
            doc_id = uuid.uuid4().hex[:20]
        return DocumentRef(self._store, self._data, self._name, doc_id)

    def where(self, field: str, op: str, value) -> "CollectionRef":
        new_ref = self._copy()
        new_ref._filters.append((field, op, value))
        return new_ref

    def order_by(self, field: str, direction: str = "ASCENDING") -> "CollectionRef":
        new_ref = self._copy()
        new_ref._order_by = (field, direction)
        return new_ref

    def limit(self, count: int) -> "CollectionRef":
        new_ref = self._copy()
        new_ref._limit_val = count
        return new_ref

    def get(self) -> list["DocumentSnapshot"]:
        # Insertion order stands in for Firestore's natural order
        results = list(self._data.values())

        for field, op, value in self._filters:
            filtered = []
            for doc in results:
                doc_val = doc.get(field)
                if doc_val is None:
                    continue
                if op == "==" and doc_val == value:
                    filtered.append(doc)
                elif op == "!=" and doc_val != value:
                    filtered.append(doc)
                elif op == ">=" and doc_val >= value:
                    filtered.append(doc)
                elif op == "<=" and doc_val <= value:
                    filtered.append(doc)
                elif op == ">" and doc_val > value:
                    filtered.append(doc)
                elif op == "<" and doc_val < value:
                    filtered.append(doc)
                elif op == "in" and doc_val in value:
                    filtered.append(doc)
                elif op == "array-contains" and value in (doc_val if isinstance(doc_val, list) else []):
                    filtered.append(doc)
            results = filtered

        if self._order_by:
            field, direction = self._order_by
            results.sort(
                key=lambda d: _sort_key(d.get(field)),
                reverse=direction == "DESCENDING",
            )

        if self._limit_val:
            results = results[: self._limit_val]

        return [DocumentSnapshot(doc.get("id", ""), doc) for doc in results]

    def stream(self):
        return iter(self.get())


class DocumentRef:
    """Mimics Firestore document reference."""

    def __init__(self, store: LocalStore, collection_data: dict, collection_name: str, doc_id: str):
        self._store = store
        self._data = collection_data
        self._name = collection_name
        self._id = doc_id

    @property
    def id(self):
        return self._id

    def get(self) -> "DocumentSnapshot":
        doc = self._data.get(self._id, None)
        return DocumentSnapshot(self._id, doc)

    def create(self, data: dict):
        """Store ``data``, failing like Firestore if the document exists."""
        with self._store._lock:
            if self._id in self._data:
                raise AlreadyExists(f"Document already exists: {self._name}/{self._id}")
            self._data[self._id] = {**data, "id": self._id}
        self._store._persist(self._name)

    def set(self, data: dict, merge: bool = False):
        if merge and self._id in self._data:
            self._data[self._id].update(_apply_transforms(self._data[self._id], data))
        else:
            self._data[self._id] = {**_apply_transforms({}, data), "id": self._id}
        self._store._persist(self._name)

    def update(self, data: dict):
        if self._id not in self._data:
            raise NotFound(f"No document to update: {self._name}/{self._id}")
        current = self._data[self._id]
        current.update(_apply_transforms(current, data))
        self._store._persist(self._name)

    def delete(self):
        self._data.pop(self._id, None)
        self._store._persist(self._name)


class DocumentSnapshot:
    """Mimics Firestore document snapshot."""

    def __init__(self, doc_id: str, data: Optional[dict]):
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> Optional[dict]:
        # Copy so callers cannot mutate stored state, as with Firestore
        return copy.deepcopy(self._data) if self._data is not None else None

    def get(self, field: str, default=None):
        if self._data is None:
            return default
        return self._data.get(field, default)
