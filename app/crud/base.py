"""
Base CRUD Class
Base class for document store operations.

Works against a Firestore ``Client`` or the LocalStore that mimics it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from google.cloud.firestore import Client


class BaseCRUD(ABC):
    """
    Base CRUD class for document store operations.

    Every document handed back to callers carries its document ID under ``id``.
    """

    def __init__(self, db: Client):
        """
        Initialize CRUD with a document store client.

        Args:
            db: Firestore client or LocalStore instance
        """
        self.db = db

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Get collection name. Must be implemented by subclass."""

    def get_collection(self) -> Any:
        """Get the collection reference."""
        return self.db.collection(self.collection_name)

    @staticmethod
    def _to_dict(snapshot) -> Dict[str, Any]:
        data = snapshot.to_dict()
        data["id"] = snapshot.id
        return data

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new document with an auto-generated ID.

        Args:
            data: Document data dictionary

        Returns:
            The stored document, including its ID
        """
        doc_ref = self.get_collection().document()
        doc_ref.set(data)
        return {**data, "id": doc_ref.id}

    def get_by_id(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Get document by ID.

        Args:
            doc_id: Document ID

        Returns:
            Document data or None if not found
        """
        doc = self.get_collection().document(doc_id).get()
        if doc.exists:
            return self._to_dict(doc)
        return None

    def get_many(self, doc_ids: Iterable[str]) -> List[Dict[str, Any]]:
        """
        Fetch several documents in one batch read.

        Missing documents are skipped; order follows ``doc_ids``.
        """
        refs = [self.get_collection().document(doc_id) for doc_id in doc_ids]
        if not refs:
            return []
        snapshots = {snap.id: snap for snap in self.db.get_all(refs) if snap.exists}
        return [self._to_dict(snapshots[ref.id]) for ref in refs if ref.id in snapshots]

    def find_one(self, field: str, value: Any) -> Optional[Dict[str, Any]]:
        """Return the first document whose ``field`` equals ``value``."""
        docs = self.get_collection().where(field, "==", value).limit(1).get()
        for doc in docs:
            return self._to_dict(doc)
        return None

    def find(
        self,
        field: str,
        value: Any,
        order_by: Optional[str] = None,
        direction: str = "ASCENDING",
    ) -> List[Dict[str, Any]]:
        """
        List documents whose ``field`` equals ``value``.

        Args:
            field: Field to filter on
            value: Required value
            order_by: Optional field to order results by
            direction: Sort direction (ASCENDING or DESCENDING)

        Returns:
            Matching documents
        """
        query = self.get_collection().where(field, "==", value)
        if order_by:
            query = query.order_by(order_by, direction=direction)
        return [self._to_dict(doc) for doc in query.get()]

    def list_all(self) -> List[Dict[str, Any]]:
        """List every document in the collection in natural order."""
        return [self._to_dict(doc) for doc in self.get_collection().stream()]

    def update(self, doc_id: str, data: Dict[str, Any]) -> None:
        """
        Update fields of an existing document.

        Args:
            doc_id: Document ID
            data: Fields to update (field transforms allowed)
        """
        self.get_collection().document(doc_id).update(data)
