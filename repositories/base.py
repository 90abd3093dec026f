"""
Base repository for MongoDB collections.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Any, Dict, List, Optional

from pymongo.collection import Collection

from domain.models import parse_object_id

Document = Dict[str, Any]


class BaseRepository:
    """
    Base repository providing common read operations over one collection.
    All repositories should inherit from this class.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    def get_by_id(self, entity_id: Any) -> Optional[Document]:
        """
        Get document by ID.

        Args:
            entity_id: ObjectId or its hex string

        Returns:
            Document or None if not found or the id is malformed
        """
        oid = parse_object_id(entity_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid})

    def get_all(self) -> List[Document]:
        """Get all documents in insertion order"""
        return list(self.collection.find({}))
