"""
User Repository - Read-only access to the users referenced by comment authors
"""

from typing import Any, Dict, Iterable, Optional

from pymongo.database import Database

from adapters.mongo_adapter import USERS
from domain.models import parse_object_id
from repositories.base import BaseRepository, Document

# Credentials never leave the store.
PUBLIC_PROJECTION = {"hash": 0, "salt": 0, "password": 0}


class UserRepository(BaseRepository):
    """Repository for user lookups"""

    def __init__(self, db: Database):
        super().__init__(db[USERS])

    def get_by_id(self, user_id: Any) -> Optional[Document]:
        """Get the public fields of a user by ID"""
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        return self.collection.find_one({"_id": oid}, PUBLIC_PROJECTION)

    def get_many(self, user_ids: Iterable[Any]) -> Dict[str, Document]:
        """Fetch several users at once, keyed by their id as a string"""
        oids = {oid for oid in (parse_object_id(u) for u in user_ids) if oid is not None}
        if not oids:
            return {}
        cursor = self.collection.find({"_id": {"$in": list(oids)}}, PUBLIC_PROJECTION)
        return {str(doc["_id"]): doc for doc in cursor}
