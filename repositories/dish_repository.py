"""
Dish Repository - Data access layer for dishes and their embedded comments (MongoDB)

Comment writes use MongoDB array operators ($push, $pull, positional $set)
so concurrent requests on the same dish never overwrite each other's
comments. Writes that depend on ownership filter on the author as well, so
they only apply if the comment still belongs to that author.
"""

from typing import Any, Dict, List, Mapping, Optional
import logging

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from adapters.mongo_adapter import DISHES
from app.exceptions import ConflictError
from domain.models import new_dish_document, parse_object_id, utcnow
from repositories.base import BaseRepository, Document
from repositories.user_repository import UserRepository

logger = logging.getLogger("dishes.repository")


class DishRepository(BaseRepository):
    """Repository for dish documents"""

    def __init__(self, db: Database, users: Optional[UserRepository] = None):
        super().__init__(db[DISHES])
        self.users = users or UserRepository(db)

    # ------------------ Reads ------------------

    def get_all_expanded(self) -> List[Document]:
        """All dishes with every comment author resolved to its user document"""
        return self.expand_authors(self.get_all())

    def get_expanded(self, dish_id: Any) -> Optional[Document]:
        """One dish with comment authors resolved, or None"""
        dish = self.get_by_id(dish_id)
        if dish is None:
            return None
        return self.expand_authors([dish])[0]

    def expand_authors(self, dishes: List[Document]) -> List[Document]:
        """Replace each comment's author id by the referenced user.

        Authors whose user no longer exists keep the bare id.
        """
        author_ids = {
            c.get("author")
            for d in dishes
            for c in d.get("comments") or []
            if c.get("author") is not None
        }
        users = self.users.get_many(author_ids)
        for dish in dishes:
            for comment in dish.get("comments") or []:
                user = users.get(str(comment.get("author")))
                if user is not None:
                    comment["author"] = user
        return dishes

    # ------------------ Dish writes ------------------

    def create(self, fields: Mapping[str, Any]) -> Document:
        """Insert a new dish built from ``fields``"""
        doc = new_dish_document(fields)
        try:
            self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise ConflictError(
                f"Dish with name {fields.get('name')!r} already exists",
                details={"name": fields.get("name")},
            )
        return doc

    def update_fields(self, dish_id: Any, fields: Mapping[str, Any]) -> Optional[Document]:
        """$set the given fields and return the updated dish, or None if absent"""
        oid = parse_object_id(dish_id)
        if oid is None:
            return None
        try:
            return self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": {**fields, "updated_at": utcnow()}},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise ConflictError(
                f"Dish with name {fields.get('name')!r} already exists",
                details={"name": fields.get("name")},
            )

    def delete(self, dish_id: Any) -> Optional[Document]:
        """Remove one dish and return it, or None if absent"""
        oid = parse_object_id(dish_id)
        if oid is None:
            return None
        return self.collection.find_one_and_delete({"_id": oid})

    def delete_all(self) -> Dict[str, Any]:
        """Remove every dish and return the store acknowledgment"""
        result = self.collection.delete_many({})
        logger.info("dishes_deleted count=%d", result.deleted_count)
        return {"acknowledged": result.acknowledged, "deleted_count": result.deleted_count}

    # ------------------ Comment writes ------------------

    def push_comment(self, dish_id: Any, comment: Document) -> bool:
        """Append a comment; False when the dish no longer exists"""
        oid = parse_object_id(dish_id)
        if oid is None:
            return False
        result = self.collection.update_one(
            {"_id": oid},
            {"$push": {"comments": comment}, "$set": {"updated_at": utcnow()}},
        )
        return result.matched_count == 1

    def update_comment(
        self, dish_id: Any, comment_id: Any, author_id: Any, fields: Mapping[str, Any]
    ) -> bool:
        """Set fields on one comment owned by ``author_id``; False when nothing matched"""
        query = self._owned_comment_query(dish_id, comment_id, author_id)
        if query is None:
            return False
        now = utcnow()
        changes = {f"comments.$.{k}": v for k, v in fields.items()}
        changes["comments.$.updated_at"] = now
        changes["updated_at"] = now
        result = self.collection.update_one(query, {"$set": changes})
        return result.matched_count == 1

    def remove_comment(self, dish_id: Any, comment_id: Any, author_id: Any) -> bool:
        """Pull one comment owned by ``author_id``; False when nothing matched"""
        query = self._owned_comment_query(dish_id, comment_id, author_id)
        if query is None:
            return False
        result = self.collection.update_one(
            query,
            {"$pull": {"comments": {"_id": query["comments"]["$elemMatch"]["_id"]}},
             "$set": {"updated_at": utcnow()}},
        )
        return result.modified_count == 1

    def clear_comments(self, dish_id: Any) -> bool:
        """Empty the comment list; False when the dish no longer exists"""
        oid = parse_object_id(dish_id)
        if oid is None:
            return False
        result = self.collection.update_one(
            {"_id": oid}, {"$set": {"comments": [], "updated_at": utcnow()}}
        )
        return result.matched_count == 1

    @staticmethod
    def _owned_comment_query(dish_id: Any, comment_id: Any, author_id: Any) -> Optional[Document]:
        oid = parse_object_id(dish_id)
        cid = parse_object_id(comment_id)
        aid = parse_object_id(author_id)
        if oid is None or cid is None or aid is None:
            return None
        return {"_id": oid, "comments": {"$elemMatch": {"_id": cid, "author": aid}}}
