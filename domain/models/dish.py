"""
Dish aggregate as stored in MongoDB.

A dish is a plain document with an embedded, ordered ``comments`` list. The
helpers below build new documents and operate on the comment sequence without
touching the store, so the service layer and tests can reason about a dish
without a database.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from bson import ObjectId
from bson.errors import InvalidId

Document = Dict[str, Any]

# Fields a client may never set directly on a dish.
RESERVED_DISH_FIELDS = frozenset({"_id", "id", "comments", "created_at", "updated_at"})
COMMENT_UPDATABLE_FIELDS = ("rating", "comment")


def is_reserved_field(key: str) -> bool:
    """True when ``key``, or the field a dotted path starts from, is reserved."""
    return key.split(".", 1)[0] in RESERVED_DISH_FIELDS


def is_field_path(key: str) -> bool:
    """True for dotted paths and operator-like names, which are not plain dish fields."""
    return "." in key or key.startswith("$")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return ``value`` as an ObjectId, or None when it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None


def new_dish_document(fields: Mapping[str, Any]) -> Document:
    now = utcnow()
    doc = {k: v for k, v in fields.items() if not is_reserved_field(k)}
    doc.update({"_id": ObjectId(), "comments": [], "created_at": now, "updated_at": now})
    return doc


def new_comment_document(fields: Mapping[str, Any], author_id: ObjectId) -> Document:
    """Build an embedded comment; the author always comes from the requester."""
    now = utcnow()
    return {
        "_id": ObjectId(),
        "rating": fields["rating"],
        "comment": fields["comment"],
        "author": author_id,
        "created_at": now,
        "updated_at": now,
    }


# ------------------ Comment sequence ------------------


def author_id_of(comment: Mapping[str, Any]) -> Optional[str]:
    """Author id of a comment, whether the author is a raw id or an expanded user."""
    author = comment.get("author")
    if isinstance(author, Mapping):
        author = author.get("_id")
    return str(author) if author is not None else None


def is_author(comment: Mapping[str, Any], user_id: Any) -> bool:
    author = author_id_of(comment)
    return author is not None and author == str(user_id)


def find_by_id(comments: List[Document], comment_id: Any) -> Optional[Document]:
    wanted = str(comment_id)
    for comment in comments:
        if str(comment.get("_id")) == wanted:
            return comment
    return None


def update_by_id(
    comments: List[Document], comment_id: Any, fields: Mapping[str, Any]
) -> Optional[List[Document]]:
    """Return a copy of ``comments`` with one comment's rating/text updated.

    Only ``rating`` and ``comment`` are applied; the author is never changed.
    Returns None when no comment has ``comment_id``.
    """
    target = find_by_id(comments, comment_id)
    if target is None:
        return None
    changes = {k: fields[k] for k in COMMENT_UPDATABLE_FIELDS if fields.get(k) is not None}
    updated = []
    for comment in comments:
        if comment is target:
            comment = {**comment, **changes, "updated_at": utcnow()}
        updated.append(comment)
    return updated


def remove_by_id(comments: List[Document], comment_id: Any) -> Optional[List[Document]]:
    """Return a copy of ``comments`` without ``comment_id``, or None if absent."""
    target = find_by_id(comments, comment_id)
    if target is None:
        return None
    return [c for c in comments if c is not target]


def clear(comments: List[Document]) -> List[Document]:
    """Remove every comment, walking from the tail so indices stay valid."""
    for index in range(len(comments) - 1, -1, -1):
        del comments[index]
    return comments
