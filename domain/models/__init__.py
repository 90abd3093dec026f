"""
Domain models - MongoDB document shapes and helpers over the embedded comment list.
"""

from domain.models.dish import (
    Document,
    RESERVED_DISH_FIELDS,
    author_id_of,
    clear,
    find_by_id,
    is_author,
    is_field_path,
    is_reserved_field,
    new_comment_document,
    new_dish_document,
    parse_object_id,
    remove_by_id,
    update_by_id,
    utcnow,
)

__all__ = [
    "Document",
    "RESERVED_DISH_FIELDS",
    "author_id_of",
    "clear",
    "find_by_id",
    "is_author",
    "is_field_path",
    "is_reserved_field",
    "new_comment_document",
    "new_dish_document",
    "parse_object_id",
    "remove_by_id",
    "update_by_id",
    "utcnow",
]
