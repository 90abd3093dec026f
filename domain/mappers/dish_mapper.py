"""
Dish domain mappers.
Handles transformation between MongoDB documents and response DTOs.
"""

from typing import Any, Mapping, Optional, Union

from domain.schemas.dish_schemas import CommentResponse, DishResponse, UserSummary

# Never rendered, even when an expanded user document carries them.
_HIDDEN_USER_FIELDS = frozenset({"hash", "salt", "password"})


class DishMapper:
    """Mapper for dish-related transformations."""

    @staticmethod
    def user_to_response(user: Mapping[str, Any]) -> UserSummary:
        data = {k: v for k, v in user.items() if k not in _HIDDEN_USER_FIELDS}
        data["id"] = str(data.pop("_id"))
        return UserSummary.model_validate(data)

    @staticmethod
    def _author(author: Any) -> Union[UserSummary, str, None]:
        if author is None:
            return None
        if isinstance(author, Mapping):
            return DishMapper.user_to_response(author)
        # Unexpanded reference, or an author whose user record no longer exists.
        return str(author)

    @staticmethod
    def comment_to_response(comment: Mapping[str, Any]) -> CommentResponse:
        """
        Convert an embedded comment document to CommentResponse.

        Args:
            comment: comment sub-document; ``author`` may be a raw id or an
                expanded user document

        Returns:
            CommentResponse DTO
        """
        return CommentResponse(
            id=str(comment["_id"]),
            rating=comment["rating"],
            comment=comment["comment"],
            author=DishMapper._author(comment.get("author")),
            created_at=comment.get("created_at"),
            updated_at=comment.get("updated_at"),
        )

    @staticmethod
    def to_response(doc: Optional[Mapping[str, Any]]) -> Optional[DishResponse]:
        """
        Convert a dish document to DishResponse.

        Extra descriptive fields stored on the dish are passed through unchanged.
        """
        if doc is None:
            return None
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        data["comments"] = [
            DishMapper.comment_to_response(c) for c in data.get("comments") or []
        ]
        return DishResponse.model_validate(data)
