from typing import Any, Dict, List
import logging

from app.exceptions import ForbiddenError, comment_not_found, dish_not_found
from domain.models import find_by_id, is_author, new_comment_document, parse_object_id
from domain.schemas import AuthenticatedUser, CommentCreate, CommentUpdate
from repositories import DishRepository

logger = logging.getLogger("dishes.service.comments")

MODIFY_FORBIDDEN = "You are not authorised to modify someone else's comment"
DELETE_FORBIDDEN = "You are not authorised to delete someone else's comment"


class CommentService:
    """Business logic for comments embedded in a dish.

    Every operation first resolves the dish, then the comment, so a missing
    dish is always reported as such even when the comment id is also unknown.
    Mutations return the whole dish, reloaded with comment authors expanded.
    """

    def __init__(self, repository: DishRepository):
        self.repository = repository

    def _load_dish(self, dish_id: str) -> Dict[str, Any]:
        dish = self.repository.get_by_id(dish_id)
        if dish is None:
            logger.warning(f"dish_not_found dish_id={dish_id}")
            raise dish_not_found(dish_id)
        return dish

    def _load_comment(self, dish: Dict[str, Any], comment_id: str) -> Dict[str, Any]:
        comment = find_by_id(dish.get("comments") or [], comment_id)
        if comment is None:
            logger.warning(f"comment_not_found dish_id={dish['_id']} comment_id={comment_id}")
            raise comment_not_found(comment_id)
        return comment

    def _reload(self, dish_id: str) -> Dict[str, Any]:
        dish = self.repository.get_expanded(dish_id)
        if dish is None:
            raise dish_not_found(dish_id)
        return dish

    def list_comments(self, dish_id: str) -> List[Dict[str, Any]]:
        dish = self.repository.get_expanded(dish_id)
        if dish is None:
            logger.warning(f"dish_not_found dish_id={dish_id}")
            raise dish_not_found(dish_id)
        return dish.get("comments") or []

    def add_comment(
        self, dish_id: str, payload: CommentCreate, user: AuthenticatedUser
    ) -> Dict[str, Any]:
        self._load_dish(dish_id)
        comment = new_comment_document(payload.model_dump(), parse_object_id(user.id))
        if not self.repository.push_comment(dish_id, comment):
            raise dish_not_found(dish_id)
        logger.info(
            f"comment_added dish_id={dish_id} comment_id={comment['_id']} author={user.id}"
        )
        return self._reload(dish_id)

    def delete_all_comments(self, dish_id: str) -> Dict[str, Any]:
        self._load_dish(dish_id)
        if not self.repository.clear_comments(dish_id):
            raise dish_not_found(dish_id)
        logger.info(f"comments_cleared dish_id={dish_id}")
        return self._reload(dish_id)

    def get_comment(self, dish_id: str, comment_id: str) -> Dict[str, Any]:
        dish = self.repository.get_expanded(dish_id)
        if dish is None:
            logger.warning(f"dish_not_found dish_id={dish_id}")
            raise dish_not_found(dish_id)
        return self._load_comment(dish, comment_id)

    def update_comment(
        self,
        dish_id: str,
        comment_id: str,
        payload: CommentUpdate,
        user: AuthenticatedUser,
    ) -> Dict[str, Any]:
        """Apply rating/comment changes to a comment owned by ``user``"""
        comment = self._load_comment(self._load_dish(dish_id), comment_id)
        if not is_author(comment, user.id):
            logger.warning(
                f"comment_modify_forbidden dish_id={dish_id} comment_id={comment_id} user={user.id}"
            )
            raise ForbiddenError(MODIFY_FORBIDDEN)

        fields = payload.to_fields()
        if fields:
            if not self.repository.update_comment(dish_id, comment_id, user.id, fields):
                # Removed between the ownership check and the write.
                raise comment_not_found(comment_id)
            logger.info(
                f"comment_updated dish_id={dish_id} comment_id={comment_id} fields={sorted(fields)}"
            )
        return self._reload(dish_id)

    def delete_comment(
        self, dish_id: str, comment_id: str, user: AuthenticatedUser
    ) -> Dict[str, Any]:
        comment = self._load_comment(self._load_dish(dish_id), comment_id)
        if not is_author(comment, user.id):
            logger.warning(
                f"comment_delete_forbidden dish_id={dish_id} comment_id={comment_id} user={user.id}"
            )
            raise ForbiddenError(DELETE_FORBIDDEN)

        if not self.repository.remove_comment(dish_id, comment_id, user.id):
            raise comment_not_found(comment_id)
        logger.info(f"comment_deleted dish_id={dish_id} comment_id={comment_id}")
        return self._reload(dish_id)
