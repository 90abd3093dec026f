"""Services package - Business logic layer"""

from services.dish_service import DishService
from services.comment_service import CommentService

__all__ = [
    "DishService",
    "CommentService",
]
