"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.dish_schemas import (
    DishCreate,
    DishUpdate,
    DishResponse,
    CommentCreate,
    CommentUpdate,
    CommentResponse,
    UserSummary,
    DeleteAllResponse,
)
from domain.schemas.user_schemas import AuthenticatedUser

__all__ = [
    # Dish schemas
    "DishCreate",
    "DishUpdate",
    "DishResponse",
    "DeleteAllResponse",
    # Comment schemas
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    # User schemas
    "UserSummary",
    "AuthenticatedUser",
]
