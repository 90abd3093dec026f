"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.dish_repository import DishRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "DishRepository",
]
