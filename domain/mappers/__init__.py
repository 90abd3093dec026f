"""
Domain mappers package.
Handles transformation between MongoDB documents and DTOs (Data Transfer Objects).
"""

from domain.mappers.dish_mapper import DishMapper

__all__ = ["DishMapper"]
