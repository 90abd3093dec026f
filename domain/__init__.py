"""
Domain layer - Dish documents, schemas, and mappers.
"""

from domain import mappers, models, schemas

__all__ = ["mappers", "models", "schemas"]
