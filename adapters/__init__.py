"""
Adapters package - External service connections.
MongoDB client lifecycle for the dishes store.
"""

from adapters import mongo_adapter

__all__ = [
    "mongo_adapter",
]
