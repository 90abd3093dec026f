"""API routes package"""

from . import dishes, comments, health

__all__ = ["dishes", "comments", "health"]
