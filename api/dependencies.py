"""
API dependencies for dependency injection
"""

from fastapi import Depends
from pymongo.database import Database

from adapters import mongo_adapter
from repositories import DishRepository, UserRepository
from services import CommentService, DishService


def get_database() -> Database:
    """
    MongoDB database dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Database = Depends(get_database)):
            # Use db here
            pass
    """
    return mongo_adapter.get_db()


def get_user_repository(db: Database = Depends(get_database)) -> UserRepository:
    return UserRepository(db)


def get_dish_repository(
    db: Database = Depends(get_database),
    users: UserRepository = Depends(get_user_repository),
) -> DishRepository:
    return DishRepository(db, users=users)


def get_dish_service(
    repository: DishRepository = Depends(get_dish_repository),
) -> DishService:
    return DishService(repository)


def get_comment_service(
    repository: DishRepository = Depends(get_dish_repository),
) -> CommentService:
    return CommentService(repository)
