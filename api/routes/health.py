"""Health check routes"""

from fastapi import APIRouter
import logging

from adapters import mongo_adapter
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("dishes.api.health")


@router.get("/health-check")
def health_check():
    """Basic health check endpoint, including a MongoDB ping"""
    mongo_ok = mongo_adapter.ping()
    return {
        "status": "ok" if mongo_ok else "degraded",
        "service": settings.app_name,
        "version": settings.app_version,
        "mongodb": "up" if mongo_ok else "down",
    }
