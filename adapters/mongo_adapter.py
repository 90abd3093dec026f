"""MongoDB adapter: client lifecycle and index setup for the dishes store.
"""

from typing import Optional
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.config import settings

logger = logging.getLogger("dishes.mongo")

DISHES = "dishes"
USERS = "users"

_client: Optional[MongoClient] = None
_db: Optional[Database] = None


# ------------------ Connection ------------------
def _new_client(uri: str) -> MongoClient:
    return MongoClient(
        uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        tz_aware=True,
    )


def get_db() -> Database:
    """Return the connected database, connecting lazily on first use."""
    global _client, _db
    if _db is not None:
        return _db
    _client = _new_client(settings.mongo_uri)
    _db = _client[settings.mongo_db_name]
    return _db


def connect(uri: str, db_name: str) -> Database:
    """Open the client and check the server answers a ping.

    A failed ping is logged but the client is kept: pymongo reconnects on
    the next operation, and that operation reports the store error.
    """
    global _client, _db
    _client = _new_client(uri)
    _db = _client[db_name]
    try:
        _client.admin.command("ping")
        logger.info("Connected to MongoDB %s (database: %s)", uri, db_name)
    except PyMongoError as exc:
        logger.warning("MongoDB ping failed at startup: %s", exc)
    return _db


def ensure_indexes(db: Database) -> None:
    """Create the indexes the dish repository relies on."""
    db[DISHES].create_index([("name", ASCENDING)], unique=True, name="name_unique")
    db[DISHES].create_index("comments._id", name="comment_id")
    logger.info("MongoDB indexes ensured on %s", DISHES)


def ping() -> bool:
    """Return True when the server answers a ping."""
    try:
        get_db().client.admin.command("ping")
        return True
    except PyMongoError:
        logger.exception("MongoDB ping failed")
        return False


def close():
    """Close MongoDB connection."""
    global _client, _db
    try:
        if _client is not None:
            _client.close()
            logger.info("MongoDB client closed")
    finally:
        _client = None
        _db = None
