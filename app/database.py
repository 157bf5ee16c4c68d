"""
MongoDB client access.

A single MongoClient is created lazily and shared by the whole process;
routes receive the portal database through the ``get_db`` dependency.
"""
from functools import lru_cache

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import get_settings
from .logging_config import db_logger


@lru_cache()
def get_client() -> MongoClient:
    """Get the process-wide MongoClient, connecting on first use."""
    settings = get_settings()
    db_logger.info("Creating MongoDB client", database=settings.mongodb_db)
    return MongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        tz_aware=True,
    )


def close_client() -> None:
    """Close the shared client (if one was created) and forget it."""
    if get_client.cache_info().currsize:
        get_client().close()
        db_logger.info("Closed MongoDB client")
    get_client.cache_clear()


def get_db() -> Database:
    """FastAPI dependency returning the portal database."""
    return get_client()[get_settings().mongodb_db]


def ping(db: Database) -> bool:
    """Return True if the database answers a ping."""
    try:
        db.command("ping")
        return True
    except PyMongoError as e:
        db_logger.warning("MongoDB ping failed", error_message=str(e))
        return False
