# uicraft/db/__init__.py
"""
Database module.
"""
from typing import Optional

from uicraft.core.config import settings
from uicraft.core.logging import log

# Motor client instance
_client = None
_db = None
_connection_error: Optional[str] = None


async def connect_db():
    """
    Connect to MongoDB and initialize Beanie.

    If MongoDB is not available, stores the error for later retrieval
    rather than failing startup. Generation still works; history does not.
    """
    global _client, _db, _connection_error
    try:
        from motor.motor_asyncio import AsyncIOMotorClient
        from beanie import init_beanie
        from uicraft.models import UIVersion

        _client = AsyncIOMotorClient(settings.db.mongodb_url, serverSelectionTimeoutMS=5000)
        _db = _client[settings.db.database_name]

        # Fail fast if MongoDB is not running
        await _client.admin.command("ping")
        log("DB", "Connected to MongoDB")

        await init_beanie(database=_db, document_models=[UIVersion])
        log("DB", "Beanie ODM initialized")
        _connection_error = None
    except Exception as e:
        _connection_error = str(e)
        log("DB", f"MongoDB not available: {_connection_error}")
        log("DB", f"Version history is disabled until {settings.db.mongodb_url} is reachable")
        if _client is not None:
            _client.close()
        _client = None
        _db = None


async def disconnect_db():
    """Disconnect from MongoDB."""
    global _client, _db
    if _client:
        _client.close()
        log("DB", "Disconnected from MongoDB")
    _client = None
    _db = None


def is_connected() -> bool:
    """Check if database is connected."""
    return _db is not None


def get_connection_error() -> Optional[str]:
    """Get connection error message if connection failed."""
    return _connection_error
