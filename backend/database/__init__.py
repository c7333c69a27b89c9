"""
Record store backends.
"""

from core.config import Settings
from core.logger import get_logger
from database.memory_store import MemoryStore
from database.session import make_engine
from database.sql_store import SqlStore
from database.store import RecordStore, RecordTable

logger = get_logger("database")


def build_store(settings: Settings) -> RecordStore:
    if settings.storage_backend == "sql":
        logger.info("Using SQL record store")
        return SqlStore(make_engine(settings.database_url))
    logger.info("Using in-memory record store; data is discarded on exit")
    return MemoryStore()


__all__ = [
    "MemoryStore",
    "RecordStore",
    "RecordTable",
    "SqlStore",
    "build_store",
]
