"""
MongoDB Connection
==================

Shared MongoDB client for all repositories.
The underlying MongoClient is created lazily on first use.
"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from movielist.core.config import get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """Owns a single MongoClient and hands out collections from one database."""
    
    def __init__(self, uri: str, database_name: str):
        self._uri = uri
        self._database_name = database_name
        self._client: Optional[MongoClient] = None
    
    @property
    def client(self) -> MongoClient:
        if self._client is None:
            self._client = MongoClient(self._uri)
            logger.info("Connected to MongoDB database '%s'", self._database_name)
        return self._client
    
    @property
    def database(self) -> Database:
        return self.client[self._database_name]
    
    def get_collection(self, name: str) -> Collection:
        """Return a collection handle from the configured database."""
        return self.database[name]
    
    def close(self) -> None:
        """Close the client if it was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("MongoDB connection closed")


# Global client manager (singleton pattern)
_mongo_client: Optional[MongoClientManager] = None


def get_mongo_client() -> MongoClientManager:
    """
    Get the shared MongoDB client manager (singleton pattern)
    
    Returns:
        MongoClientManager configured from settings
    """
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = MongoClientManager(settings.mongo_uri, settings.mongo_database_name)
    return _mongo_client
