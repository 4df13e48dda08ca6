"""
MongoDB Movie Repository
========================

Concrete implementation of MovieRepository using MongoDB.
Each document is one entry in a user's movie list.
"""
import logging
from typing import Optional

from pymongo.collection import Collection

from movielist.core.config import get_settings
from movielist.domain.constants.movie_fields import MovieFields
from movielist.domain.models.movie import Movie
from movielist.domain.repositories.movie_repository import MovieRepository
from movielist.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from movielist.utils.datetime_utils import now

logger = logging.getLogger(__name__)


class MongoMovieRepository(MovieRepository):
    """MongoDB implementation of MovieRepository."""
    
    def __init__(self, client: Optional[MongoClientManager] = None, collection_name: Optional[str] = None):
        self._client = client or get_mongo_client()
        self._collection: Collection = self._client.get_collection(
            collection_name or get_settings().movies_collection
        )
    
    def _to_document(self, movie: Movie) -> dict:
        """Convert Movie entity to MongoDB document."""
        doc = movie.model_dump()
        doc[MovieFields.ADDED_AT] = now()
        return doc
    
    def add(self, movie: Movie) -> Movie:
        """
        Store a movie, replacing the same entry in the owner's list.
        
        Entries are keyed by (id, user_id); movies without an owner share
        the user_id=None list.
        """
        result = self._collection.replace_one(
            {MovieFields.ID: movie.id, MovieFields.USER_ID: movie.user_id},
            self._to_document(movie),
            upsert=True,
        )
        if result.upserted_id is None:
            logger.info("Movie %s already in list of user %s, replaced", movie.id, movie.user_id)
        return movie
