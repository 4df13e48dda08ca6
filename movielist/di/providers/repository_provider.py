from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.account_repository import AccountRepository
from ...domain.repositories.movie_catalog import MovieCatalog
from ...domain.repositories.movie_repository import MovieRepository
from ...infrastructure.db.mongo_account_repository import MongoAccountRepository
from ...infrastructure.db.mongo_movie_repository import MongoMovieRepository
from ...infrastructure.tmdb.tmdb_movie_catalog import TmdbMovieCatalog

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository and catalog implementations.
        Gets database client from database provider and creates repository instances.
        """
        settings = get_settings()
        mongo_client = container.get("mongo_client")
        
        container.register_singleton(
            AccountRepository,
            MongoAccountRepository(mongo_client, settings.accounts_collection)
        )
        
        container.register_singleton(
            MovieRepository,
            MongoMovieRepository(mongo_client, settings.movies_collection)
        )
        
        container.register_singleton(
            MovieCatalog,
            TmdbMovieCatalog(
                base_url=settings.tmdb_api_url,
                api_key=settings.tmdb_api_key,
                timeout=settings.tmdb_timeout_seconds,
            )
        )
