from .account_repository import AccountRepository
from .movie_catalog import MovieCatalog
from .movie_repository import MovieRepository

__all__ = ["AccountRepository", "MovieCatalog", "MovieRepository"]
