from .account.add_account import DbAddAccount
from .movie.add_movie import DbAddMovie
from .movie.find_movie_by_id import CatalogFindMovieById

__all__ = ["CatalogFindMovieById", "DbAddAccount", "DbAddMovie"]
