from .add_account import AddAccount
from .add_movie import AddMovie
from .find_movie_by_id import FindMovieById

__all__ = ["AddAccount", "AddMovie", "FindMovieById"]
