from typing import TYPE_CHECKING
from ...domain.repositories.movie_catalog import MovieCatalog
from ...domain.repositories.movie_repository import MovieRepository
from ...domain.usecases.add_movie import AddMovie
from ...domain.usecases.find_movie_by_id import FindMovieById
from ...application.use_cases.movie.add_movie import DbAddMovie
from ...application.use_cases.movie.find_movie_by_id import CatalogFindMovieById
from ...presentation.controllers.add_movie_controller import AddMovieController

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MovieProvider:
    """Movie provider - registers movie use cases and controller"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """Register movie lookup/add use cases and the add-movie controller."""
        container.register_singleton(
            FindMovieById,
            CatalogFindMovieById(movie_catalog=container.get(MovieCatalog))
        )
        container.register_singleton(
            AddMovie,
            DbAddMovie(movie_repository=container.get(MovieRepository))
        )
        container.register_singleton(
            AddMovieController,
            AddMovieController(
                add_movie=container.get(AddMovie),
                find_movie_by_id=container.get(FindMovieById),
            )
        )
