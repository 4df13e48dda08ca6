"""
Find Movie By Id Use Case
=========================

Business use case for looking a movie up in the catalog.
"""
from typing import Optional

from movielist.domain.models.movie import Movie
from movielist.domain.repositories.movie_catalog import MovieCatalog
from movielist.domain.usecases.find_movie_by_id import FindMovieById


class CatalogFindMovieById(FindMovieById):
    """Use case for finding a movie in the external catalog."""
    
    def __init__(self, movie_catalog: MovieCatalog):
        self._catalog = movie_catalog
    
    async def execute(self, movie_id: str) -> Optional[Movie]:
        """
        Execute the find movie use case.
        
        Args:
            movie_id: Movie identifier
            
        Returns:
            Movie if the catalog has it, None otherwise
        """
        movie_id = str(movie_id).strip()
        if not movie_id:
            return None
        return await self._catalog.get_movie(movie_id)
