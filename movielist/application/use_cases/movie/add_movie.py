"""
Add Movie Use Case
==================

Business use case for adding a movie to a list.
"""
import asyncio

from movielist.domain.models.movie import Movie
from movielist.domain.repositories.movie_repository import MovieRepository
from movielist.domain.usecases.add_movie import AddMovie


class DbAddMovie(AddMovie):
    """Use case for storing a movie in the movie repository."""
    
    def __init__(self, movie_repository: MovieRepository):
        self._repository = movie_repository
    
    async def execute(self, movie: Movie) -> Movie:
        """
        Execute the add movie use case.
        
        Args:
            movie: Movie to store
            
        Returns:
            Stored movie entity
        """
        return await asyncio.to_thread(self._repository.add, movie)
