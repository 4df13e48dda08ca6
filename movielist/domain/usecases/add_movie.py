"""
Add Movie Use Case Interface
============================

Contract for adding a movie to a list.
"""
from abc import ABC, abstractmethod

from movielist.domain.models.movie import Movie


class AddMovie(ABC):
    """Business operation that stores a movie in a list."""
    
    @abstractmethod
    async def execute(self, movie: Movie) -> Movie:
        """
        Add a movie to the list.
        
        Args:
            movie: Movie returned by the lookup
            
        Returns:
            Stored movie
        """
        pass
