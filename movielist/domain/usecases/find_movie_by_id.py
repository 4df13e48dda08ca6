"""
Find Movie By Id Use Case Interface
===================================

Contract for looking up a movie by its identifier.
"""
from abc import ABC, abstractmethod
from typing import Optional

from movielist.domain.models.movie import Movie


class FindMovieById(ABC):
    """Business operation that looks up a single movie."""
    
    @abstractmethod
    async def execute(self, movie_id: str) -> Optional[Movie]:
        """
        Find a movie by ID.
        
        Args:
            movie_id: Movie identifier as received from the client
            
        Returns:
            Movie if found. A missing movie is reported either as None
            or as a Movie without an `id`.
        """
        pass
