"""
Movie Repository Interface
==========================

Abstract interface for movie list data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod

from movielist.domain.models.movie import Movie


class MovieRepository(ABC):
    """Abstract repository for movie list persistence operations."""
    
    @abstractmethod
    def add(self, movie: Movie) -> Movie:
        """
        Store a movie in its owner's list, replacing an existing entry.
        
        Args:
            movie: Movie entity to store
            
        Returns:
            Stored movie entity
        """
        pass
