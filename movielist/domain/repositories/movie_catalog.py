"""
Movie Catalog Interface
=======================

Abstract interface for the external catalog movies are looked up in.
"""
from abc import ABC, abstractmethod
from typing import Optional

from movielist.domain.models.movie import Movie


class MovieCatalog(ABC):
    """Read-only source of movie details."""
    
    @abstractmethod
    async def get_movie(self, movie_id: str) -> Optional[Movie]:
        """
        Fetch movie details.
        
        Args:
            movie_id: Catalog movie identifier
            
        Returns:
            Movie if the catalog knows it, None otherwise
        """
        pass
    
    async def aclose(self) -> None:
        """Release connections held by the catalog. Nothing to release by default."""
        return None
