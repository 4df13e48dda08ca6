"""
TMDB Movie Catalog
==================

MovieCatalog implementation backed by The Movie Database HTTP API.
"""
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from movielist.domain.models.movie import Movie
from movielist.domain.repositories.movie_catalog import MovieCatalog

logger = logging.getLogger(__name__)


class TmdbMovieCatalog(MovieCatalog):
    """
    Looks movies up through `GET /movie/{id}`.
    
    A 404 from TMDB means the movie does not exist and yields None.
    Any other HTTP error is raised to the caller.
    """
    
    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize catalog client.
        
        Args:
            base_url: TMDB API root, e.g. https://api.themoviedb.org/3
            api_key: TMDB read access token sent as a Bearer token
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        
        The HTTP client and its connection pool are created on first use and
        reused until aclose().
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
    
    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers
    
    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._client
    
    async def aclose(self) -> None:
        """Close the shared HTTP client if it was opened."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
    
    async def get_movie(self, movie_id: str) -> Optional[Movie]:
        url = f"{self._base_url}/movie/{quote(str(movie_id), safe='')}"
        response = await self._get_client().get(url, headers=self._headers())
        
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("TMDB has no movie with id %s", movie_id)
            return None
        response.raise_for_status()
        
        return Movie.model_validate(response.json())
