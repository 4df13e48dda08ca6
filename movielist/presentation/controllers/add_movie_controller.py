"""
Add Movie Controller
====================

Looks up a movie by ID and adds it to the list.
"""
import logging

from movielist.domain.usecases.add_movie import AddMovie
from movielist.domain.usecases.find_movie_by_id import FindMovieById
from movielist.presentation.errors import MissingParamError
from movielist.presentation.helpers.http_helper import bad_request, not_found, ok, server_error
from movielist.presentation.protocols.controller import Controller
from movielist.presentation.protocols.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class AddMovieController(Controller):
    """Controller for adding a movie to the list by its ID."""
    
    def __init__(self, add_movie: AddMovie, find_movie_by_id: FindMovieById):
        self._add_movie = add_movie
        self._find_movie_by_id = find_movie_by_id
    
    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            movie_id = (request.params or {}).get("id")
            
            if not movie_id:
                return bad_request(MissingParamError("id"))
            
            movie = await self._find_movie_by_id.execute(movie_id)
            
            # Lookup reports a miss as None or as a movie without an id
            if movie is None or not movie.id:
                return not_found(movie_id)
            
            result = await self._add_movie.execute(movie)
            return ok(result)
        except Exception as e:
            logger.exception("Adding movie failed: %s", e)
            return server_error(e)
