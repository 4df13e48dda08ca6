"""
Movie Routes
============

FastAPI routes for the movie list.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from movielist.api.v1.dependencies import get_add_movie_controller
from movielist.api.v1.route_adapter import adapt_route
from movielist.application.dto.error_dto import ErrorResponse
from movielist.domain.models.movie import Movie
from movielist.presentation.controllers.add_movie_controller import AddMovieController
from movielist.presentation.protocols.http import HttpRequest

router = APIRouter(tags=["movies"])


@router.post(
    "/{movie_id}",
    response_model=Movie,
    status_code=status.HTTP_200_OK,
    summary="Add a movie to the list",
    description="Look the movie up in the catalog by ID and add it to the list.",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def add_movie(
    movie_id: str,
    controller: AddMovieController = Depends(get_add_movie_controller),
) -> JSONResponse:
    """Add a movie to the list."""
    return await adapt_route(controller, HttpRequest(params={"id": movie_id}))
