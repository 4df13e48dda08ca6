"""
Unit tests for AddMovieController.
"""
import asyncio
from unittest.mock import AsyncMock

import pytest

from movielist.domain.models.movie import Movie
from movielist.domain.usecases.add_movie import AddMovie
from movielist.domain.usecases.find_movie_by_id import FindMovieById
from movielist.presentation.controllers.add_movie_controller import AddMovieController
from movielist.presentation.errors import MissingParamError, NotFoundError, ServerError
from movielist.presentation.helpers.http_helper import bad_request, not_found, ok
from movielist.presentation.protocols.http import HttpRequest
from tests.stubs import make_movie


@pytest.fixture
def find_movie_by_id():
    mock = AsyncMock(spec=FindMovieById)
    mock.execute.return_value = make_movie()
    return mock


@pytest.fixture
def add_movie():
    mock = AsyncMock(spec=AddMovie)
    mock.execute.return_value = make_movie(title="Stored Movie")
    return mock


@pytest.fixture
def sut(add_movie, find_movie_by_id):
    return AddMovieController(add_movie, find_movie_by_id)


def handle(sut, request):
    return asyncio.run(sut.handle(request))


@pytest.mark.parametrize("params", [{}, {"id": ""}, {"id": None}])
def test_returns_400_when_id_is_missing(sut, find_movie_by_id, params):
    response = handle(sut, HttpRequest(params=params))
    
    assert response == bad_request(MissingParamError("id"))
    find_movie_by_id.execute.assert_not_called()


def test_looks_movie_up_with_the_requested_id(sut, find_movie_by_id):
    handle(sut, HttpRequest(params={"id": "123"}))
    
    find_movie_by_id.execute.assert_awaited_once_with("123")


def test_returns_404_when_lookup_returns_movie_without_id(sut, find_movie_by_id, add_movie):
    find_movie_by_id.execute.return_value = Movie()
    
    response = handle(sut, HttpRequest(params={"id": "999"}))
    
    assert response == not_found("999")
    assert response.body == NotFoundError("999")
    add_movie.execute.assert_not_called()


def test_returns_404_when_lookup_returns_none(sut, find_movie_by_id, add_movie):
    find_movie_by_id.execute.return_value = None
    
    response = handle(sut, HttpRequest(params={"id": "999"}))
    
    assert response.status_code == 404
    add_movie.execute.assert_not_called()


def test_adds_the_found_movie(sut, find_movie_by_id, add_movie):
    handle(sut, HttpRequest(params={"id": "123"}))
    
    add_movie.execute.assert_awaited_once_with(find_movie_by_id.execute.return_value)


def test_returns_200_with_add_result(sut, add_movie):
    response = handle(sut, HttpRequest(params={"id": "123"}))
    
    assert response == ok(add_movie.execute.return_value)
    assert response.body.title == "Stored Movie"


@pytest.mark.parametrize("failing", ["find_movie_by_id", "add_movie"])
def test_returns_500_when_a_collaborator_fails(sut, find_movie_by_id, add_movie, failing):
    collaborator = find_movie_by_id if failing == "find_movie_by_id" else add_movie
    collaborator.execute.side_effect = Exception("storage offline")
    
    response = handle(sut, HttpRequest(params={"id": "123"}))
    
    assert response.status_code == 500
    assert isinstance(response.body, ServerError)
    assert "storage offline" in response.body.stack
