"""
Unit tests for response helpers and error descriptors.
"""
import pytest

from movielist.presentation.errors import (
    InvalidParamError,
    MissingParamError,
    NotFoundError,
    ServerError,
)
from movielist.presentation.helpers.http_helper import (
    bad_request,
    created,
    not_found,
    ok,
    server_error,
)
from movielist.presentation.protocols.http import HttpResponse


def _raise_and_catch(message: str) -> Exception:
    try:
        raise RuntimeError(message)
    except RuntimeError as e:
        return e


def test_bad_request_keeps_error_as_body():
    error = MissingParamError("name")
    
    assert bad_request(error) == HttpResponse(status_code=400, body=error)


def test_created_and_ok_wrap_payload():
    assert created({"id": 1}) == HttpResponse(status_code=201, body={"id": 1})
    assert ok({"id": 1}) == HttpResponse(status_code=200, body={"id": 1})


def test_not_found_carries_the_id():
    response = not_found("42")
    
    assert response.status_code == 404
    assert response.body == NotFoundError("42")
    assert response.body.resource_id == "42"


def test_server_error_hides_the_raw_error():
    error = _raise_and_catch("db exploded")
    
    response = server_error(error)
    
    assert response.status_code == 500
    assert isinstance(response.body, ServerError)
    assert response.body is not error
    assert "RuntimeError: db exploded" in response.body.stack
    assert "_raise_and_catch" in response.body.stack


def test_server_error_without_traceback():
    response = server_error(ValueError("never raised"))
    
    assert response.body.stack.strip() == "ValueError: never raised"


@pytest.mark.parametrize(
    "build",
    [
        lambda: ok({"title": "Mock Movie"}),
        lambda: created({"id": "abc"}),
        lambda: bad_request(MissingParamError("email")),
        lambda: bad_request(InvalidParamError("email")),
        lambda: not_found("123"),
    ],
)
def test_helpers_are_idempotent(build):
    assert build() == build()


def test_server_error_is_idempotent_for_the_same_error():
    error = _raise_and_catch("boom")
    
    assert server_error(error) == server_error(error)


def test_responses_are_immutable():
    response = ok("payload")
    
    with pytest.raises(AttributeError):
        response.status_code = 500


def test_error_descriptors_compare_by_kind_and_message():
    assert MissingParamError("email") == MissingParamError("email")
    assert MissingParamError("email") != MissingParamError("name")
    assert MissingParamError("email") != InvalidParamError("email")


def test_error_descriptor_serialization():
    assert MissingParamError("name").to_dict() == {
        "error": "MissingParamError",
        "message": "Missing param: name",
    }
    assert InvalidParamError("email").to_dict() == {
        "error": "InvalidParamError",
        "message": "Invalid param: email",
    }
    assert NotFoundError("7").to_dict() == {
        "error": "NotFoundError",
        "message": "Resource not found: 7",
    }
    assert ServerError("Traceback ...").to_dict() == {
        "error": "ServerError",
        "message": "Internal server error",
    }
