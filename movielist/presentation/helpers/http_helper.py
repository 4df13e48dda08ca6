"""
HTTP Helpers
============

Pure functions mapping a result or an error into an HttpResponse.
"""
import traceback
from typing import Any

from fastapi import status

from movielist.presentation.errors import NotFoundError, ServerError
from movielist.presentation.protocols.http import HttpResponse


def bad_request(error: Exception) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_400_BAD_REQUEST, body=error)


def created(data: Any) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_201_CREATED, body=data)


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_200_OK, body=data)


def not_found(resource_id: Any) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_404_NOT_FOUND, body=NotFoundError(resource_id))


def server_error(error: BaseException) -> HttpResponse:
    """Wrap the traceback of `error` in a ServerError; the raw error never leaves."""
    stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return HttpResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        body=ServerError(stack),
    )
