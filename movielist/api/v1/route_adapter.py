"""
Route Adapter
=============

Runs a presentation controller for a FastAPI route and turns its
HttpResponse into a JSONResponse.
"""
from dataclasses import asdict, is_dataclass
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from movielist.domain.models.account import Account
from movielist.presentation.errors import PresentationError
from movielist.presentation.protocols.controller import Controller
from movielist.presentation.protocols.http import HttpRequest


def serialize_body(body: Any) -> Any:
    """Convert a response body into JSON-compatible data."""
    if isinstance(body, PresentationError):
        return body.to_dict()
    if isinstance(body, Account):
        return body.to_public_dict()
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json")
    if is_dataclass(body) and not isinstance(body, type):
        return jsonable_encoder(asdict(body))
    return jsonable_encoder(body)


async def adapt_route(controller: Controller, request: HttpRequest) -> JSONResponse:
    """Handle `request` with `controller` and build the HTTP response."""
    response = await controller.handle(request)
    return JSONResponse(
        status_code=response.status_code,
        content=serialize_body(response.body),
    )
