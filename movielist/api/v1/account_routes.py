"""
Account Routes
==============

FastAPI routes for account sign-up.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from movielist.api.v1.dependencies import get_sign_up_controller
from movielist.api.v1.route_adapter import adapt_route
from movielist.application.dto.account_dto import SIGN_UP_EXAMPLE, AccountResponse
from movielist.application.dto.error_dto import ErrorResponse
from movielist.presentation.controllers.sign_up_controller import SignUpController
from movielist.presentation.protocols.http import HttpRequest

router = APIRouter(tags=["accounts"])


@router.post(
    "/signup",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    description="""
    Create a new account.
    
    1. name, email and password are required (first missing one is reported)
    2. email must be a well-formed address
    3. password is hashed with bcrypt before it is stored
    """,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def sign_up(
    payload: Optional[Dict[str, Any]] = Body(None, examples=[SIGN_UP_EXAMPLE]),
    controller: SignUpController = Depends(get_sign_up_controller),
) -> JSONResponse:
    """Create an account."""
    return await adapt_route(controller, HttpRequest(body=payload or {}))
