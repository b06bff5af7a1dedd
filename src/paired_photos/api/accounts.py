"""Account registration and login endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from paired_photos.api.error_handlers import server_error
from paired_photos.api.schemas import LoginRequest, MessageResponse, RegisterRequest
from paired_photos.domain.errors import DuplicateIdError, InvalidCredentialsError

if TYPE_CHECKING:
    from paired_photos.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["accounts"])


@router.post("/login", response_model=MessageResponse)
async def login(body: LoginRequest, request: Request) -> object:
    """Verify an eid and password pair."""
    container: AppContainer = request.app.state.container
    try:
        await container.identity_service.login(body.eid, body.password)
    except InvalidCredentialsError:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "Invalid eid or password"},
        )
    except Exception:
        logger.exception("Login failed", extra={"eid": body.eid})
        return server_error()
    return MessageResponse(message="Authentication successful")


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(body: RegisterRequest, request: Request) -> object:
    """Register a new account with a hashed password."""
    container: AppContainer = request.app.state.container
    try:
        await container.identity_service.register(
            display_name=body.name,
            external_id=body.eid,
            secret=body.password,
            phone_number=body.mobile_number,
        )
    except DuplicateIdError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Employee ID already exists"},
        )
    except Exception:
        logger.exception("Registration failed", extra={"eid": body.eid})
        return server_error()
    return MessageResponse(message="User registered successfully.")
