"""
Authentication endpoints for API v1.

The admin logs in with a username and password and receives an
opaque session cookie.  The session itself lives on the server (see
``core.security.SessionStore``); logging out destroys it and clears
the cookie.
"""

import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from portfolio_api.app.api.deps import get_settings, get_storage
from portfolio_api.app.core.config import Settings
from portfolio_api.app.core.security import (
    SessionStore,
    get_current_user,
    get_session_store,
    get_session_token,
)
from portfolio_api.app.schemas.common import MessageResponse
from portfolio_api.app.schemas.user import LoginRequest, UserRead, UserResponse
from portfolio_api.app.services.storage import Storage


router = APIRouter()


@router.post("/login", response_model=UserResponse)
async def login(
    credentials: LoginRequest,
    response: Response,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> UserResponse:
    """Check the credentials and start a session.

    Returns HTTP 401 if the username is unknown or the password does
    not match; both cases produce the same message.
    """
    user = await storage.users.authenticate(credentials.username, credentials.password)
    if user is None:
        logging.getLogger(__name__).warning("Failed login for %r", credentials.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = sessions.create(user.id, user.username)
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    logging.getLogger(__name__).info("User %s logged in", user.id)
    return UserResponse(user=UserRead(id=user.id, username=user.username))


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> MessageResponse:
    """End the current session, if any.  Always succeeds."""
    sessions.destroy(token)
    response.delete_cookie(settings.session_cookie_name)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserResponse)
async def me(current_user: Dict[str, object] = Depends(get_current_user)) -> UserResponse:
    """Return the logged in admin."""
    return UserResponse(user=UserRead(**current_user))
