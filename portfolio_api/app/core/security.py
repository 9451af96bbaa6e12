"""
Security helpers for password hashing and session authentication.

Passwords are hashed with PBKDF2‑HMAC using SHA‑256 and a random
per‑password salt.  Authenticated admins are tracked through
server‑side sessions: logging in stores a ``Session`` under an opaque
random token, and the token is handed to the browser in an HTTP‑only
cookie.  Nothing but the token ever leaves the server, so logging out
(or restarting the process) invalidates the session immediately.
"""

import hashlib
import hmac
import logging
import os
import secrets
import time
from dataclasses import dataclass
from typing import Dict, Optional

from fastapi import Depends, HTTPException, Request, status


PBKDF2_ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The
    resulting string contains the salt and hash separated by a
    ``$`` (salt in hex, then hash in hex).

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        Salt and hash concatenated with ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Returns ``False`` for malformed hashes instead of raising, so a
    corrupted record simply fails authentication.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


@dataclass
class Session:
    """Server‑side state for one logged in user."""

    user_id: int
    username: str
    expires_at: float


class SessionStore:
    """In‑memory map from opaque session tokens to ``Session`` records."""

    def __init__(self, expire_minutes: int = 60 * 24) -> None:
        self._sessions: Dict[str, Session] = {}
        self._ttl = expire_minutes * 60

    def _sweep(self, now: float) -> None:
        expired = [token for token, s in self._sessions.items() if s.expires_at < now]
        for token in expired:
            del self._sessions[token]

    def create(self, user_id: int, username: str) -> str:
        """Start a session and return its token.  Expired sessions are swept first."""
        self._sweep(time.time())
        token = secrets.token_urlsafe(32)
        self._sessions[token] = Session(
            user_id=user_id,
            username=username,
            expires_at=time.time() + self._ttl,
        )
        return token

    def get(self, token: Optional[str]) -> Optional[Session]:
        """Return the live session for ``token``; expired ones are dropped."""
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.expires_at < time.time():
            del self._sessions[token]
            return None
        return session

    def destroy(self, token: Optional[str]) -> bool:
        if not token:
            return False
        return self._sessions.pop(token, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_session_token(request: Request) -> Optional[str]:
    """Read the session cookie named by the application's settings."""
    return request.cookies.get(request.app.state.settings.session_cookie_name)


async def get_current_user(
    request: Request,
    token: Optional[str] = Depends(get_session_token),
) -> Dict[str, object]:
    """Dependency that retrieves the current authenticated admin.

    Raises HTTP 401 when the cookie is missing, the session is unknown
    or expired, or the user behind the session no longer exists.  On
    success returns ``{"id": ..., "username": ...}``.
    """
    session = get_session_store(request).get(token)
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    user = await request.app.state.storage.users.get_user(session.user_id)
    if user is None:
        logging.getLogger(__name__).warning(
            "Session for missing user %s rejected", session.user_id
        )
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return {"id": user.id, "username": user.username}
