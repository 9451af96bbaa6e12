"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with no configuration at all; in a real deployment you
should at least override the admin credentials.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Portfolio API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Credentials of the single admin account seeded at startup.  When
    # ``ADMIN_PASSWORD_HASH`` is set (see ``hash_password.py``) it takes
    # precedence and the plain password is never held in memory.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")
    admin_password_hash: str = os.getenv("ADMIN_PASSWORD_HASH", "")

    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "portfolio_session")
    session_expire_minutes: int = int(os.getenv("SESSION_EXPIRE_MINUTES", str(60 * 24)))
    session_cookie_secure: bool = _env_flag("SESSION_COOKIE_SECURE", "false")

    # One id counter shared by every record kind.  Set to false to give
    # each collection its own sequence.
    shared_id_sequence: bool = _env_flag("SHARED_ID_SEQUENCE", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
