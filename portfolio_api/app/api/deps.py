"""
Shared FastAPI dependencies.

``create_app`` stores the settings and the storage it was built with
on ``app.state``; these helpers hand them to endpoints.
"""

from fastapi import Request

from ..core.config import Settings
from ..services.storage import Storage


def get_storage(request: Request) -> Storage:
    """Return the storage instance created for this application."""
    return request.app.state.storage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
