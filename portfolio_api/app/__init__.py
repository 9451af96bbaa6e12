"""
Application package initializer.

The API is organised into small pieces: ``core`` (configuration,
logging, security and the in‑memory database), ``schemas`` (Pydantic
payloads), ``services`` (storage operations per record kind) and
``api`` (versioned routers).
"""

from .main import app, create_app  # noqa: F401
