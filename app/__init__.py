"""
App package - Application configuration and core utilities.
Contains settings and the loader's exception hierarchy.
"""

from app.config import settings, Settings
from app.exceptions import (
    ChipotleLoaderError,
    ApiError,
    ApiRequestError,
    ApiDecodeError,
    PersistenceError,
)

__all__ = [
    "settings",
    "Settings",
    "ChipotleLoaderError",
    "ApiError",
    "ApiRequestError",
    "ApiDecodeError",
    "PersistenceError",
]
