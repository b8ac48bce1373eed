"""
Data models and schemas for the version lookup application
"""

from .schemas import (
    VersionResponse,
    ErrorResponse
)

__all__ = [
    "VersionResponse",
    "ErrorResponse"
]
