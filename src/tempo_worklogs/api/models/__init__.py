"""
API Models - Pydantic schemas for the API
"""

from .schemas import (
    WorklogQuery,
    WorklogsResponse,
    ErrorResponse,
)

__all__ = [
    "WorklogQuery",
    "WorklogsResponse",
    "ErrorResponse",
]
