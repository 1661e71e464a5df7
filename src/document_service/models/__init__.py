"""Data models for Document Service."""

from .document import (
    ActiveState,
    DeletedState,
    Document,
    DocumentCreate,
    DocumentUpdate,
    DocumentResponse,
)
from .requests import DeleteResponse, HealthResponse

__all__ = [
    "ActiveState",
    "DeletedState",
    "Document",
    "DocumentCreate",
    "DocumentUpdate",
    "DocumentResponse",
    "DeleteResponse",
    "HealthResponse",
]
