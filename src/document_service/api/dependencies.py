"""Shared API dependencies."""

from fastapi import Request

from ..core.document_store import DocumentStore


def get_document_store(request: Request) -> DocumentStore:
    """Return the store owned by the running application."""
    return request.app.state.document_store
