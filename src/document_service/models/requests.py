"""Request and response models for API endpoints."""

from pydantic import BaseModel, Field


class DeleteResponse(BaseModel):
    """Confirmation returned after a soft delete."""
    message: str = "Document deleted successfully"
    id: str


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    service: str
    version: str
    document_count: int = Field(..., description="Records held by the store, deleted ones included")
