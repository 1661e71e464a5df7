"""Document CRUD endpoints."""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, status
from ...models.document import DocumentCreate, DocumentUpdate, DocumentResponse
from ...models.requests import DeleteResponse
from ...core.document_store import DocumentStore
from ...api.dependencies import get_document_store

router = APIRouter(prefix="/api/documents", tags=["documents"])
logger = logging.getLogger(__name__)

NOT_FOUND = "Document not found"
INTERNAL_ERROR = "Internal server error"


@router.post(
    "",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Document",
    description="""
Create a new document in a workspace.

**Workflow**:
1. Check that workspaceId, title and createdByUserId are not blank
2. Validate content as JSON (blank content becomes `{"blocks":[]}`)
3. Store the compact form of the content
4. Return the created document

**Request Example**:
```json
{
  "workspaceId": "workspace-example-1",
  "title": "Meeting Notes",
  "icon": "📝",
  "content": "{\\"blocks\\": []}",
  "createdByUserId": "user-example-1"
}
```
    """,
    responses={
        201: {"description": "Document created successfully"},
        400: {"description": "Blank required field or invalid JSON content"},
        422: {"description": "Malformed request body"},
        500: {"description": "Internal server error"}
    }
)
async def create_document(
    doc_data: DocumentCreate,
    store: DocumentStore = Depends(get_document_store)
):
    """Create a new document."""
    try:
        result = store.create(
            workspace_id=doc_data.workspace_id,
            title=doc_data.title,
            icon=doc_data.icon,
            created_by_user_id=doc_data.created_by_user_id,
            content=doc_data.content,
        )
    except Exception as e:
        logger.error(f"Failed to create document: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

    if result.is_invalid:
        logger.warning(f"Validation error creating document: {result.error}")
        raise HTTPException(status_code=400, detail=result.error)

    logger.info(f"Created document {result.document.id} in workspace {result.document.workspace_id}")
    return DocumentResponse.from_document(result.document)


@router.get(
    "",
    response_model=List[DocumentResponse],
    summary="List Documents",
    description="""
List every document, most recently updated first.

Soft-deleted documents are included (`isActive: false`).
    """,
    responses={
        200: {"description": "Document list retrieved successfully"}
    }
)
async def list_documents(store: DocumentStore = Depends(get_document_store)):
    """List all documents."""
    return [DocumentResponse.from_document(doc) for doc in store.list_all()]


@router.get(
    "/workspace/{workspace_id}",
    response_model=List[DocumentResponse],
    summary="List Workspace Documents",
    description="""
List the active documents of a workspace, most recently updated first.

An unknown workspace yields an empty list.
    """,
    responses={
        200: {"description": "Workspace documents retrieved successfully"}
    }
)
async def list_workspace_documents(
    workspace_id: str,
    store: DocumentStore = Depends(get_document_store)
):
    """List documents of a workspace."""
    return [DocumentResponse.from_document(doc) for doc in store.list_by_workspace(workspace_id)]


@router.get(
    "/{document_id}",
    response_model=DocumentResponse,
    summary="Get Document",
    responses={
        200: {"description": "Document retrieved successfully"},
        404: {"description": "Document not found or deleted"}
    }
)
async def get_document(document_id: str, store: DocumentStore = Depends(get_document_store)):
    """Get document by ID."""
    document = store.get(document_id)
    if not document:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return DocumentResponse.from_document(document)


@router.patch(
    "/{document_id}",
    response_model=DocumentResponse,
    summary="Update Document",
    description="""
Partially update a document's title, icon or content.

Omitted and blank fields keep their current values. Content must be valid
JSON and is stored in compact form. `updatedAt` is refreshed on success.
    """,
    responses={
        200: {"description": "Document updated successfully"},
        400: {"description": "Invalid JSON content"},
        404: {"description": "Document not found or deleted"},
        422: {"description": "Malformed request body"},
        500: {"description": "Internal server error"}
    }
)
async def update_document(
    document_id: str,
    updates: DocumentUpdate,
    store: DocumentStore = Depends(get_document_store)
):
    """Update document."""
    try:
        result = store.update(
            document_id,
            title=updates.title,
            icon=updates.icon,
            content=updates.content,
        )
    except Exception as e:
        logger.error(f"Failed to update document {document_id}: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

    if result.is_not_found:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    if result.is_invalid:
        logger.warning(f"Validation error updating document {document_id}: {result.error}")
        raise HTTPException(status_code=400, detail=result.error)

    logger.info(f"Updated document {document_id}")
    return DocumentResponse.from_document(result.document)


@router.delete(
    "/{document_id}",
    response_model=DeleteResponse,
    summary="Delete Document",
    description="""
Soft delete a document.

The document is marked inactive and timestamped; it disappears from lookups
and workspace listings but remains in the full listing. Deleting twice
returns 404 the second time.
    """,
    responses={
        200: {"description": "Document deleted successfully"},
        404: {"description": "Document not found or already deleted"},
        500: {"description": "Internal server error"}
    }
)
async def delete_document(document_id: str, store: DocumentStore = Depends(get_document_store)):
    """Delete document."""
    try:
        deleted = store.delete(document_id)
    except Exception as e:
        logger.error(f"Failed to delete document {document_id}: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)

    if not deleted:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    logger.info(f"Deleted document {document_id}")
    return DeleteResponse(id=document_id)
