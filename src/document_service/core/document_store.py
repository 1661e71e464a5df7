"""In-memory document store."""

import threading
from uuid import uuid4
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from ..models.document import DeletedState, Document
from .content_validator import canonicalize, empty_document_content, is_valid_json
from .results import StoreResult
from .seeds import build_sample_documents

INVALID_CONTENT = "Invalid JSON content"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class DocumentStore:
    """Authoritative collection of workspace documents.

    A single lock serializes every read and write. Records are immutable
    ``Document`` instances, so handing them out never exposes later changes.
    Deleted records stay in the collection for the lifetime of the store.
    """

    def __init__(self, seed: bool = True, clock: Callable[[], datetime] = utcnow):
        """Initialize the store.

        Args:
            seed: Load the sample documents if the collection is empty
            clock: Source of the current time (UTC)
        """
        self._documents: Dict[str, Document] = {}
        self._lock = threading.Lock()
        self._clock = clock

        if seed:
            with self._lock:
                if not self._documents:
                    for doc in build_sample_documents(self._clock()):
                        self._documents[doc.id] = doc

    def create(
        self,
        workspace_id: str,
        title: str,
        icon: Optional[str],
        created_by_user_id: str,
        content: Optional[str] = None,
    ) -> StoreResult:
        """Create a new document.

        Args:
            workspace_id: Workspace the document belongs to
            title: Document title
            icon: Emoji or URL, may be empty
            created_by_user_id: Creating user
            content: Optional JSON text; blank means empty content

        Returns:
            OK result with the new document, or INVALID with a message
        """
        if _is_blank(workspace_id):
            return StoreResult.invalid("Workspace ID is required")
        if _is_blank(title):
            return StoreResult.invalid("Title is required")
        if _is_blank(created_by_user_id):
            return StoreResult.invalid("Created by user ID is required")

        if _is_blank(content):
            content = empty_document_content()
        elif not is_valid_json(content):
            return StoreResult.invalid(INVALID_CONTENT)
        else:
            content = canonicalize(content)

        with self._lock:
            now = self._clock()
            document = Document(
                id=self._new_id(),
                workspace_id=workspace_id,
                title=title,
                icon=icon or "",
                content=content,
                created_by_user_id=created_by_user_id,
                created_at=now,
                updated_at=now,
            )
            self._documents[document.id] = document

        return StoreResult.ok(document)

    def get(self, document_id: str) -> Optional[Document]:
        """Get an active document by ID, or None."""
        with self._lock:
            return self._find(document_id)

    def list_all(self) -> List[Document]:
        """List every document, deleted ones included, most recently updated first."""
        with self._lock:
            return self._newest_first(self._documents.values())

    def list_by_workspace(self, workspace_id: str) -> List[Document]:
        """List active documents of a workspace, most recently updated first."""
        with self._lock:
            return self._newest_first(
                doc for doc in self._documents.values()
                if doc.workspace_id == workspace_id and doc.is_active
            )

    def update(
        self,
        document_id: str,
        title: Optional[str] = None,
        icon: Optional[str] = None,
        content: Optional[str] = None,
    ) -> StoreResult:
        """Partially update an active document.

        Args:
            document_id: Document ID
            title: New title; None or blank keeps the current one
            icon: New icon; None or blank keeps the current one
            content: New JSON content; None or blank keeps the current one

        Returns:
            OK result with the updated document, NOT_FOUND, or INVALID
        """
        with self._lock:
            current = self._find(document_id)
            if current is None:
                return StoreResult.not_found()

            changes = {}
            if not _is_blank(title):
                changes["title"] = title
            if not _is_blank(icon):
                changes["icon"] = icon
            if not _is_blank(content):
                if not is_valid_json(content):
                    return StoreResult.invalid(INVALID_CONTENT)
                changes["content"] = canonicalize(content)

            changes["updated_at"] = self._clock()
            updated = current.model_copy(update=changes)
            self._documents[document_id] = updated

        return StoreResult.ok(updated)

    def delete(self, document_id: str) -> bool:
        """Soft delete an active document.

        Returns:
            True if deleted, False if not found or already deleted
        """
        with self._lock:
            current = self._find(document_id)
            if current is None:
                return False

            now = self._clock()
            self._documents[document_id] = current.model_copy(
                update={"state": DeletedState(deleted_at=now), "updated_at": now}
            )
            return True

    def count(self) -> int:
        """Number of records in the collection, deleted ones included."""
        with self._lock:
            return len(self._documents)

    def _find(self, document_id: str) -> Optional[Document]:
        # Caller holds the lock.
        doc = self._documents.get(document_id)
        if doc is None or not doc.is_active:
            return None
        return doc

    def _new_id(self) -> str:
        document_id = str(uuid4())
        while document_id in self._documents:
            document_id = str(uuid4())
        return document_id

    @staticmethod
    def _newest_first(documents) -> List[Document]:
        # sorted() is stable, so ties keep insertion order.
        return sorted(documents, key=lambda doc: doc.updated_at, reverse=True)
