"""Sample documents loaded into a fresh store."""

from datetime import datetime, timedelta
from typing import List
from uuid import uuid4

from ..models.document import Document
from .content_validator import canonicalize, empty_document_content

WORKSPACE_1 = "workspace-example-1"
WORKSPACE_2 = "workspace-example-2"
USER_1 = "user-example-1"
USER_2 = "user-example-2"

# (workspace, title, icon, content, created_by, created days ago, updated days ago)
SAMPLE_DOCUMENTS = [
    (WORKSPACE_1, "Welcome Document", "👋", None, USER_1, 10, 10),
    (
        WORKSPACE_1,
        "Meeting Notes",
        "📝",
        '{"blocks": [{"type": "paragraph", "content": "Notes from the team meeting"}]}',
        USER_1,
        5,
        2,
    ),
    (
        WORKSPACE_1,
        "Project Ideas",
        "💡",
        '{"blocks": [{"type": "heading", "content": "Brainstorming"},'
        ' {"type": "paragraph", "content": "List of ideas..."}]}',
        USER_2,
        3,
        1,
    ),
    (WORKSPACE_2, "Technical Documentation", "📚", None, USER_1, 7, 7),
    (
        WORKSPACE_2,
        "Marketing Plan",
        "📊",
        '{"blocks": [{"type": "heading", "content": "Q1 Strategy"},'
        ' {"type": "paragraph", "content": "Goals and metrics..."}]}',
        USER_2,
        4,
        0,
    ),
]


def build_sample_documents(now: datetime) -> List[Document]:
    """Build the sample documents with timestamps relative to ``now``."""
    documents = []
    for workspace_id, title, icon, content, user_id, created_ago, updated_ago in SAMPLE_DOCUMENTS:
        documents.append(Document(
            id=str(uuid4()),
            workspace_id=workspace_id,
            title=title,
            icon=icon,
            content=canonicalize(content) if content else empty_document_content(),
            created_by_user_id=user_id,
            created_at=now - timedelta(days=created_ago),
            updated_at=now - timedelta(days=updated_ago),
        ))
    return documents
