"""Document data models."""

from datetime import datetime
from typing import Annotated, Optional, Union, Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_TITLE_LENGTH = 200


class ActiveState(BaseModel):
    """Lifecycle state of a document that has not been deleted."""
    model_config = ConfigDict(frozen=True)

    status: Literal["active"] = "active"


class DeletedState(BaseModel):
    """Lifecycle state of a soft-deleted document."""
    model_config = ConfigDict(frozen=True)

    status: Literal["deleted"] = "deleted"
    deleted_at: datetime


DocumentState = Annotated[Union[ActiveState, DeletedState], Field(discriminator="status")]


class Document(BaseModel):
    """A workspace document as held by the store.

    Instances are immutable; the store replaces a record with a modified
    copy on every mutation.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    workspace_id: str
    title: str
    icon: str
    content: str
    created_by_user_id: str
    created_at: datetime
    updated_at: datetime
    state: DocumentState = Field(default_factory=ActiveState)

    @property
    def is_active(self) -> bool:
        return isinstance(self.state, ActiveState)

    @property
    def deleted_at(self) -> Optional[datetime]:
        if isinstance(self.state, DeletedState):
            return self.state.deleted_at
        return None


class CamelModel(BaseModel):
    """Base for API schemas: camelCase on the wire, snake_case accepted too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DocumentCreate(CamelModel):
    """Model for creating a new document."""
    workspace_id: str = Field(..., description="Workspace the document belongs to")
    title: str = Field(..., max_length=MAX_TITLE_LENGTH)
    icon: str = Field(..., description="Emoji or URL; may be empty")
    content: Optional[str] = Field(None, description="JSON text; defaults to an empty block list")
    created_by_user_id: str = Field(..., description="User creating the document")


class DocumentUpdate(CamelModel):
    """Model for partially updating a document.

    Omitted or blank fields are left unchanged.
    """
    title: Optional[str] = Field(None, max_length=MAX_TITLE_LENGTH)
    icon: Optional[str] = None
    content: Optional[str] = None


class DocumentResponse(CamelModel):
    """API response model for a single document."""
    id: str
    workspace_id: str
    title: str
    icon: str
    content: str
    created_by_user_id: str
    created_at: str
    updated_at: str
    is_active: bool

    @classmethod
    def from_document(cls, doc: Document):
        """Convert Document to DocumentResponse."""
        return cls(
            id=doc.id,
            workspace_id=doc.workspace_id,
            title=doc.title,
            icon=doc.icon,
            content=doc.content,
            created_by_user_id=doc.created_by_user_id,
            created_at=doc.created_at.isoformat(),
            updated_at=doc.updated_at.isoformat(),
            is_active=doc.is_active,
        )
