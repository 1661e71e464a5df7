"""Outcome values returned by store mutations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.document import Document


class StoreStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INVALID = "invalid"


@dataclass(frozen=True)
class StoreResult:
    """Result of a create or update.

    Exactly one of ``document`` (OK) or ``error`` (INVALID) is set;
    NOT_FOUND carries neither.
    """

    status: StoreStatus
    document: Optional[Document] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, document: Document) -> "StoreResult":
        return cls(StoreStatus.OK, document=document)

    @classmethod
    def not_found(cls) -> "StoreResult":
        return cls(StoreStatus.NOT_FOUND)

    @classmethod
    def invalid(cls, message: str) -> "StoreResult":
        return cls(StoreStatus.INVALID, error=message)

    @property
    def is_ok(self) -> bool:
        return self.status is StoreStatus.OK

    @property
    def is_not_found(self) -> bool:
        return self.status is StoreStatus.NOT_FOUND

    @property
    def is_invalid(self) -> bool:
        return self.status is StoreStatus.INVALID
