from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import DocumentType
from .model import Document


class DocumentRepository(Protocol):
    def create(self, document: Document) -> str:
        raise NotImplementedError

    def save(self, document_id: str, document: Document) -> None:
        raise NotImplementedError

    def get_by_id(self, document_id: str) -> Optional[Document]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Document]:
        raise NotImplementedError

    def list_by_student(self, student_id: str) -> Sequence[Document]:
        raise NotImplementedError

    def list_by_parent(self, parent_id: str) -> Sequence[Document]:
        raise NotImplementedError

    def list_by_type(self, document_type: DocumentType) -> Sequence[Document]:
        raise NotImplementedError

    def list_unverified(self) -> Sequence[Document]:
        raise NotImplementedError

    def delete(self, document_id: str) -> None:
        raise NotImplementedError
