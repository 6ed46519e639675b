from __future__ import annotations

from typing import Sequence

from ..core.enums import DocumentType
from ..database.firestore_repository import FirestoreRepository
from .model import Document


class FirestoreDocumentRepository(FirestoreRepository[Document]):
    collection = "documents"
    model = Document

    def list_by_student(self, student_id: str) -> Sequence[Document]:
        return self.list_by("studentId", student_id)

    def list_by_parent(self, parent_id: str) -> Sequence[Document]:
        return self.list_by("parentId", parent_id)

    def list_by_type(self, document_type: DocumentType) -> Sequence[Document]:
        return self.list_by("documentType", document_type)

    def list_unverified(self) -> Sequence[Document]:
        return self.list_by("verified", False)
