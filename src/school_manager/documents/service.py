from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.timestamps import Timestamp
from ..common.validators import require_non_empty
from ..core.enums import DocumentType
from ..core.exceptions import NotFoundError
from .model import Document
from .repository import DocumentRepository

logger = logging.getLogger(__name__)


class DocumentService:
    def __init__(self, documents: DocumentRepository):
        self._documents = documents

    def _require(self, document_id: str) -> Document:
        document = self._documents.get_by_id(document_id)
        if document is None:
            raise NotFoundError(f"Document not found with ID: {document_id}")
        return document

    def upload(self, document: Document) -> Document:
        if document.uploaded_at is None:
            document.uploaded_at = Timestamp.now()
        self._documents.create(document)
        logger.info("Document %s uploaded (%s)", document.document_id, document.file_name)
        return document

    def list_all(self) -> Sequence[Document]:
        return self._documents.list_all()

    def get(self, document_id: str) -> Optional[Document]:
        return self._documents.get_by_id(document_id)

    def list_by_student(self, student_id: str) -> Sequence[Document]:
        return self._documents.list_by_student(student_id)

    def list_by_parent(self, parent_id: str) -> Sequence[Document]:
        return self._documents.list_by_parent(parent_id)

    def list_by_type(self, document_type: DocumentType) -> Sequence[Document]:
        return self._documents.list_by_type(document_type)

    def list_unverified(self) -> Sequence[Document]:
        return self._documents.list_unverified()

    def verify(self, document_id: str, verified_by: Optional[str]) -> Document:
        verified_by = require_non_empty(verified_by, "verifiedBy")
        document = self._require(document_id)
        document.verified = True
        document.verified_by = verified_by
        document.verified_at = Timestamp.now()
        self._documents.save(document_id, document)
        logger.info("Document %s verified by %s", document_id, verified_by)
        return document

    def update(self, document_id: str, document: Document) -> Document:
        existing = self._require(document_id)
        document.document_id = document_id
        if document.uploaded_at is None:
            document.uploaded_at = existing.uploaded_at
        self._documents.save(document_id, document)
        return document

    def delete(self, document_id: str) -> None:
        self._require(document_id)
        self._documents.delete(document_id)
        logger.info("Document %s deleted", document_id)
