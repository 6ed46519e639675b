from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.records import Record
from ..common.timestamps import Timestamp
from ..core.enums import DocumentType


@dataclass
class Document(Record):
    document_id: Optional[str] = None
    file_name: Optional[str] = None
    # Storage URL or base64 encoded content.
    file_url: Optional[str] = None
    document_type: Optional[DocumentType] = None
    student_id: Optional[str] = None
    parent_id: Optional[str] = None
    uploaded_by: Optional[str] = None
    uploaded_by_role: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    description: Optional[str] = None
    uploaded_at: Optional[Timestamp] = None
    verified: bool = False
    verified_by: Optional[str] = None
    verified_at: Optional[Timestamp] = None

    def assign_id(self, identifier: str) -> None:
        self.document_id = identifier
