"""
Export models for claim document downloads.

Provides data structures for:
- Export format enumeration (DOCX, ZIP) with MIME types
- Export result with bytes, filename, and MIME type
"""

from enum import Enum
from pydantic import BaseModel, Field


class ExportFormat(str, Enum):
    """Supported download formats."""
    DOCX = "docx"
    ZIP = "zip"

    @property
    def mime_type(self) -> str:
        return MIME_TYPES[self]


MIME_TYPES = {
    ExportFormat.DOCX: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ExportFormat.ZIP: "application/zip",
}


class ExportResult(BaseModel):
    """Result of serializing a document or an archive."""

    format: ExportFormat = Field(
        description="Export format used"
    )
    content_bytes: bytes = Field(
        description="Raw bytes of the exported file"
    )
    filename: str = Field(
        description="Download filename"
    )

    @property
    def mime_type(self) -> str:
        return self.format.mime_type
