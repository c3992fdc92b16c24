"""
Claim document module.

Provides the document type catalogue, the static paragraph scripts, and the
builder that fills them with client details.
"""

from src.documents.schemas import (
    DocumentType,
    DOCUMENT_ORDER,
    DOCUMENT_LABELS,
    DOCUMENT_NAMES,
    Alignment,
    ParagraphBlock,
    RenderedDocument,
)
from src.documents.templates import DOCUMENT_SCRIPTS, get_script
from src.documents.builder import (
    DocumentBuilder,
    InvalidDocumentTypeError,
    build_filename,
    format_document_date,
    resolve_document_type,
    use_system_locale,
)

__all__ = [
    # Schemas
    "DocumentType",
    "DOCUMENT_ORDER",
    "DOCUMENT_LABELS",
    "DOCUMENT_NAMES",
    "Alignment",
    "ParagraphBlock",
    "RenderedDocument",
    # Scripts
    "DOCUMENT_SCRIPTS",
    "get_script",
    # Builder
    "DocumentBuilder",
    "InvalidDocumentTypeError",
    "build_filename",
    "format_document_date",
    "resolve_document_type",
    "use_system_locale",
]
