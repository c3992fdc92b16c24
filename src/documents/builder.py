"""
Document builder turning client details into rendered claim documents.

Pipeline:
1. Resolve the requested document type
2. Load the static paragraph script for that type
3. Render each paragraph's text with the client fields (Jinja2)
4. Return a RenderedDocument with the date stamp and ordered blocks
"""

import locale
import logging
import re
from datetime import date
from typing import Optional, Union

from jinja2 import Template

from src.clients.models import ClientDetails
from src.documents.schemas import (
    DOCUMENT_LABELS,
    DocumentType,
    RenderedDocument,
)
from src.documents.templates import get_script


WHITESPACE_RUN = re.compile(r"\s+")

logger = logging.getLogger(__name__)


class InvalidDocumentTypeError(ValueError):
    """Raised when a document type tag is not one of the supported types."""

    def __init__(self, doc_type: object):
        self.doc_type = doc_type
        super().__init__(f"Invalid document type: {doc_type!r}")


def resolve_document_type(doc_type: Union[DocumentType, str]) -> DocumentType:
    """
    Convert a tag to a DocumentType.

    Raises:
        InvalidDocumentTypeError: If the tag is not recognized
    """
    try:
        return DocumentType(doc_type)
    except ValueError:
        raise InvalidDocumentTypeError(doc_type) from None


def build_filename(
    doc_type: Union[DocumentType, str],
    client_name: str,
    extension: str = "docx"
) -> str:
    """
    Build the download filename for a document.

    Whitespace runs in the client name become single underscores, e.g.
    Warrant_to_Act_John_Smith.docx.
    """
    label = DOCUMENT_LABELS[resolve_document_type(doc_type)]
    safe_name = WHITESPACE_RUN.sub("_", client_name)
    return f"{label}_{safe_name}.{extension}"


def use_system_locale() -> bool:
    """
    Switch date formatting to the host locale (LANG / LC_ALL / LC_TIME).

    Returns:
        True if the host locale was applied, False if it is not installed
    """
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Host locale unavailable, keeping current date format: {e}")
        return False
    return True


def format_document_date(value: date) -> str:
    """
    Format the date stamp with the current locale's date order.

    The year is always written with four digits, e.g. 03/15/2024 in the C
    locale and 15/03/2024 in en_GB.
    """
    if hasattr(locale, "nl_langinfo"):
        pattern = locale.nl_langinfo(locale.D_FMT).replace("%y", "%Y")
    else:
        pattern = "%x"
    return value.strftime(pattern)


class DocumentBuilder:
    """
    Renders claim documents for one client.

    Example:
        builder = DocumentBuilder(details)
        rendered = builder.render(DocumentType.WARRANT)
        filename = builder.filename(DocumentType.WARRANT)
    """

    def __init__(self, details: ClientDetails, today: Optional[date] = None):
        """
        Initialize the builder.

        Args:
            details: Validated client details snapshot
            today: Fixed date stamp. If None, the current date is used at render time.
        """
        self.details = details
        self.today = today

    def _context(self, stamp: date) -> dict:
        return {
            "name": self.details.name,
            "email": self.details.email,
            "phone_number": self.details.phone_number,
            "identification_number": self.details.identification_number,
            "date": format_document_date(stamp),
        }

    def render(self, doc_type: Union[DocumentType, str]) -> RenderedDocument:
        """
        Render one document.

        Args:
            doc_type: DocumentType or its string tag

        Returns:
            RenderedDocument with client fields filled in

        Raises:
            InvalidDocumentTypeError: If doc_type is not recognized
        """
        resolved = resolve_document_type(doc_type)
        stamp = self.today or date.today()
        context = self._context(stamp)

        blocks = [
            block.model_copy(update={"text": Template(block.text).render(**context)})
            for block in get_script(resolved)
        ]

        return RenderedDocument(
            doc_type=resolved,
            title=blocks[0].text,
            generated_on=stamp,
            blocks=blocks,
        )

    def filename(self, doc_type: Union[DocumentType, str]) -> str:
        """Download filename for a document type and this client."""
        return build_filename(doc_type, self.details.name)
