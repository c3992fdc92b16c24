"""
Pydantic models for claim document rendering.

Provides data structures for:
- Document type enumeration (warrant, consent, demand, notice)
- Paragraph alignment and paragraph blocks with style attributes
- Rendered documents handed to the DOCX exporter

Sizes follow word-processing conventions: font sizes in half-points,
paragraph spacing in twips (1/20 pt).
"""

from datetime import date
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class DocumentType(str, Enum):
    """Claim documents the generator can render."""
    WARRANT = "warrant"
    CONSENT = "consent"
    DEMAND = "demand"
    NOTICE = "notice"


# Fixed order for the all-documents batch
DOCUMENT_ORDER: List[DocumentType] = [
    DocumentType.WARRANT,
    DocumentType.CONSENT,
    DocumentType.DEMAND,
    DocumentType.NOTICE,
]

# Filename prefixes
DOCUMENT_LABELS: Dict[DocumentType, str] = {
    DocumentType.WARRANT: "Warrant_to_Act",
    DocumentType.CONSENT: "Medical_Consent",
    DocumentType.DEMAND: "Letter_of_Demand",
    DocumentType.NOTICE: "Statutory_Notice",
}

# Names shown to users in the success summary
DOCUMENT_NAMES: Dict[DocumentType, str] = {
    DocumentType.WARRANT: "Warrant to Act",
    DocumentType.CONSENT: "Consent for Medical Information",
    DocumentType.DEMAND: "Letter of Demand",
    DocumentType.NOTICE: "Statutory Notice",
}

BODY_FONT_SIZE = 24
HEADER_FONT_SIZE = 28


class Alignment(str, Enum):
    """Paragraph alignment."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ParagraphBlock(BaseModel):
    """One rendered paragraph with its style attributes."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        default="",
        description="Paragraph text; empty for spacer paragraphs"
    )
    bold: bool = Field(
        default=False,
        description="Render the run in bold"
    )
    heading_level: int = Field(
        default=0,
        ge=0,
        le=9,
        description="Heading level, 0 for body text"
    )
    alignment: Alignment = Field(
        default=Alignment.LEFT,
        description="Paragraph alignment"
    )
    font_size: int = Field(
        default=BODY_FONT_SIZE,
        description="Font size in half-points"
    )
    space_before: int = Field(
        default=0,
        ge=0,
        description="Spacing before the paragraph in twips"
    )
    space_after: int = Field(
        default=200,
        ge=0,
        description="Spacing after the paragraph in twips"
    )


class RenderedDocument(BaseModel):
    """A claim document ready for serialization."""

    doc_type: DocumentType = Field(
        description="Document type that was rendered"
    )
    title: str = Field(
        description="Document heading text"
    )
    generated_on: date = Field(
        description="Date stamped on the document"
    )
    blocks: List[ParagraphBlock] = Field(
        default_factory=list,
        description="Ordered paragraphs"
    )

    @property
    def text(self) -> str:
        """Plain text of all blocks, one per line."""
        return "\n".join(block.text for block in self.blocks)
