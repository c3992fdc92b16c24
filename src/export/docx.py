"""
DOCX exporter for claim documents.

Uses python-docx to turn RenderedDocument paragraph blocks into Word
documents.
"""

import io
import logging

from docx import Document
from docx.enum.section import WD_ORIENT
from docx.enum.text import WD_PARAGRAPH_ALIGNMENT
from docx.shared import Cm, Pt

from src.documents.schemas import (
    BODY_FONT_SIZE,
    Alignment,
    ParagraphBlock,
    RenderedDocument,
)
from src.export.models import ExportFormat, ExportResult


logger = logging.getLogger(__name__)

ALIGNMENTS = {
    Alignment.LEFT: WD_PARAGRAPH_ALIGNMENT.LEFT,
    Alignment.CENTER: WD_PARAGRAPH_ALIGNMENT.CENTER,
    Alignment.RIGHT: WD_PARAGRAPH_ALIGNMENT.RIGHT,
}


def half_points(value: int) -> Pt:
    """Convert a size in half-points to a python-docx length."""
    return Pt(value / 2)


def twips(value: int) -> Pt:
    """Convert a spacing in twips (1/20 pt) to a python-docx length."""
    return Pt(value / 20)


class DocxExporter:
    """
    Exports rendered claim documents to DOCX.

    Applies:
    - Paper size (A4, portrait)
    - Font (Times New Roman)
    - Per-paragraph bold, heading level, alignment, size and spacing

    Example:
        exporter = DocxExporter()
        result = exporter.export(rendered, builder.filename(rendered.doc_type))
        docx_bytes = result.content_bytes
    """

    def __init__(self, font: str = "Times New Roman", margin_cm: float = 2.54):
        """
        Initialize the DOCX exporter.

        Args:
            font: Font family applied to every run
            margin_cm: Page margin on all sides in centimeters
        """
        self.font = font
        self.margin_cm = margin_cm

    def export(self, document: RenderedDocument, filename: str) -> ExportResult:
        """
        Export a rendered document to DOCX.

        Args:
            document: The rendered claim document
            filename: Download filename (see DocumentBuilder.filename)

        Returns:
            ExportResult with DOCX bytes and filename
        """
        doc = Document()

        section = doc.sections[0]
        section.page_width = Cm(21)  # A4 width
        section.page_height = Cm(29.7)  # A4 height
        section.orientation = WD_ORIENT.PORTRAIT
        section.left_margin = Cm(self.margin_cm)
        section.right_margin = Cm(self.margin_cm)
        section.top_margin = Cm(self.margin_cm)
        section.bottom_margin = Cm(self.margin_cm)

        doc.core_properties.title = document.title

        # Blank spacer paragraphs have no runs and take their size from Normal
        normal = doc.styles["Normal"]
        normal.font.name = self.font
        normal.font.size = half_points(BODY_FONT_SIZE)

        for block in document.blocks:
            self._write_block(doc, block)

        docx_buffer = io.BytesIO()
        doc.save(docx_buffer)
        docx_bytes = docx_buffer.getvalue()

        logger.debug(f"Exported {document.doc_type.value} to {filename} ({len(docx_bytes)} bytes)")

        return ExportResult(
            format=ExportFormat.DOCX,
            content_bytes=docx_bytes,
            filename=filename,
        )

    def _write_block(self, doc: Document, block: ParagraphBlock):
        """
        Write one paragraph block.

        Headings use the built-in "Heading N" style so that Word's navigation
        pane picks them up; the run formatting below still sets the look.
        """
        if block.heading_level:
            para = doc.add_heading(level=block.heading_level)
        else:
            para = doc.add_paragraph()

        para_format = para.paragraph_format
        para_format.alignment = ALIGNMENTS[block.alignment]
        para_format.space_before = twips(block.space_before)
        para_format.space_after = twips(block.space_after)

        if not block.text:
            return

        run = para.add_run(block.text)
        run.bold = block.bold
        run.font.name = self.font
        run.font.size = half_points(block.font_size)
