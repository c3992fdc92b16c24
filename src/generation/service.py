"""
Document generation service.

Combines:
- DocumentBuilder (render paragraph scripts with client details)
- DocxExporter (serialize to DOCX bytes)
- ZipArchiver (bundle several documents)
- FileSink (hand finished bytes to the save-file action)

Every method runs its steps one after another; nothing is rendered or
serialized concurrently.
"""

import asyncio
from datetime import date
from typing import Awaitable, Callable, Iterable, List, Optional, Union

from src.clients.models import ClientDetails
from src.documents.builder import (
    WHITESPACE_RUN,
    DocumentBuilder,
    resolve_document_type,
)
from src.documents.schemas import DOCUMENT_ORDER, DocumentType
from src.export.archive import ZipArchiver
from src.export.docx import DocxExporter
from src.export.download import FileSink
from src.export.models import ExportFormat, ExportResult
from src.logging_config import get_logger


logger = get_logger("document_service")

DEFAULT_DOWNLOAD_DELAY_SECONDS = 0.5


class DocumentGenerationError(Exception):
    """Serialization, archive or download failure for one generation step."""

    def __init__(self, message: str, doc_type: Optional[DocumentType] = None):
        self.doc_type = doc_type
        super().__init__(message)


class DocumentService:
    """
    Generates claim documents for one client snapshot.

    Example:
        service = DocumentService(details, sink=CollectingSink())
        await service.generate_document(DocumentType.WARRANT)
        generated = await service.generate_all_documents()
        await service.generate_documents_as_zip([DocumentType.WARRANT, DocumentType.DEMAND])
    """

    def __init__(
        self,
        details: ClientDetails,
        sink: FileSink,
        exporter: Optional[DocxExporter] = None,
        archiver: Optional[ZipArchiver] = None,
        download_delay_seconds: float = DEFAULT_DOWNLOAD_DELAY_SECONDS,
        today: Optional[date] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize the service.

        Args:
            details: Validated client details snapshot
            sink: Save-file target for finished downloads
            exporter: Optional DocxExporter. If None, creates default exporter.
            archiver: Optional ZipArchiver. If None, creates default archiver.
            download_delay_seconds: Pause after each download in generate_all_documents()
            today: Fixed date stamp for rendered documents
            sleep: Awaitable used for the pause
        """
        self.details = details
        self.sink = sink
        self.builder = DocumentBuilder(details, today=today)
        self.exporter = exporter or DocxExporter()
        self.archiver = archiver or ZipArchiver()
        self.download_delay_seconds = download_delay_seconds
        self._sleep = sleep

    def export_document(self, doc_type: Union[DocumentType, str]) -> ExportResult:
        """
        Render and serialize one document without downloading it.

        Raises:
            InvalidDocumentTypeError: If doc_type is not recognized
            DocumentGenerationError: If serialization fails
        """
        resolved = resolve_document_type(doc_type)
        rendered = self.builder.render(resolved)
        logger.debug("document_rendered", doc_type=resolved.value, blocks=len(rendered.blocks))

        try:
            return self.exporter.export(rendered, self.builder.filename(resolved))
        except Exception as e:
            raise DocumentGenerationError(
                f"Failed to serialize {resolved.value} document: {e}", resolved
            ) from e

    async def generate_document(self, doc_type: Union[DocumentType, str]) -> ExportResult:
        """
        Render, serialize and download one document.

        Raises:
            InvalidDocumentTypeError: If doc_type is not recognized
            DocumentGenerationError: If serialization or the download fails
        """
        result = self.export_document(doc_type)
        resolved = resolve_document_type(doc_type)

        try:
            await self.sink.save(result.content_bytes, result.mime_type, result.filename)
        except Exception as e:
            raise DocumentGenerationError(
                f"Failed to download {result.filename}: {e}", resolved
            ) from e

        logger.info(
            "document_downloaded",
            doc_type=resolved.value,
            filename=result.filename,
            size_bytes=len(result.content_bytes),
        )
        return result

    async def generate_all_documents(self) -> List[DocumentType]:
        """
        Download every document type as a separate file.

        Types run in the fixed order warrant, consent, demand, notice. A failed
        document is logged and skipped. Each successful download is followed
        by the configured pause so browsers do not block consecutive downloads.

        Returns:
            Document types that were downloaded, in order
        """
        generated: List[DocumentType] = []

        for doc_type in DOCUMENT_ORDER:
            try:
                await self.generate_document(doc_type)
            except Exception as e:
                logger.error(
                    "document_generation_failed",
                    doc_type=doc_type.value,
                    error=str(e),
                    exc_info=True,
                )
                continue

            generated.append(doc_type)
            if self.download_delay_seconds > 0:
                await self._sleep(self.download_delay_seconds)

        return generated

    def archive_filename(self) -> str:
        return f"Legal_Documents_{WHITESPACE_RUN.sub('_', self.details.name)}.zip"

    async def generate_documents_as_zip(
        self, doc_types: Iterable[Union[DocumentType, str]]
    ) -> ExportResult:
        """
        Render every requested document and download them as one zip archive.

        Duplicate types are collapsed; the archive keeps first-seen order.

        Raises:
            InvalidDocumentTypeError: If any type is not recognized
            DocumentGenerationError: If serialization, bundling or the download fails
        """
        resolved: List[DocumentType] = []
        for doc_type in doc_types:
            item = resolve_document_type(doc_type)
            if item not in resolved:
                resolved.append(item)

        if not resolved:
            raise ValueError("At least one document type is required for an archive")

        files = {}
        for doc_type in resolved:
            result = self.export_document(doc_type)
            files[result.filename] = result.content_bytes

        try:
            archive_bytes = self.archiver.bundle(files)
        except Exception as e:
            raise DocumentGenerationError(f"Failed to build archive: {e}") from e

        archive = ExportResult(
            format=ExportFormat.ZIP,
            content_bytes=archive_bytes,
            filename=self.archive_filename(),
        )

        try:
            await self.sink.save(archive.content_bytes, archive.mime_type, archive.filename)
        except Exception as e:
            raise DocumentGenerationError(f"Failed to download {archive.filename}: {e}") from e

        logger.info(
            "archive_downloaded",
            filename=archive.filename,
            doc_types=[d.value for d in resolved],
            size_bytes=len(archive_bytes),
        )
        return archive
