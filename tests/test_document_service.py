"""
Tests for DocumentService single, batch and archive generation.
"""

import io
import zipfile
from unittest.mock import AsyncMock, Mock

import pytest

from src.documents import DocumentType, InvalidDocumentTypeError
from src.export import DocxExporter, ExportFormat
from src.generation import DocumentGenerationError, DocumentService


DOCX_MIME = ExportFormat.DOCX.mime_type


@pytest.fixture
def service(client_details, sink, fixed_date, no_sleep):
    return DocumentService(client_details, sink, today=fixed_date, sleep=no_sleep)


class FailingExporter(DocxExporter):
    """Fails for chosen document types."""

    def __init__(self, failing):
        super().__init__()
        self.failing = set(failing)

    def export(self, document, filename):
        if document.doc_type in self.failing:
            raise RuntimeError("serializer exploded")
        return super().export(document, filename)


@pytest.mark.asyncio
async def test_generate_document_downloads_one_file(service, sink):
    result = await service.generate_document(DocumentType.WARRANT)

    assert sink.filenames == ["Warrant_to_Act_John_Smith.docx"]
    assert sink.downloads[0].mime_type == DOCX_MIME
    assert sink.downloads[0].content == result.content_bytes


@pytest.mark.asyncio
async def test_generate_document_rejects_unknown_type(service, sink):
    with pytest.raises(InvalidDocumentTypeError):
        await service.generate_document("invoice")
    assert sink.downloads == []


@pytest.mark.asyncio
async def test_generate_all_documents_in_order(service, sink, no_sleep):
    generated = await service.generate_all_documents()

    assert generated == ["warrant", "consent", "demand", "notice"]
    assert sink.filenames == [
        "Warrant_to_Act_John_Smith.docx",
        "Medical_Consent_John_Smith.docx",
        "Letter_of_Demand_John_Smith.docx",
        "Statutory_Notice_John_Smith.docx",
    ]
    assert no_sleep.calls == [0.5, 0.5, 0.5, 0.5]


@pytest.mark.asyncio
async def test_generate_all_skips_failures(client_details, sink, fixed_date, no_sleep):
    service = DocumentService(
        client_details,
        sink,
        exporter=FailingExporter([DocumentType.CONSENT]),
        today=fixed_date,
        sleep=no_sleep,
    )

    generated = await service.generate_all_documents()

    assert generated == [DocumentType.WARRANT, DocumentType.DEMAND, DocumentType.NOTICE]
    assert len(sink.downloads) == 3
    assert len(no_sleep.calls) == 3


@pytest.mark.asyncio
async def test_generate_all_skips_download_failures(client_details, fixed_date, no_sleep):
    sink = Mock()
    sink.save = AsyncMock(side_effect=[None, OSError("blocked"), None, None])
    service = DocumentService(client_details, sink, today=fixed_date, sleep=no_sleep)

    generated = await service.generate_all_documents()

    assert generated == [DocumentType.WARRANT, DocumentType.DEMAND, DocumentType.NOTICE]
    assert sink.save.await_count == 4


@pytest.mark.asyncio
async def test_zero_delay_does_not_sleep(client_details, sink, no_sleep):
    service = DocumentService(client_details, sink, download_delay_seconds=0, sleep=no_sleep)
    await service.generate_all_documents()
    assert no_sleep.calls == []


@pytest.mark.asyncio
async def test_zip_contains_requested_documents(service, sink):
    archive = await service.generate_documents_as_zip(["warrant", "demand"])

    assert archive.format == ExportFormat.ZIP
    assert archive.filename == "Legal_Documents_John_Smith.zip"
    assert len(sink.downloads) == 1
    assert sink.downloads[0].mime_type == "application/zip"

    with zipfile.ZipFile(io.BytesIO(sink.downloads[0].content)) as bundle:
        assert bundle.namelist() == [
            "Warrant_to_Act_John_Smith.docx",
            "Letter_of_Demand_John_Smith.docx",
        ]
        assert bundle.read("Warrant_to_Act_John_Smith.docx")[:2] == b"PK"


@pytest.mark.asyncio
async def test_zip_collapses_duplicates(service, sink):
    await service.generate_documents_as_zip(["notice", DocumentType.NOTICE, "consent"])
    with zipfile.ZipFile(io.BytesIO(sink.downloads[0].content)) as bundle:
        assert bundle.namelist() == [
            "Statutory_Notice_John_Smith.docx",
            "Medical_Consent_John_Smith.docx",
        ]


@pytest.mark.asyncio
async def test_zip_failure_downloads_nothing(client_details, sink, fixed_date):
    service = DocumentService(
        client_details,
        sink,
        exporter=FailingExporter([DocumentType.DEMAND]),
        today=fixed_date,
    )

    with pytest.raises(DocumentGenerationError) as exc_info:
        await service.generate_documents_as_zip(["warrant", "demand"])

    assert exc_info.value.doc_type == DocumentType.DEMAND
    assert sink.downloads == []


@pytest.mark.asyncio
async def test_zip_rejects_unknown_type(service, sink):
    with pytest.raises(InvalidDocumentTypeError):
        await service.generate_documents_as_zip(["warrant", "invoice"])
    assert sink.downloads == []


@pytest.mark.asyncio
async def test_zip_requires_a_type(service):
    with pytest.raises(ValueError):
        await service.generate_documents_as_zip([])
