"""
User actions behind the generation buttons.

Each action validates the client details first and never raises: refusals
and failures come back as a GenerationResult the page can display, leaving
the form untouched for a retry.

Selection policy:
- nothing selected: refuse before any document is rendered
- one type: single DOCX download
- more than one: one zip archive download
"""

from datetime import date
from typing import Iterable, Optional, Union

from src.clients.models import ClientDetails, validate_client_details
from src.documents.builder import resolve_document_type
from src.documents.schemas import DocumentType
from src.export.download import FileSink
from src.generation.models import (
    GENERIC_FAILURE_MESSAGE,
    NO_SELECTION_MESSAGE,
    VALIDATION_FAILURE_MESSAGE,
    GenerationResult,
    success_message,
)
from src.generation.service import DEFAULT_DOWNLOAD_DELAY_SECONDS, DocumentService
from src.logging_config import get_logger


logger = get_logger("generation_actions")


def _check_details(details: ClientDetails) -> Optional[GenerationResult]:
    errors = validate_client_details(details)
    if errors:
        logger.info("validation_failed", fields=sorted(errors))
        return GenerationResult(
            success=False,
            message=VALIDATION_FAILURE_MESSAGE,
            errors=errors,
        )
    return None


async def generate_selection(
    details: ClientDetails,
    selected: Iterable[Union[DocumentType, str]],
    sink: FileSink,
    download_delay_seconds: float = DEFAULT_DOWNLOAD_DELAY_SECONDS,
    today: Optional[date] = None,
) -> GenerationResult:
    """
    Generate the selected documents for a client.

    Args:
        details: Client details snapshot from the form
        selected: Document types chosen by the user
        sink: Save-file target
        download_delay_seconds: Passed through to DocumentService
        today: Fixed date stamp for rendered documents

    Returns:
        GenerationResult describing what was downloaded or why nothing was
    """
    refused = _check_details(details)
    if refused is not None:
        return refused

    selection = list(dict.fromkeys(selected))
    if not selection:
        logger.info("generation_refused", reason="no_selection")
        return GenerationResult(success=False, message=NO_SELECTION_MESSAGE)

    service = DocumentService(
        details,
        sink,
        download_delay_seconds=download_delay_seconds,
        today=today,
    )

    try:
        generated = list(dict.fromkeys(resolve_document_type(d) for d in selection))
        if len(generated) == 1:
            await service.generate_document(generated[0])
        else:
            await service.generate_documents_as_zip(generated)
    except Exception as e:
        logger.error(
            "document_generation_failed",
            doc_types=[str(d) for d in selection],
            error=str(e),
            exc_info=True,
        )
        return GenerationResult(success=False, message=GENERIC_FAILURE_MESSAGE)

    return GenerationResult(
        success=True,
        message=success_message(generated),
        documents_generated=generated,
    )


async def generate_all(
    details: ClientDetails,
    sink: FileSink,
    download_delay_seconds: float = DEFAULT_DOWNLOAD_DELAY_SECONDS,
    today: Optional[date] = None,
) -> GenerationResult:
    """
    Generate every document as a separate download.

    Individual failures are skipped by DocumentService; the result lists
    only the documents that were downloaded.
    """
    refused = _check_details(details)
    if refused is not None:
        return refused

    service = DocumentService(
        details,
        sink,
        download_delay_seconds=download_delay_seconds,
        today=today,
    )

    try:
        generated = await service.generate_all_documents()
    except Exception as e:
        logger.error("document_generation_failed", error=str(e), exc_info=True)
        return GenerationResult(success=False, message=GENERIC_FAILURE_MESSAGE)

    if not generated:
        return GenerationResult(success=False, message=GENERIC_FAILURE_MESSAGE)

    return GenerationResult(
        success=True,
        message=success_message(generated),
        documents_generated=generated,
    )
