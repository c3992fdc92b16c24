"""
Result models for generation actions.

A GenerationResult is what the UI shows after one user action: whether it
succeeded, a message, the documents produced, and any field errors that
stopped it.
"""

from typing import List

from pydantic import BaseModel, Field

from src.clients.models import ValidationErrors
from src.documents.schemas import DOCUMENT_NAMES, DocumentType


GENERIC_FAILURE_MESSAGE = "Error generating documents. Please try again."
NO_SELECTION_MESSAGE = "Please select at least one document to generate."
VALIDATION_FAILURE_MESSAGE = "Please correct the highlighted fields."


class GenerationResult(BaseModel):
    """Outcome of a single generation action."""

    success: bool = Field(
        description="True when at least the requested download was produced"
    )
    message: str = Field(
        description="User-facing summary"
    )
    documents_generated: List[DocumentType] = Field(
        default_factory=list,
        description="Document types produced, in generation order"
    )
    errors: ValidationErrors = Field(
        default_factory=dict,
        description="Field errors that blocked generation"
    )

    @property
    def document_names(self) -> List[str]:
        return summarize(self.documents_generated)


def summarize(documents: List[DocumentType]) -> List[str]:
    """Display names for generated documents, in the given order."""
    return [DOCUMENT_NAMES.get(doc_type, str(doc_type)) for doc_type in documents]


def success_message(documents: List[DocumentType]) -> str:
    count = len(documents)
    noun = "document" if count == 1 else "documents"
    return f"{count} {noun} generated successfully."
