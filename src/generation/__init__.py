"""
Document generation module for the claim document generator.

This module provides the generation service (single document, all documents,
zip archive) and the user actions that apply validation and the selection
policy before calling it.
"""

from src.generation.models import (
    GENERIC_FAILURE_MESSAGE,
    NO_SELECTION_MESSAGE,
    VALIDATION_FAILURE_MESSAGE,
    GenerationResult,
    summarize,
)
from src.generation.service import (
    DEFAULT_DOWNLOAD_DELAY_SECONDS,
    DocumentGenerationError,
    DocumentService,
)
from src.generation.actions import generate_all, generate_selection

__all__ = [
    # Result models
    "GenerationResult",
    "summarize",
    "GENERIC_FAILURE_MESSAGE",
    "NO_SELECTION_MESSAGE",
    "VALIDATION_FAILURE_MESSAGE",
    # Service
    "DocumentService",
    "DocumentGenerationError",
    "DEFAULT_DOWNLOAD_DELAY_SECONDS",
    # Actions
    "generate_selection",
    "generate_all",
]
