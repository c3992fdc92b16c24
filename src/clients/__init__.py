"""
Client details module.

Classes:
    ClientDetails: The four-field record every document is filled with
    ClientForm: Editable form state with per-field error clearing

Functions:
    validate_client_details: Field presence and email shape checks
    is_valid: True when validation reports no errors
"""

from src.clients.models import (
    ClientDetails,
    ValidationErrors,
    validate_client_details,
    is_valid,
)
from src.clients.form import ClientForm

__all__ = [
    "ClientDetails",
    "ValidationErrors",
    "validate_client_details",
    "is_valid",
    "ClientForm",
]
