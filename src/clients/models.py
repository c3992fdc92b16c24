"""
Client detail models and validation.

ClientDetails holds the four fields every claim document is filled with.
Fields are plain strings so that half-filled form state can be represented;
validate_client_details() decides whether a snapshot may be used for
generation.
"""

import re
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


# Loose email shape: something@something.something
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

ValidationErrors = Dict[str, str]


class ClientDetails(BaseModel):
    """
    The person the generated documents concern.

    Accepts the camelCase names used by form payloads (phoneNumber,
    identificationNumber) as well as the Python field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(
        default="",
        description="Full name of the client",
        examples=["Jane Doe"]
    )

    email: str = Field(
        default="",
        description="Client email address",
        examples=["jane@example.com"]
    )

    phone_number: str = Field(
        default="",
        alias="phoneNumber",
        description="Client phone number (no format check)",
        examples=["0821234567"]
    )

    identification_number: str = Field(
        default="",
        alias="identificationNumber",
        description="Client identification number (no checksum check)",
        examples=["8001015009087"]
    )


def validate_client_details(details: ClientDetails) -> ValidationErrors:
    """
    Check that every field is present and that the email looks like one.

    Args:
        details: Client details snapshot to check

    Returns:
        Mapping of field name to error message. Empty when valid.
    """
    errors: ValidationErrors = {}

    if not details.name.strip():
        errors["name"] = "Name is required"

    if not details.email.strip():
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.search(details.email):
        errors["email"] = "Email is invalid"

    if not details.phone_number.strip():
        errors["phone_number"] = "Phone number is required"

    if not details.identification_number.strip():
        errors["identification_number"] = "Identification number is required"

    return errors


def is_valid(details: ClientDetails) -> bool:
    """Return True when validate_client_details() reports no errors."""
    return not validate_client_details(details)
