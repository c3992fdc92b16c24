"""
Shared fixtures for claim document tests.
"""

from datetime import date

import pytest

from src.clients import ClientDetails
from src.export import CollectingSink


@pytest.fixture
def client_details():
    """Valid client details."""
    return ClientDetails(
        name="John Smith",
        email="john@example.com",
        phone_number="0821234567",
        identification_number="8001015009087",
    )


@pytest.fixture
def fixed_date():
    return date(2024, 3, 15)


@pytest.fixture
def sink():
    """In-memory download target."""
    return CollectingSink()


@pytest.fixture
def no_sleep():
    """Records requested pauses instead of sleeping."""
    calls = []

    async def _sleep(seconds):
        calls.append(seconds)

    _sleep.calls = calls
    return _sleep
