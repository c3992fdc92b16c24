"""
Unit tests for client detail validation and form state.
"""

import pytest

from src.clients import ClientDetails, ClientForm, is_valid, validate_client_details


REQUIRED_MESSAGES = {
    "name": "Name is required",
    "email": "Email is required",
    "phone_number": "Phone number is required",
    "identification_number": "Identification number is required",
}


def test_valid_details_have_no_errors():
    details = ClientDetails(
        name="Jane Doe",
        email="jane@example.com",
        phoneNumber="0821234567",
        identificationNumber="8001015009087",
    )
    assert validate_client_details(details) == {}
    assert is_valid(details)


def test_invalid_email_is_the_only_error():
    details = ClientDetails(name="A", email="bad", phone_number="1", identification_number="1")
    assert validate_client_details(details) == {"email": "Email is invalid"}


@pytest.mark.parametrize("field", list(REQUIRED_MESSAGES))
@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
def test_blank_field_reports_only_that_field(client_details, field, blank):
    details = client_details.model_copy(update={field: blank})
    errors = validate_client_details(details)
    assert errors == {field: REQUIRED_MESSAGES[field]}
    assert not is_valid(details)


def test_all_blank_reports_every_field():
    assert validate_client_details(ClientDetails()) == REQUIRED_MESSAGES


@pytest.mark.parametrize(
    "email",
    ["jane@example.com", "a@b.c", "first.last@sub.domain.org", " x@y.z "],
)
def test_email_shape_accepted(client_details, email):
    details = client_details.model_copy(update={"email": email})
    assert "email" not in validate_client_details(details)


@pytest.mark.parametrize("email", ["bad", "jane@example", "@example.com", "jane@.com", "jane example.com"])
def test_email_shape_rejected(client_details, email):
    details = client_details.model_copy(update={"email": email})
    assert validate_client_details(details) == {"email": "Email is invalid"}


def test_camel_case_aliases_accepted():
    details = ClientDetails.model_validate(
        {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "phoneNumber": "0821234567",
            "identificationNumber": "8001015009087",
        }
    )
    assert details.phone_number == "0821234567"
    assert details.identification_number == "8001015009087"


def test_client_details_are_immutable(client_details):
    with pytest.raises(Exception):
        client_details.name = "Someone Else"


class TestClientForm:
    def test_validate_stores_errors(self):
        form = ClientForm()
        assert form.validate() is False
        assert form.errors == REQUIRED_MESSAGES

    def test_editing_a_field_clears_only_its_error(self):
        form = ClientForm()
        form.validate()

        form.update_field("name", "Jane")

        assert "name" not in form.errors
        assert set(form.errors) == {"email", "phone_number", "identification_number"}

    def test_editing_does_not_revalidate(self):
        form = ClientForm()
        form.validate()
        form.update_field("email", "still-bad")
        assert "email" not in form.errors
        assert form.validate() is False
        assert form.errors["email"] == "Email is invalid"

    def test_snapshot_reflects_edits(self, client_details):
        form = ClientForm(client_details)
        form.update_field("name", "Mary Jones")
        snapshot = form.snapshot()
        assert snapshot.name == "Mary Jones"
        assert snapshot.email == client_details.email
        assert form.validate() is True
        assert form.errors == {}

    def test_unknown_field_rejected(self):
        form = ClientForm()
        with pytest.raises(KeyError):
            form.update_field("address", "1 Main Road")
