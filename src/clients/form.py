"""
Transient form state for the client details page.

Holds the values being typed and the errors from the last validation pass.
Editing a field clears that field's error; nothing is persisted.
"""

from typing import Optional

from src.clients.models import ClientDetails, ValidationErrors, validate_client_details


class ClientForm:
    """
    Editable client details plus their current validation errors.

    Example:
        form = ClientForm()
        form.update_field("name", "Jane Doe")
        if form.validate():
            details = form.snapshot()
    """

    FIELDS = ("name", "email", "phone_number", "identification_number")

    def __init__(self, details: Optional[ClientDetails] = None):
        self._values = (details or ClientDetails()).model_dump()
        self.errors: ValidationErrors = {}

    def update_field(self, field: str, value: str) -> None:
        """
        Set a field value and clear any error shown for it.

        Raises:
            KeyError: If field is not one of the client detail fields
        """
        if field not in self.FIELDS:
            raise KeyError(f"Unknown client field '{field}'")
        self._values[field] = value
        self.errors.pop(field, None)

    def get(self, field: str) -> str:
        return self._values[field]

    def snapshot(self) -> ClientDetails:
        """Return an immutable copy of the current values."""
        return ClientDetails(**self._values)

    def validate(self) -> bool:
        """Recompute errors for the current values. True when there are none."""
        self.errors = validate_client_details(self.snapshot())
        return not self.errors
