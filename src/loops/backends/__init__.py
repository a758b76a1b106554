"""Loops backends module."""

from dataclasses import dataclass, field, fields
from typing import Any

from loops.exceptions import LoopsDecodeError


@dataclass
class EventData:
    """Event sent on behalf of a contact."""

    email: str
    event_name: str

    def to_payload(self) -> dict:
        """Return the JSON body expected by the events endpoint."""
        return {"email": self.email, "eventName": self.event_name}


@dataclass
class TransactionalData:
    """Transactional message sent to a contact."""

    email: str
    transactional_id: str
    data_variables: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> dict:
        """Return the JSON body expected by the transactional endpoint."""
        return {
            "email": self.email,
            "transactionalId": self.transactional_id,
            "dataVariables": self.data_variables,
        }


class ResponseMixin:
    """Build a response record from a decoded JSON body."""

    @classmethod
    def from_dict(cls, data):
        """
        Build the record from a decoded JSON object.

        Unknown keys are ignored, missing and null keys keep their default value.

        Raises:
            LoopsDecodeError: If data is not an object or a value has the wrong type

        """
        if not isinstance(data, dict):
            raise LoopsDecodeError(f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}")

        values = {}
        for record_field in fields(cls):
            if record_field.name not in data:
                continue
            value = data[record_field.name]
            if value is None:
                continue
            if not isinstance(value, record_field.type):
                raise LoopsDecodeError(
                    f"Invalid value for {cls.__name__}.{record_field.name}: "
                    f"expected {record_field.type.__name__}, got {type(value).__name__}"
                )
            values[record_field.name] = value
        return cls(**values)


@dataclass
class ContactResponse(ResponseMixin):
    """Response of the contact creation and update endpoints."""

    success: bool = False
    id: str = ""


class CreateContactResponse(ContactResponse):
    """Response of the contact creation endpoint."""


class UpsertContactResponse(ContactResponse):
    """Response of the contact update endpoint."""


@dataclass
class DeleteContactResponse(ResponseMixin):
    """Response of the contact deletion endpoint."""

    success: bool = False
    message: str = ""


@dataclass
class SendEventResponse(ResponseMixin):
    """Response of the event endpoint."""

    success: bool = False


@dataclass
class SendTransactionalResponse(ResponseMixin):
    """Response of the transactional endpoint."""

    success: bool = False
