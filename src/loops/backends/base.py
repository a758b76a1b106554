"""Loops backend base module."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from threading import Event

from loops.backends import (
    CreateContactResponse,
    DeleteContactResponse,
    EventData,
    SendEventResponse,
    SendTransactionalResponse,
    TransactionalData,
    UpsertContactResponse,
)
from loops.fields import FieldValue


class BaseBackend(ABC):
    """Base class for all Loops backends."""

    @abstractmethod
    def create_contact(
        self,
        email: str,
        fields: Mapping[str, FieldValue] | None = None,
        timeout: int = None,
        cancel_event: Event | None = None,
    ) -> CreateContactResponse:
        """
        Create a contact.

        Args:
            email: Contact email address
            fields: Contact custom properties (string, boolean, integer or datetime values)
            timeout: API request timeout in seconds
            cancel_event: Event set by the caller to abort the request

        Returns:
            CreateContactResponse: Service response

        Raises:
            FieldValidationError: If a field holds an unsupported value type

        """

    @abstractmethod
    def upsert_contact(
        self,
        email: str,
        fields: Mapping[str, FieldValue] | None = None,
        timeout: int = None,
        cancel_event: Event | None = None,
    ) -> UpsertContactResponse:
        """Create or update a contact, same arguments as create_contact."""

    @abstractmethod
    def delete_contact(
        self, email: str, timeout: int = None, cancel_event: Event | None = None
    ) -> DeleteContactResponse:
        """Delete a contact."""

    @abstractmethod
    def send_event(
        self, event_data: EventData, timeout: int = None, cancel_event: Event | None = None
    ) -> SendEventResponse:
        """
        Send an event for a contact.

        Warning:
            Loops creates the contact if it does not exist yet.

        """

    @abstractmethod
    def send_transactional(
        self, transactional_data: TransactionalData, timeout: int = None, cancel_event: Event | None = None
    ) -> SendTransactionalResponse:
        """Send a transactional email to a contact."""
