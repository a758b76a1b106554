"""Dummy Loops backend."""

import logging

from loops.backends import (
    CreateContactResponse,
    DeleteContactResponse,
    SendEventResponse,
    SendTransactionalResponse,
    UpsertContactResponse,
)
from loops.fields import validate_fields

from .base import BaseBackend

logger = logging.getLogger(__name__)


class DummyBackend(BaseBackend):
    """Dummy Loops backend sending nothing."""

    def __init__(self, **kwargs):
        """Accept and ignore the parameters of the real backend."""

    def create_contact(self, email, fields=None, timeout=None, cancel_event=None):
        """Validate the fields and pretend the contact was created."""
        validate_fields(fields)
        logger.debug("Dummy contact creation for %s", email)
        return CreateContactResponse(success=True)

    def upsert_contact(self, email, fields=None, timeout=None, cancel_event=None):
        """Validate the fields and pretend the contact was updated."""
        validate_fields(fields)
        logger.debug("Dummy contact update for %s", email)
        return UpsertContactResponse(success=True)

    def delete_contact(self, email, timeout=None, cancel_event=None):
        """Pretend the contact was deleted."""
        logger.debug("Dummy contact deletion for %s", email)
        return DeleteContactResponse(success=True)

    def send_event(self, event_data, timeout=None, cancel_event=None):
        """Pretend the event was sent."""
        logger.debug("Dummy event %s for %s", event_data.event_name, event_data.email)
        return SendEventResponse(success=True)

    def send_transactional(self, transactional_data, timeout=None, cancel_event=None):
        """Pretend the transactional email was sent."""
        logger.debug("Dummy transactional %s for %s", transactional_data.transactional_id, transactional_data.email)
        return SendTransactionalResponse(success=True)
