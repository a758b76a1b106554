"""Loops tasks module."""

from dataclasses import asdict

from celery import shared_task

from loops import loops
from loops.backends import EventData, TransactionalData


@shared_task
def create_contact(email: str, fields: dict | None = None, timeout: int = None):
    """Create a contact."""
    return asdict(loops.create_contact(email, fields, timeout))


@shared_task
def upsert_contact(email: str, fields: dict | None = None, timeout: int = None):
    """Create or update a contact."""
    return asdict(loops.upsert_contact(email, fields, timeout))


@shared_task
def delete_contact(email: str, timeout: int = None):
    """Delete a contact."""
    return asdict(loops.delete_contact(email, timeout))


@shared_task
def send_event(email: str, event_name: str, timeout: int = None):
    """Send an event, creating the contact if needed."""
    event_data = EventData(email=email, event_name=event_name)
    return asdict(loops.send_event(event_data, timeout))


@shared_task
def send_transactional(
    email: str, transactional_id: str, data_variables: dict | None = None, timeout: int = None
):
    """Send a transactional email."""
    transactional_data = TransactionalData(
        email=email, transactional_id=transactional_id, data_variables=data_variables or {}
    )
    return asdict(loops.send_transactional(transactional_data, timeout))
