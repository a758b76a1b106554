"""Loops marketing automation integration."""

import json
import logging
from collections.abc import Mapping
from threading import Event

import requests
from django.core.serializers.json import DjangoJSONEncoder

from loops.backends import (
    CreateContactResponse,
    DeleteContactResponse,
    EventData,
    SendEventResponse,
    SendTransactionalResponse,
    TransactionalData,
    UpsertContactResponse,
)
from loops.exceptions import LoopsAPIError, LoopsDecodeError, RequestCancelledError
from loops.fields import FieldValue, validate_fields

from .base import BaseBackend

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://app.loops.so/api/v1"
DEFAULT_TIMEOUT = 10


class LoopsBackend(BaseBackend):
    """
    Loops marketing automation integration.

    Handles:
    - Contact creation, update and deletion
    - Events triggering loops for a contact
    - Transactional emails

    The backend only holds its API key, endpoint and HTTP session, it can be
    shared between threads as long as the session can.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = DEFAULT_ENDPOINT,
        session: requests.Session | None = None,
        timeout: int | None = None,
    ):
        """Configure the Loops backend."""
        self._api_key = api_key
        self.endpoint = endpoint
        self.session = session or requests.Session()
        self.timeout = timeout or DEFAULT_TIMEOUT

    @property
    def endpoint(self):
        """Base URL of the Loops API, without trailing slash."""
        return self._endpoint

    @endpoint.setter
    def endpoint(self, value):
        self._endpoint = value.removesuffix("/")

    def with_endpoint(self, endpoint: str) -> "LoopsBackend":
        """Use a non-default endpoint, e.g. for dedicated deployments."""
        self.endpoint = endpoint
        return self

    def with_session(self, session: requests.Session) -> "LoopsBackend":
        """Use a non-default HTTP session."""
        self.session = session
        return self

    def _headers(self, has_body):
        headers = {}
        if has_body:
            headers["Content-Type"] = "application/json"
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    def _request(self, method, path, body=None, response_class=None, *, timeout=None, cancel_event=None):
        """
        Send one request to the Loops API.

        Args:
            method: HTTP method
            path: Path relative to the endpoint
            body: JSON serializable payload, if any
            response_class: Record class the JSON response is decoded into, if any
            timeout: API request timeout in seconds, defaults to the backend timeout
            cancel_event: Event set by the caller to abort the request

        Returns:
            The decoded response record, or None without response_class

        Raises:
            RequestCancelledError: If cancel_event is set before the response is used
            LoopsAPIError: If the API answers with a status code >= 400
            LoopsDecodeError: If the response does not match response_class
            requests.RequestException: On network failures, raised unchanged

        """
        if cancel_event is not None and cancel_event.is_set():
            raise RequestCancelledError(f"{method} {path} cancelled before being sent")

        data = None
        if body is not None:
            data = json.dumps(body, cls=DjangoJSONEncoder)

        url = f"{self.endpoint}{path}"
        logger.debug("Loops request %s %s", method, url)

        with self.session.request(
            method,
            url,
            data=data,
            headers=self._headers(data is not None),
            timeout=timeout or self.timeout,
            stream=True,
        ) as response:
            if cancel_event is not None and cancel_event.is_set():
                raise RequestCancelledError(f"{method} {path} cancelled")

            if response.status_code >= 400:  # noqa: PLR2004
                try:
                    content = response.text
                except requests.RequestException:
                    content = ""
                logger.warning("Loops API error on %s %s: %s", method, path, response.status_code)
                raise LoopsAPIError(response.status_code, response.reason, content)

            if response_class is None:
                return None

            try:
                payload = response.json()
            except requests.JSONDecodeError as err:
                raise LoopsDecodeError(f"Invalid JSON response for {method} {path}") from err
            return response_class.from_dict(payload)

    def _contact_payload(self, email, fields):
        payload = validate_fields(fields)
        payload["email"] = email
        return payload

    def create_contact(
        self,
        email: str,
        fields: Mapping[str, FieldValue] | None = None,
        timeout: int = None,
        cancel_event: Event | None = None,
    ) -> CreateContactResponse:
        """
        Create a Loops contact.

        Args:
            email: Contact email address
            fields: Contact custom properties, an ``email`` key is ignored
            timeout: API request timeout in seconds
            cancel_event: Event set by the caller to abort the request

        Returns:
            CreateContactResponse: Loops API response

        Raises:
            FieldValidationError: If a field holds an unsupported value type, nothing is sent
            LoopsAPIError: If the contact creation fails

        """
        return self._request(
            "POST",
            "/contacts/create",
            self._contact_payload(email, fields),
            CreateContactResponse,
            timeout=timeout,
            cancel_event=cancel_event,
        )

    def upsert_contact(
        self,
        email: str,
        fields: Mapping[str, FieldValue] | None = None,
        timeout: int = None,
        cancel_event: Event | None = None,
    ) -> UpsertContactResponse:
        """Update a Loops contact, creating it when it does not exist."""
        return self._request(
            "PUT",
            "/contacts/update",
            self._contact_payload(email, fields),
            UpsertContactResponse,
            timeout=timeout,
            cancel_event=cancel_event,
        )

    def delete_contact(
        self, email: str, timeout: int = None, cancel_event: Event | None = None
    ) -> DeleteContactResponse:
        """Delete a Loops contact."""
        return self._request(
            "POST",
            "/contacts/delete",
            {"email": email},
            DeleteContactResponse,
            timeout=timeout,
            cancel_event=cancel_event,
        )

    def send_event(
        self, event_data: EventData, timeout: int = None, cancel_event: Event | None = None
    ) -> SendEventResponse:
        """
        Send an event triggering loops for a contact.

        Warning:
            Loops creates the contact if no contact exists for this email.

        """
        return self._request(
            "POST",
            "/events/send",
            event_data.to_payload(),
            SendEventResponse,
            timeout=timeout,
            cancel_event=cancel_event,
        )

    def send_transactional(
        self, transactional_data: TransactionalData, timeout: int = None, cancel_event: Event | None = None
    ) -> SendTransactionalResponse:
        """Send a transactional email, data variables are rendered in the template."""
        return self._request(
            "POST",
            "/transactional",
            transactional_data.to_payload(),
            SendTransactionalResponse,
            timeout=timeout,
            cancel_event=cancel_event,
        )
