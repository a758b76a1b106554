"""Contact fields validation."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Union

from loops.exceptions import FieldValidationError

# Values Loops accepts for a custom contact property.
FieldValue = Union[str, bool, int, datetime]

ALLOWED_FIELD_TYPES = (str, bool, int, datetime)

# The email is always given as its own argument, never through the fields.
RESERVED_FIELD = "email"


def validate_fields(fields: Mapping[str, Any] | None) -> dict[str, FieldValue]:
    """
    Return a copy of the contact fields ready to be sent to Loops.

    The reserved ``email`` key is dropped whatever its value. Every other value
    must be a string, a boolean, an integer or a datetime.

    Args:
        fields: Contact custom properties, keyed by property name

    Returns:
        dict: A new mapping without the ``email`` key

    Raises:
        FieldValidationError: On the first value with an unsupported type

    """
    validated = {}
    for name, value in (fields or {}).items():
        if name == RESERVED_FIELD:
            continue
        if not isinstance(value, ALLOWED_FIELD_TYPES):
            raise FieldValidationError(name, type(value).__name__)
        validated[name] = value
    return validated
