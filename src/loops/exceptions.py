"""Loops exceptions module."""


class LoopsError(Exception):
    """Base exception for all Loops exceptions."""


class LoopsInvalidBackendError(LoopsError):
    """Exception raised when the backend is invalid."""


class FieldValidationError(LoopsError):
    """Exception raised when a contact field holds an unsupported value type."""

    def __init__(self, field_name, field_type):
        """Keep the offending field name and its type name."""
        self.field_name = field_name
        self.field_type = field_type
        super().__init__(f"invalid field type for {field_name}: {field_type}")


class LoopsAPIError(LoopsError):
    """Exception raised when the Loops API answers with an error status."""

    def __init__(self, status_code: int, reason: str, body: str):
        """Keep the status and the raw response body."""
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"{status_code} {reason}: {body}")


class LoopsDecodeError(LoopsError):
    """Exception raised when a response body does not match the expected shape."""


class RequestCancelledError(LoopsError):
    """Exception raised when the caller cancelled the request."""
