"""
Error taxonomy for the product catalog client.

Every failure surfaced to callers is an ApiError (or a subclass):
- ApiError: the remote API rejected the request, or the transport failed
- ValidationError: the remote API rejected the input with field-level detail (HTTP 422)
- MalformedResponseError: a response body did not match the expected contract

Each error carries a `kind` so callers can branch on data instead of on the
exception class.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

VALIDATION_STATUS_CODE = 422
DEFAULT_VALIDATION_MESSAGE = "Validation failed"


class ErrorKind(str, Enum):
    TRANSPORT = "TRANSPORT"
    HTTP = "HTTP"
    VALIDATION = "VALIDATION"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"


class ApiError(Exception):
    """Base error for all product API failures."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        *,
        kind: Optional[ErrorKind] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause
        if kind is None:
            kind = ErrorKind.HTTP if status_code else ErrorKind.TRANSPORT
        self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, status_code={self.status_code!r}, kind={self.kind.value})"


class ValidationError(ApiError):
    """Raised when the API answers 422 with an `errors` map."""

    def __init__(
        self,
        message: Optional[str],
        errors: Dict[str, List[str]],
        status_code: Optional[int] = VALIDATION_STATUS_CODE,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            message or DEFAULT_VALIDATION_MESSAGE,
            status_code,
            cause,
            kind=ErrorKind.VALIDATION,
        )
        self.errors = errors

    def messages_for(self, field: str) -> List[str]:
        return list(self.errors.get(field, []))


class MalformedResponseError(ApiError):
    """Raised when a payload is missing required fields or has the wrong shape."""

    def __init__(
        self,
        message: str,
        *,
        payload: Any = None,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, status_code, cause, kind=ErrorKind.MALFORMED_RESPONSE)
        self.payload = payload
