"""
Failure classification for the product catalog API.

A single rule set, shared by every client operation:
1. Parse the error body as JSON (unparseable or non-object bodies count as `{}`)
2. 422 with an `errors` map        -> ValidationError
3. any body with a `message`       -> ApiError(message, status)
4. otherwise                       -> ApiError(transport description, status or None)

The rules apply to every HTTP status error, 5xx included, not only client errors.
An empty `errors` array (how PHP encodes an empty map) counts as an empty map.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from product_sdk.errors import (
    DEFAULT_VALIDATION_MESSAGE,
    VALIDATION_STATUS_CODE,
    ApiError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def parse_error_body(content: Optional[bytes]) -> Dict[str, Any]:
    if not content:
        return {}
    try:
        body = json.loads(content)
    except (ValueError, UnicodeDecodeError):
        return {}
    return body if isinstance(body, dict) else {}


def normalize_field_errors(raw: Dict[str, Any]) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for field, messages in raw.items():
        if isinstance(messages, (list, tuple)):
            errors[str(field)] = [str(message) for message in messages]
        elif messages is None:
            errors[str(field)] = []
        else:
            errors[str(field)] = [str(messages)]
    return errors


def classify_failure(
    status_code: Optional[int],
    body: Dict[str, Any],
    cause: Optional[BaseException] = None,
) -> ApiError:
    """Map (status, parsed body, underlying error) onto the error taxonomy."""
    errors = body.get("errors")
    message = body.get("message")
    if errors == []:
        errors = {}

    if status_code == VALIDATION_STATUS_CODE and isinstance(errors, dict):
        return ValidationError(
            str(message) if message else DEFAULT_VALIDATION_MESSAGE,
            normalize_field_errors(errors),
            status_code,
            cause,
        )

    if message is not None:
        return ApiError(str(message), status_code, cause)

    description = str(cause) if cause is not None else "Product API request failed"
    return ApiError(description or type(cause).__name__, status_code, cause)


def translate_exception(exc: BaseException) -> ApiError:
    """Turn anything raised while talking to the API into an ApiError."""
    if isinstance(exc, ApiError):
        return exc

    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        error = classify_failure(response.status_code, parse_error_body(response.content), exc)
        logger.warning(
            f"Product API returned {response.status_code} for "
            f"{exc.request.method} {exc.request.url}: {error.message}"
        )
        return error

    if isinstance(exc, httpx.RequestError):
        logger.error(f"Request error connecting to product API: {exc!r}")
        return classify_failure(None, {}, exc)

    logger.error(f"Unexpected error in product API client: {exc!r}", exc_info=exc)
    return classify_failure(None, {}, exc)
