"""Tests for HTTP / transport failure classification."""

import httpx
import pytest

from product_sdk.errors import ApiError, ErrorKind, MalformedResponseError, ValidationError
from product_sdk.policy.error_translation import (
    classify_failure,
    normalize_field_errors,
    parse_error_body,
    translate_exception,
)


def _status_error(status_code, **response_kwargs):
    request = httpx.Request("POST", "https://catalog.test/api/products/1/variants")
    response = httpx.Response(status_code, request=request, **response_kwargs)
    return httpx.HTTPStatusError(f"HTTP {status_code}", request=request, response=response)


def test_validation_error_with_message_and_field_errors():
    error = classify_failure(422, {"message": "bad input", "errors": {"sku": ["required"]}})

    assert isinstance(error, ValidationError)
    assert error.message == "bad input"
    assert error.errors == {"sku": ["required"]}
    assert error.status_code == 422
    assert error.kind == ErrorKind.VALIDATION
    assert error.messages_for("sku") == ["required"]
    assert error.messages_for("stock") == []


def test_validation_error_defaults_message():
    error = classify_failure(422, {"errors": {"name": ["The name field is required."]}})
    assert isinstance(error, ValidationError)
    assert error.message == "Validation failed"


def test_errors_outside_422_are_generic():
    error = classify_failure(400, {"message": "bad request", "errors": {"sku": ["taken"]}})
    assert type(error) is ApiError
    assert error.message == "bad request"
    assert error.status_code == 400


def test_422_without_errors_map_is_generic():
    error = classify_failure(422, {"message": "Unprocessable"})
    assert type(error) is ApiError
    assert error.message == "Unprocessable"


def test_422_with_empty_errors_array_is_validation_error():
    error = classify_failure(422, {"message": "bad input", "errors": []})
    assert isinstance(error, ValidationError)
    assert error.errors == {}
    assert error.message == "bad input"


def test_server_error_uses_body_message():
    error = classify_failure(500, {"message": "Server Error"})
    assert type(error) is ApiError
    assert error.message == "Server Error"
    assert error.status_code == 500


def test_not_found_uses_body_message():
    error = classify_failure(404, {"message": "not found"})
    assert type(error) is ApiError
    assert error.message == "not found"
    assert error.status_code == 404
    assert error.kind == ErrorKind.HTTP


def test_no_message_falls_back_to_cause_description():
    cause = RuntimeError("upstream exploded")
    error = classify_failure(500, {}, cause)
    assert error.message == "upstream exploded"
    assert error.status_code == 500
    assert error.cause is cause


@pytest.mark.parametrize("content", [b"", b"<html>oops</html>", b"[1, 2]", b'"text"', b"\xff\xfe"])
def test_unparseable_or_non_object_bodies_are_empty(content):
    assert parse_error_body(content) == {}


def test_normalize_field_errors_wraps_scalars():
    assert normalize_field_errors({"sku": "taken", "stock": ["min", 0], "name": None}) == {
        "sku": ["taken"],
        "stock": ["min", "0"],
        "name": [],
    }


def test_translate_http_status_error_422():
    exc = _status_error(422, json={"message": "bad input", "errors": {"sku": ["required"]}})
    error = translate_exception(exc)
    assert isinstance(error, ValidationError)
    assert error.errors == {"sku": ["required"]}
    assert error.cause is exc


def test_translate_http_status_error_with_html_body():
    exc = _status_error(502, content=b"<html>Bad gateway</html>")
    error = translate_exception(exc)
    assert type(error) is ApiError
    assert error.status_code == 502
    assert error.message == "HTTP 502"


def test_translate_connection_failure_has_no_status():
    exc = httpx.ConnectError("Connection refused")
    error = translate_exception(exc)
    assert type(error) is ApiError
    assert error.status_code is None
    assert error.cause is exc
    assert error.kind == ErrorKind.TRANSPORT
    assert "Connection refused" in error.message


def test_translate_timeout_has_no_status():
    error = translate_exception(httpx.ReadTimeout("timed out"))
    assert error.status_code is None
    assert error.kind == ErrorKind.TRANSPORT


def test_translate_passes_api_errors_through():
    original = MalformedResponseError("missing id", payload={})
    assert translate_exception(original) is original


def test_translate_unexpected_exception():
    error = translate_exception(KeyError("data"))
    assert type(error) is ApiError
    assert error.status_code is None
