"""
Response normalization helpers.

Everything that turns a parsed JSON body into contract models goes through here:
- envelope unwrapping (`{"data": ...}` vs. bare entity)
- lenient numeric/identifier coercion used by the contract fields
- model building that converts pydantic validation failures into MalformedResponseError
"""

from __future__ import annotations

import math
from typing import Any, List, Mapping, Type, TypeVar

from pydantic import BaseModel, JsonValue
from pydantic import ValidationError as PydanticValidationError

from product_sdk.errors import MalformedResponseError

ModelT = TypeVar("ModelT", bound=BaseModel)

DATA_ENVELOPE_KEY = "data"


def extract_payload(body: JsonValue) -> JsonValue:
    """Return the entity carried by a success body, with or without a `data` envelope."""
    if isinstance(body, dict) and DATA_ENVELOPE_KEY in body:
        return body[DATA_ENVELOPE_KEY]
    return body


def require_array(payload: JsonValue, label: str) -> List[JsonValue]:
    if not isinstance(payload, list):
        raise MalformedResponseError(
            f"Expected a JSON array for {label}, got {type(payload).__name__}.",
            payload=payload,
        )
    return payload


def build_model(model_type: Type[ModelT], raw: Any) -> ModelT:
    if not isinstance(raw, Mapping):
        raise MalformedResponseError(
            f"{model_type.__name__} payload must be a JSON object, got {type(raw).__name__}.",
            payload=raw,
        )
    try:
        return model_type.model_validate(dict(raw))
    except PydanticValidationError as exc:
        raise MalformedResponseError(
            f"{model_type.__name__} response validation failed: {exc}",
            payload=raw,
            cause=exc,
        ) from exc


def build_models(model_type: Type[ModelT], raw_items: JsonValue, label: str) -> List[ModelT]:
    return [build_model(model_type, item) for item in require_array(raw_items, label)]


# ---------------------------------------------------------------------------
# Field coercion (used as pydantic BeforeValidators by the contracts)
# ---------------------------------------------------------------------------

def coerce_identifier(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValueError(f"identifier must be a string or integer, got {type(value).__name__}")
    return str(value)


def coerce_amount(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"expected a number, got {value!r}")
    try:
        amount = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"expected a number, got {value!r}") from exc
    if not math.isfinite(amount):
        raise ValueError(f"expected a finite number, got {value!r}")
    return amount


def coerce_count(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected an integer, got {value!r}")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            amount = coerce_amount(value)
            if not amount.is_integer():
                raise ValueError(f"expected an integer, got {value!r}") from None
            return int(amount)
    raise ValueError(f"expected an integer, got {type(value).__name__}")


def empty_list_when_null(value: Any) -> Any:
    return [] if value is None else value


def empty_dict_when_null(value: Any) -> Any:
    return {} if value is None else value
