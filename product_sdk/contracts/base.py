from __future__ import annotations

from typing import Annotated, Any, Dict

from pydantic import BaseModel, BeforeValidator, ConfigDict

from product_sdk.policy.response_wrappers import (
    build_model,
    coerce_amount,
    coerce_count,
    coerce_identifier,
)

# Lenient wire types: ids may arrive as ints, numbers as numeric strings.
Identifier = Annotated[str, BeforeValidator(coerce_identifier)]
Amount = Annotated[float, BeforeValidator(coerce_amount)]
Count = Annotated[int, BeforeValidator(coerce_count)]


class ContractModel(BaseModel):
    """Immutable value object mapped to and from a snake_case JSON object."""

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    @classmethod
    def from_dict(cls, data: Any):
        return build_model(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
