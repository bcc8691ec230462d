"""
Product contracts.

The product endpoints have shipped several payload shapes over time. These models
are the superset of all of them:
- v1 (`/api/products` first generation): id, name, description, variants, timestamps
- v2 adds: slug, price, is_active, available_at, product_type, images

Every field that is not present in all versions is optional. Collections
(images, variants) are always tuples; a missing or null collection becomes ().
Variant attributes are exposed as a read-only mapping. `to_dict` emits plain
JSON lists and objects for all of them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Dict, Mapping, Optional, Tuple

from pydantic import AfterValidator, BeforeValidator, Field, JsonValue, field_serializer, field_validator

from product_sdk.contracts.base import Amount, ContractModel, Count, Identifier
from product_sdk.contracts.product_types import ProductType
from product_sdk.policy.response_wrappers import empty_dict_when_null, empty_list_when_null


class ProductImage(ContractModel):
    id: Identifier
    name: str
    path: str
    order: Count = 0

    @field_validator("order", mode="before")
    @classmethod
    def _order_defaults_to_zero(cls, value):
        return 0 if value is None else value


class ProductVariant(ContractModel):
    id: Identifier
    sku: str
    stock: Annotated[Count, Field(ge=0)]
    attributes: Annotated[
        Dict[str, JsonValue],
        BeforeValidator(empty_dict_when_null),
        AfterValidator(MappingProxyType),
    ] = Field(default_factory=lambda: MappingProxyType({}))
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_serializer("attributes")
    def _attributes_as_dict(self, value: Mapping[str, JsonValue]) -> Dict[str, JsonValue]:
        return dict(value)


class Product(ContractModel):
    id: Identifier
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Amount] = None
    is_active: bool = True
    available_at: Optional[str] = None              # ISO-8601, kept verbatim
    product_type: Optional[ProductType] = None
    images: Annotated[Tuple[ProductImage, ...], BeforeValidator(empty_list_when_null)] = ()
    variants: Annotated[Tuple[ProductVariant, ...], BeforeValidator(empty_list_when_null)] = ()
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("is_active", mode="before")
    @classmethod
    def _active_unless_stated(cls, value):
        return True if value is None else value

