"""
Product category contract.

Categories form a tree through `parent_id`. The parent is a plain id: it is
never resolved or fetched by this library.

Timestamps are the only typed dates in the contracts. They are parsed from
ISO-8601 (or `YYYY-MM-DD HH:MM:SS`) and always serialized back as
`YYYY-MM-DD HH:MM:SS`, so timezone and sub-second precision do not survive a
round trip.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import field_serializer, field_validator

from product_sdk.contracts.base import ContractModel, Count

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(value) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(f"unparseable timestamp {value!r}") from exc
    else:
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
    if parsed is None:
        return None
    return parsed.replace(tzinfo=None, microsecond=0)


class ProductCategory(ContractModel):
    id: Count
    name: str
    slug: str
    parent_id: Optional[Count] = None
    description: Optional[str] = None
    image: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    position: Optional[Count] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("is_active", mode="before")
    @classmethod
    def _active_unless_stated(cls, value):
        return True if value is None else value

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _normalize_timestamp(cls, value):
        return parse_timestamp(value)

    @field_serializer("created_at", "updated_at")
    def _format_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return value.strftime(TIMESTAMP_FORMAT) if value is not None else None

