"""Tests for the product category value object (typed timestamps, parent reference)."""

from datetime import datetime

import pytest

from product_sdk.contracts import ProductCategory
from product_sdk.errors import MalformedResponseError


def _category(**overrides):
    data = {
        "id": 3,
        "name": "Shoes",
        "slug": "shoes",
        "parent_id": 1,
        "position": "2",
        "created_at": "2024-01-15T10:30:00.123456Z",
        "updated_at": "2024-01-16 08:00:00",
    }
    data.update(overrides)
    return data


def test_category_parses_timestamps_and_coerces_numbers():
    category = ProductCategory.from_dict(_category())

    assert category.id == 3
    assert category.parent_id == 1
    assert category.position == 2
    assert category.is_active is True
    assert category.created_at == datetime(2024, 1, 15, 10, 30, 0)
    assert category.updated_at == datetime(2024, 1, 16, 8, 0, 0)


def test_category_optional_fields_default_to_none():
    category = ProductCategory.from_dict({"id": 1, "name": "Root", "slug": "root"})

    assert category.parent_id is None
    assert category.description is None
    assert category.image is None
    assert category.meta_title is None
    assert category.meta_description is None
    assert category.position is None
    assert category.created_at is None


def test_category_serializes_timestamps_in_fixed_format():
    data = ProductCategory.from_dict(_category()).to_dict()

    assert data["created_at"] == "2024-01-15 10:30:00"
    assert data["updated_at"] == "2024-01-16 08:00:00"
    assert data["parent_id"] == 1
    assert data["meta_title"] is None


def test_category_round_trip_after_normalization():
    category = ProductCategory.from_dict(_category(is_active=False, description="All footwear"))
    assert ProductCategory.from_dict(category.to_dict()) == category


def test_category_with_unparseable_timestamp_is_malformed():
    with pytest.raises(MalformedResponseError):
        ProductCategory.from_dict(_category(created_at="yesterday"))


def test_category_requires_slug():
    data = _category()
    del data["slug"]
    with pytest.raises(MalformedResponseError):
        ProductCategory.from_dict(data)
