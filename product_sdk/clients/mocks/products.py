"""
Product catalog: MOCK client.

⚠️  In-memory implementation for development and testing.
    Does NOT make network calls. Entities are stored in their wire shape and
    mapped through the same contract models as the real client, so callers see
    identical value objects and identical errors (404 -> ApiError,
    missing required input -> ValidationError).
    Writes are validated against the contract models before they are stored,
    so a rejected create or update leaves the catalog untouched.
"""

import copy
import itertools
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from product_sdk.contracts.base import ContractModel
from product_sdk.contracts.interfaces import Payload, ProductCatalogClient
from product_sdk.contracts.product_types import ProductType
from product_sdk.contracts.products import Product, ProductImage, ProductVariant
from product_sdk.errors import ApiError, MalformedResponseError, ValidationError
from product_sdk.policy.response_wrappers import coerce_count

logger = logging.getLogger(__name__)

NOT_FOUND = 404
INVALID_DATA = "The given data was invalid."

ModelT = TypeVar("ModelT", bound=ContractModel)

_PRODUCT_FIELDS = ("name", "slug", "description", "price", "is_active", "available_at")
_VARIANT_FIELDS = ("sku", "stock", "attributes")
_TYPE_FIELDS = ("name",)


def _now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000000Z")


def _is_future(value: Optional[str]) -> bool:
    if not value:
        return False
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(text)
    except ValueError:
        return False
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment > datetime.now(timezone.utc)


def _required(data: Payload, *fields: str) -> None:
    errors = {
        field: [f"The {field} field is required."]
        for field in fields
        if data.get(field) in (None, "")
    }
    if errors:
        raise ValidationError(INVALID_DATA, errors)



def _validated(model_type: Type[ModelT], candidate: Dict[str, Any]) -> ModelT:
    """Build the value object for a pending write, reporting bad input as a 422."""
    try:
        return model_type.from_dict(copy.deepcopy(candidate))
    except MalformedResponseError as exc:
        errors: Dict[str, List[str]] = {}
        if isinstance(exc.cause, PydanticValidationError):
            for detail in exc.cause.errors():
                field = ".".join(str(part) for part in detail["loc"]) or "data"
                errors.setdefault(field, []).append(detail["msg"])
        raise ValidationError(INVALID_DATA, errors or {"data": [exc.message]}, cause=exc) from exc


class MockProductClient(ProductCatalogClient):
    """
    Mock product catalog client.

    Parameters
    ----------
    products : iterable of mappings
        Seed products in wire shape (snake_case keys). Ids are kept if present.
    product_types : iterable of mappings
        Seed product types in wire shape.
    """

    def __init__(
        self,
        products: Optional[Iterable[Mapping[str, Any]]] = None,
        product_types: Optional[Iterable[Mapping[str, Any]]] = None,
    ) -> None:
        self._ids = itertools.count(1)

        # In-memory stores (reset on restart)
        self._products: Dict[str, Dict[str, Any]] = {}
        self._product_types: Dict[str, Dict[str, Any]] = {}

        for raw_type in product_types or []:
            self._store_type(self._type_defaults(dict(raw_type)))
        for raw_product in products or []:
            self._store_product(self._product_defaults(dict(raw_product)))

        logger.info(
            "[PRODUCT MOCK] Client initialised with %d products, %d product types",
            len(self._products), len(self._product_types),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _new_id(self) -> str:
        new_id = str(next(self._ids))
        while new_id in self._products or new_id in self._product_types:
            new_id = str(next(self._ids))
        return new_id

    def _type_defaults(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        raw.setdefault("id", self._new_id())
        raw["id"] = str(raw["id"])
        raw.setdefault("created_at", _now())
        raw.setdefault("updated_at", raw["created_at"])
        return raw

    def _product_defaults(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        raw.setdefault("id", self._new_id())
        raw["id"] = str(raw["id"])
        raw.setdefault("is_active", True)
        raw["images"] = list(raw.get("images") or [])
        raw["variants"] = list(raw.get("variants") or [])
        raw.setdefault("created_at", _now())
        raw.setdefault("updated_at", raw["created_at"])
        return raw

    def _store_type(self, raw: Dict[str, Any]) -> ProductType:
        product_type = _validated(ProductType, raw)
        self._product_types[raw["id"]] = raw
        return product_type

    def _store_product(self, raw: Dict[str, Any]) -> Product:
        product = _validated(Product, raw)
        self._products[raw["id"]] = raw
        return product

    def _product_raw(self, product_id: str) -> Dict[str, Any]:
        raw = self._products.get(str(product_id))
        if raw is None:
            raise ApiError(f"Product {product_id} not found.", NOT_FOUND)
        return raw

    def _type_raw(self, type_id: str) -> Dict[str, Any]:
        raw = self._product_types.get(str(type_id))
        if raw is None:
            raise ApiError(f"Product type {type_id} not found.", NOT_FOUND)
        return raw

    def _variant_raw(self, product_id: str, variant_id: str) -> Dict[str, Any]:
        for variant in self._product_raw(product_id)["variants"]:
            if str(variant.get("id")) == str(variant_id):
                return variant
        raise ApiError(f"Variant {variant_id} not found for product {product_id}.", NOT_FOUND)

    def _apply_product_type(self, raw: Dict[str, Any], data: Payload) -> None:
        if "product_type_id" not in data:
            return
        type_id = data["product_type_id"]
        if type_id is None:
            raw["product_type"] = None
            return
        if str(type_id) not in self._product_types:
            raise ValidationError(
                INVALID_DATA,
                {"product_type_id": ["The selected product type id is invalid."]},
            )
        raw["product_type"] = copy.deepcopy(self._product_types[str(type_id)])

    @staticmethod
    def _check_stock(data: Payload) -> None:
        stock = data.get("stock")
        if isinstance(stock, (int, float)) and not isinstance(stock, bool) and stock < 0:
            raise ValidationError(
                INVALID_DATA,
                {"stock": ["The stock field must be at least 0."]},
            )

    @staticmethod
    def _product(raw: Dict[str, Any]) -> Product:
        return Product.from_dict(copy.deepcopy(raw))

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def list_products(self, params: Optional[Mapping[str, Any]] = None) -> List[Product]:
        products = list(self._products.values())
        if params and "is_active" in params:
            wanted = str(params["is_active"]).lower() in ("1", "true")
            products = [p for p in products if bool(p.get("is_active")) == wanted]
        return [self._product(raw) for raw in products]

    async def list_active_products(self) -> List[Product]:
        return await self.list_products({"is_active": 1})

    async def list_future_products(self) -> List[Product]:
        return [self._product(raw) for raw in self._products.values() if _is_future(raw.get("available_at"))]

    async def get_product(self, product_id: str) -> Product:
        return self._product(self._product_raw(product_id))

    async def get_product_by_slug(self, slug: str) -> Product:
        for raw in self._products.values():
            if raw.get("slug") == slug:
                return self._product(raw)
        raise ApiError(f"Product with slug '{slug}' not found.", NOT_FOUND)

    async def create_product(self, data: Payload) -> Product:
        _required(data, "name")
        raw = {field: copy.deepcopy(data[field]) for field in _PRODUCT_FIELDS if field in data}
        self._apply_product_type(raw, data)
        product = self._store_product(self._product_defaults(raw))
        logger.info("[PRODUCT MOCK] Created product %s", product.id)
        return product

    async def update_product(self, product_id: str, data: Payload) -> Product:
        candidate = copy.deepcopy(self._product_raw(product_id))
        candidate.update({field: copy.deepcopy(data[field]) for field in _PRODUCT_FIELDS if field in data})
        self._apply_product_type(candidate, data)
        candidate["updated_at"] = _now()
        return self._store_product(candidate)

    async def delete_product(self, product_id: str) -> None:
        self._product_raw(product_id)
        del self._products[str(product_id)]
        logger.info("[PRODUCT MOCK] Deleted product %s", product_id)

    # ------------------------------------------------------------------
    # Variants
    # ------------------------------------------------------------------

    async def list_variants(self, product_id: str) -> List[ProductVariant]:
        variants = self._product_raw(product_id)["variants"]
        return [ProductVariant.from_dict(copy.deepcopy(v)) for v in variants]

    async def get_variant(self, product_id: str, variant_id: str) -> ProductVariant:
        return ProductVariant.from_dict(copy.deepcopy(self._variant_raw(product_id, variant_id)))

    async def create_variant(self, product_id: str, data: Payload) -> ProductVariant:
        product = self._product_raw(product_id)
        _required(data, "sku")
        self._check_stock(data)
        now = _now()
        raw = {
            "id": self._new_id(),
            "sku": data["sku"],
            "stock": data.get("stock", 0),
            "attributes": copy.deepcopy(data.get("attributes") or {}),
            "created_at": now,
            "updated_at": now,
        }
        variant = _validated(ProductVariant, raw)
        product["variants"].append(raw)
        return variant

    async def update_variant(self, product_id: str, variant_id: str, data: Payload) -> ProductVariant:
        raw = self._variant_raw(product_id, variant_id)
        self._check_stock(data)
        candidate = dict(raw)
        candidate.update({field: copy.deepcopy(data[field]) for field in _VARIANT_FIELDS if field in data})
        candidate["updated_at"] = _now()
        variant = _validated(ProductVariant, candidate)
        raw.update(candidate)
        return variant

    async def delete_variant(self, product_id: str, variant_id: str) -> None:
        product = self._product_raw(product_id)
        variant = self._variant_raw(product_id, variant_id)
        product["variants"].remove(variant)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    async def create_image(self, product_id: str, data: Payload) -> ProductImage:
        product = self._product_raw(product_id)
        _required(data, "path")
        path = str(data["path"])
        raw = {
            "id": self._new_id(),
            "name": data.get("name") or path.rsplit("/", 1)[-1],
            "path": path,
            "order": data.get("order", len(product["images"])),
        }
        image = _validated(ProductImage, raw)
        raw["order"] = image.order
        product["images"].append(raw)
        product["images"].sort(key=lambda stored: coerce_count(stored.get("order") or 0))
        return image

    async def delete_image(self, product_id: str, image_id: str) -> None:
        product = self._product_raw(product_id)
        for image in product["images"]:
            if str(image.get("id")) == str(image_id):
                product["images"].remove(image)
                return
        raise ApiError(f"Image {image_id} not found for product {product_id}.", NOT_FOUND)

    # ------------------------------------------------------------------
    # Product types
    # ------------------------------------------------------------------

    async def list_product_types(self) -> List[ProductType]:
        return [ProductType.from_dict(copy.deepcopy(raw)) for raw in self._product_types.values()]

    async def get_product_type(self, type_id: str) -> ProductType:
        return ProductType.from_dict(copy.deepcopy(self._type_raw(type_id)))

    async def create_product_type(self, data: Payload) -> ProductType:
        _required(data, "name")
        return self._store_type(self._type_defaults({field: data[field] for field in _TYPE_FIELDS}))

    async def update_product_type(self, type_id: str, data: Payload) -> ProductType:
        candidate = dict(self._type_raw(type_id))
        candidate.update({field: data[field] for field in _TYPE_FIELDS if field in data})
        candidate["updated_at"] = _now()
        return self._store_type(candidate)

    async def delete_product_type(self, type_id: str) -> None:
        self._type_raw(type_id)
        del self._product_types[str(type_id)]
