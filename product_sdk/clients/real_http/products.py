"""
Real Product Catalog HTTP Client.

Purpose:
- Calls the product catalog REST API (products, variants, images, product types)
- Maps success bodies into contract models (bare entity or `{"data": ...}` envelope)
- Translates every transport / HTTP failure into ApiError / ValidationError

Usage:
- The caller builds the httpx.AsyncClient (see clients/factory.py) and injects it.
  This client never creates its own transport.

Important:
- Keep this client as the ONLY place where product catalog HTTP calls are made.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import JsonValue

from product_sdk.contracts.base import ContractModel
from product_sdk.contracts.interfaces import Payload, ProductCatalogClient
from product_sdk.contracts.product_types import ProductType
from product_sdk.contracts.products import Product, ProductImage, ProductVariant
from product_sdk.errors import MalformedResponseError
from product_sdk.policy.error_translation import translate_exception
from product_sdk.policy.response_wrappers import (
    build_model,
    build_models,
    extract_payload,
)
from product_sdk.utils.config_loader import ProductApiConfig

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=ContractModel)

STORE_TOKEN_HEADER = "X-Store-Token"

PRODUCTS_PATH = "/api/products"
PRODUCT_TYPES_PATH = "/api/product-types"


class ProductClient(ProductCatalogClient):
    def __init__(self, http_client: httpx.AsyncClient, base_url: str, store_token: str) -> None:
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")
        self.store_token = store_token

    @classmethod
    def from_config(cls, config: ProductApiConfig, http_client: httpx.AsyncClient) -> "ProductClient":
        return cls(http_client, config.base_url, config.store_token)

    async def __aenter__(self) -> "ProductClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.http_client.aclose()

    def _headers(self) -> Dict[str, str]:
        return {
            STORE_TOKEN_HEADER: self.store_token,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Payload] = None,
    ) -> httpx.Response:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            response = await self.http_client.request(
                method,
                url,
                params=dict(params) if params else None,
                json=dict(data) if data is not None else None,
                headers=self._headers(),
            )
            response.raise_for_status()
        except Exception as exc:
            raise translate_exception(exc) from exc
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    @staticmethod
    def _payload(response: httpx.Response) -> JsonValue:
        if not response.content:
            raise MalformedResponseError(
                "Product API returned an empty body.",
                status_code=response.status_code,
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Product API returned invalid JSON: {exc}",
                payload=response.text,
                status_code=response.status_code,
                cause=exc,
            ) from exc
        return extract_payload(body)

    async def _fetch_one(self, model_type: Type[ModelT], method: str, path: str, data: Optional[Payload] = None) -> ModelT:
        response = await self._request(method, path, data=data)
        return build_model(model_type, self._payload(response))

    async def _fetch_many(
        self,
        model_type: Type[ModelT],
        path: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[ModelT]:
        response = await self._request("GET", path, params=params)
        return build_models(model_type, self._payload(response), f"{model_type.__name__} list")

    async def _delete(self, path: str) -> None:
        await self._request("DELETE", path)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def list_products(self, params: Optional[Mapping[str, Any]] = None) -> List[Product]:
        return await self._fetch_many(Product, PRODUCTS_PATH, params)

    async def list_active_products(self) -> List[Product]:
        return await self._fetch_many(Product, PRODUCTS_PATH, {"is_active": 1})

    async def list_future_products(self) -> List[Product]:
        return await self._fetch_many(Product, f"{PRODUCTS_PATH}/future")

    async def get_product(self, product_id: str) -> Product:
        return await self._fetch_one(Product, "GET", f"{PRODUCTS_PATH}/{product_id}")

    async def get_product_by_slug(self, slug: str) -> Product:
        return await self._fetch_one(Product, "GET", f"{PRODUCTS_PATH}/slug/{slug}")

    async def create_product(self, data: Payload) -> Product:
        return await self._fetch_one(Product, "POST", PRODUCTS_PATH, data)

    async def update_product(self, product_id: str, data: Payload) -> Product:
        return await self._fetch_one(Product, "PUT", f"{PRODUCTS_PATH}/{product_id}", data)

    async def delete_product(self, product_id: str) -> None:
        await self._delete(f"{PRODUCTS_PATH}/{product_id}")

    # ------------------------------------------------------------------
    # Variants
    # ------------------------------------------------------------------

    async def list_variants(self, product_id: str) -> List[ProductVariant]:
        return await self._fetch_many(ProductVariant, f"{PRODUCTS_PATH}/{product_id}/variants")

    async def get_variant(self, product_id: str, variant_id: str) -> ProductVariant:
        return await self._fetch_one(ProductVariant, "GET", f"{PRODUCTS_PATH}/{product_id}/variants/{variant_id}")

    async def create_variant(self, product_id: str, data: Payload) -> ProductVariant:
        return await self._fetch_one(ProductVariant, "POST", f"{PRODUCTS_PATH}/{product_id}/variants", data)

    async def update_variant(self, product_id: str, variant_id: str, data: Payload) -> ProductVariant:
        return await self._fetch_one(
            ProductVariant, "PUT", f"{PRODUCTS_PATH}/{product_id}/variants/{variant_id}", data
        )

    async def delete_variant(self, product_id: str, variant_id: str) -> None:
        await self._delete(f"{PRODUCTS_PATH}/{product_id}/variants/{variant_id}")

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    async def create_image(self, product_id: str, data: Payload) -> ProductImage:
        return await self._fetch_one(ProductImage, "POST", f"{PRODUCTS_PATH}/{product_id}/images", data)

    async def delete_image(self, product_id: str, image_id: str) -> None:
        await self._delete(f"{PRODUCTS_PATH}/{product_id}/images/{image_id}")

    # ------------------------------------------------------------------
    # Product types
    # ------------------------------------------------------------------

    async def list_product_types(self) -> List[ProductType]:
        return await self._fetch_many(ProductType, PRODUCT_TYPES_PATH)

    async def get_product_type(self, type_id: str) -> ProductType:
        return await self._fetch_one(ProductType, "GET", f"{PRODUCT_TYPES_PATH}/{type_id}")

    async def create_product_type(self, data: Payload) -> ProductType:
        return await self._fetch_one(ProductType, "POST", PRODUCT_TYPES_PATH, data)

    async def update_product_type(self, type_id: str, data: Payload) -> ProductType:
        return await self._fetch_one(ProductType, "PUT", f"{PRODUCT_TYPES_PATH}/{type_id}", data)

    async def delete_product_type(self, type_id: str) -> None:
        await self._delete(f"{PRODUCT_TYPES_PATH}/{type_id}")
