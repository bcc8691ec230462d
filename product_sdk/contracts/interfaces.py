from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from product_sdk.contracts.product_types import ProductType
from product_sdk.contracts.products import Product, ProductImage, ProductVariant

# Request bodies are caller-assembled JSON objects (snake_case keys).
Payload = Mapping[str, Any]


# ---------------------------------------------------------------------------
# Abstract catalog client interface
# ---------------------------------------------------------------------------

class ProductCatalogClient(ABC):
    """Every product catalog client (real HTTP or mock) must implement this interface."""

    # -- Products --

    @abstractmethod
    async def list_products(self, params: Optional[Mapping[str, Any]] = None) -> List[Product]:
        """Return all products, in server order."""

    @abstractmethod
    async def list_active_products(self) -> List[Product]:
        """Return products flagged active (server-side filter)."""

    @abstractmethod
    async def list_future_products(self) -> List[Product]:
        """Return products that become available in the future."""

    @abstractmethod
    async def get_product(self, product_id: str) -> Product:
        """Fetch a single product by id."""

    @abstractmethod
    async def get_product_by_slug(self, slug: str) -> Product:
        """Fetch a single product by slug."""

    @abstractmethod
    async def create_product(self, data: Payload) -> Product:
        """Create a product and return the stored representation."""

    @abstractmethod
    async def update_product(self, product_id: str, data: Payload) -> Product:
        """Update a product and return the fresh representation."""

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        """Delete a product."""

    # -- Variants --

    @abstractmethod
    async def list_variants(self, product_id: str) -> List[ProductVariant]:
        """Return all variants of a product."""

    @abstractmethod
    async def get_variant(self, product_id: str, variant_id: str) -> ProductVariant:
        """Fetch one variant of a product."""

    @abstractmethod
    async def create_variant(self, product_id: str, data: Payload) -> ProductVariant:
        """Add a variant to a product."""

    @abstractmethod
    async def update_variant(self, product_id: str, variant_id: str, data: Payload) -> ProductVariant:
        """Update a variant of a product."""

    @abstractmethod
    async def delete_variant(self, product_id: str, variant_id: str) -> None:
        """Remove a variant from a product."""

    # -- Images --

    @abstractmethod
    async def create_image(self, product_id: str, data: Payload) -> ProductImage:
        """Attach an image to a product."""

    @abstractmethod
    async def delete_image(self, product_id: str, image_id: str) -> None:
        """Remove an image from a product."""

    # -- Product types --

    @abstractmethod
    async def list_product_types(self) -> List[ProductType]:
        """Return all product types."""

    @abstractmethod
    async def get_product_type(self, type_id: str) -> ProductType:
        """Fetch a single product type by id."""

    @abstractmethod
    async def create_product_type(self, data: Payload) -> ProductType:
        """Create a product type."""

    @abstractmethod
    async def update_product_type(self, type_id: str, data: Payload) -> ProductType:
        """Update a product type."""

    @abstractmethod
    async def delete_product_type(self, type_id: str) -> None:
        """Delete a product type."""
