"""
Contracts (data models).

This folder defines the value objects exchanged with the product catalog API:
- Product, ProductVariant, ProductImage
- ProductType
- ProductCategory (data only, no endpoints use it yet)

Why this exists:
- Both the real HTTP client and the mock client return these models
- Callers work with validated, immutable objects instead of ad-hoc dicts
- Every model maps to and from the API's snake_case JSON (`from_dict` / `to_dict`)
"""

from .categories import ProductCategory
from .interfaces import Payload, ProductCatalogClient
from .product_types import ProductType
from .products import Product, ProductImage, ProductVariant

__all__ = [
    "Payload",
    "Product",
    "ProductCatalogClient",
    "ProductCategory",
    "ProductImage",
    "ProductType",
    "ProductVariant",
]
