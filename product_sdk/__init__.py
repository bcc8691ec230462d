"""
Product catalog SDK.

Client library for the product catalog HTTP API:
- contracts: immutable value objects (Product, ProductVariant, ProductImage, ProductType, ProductCategory)
- clients: the real HTTP client (ProductClient) and an in-memory mock with the same interface
- errors: ApiError, ValidationError, MalformedResponseError

Everything callers need is re-exported here.
"""

from .clients import MockProductClient, ProductClient, build_http_client, build_product_client
from .contracts import (
    Product,
    ProductCatalogClient,
    ProductCategory,
    ProductImage,
    ProductType,
    ProductVariant,
)
from .errors import ApiError, ErrorKind, MalformedResponseError, ValidationError
from .utils import ProductApiConfig, load_client_config

__all__ = [
    # clients
    "ProductClient", "MockProductClient", "ProductCatalogClient",
    "build_http_client", "build_product_client",
    # contracts
    "Product", "ProductVariant", "ProductImage", "ProductType", "ProductCategory",
    # errors
    "ApiError", "ValidationError", "MalformedResponseError", "ErrorKind",
    # config
    "ProductApiConfig", "load_client_config",
]
