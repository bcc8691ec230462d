"""
Product catalog clients.

- real_http: talks to the product catalog API via an injected httpx.AsyncClient
- mocks: in-memory catalog with the same interface, for development and tests

Switching between them should happen in ONE place in the calling application.
"""

from .factory import build_http_client, build_product_client
from .mocks.products import MockProductClient
from .real_http.products import ProductClient

__all__ = ["MockProductClient", "ProductClient", "build_http_client", "build_product_client"]
