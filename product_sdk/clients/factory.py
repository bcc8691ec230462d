"""
Transport construction.

The product client never builds its own httpx client; callers (scripts, apps)
build one here from validated config and pass it in. Timeouts live on the
transport, not on the client.
"""

from __future__ import annotations

import httpx

from product_sdk.clients.real_http.products import ProductClient
from product_sdk.utils.config_loader import ProductApiConfig


def build_http_client(config: ProductApiConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=config.timeout_seconds)


def build_product_client(config: ProductApiConfig) -> ProductClient:
    """Build a ProductClient together with a fresh pooled transport."""
    return ProductClient.from_config(config, build_http_client(config))
