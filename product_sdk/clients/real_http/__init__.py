"""
Real HTTP integration clients.

These clients communicate with the product catalog API over HTTP.

Important:
- Must implement the same interface as the mock clients (contracts.ProductCatalogClient)
- Must return data shaped according to product_sdk/contracts/*
"""

from .products import ProductClient

__all__ = ["ProductClient"]
