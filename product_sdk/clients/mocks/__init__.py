"""
Mock integration clients.

These clients return realistic responses without calling the product catalog API.
They are used when:
- the API is not reachable from the development environment
- we want to test calling code end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients must return data shaped according to product_sdk/contracts/*
"""

from .products import MockProductClient

__all__ = ["MockProductClient"]
