"""Pytest fixtures for product catalog client tests."""

import httpx
import pytest

from product_sdk.clients.real_http.products import ProductClient

BASE_URL = "https://catalog.test"
STORE_TOKEN = "store-token-123"


class RecordingHandler:
    """httpx.MockTransport handler that records every request it answers."""

    def __init__(self, responder):
        self.responder = responder
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_client():
    """Build a ProductClient whose transport answers with `responder(request)`."""

    def _make(responder):
        handler = RecordingHandler(responder)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ProductClient(http_client, BASE_URL, STORE_TOKEN), handler

    return _make


@pytest.fixture
def product_payload():
    return {
        "id": 7,
        "name": "Linen Shirt",
        "slug": "linen-shirt",
        "description": "Breathable summer shirt",
        "price": "49.90",
        "is_active": 1,
        "available_at": "2024-05-01T00:00:00.000000Z",
        "product_type": {
            "id": 2,
            "name": "Shirts",
            "created_at": "2024-01-01T09:00:00.000000Z",
            "updated_at": "2024-01-01T09:00:00.000000Z",
        },
        "images": [
            {"id": 11, "name": "front", "path": "products/7/front.jpg", "order": 0},
            {"id": 12, "name": "back", "path": "products/7/back.jpg", "order": "1"},
        ],
        "variants": [
            {
                "id": 21,
                "sku": "LS-M-WHT",
                "stock": "5",
                "attributes": {"size": "M", "color": "white"},
                "created_at": "2024-01-02T10:00:00.000000Z",
                "updated_at": "2024-01-02T10:00:00.000000Z",
            },
        ],
        "created_at": "2024-01-02T10:00:00.000000Z",
        "updated_at": "2024-02-03T11:30:00.000000Z",
    }
