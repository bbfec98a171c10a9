# tests/conftest.py
from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from premium_estate.adapters.clients.listings_api import ListingsApiClient
from premium_estate.domain.result import Result
from premium_estate.domain.types import OfferType, Property

BASE_URL = "https://listings.test"


@pytest.fixture
def paris_payload() -> dict[str, Any]:
    return {
        "id": 1,
        "city": "Paris",
        "area": 120.0,
        "price": 850000.0,
        "professional": "John Doe",
        "propertyType": "Apartment",
        "offerType": 1,
    }


@pytest.fixture
def listing_payload() -> dict[str, Any]:
    return {
        "items": [
            {
                "id": 1,
                "bedrooms": 3,
                "city": "Paris",
                "area": 120.0,
                "url": "https://example.com/image1.jpg",
                "price": 850000.0,
                "professional": "John Doe",
                "propertyType": "Apartment",
                "offerType": 1,
                "rooms": 4,
            },
            {
                "id": 2,
                "bedrooms": 2,
                "city": "Lyon",
                "area": 80.0,
                "url": "https://example.com/image2.jpg",
                "price": 1200.0,
                "professional": "Jane Smith",
                "propertyType": "House",
                "offerType": 2,
                "rooms": 3,
            },
            {
                "id": 3,
                "city": "Marseille",
                "area": 45.0,
                "price": 350000.0,
                "professional": "Bob Wilson",
                "propertyType": "Studio",
                "offerType": 0,
            },
        ],
        "totalCount": 3,
    }


@pytest.fixture
def sample_properties() -> list[Property]:
    return [
        Property(
            id=1,
            bedrooms=3,
            city="Paris",
            area=120.0,
            image_url="https://example.com/image1.jpg",
            price=850000.0,
            professional="John Doe",
            property_type="Apartment",
            offer_type=OfferType.SALE,
            rooms=4,
        ),
        Property(
            id=3,
            city="Marseille",
            area=45.0,
            price=350000.0,
            professional="Bob Wilson",
            property_type="Studio",
            offer_type=OfferType.SALE,
        ),
    ]


@pytest.fixture
async def make_api():
    """ListingsApiClient backed by an in-process httpx.MockTransport handler."""
    clients: list[httpx.AsyncClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ListingsApiClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(http)
        return ListingsApiClient(base_url=BASE_URL, client=http)

    try:
        yield _make
    finally:
        for http in clients:
            await http.aclose()


class FakeRepository:
    """Scripted repository: hands out queued results in order, repeating the last one."""

    def __init__(self, *results: Result[Any]) -> None:
        self.results = list(results)
        self.list_calls = 0
        self.detail_calls: list[int] = []

    def _next(self) -> Result[Any]:
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]

    async def get_properties(self) -> Result[list[Property]]:
        self.list_calls += 1
        return self._next()

    async def get_property_details(self, listing_id: int) -> Result[Property]:
        self.detail_calls.append(listing_id)
        return self._next()


@pytest.fixture
def fake_repository_cls() -> type[FakeRepository]:
    return FakeRepository
