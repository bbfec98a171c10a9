import httpx
import pytest

from premium_estate.adapters.clients.listings_api import ListingsApiClient
from premium_estate.bootstrap import build_details_holder, build_list_holder, build_repository
from premium_estate.domain.types import OfferType, Property


def _router(routes: dict[str, httpx.Response]):
    def handler(request: httpx.Request) -> httpx.Response:
        return routes.get(request.url.path, httpx.Response(404))

    return handler


@pytest.mark.asyncio
async def test_listing_screen_loads_single_paris_apartment(make_api):
    body = {
        "items": [
            {
                "id": 1,
                "city": "Paris",
                "area": 120.0,
                "price": 850000.0,
                "professional": "John Doe",
                "propertyType": "Apartment",
                "offerType": 1,
            }
        ],
        "totalCount": 1,
    }
    repo = build_repository(make_api(_router({"/listings.json": httpx.Response(200, json=body)})))

    holder = build_list_holder(repo)
    await holder.join()

    assert holder.state.is_loading is False
    assert holder.state.error is None
    assert holder.state.properties == (
        Property(
            id=1,
            city="Paris",
            area=120.0,
            price=850000.0,
            professional="John Doe",
            property_type="Apartment",
            offer_type=OfferType.SALE,
        ),
    )


@pytest.mark.asyncio
async def test_detail_screen_server_error(make_api):
    repo = build_repository(make_api(_router({"/listings/7.json": httpx.Response(500)})))

    holder = build_details_holder(repo)
    await holder.load_details(7)

    assert holder.state.is_loading is False
    assert holder.state.property is None
    assert holder.state.error == "HTTP 500: Internal Server Error"


@pytest.mark.asyncio
async def test_list_then_detail_share_one_repository(make_api, listing_payload):
    routes = {
        "/listings.json": httpx.Response(200, json=listing_payload),
        "/listings/2.json": httpx.Response(200, json=listing_payload["items"][1]),
    }
    repo = build_repository(make_api(_router(routes)))

    listing = build_list_holder(repo)
    await listing.join()
    picked = listing.state.properties[1]

    details = build_details_holder(repo)
    await details.load_details(picked.id)

    assert details.state.property == picked
    assert details.state.property.offer_type is OfferType.RENT


@pytest.mark.asyncio
async def test_default_repository_client_is_closed_through_repo_api():
    repo = build_repository()
    assert isinstance(repo.api, ListingsApiClient)

    client = repo.api._http()
    await repo.api.aclose()

    assert client.is_closed
