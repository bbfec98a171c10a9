# premium_estate/bootstrap.py
"""
Explicit wiring: API client -> repository -> state holders.

The presentation layer calls these factories instead of reaching for a
registry; tests build the same graph with fakes.
"""
from __future__ import annotations

import httpx

from .adapters.clients.listings_api import ListingsApiClient
from .adapters.repos.base import PropertyRepository
from .adapters.repos.properties import ApiPropertyRepository
from .presentation.property_details import PropertyDetailsStateHolder
from .presentation.property_list import PropertyListStateHolder


def build_api_client(
    *,
    base_url: str | None = None,
    timeout_s: float | None = None,
    client: httpx.AsyncClient | None = None,
) -> ListingsApiClient:
    return ListingsApiClient(base_url=base_url, timeout_s=timeout_s, client=client)


def build_repository(api: ListingsApiClient | None = None) -> ApiPropertyRepository:
    """
    Without `api` the repository gets its own client; the caller then owns it
    and must `await repo.api.aclose()` when done.
    """
    return ApiPropertyRepository(api if api is not None else build_api_client())


def build_list_holder(repository: PropertyRepository, *, drop_stale: bool | None = None) -> PropertyListStateHolder:
    return PropertyListStateHolder(repository, drop_stale=drop_stale)


def build_details_holder(
    repository: PropertyRepository, *, drop_stale: bool | None = None
) -> PropertyDetailsStateHolder:
    return PropertyDetailsStateHolder(repository, drop_stale=drop_stale)
