# premium_estate/adapters/repos/properties.py
from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypeVar

import httpx
from pydantic import BaseModel

from ...domain.errors import EmptyBodyError, HttpError, ListingsError, TransportError
from ...domain.result import Result
from ...domain.types import Property
from ..clients.listings_api import ApiResponse, ListingsApiClient
from ..mapper import to_domain, to_domain_list

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")


async def _resolve(
    what: str,
    call: Callable[[], Awaitable[ApiResponse[M]]],
    mapper: Callable[[M], T],
) -> Result[T]:
    """
    transport error -> TransportError
    anything else   -> ListingsError
    non-2xx         -> HttpError(status, reason)
    2xx + body      -> success(mapper(body))
    2xx, no body    -> EmptyBodyError
    """
    try:
        resp = await call()
    except httpx.TransportError as e:
        log.warning("%s: request failed: %r", what, e)
        return Result.failure(TransportError(e))
    except Exception as e:
        log.exception("%s: client raised", what)
        return Result.failure(ListingsError(str(e) or type(e).__name__))

    if not resp.is_successful:
        log.warning("%s: HTTP %s %s", what, resp.status_code, resp.reason)
        return Result.failure(HttpError(resp.status_code, resp.reason))

    if resp.body is None:
        log.warning("%s: empty response body", what)
        return Result.failure(EmptyBodyError())

    return Result.success(mapper(resp.body))


class ApiPropertyRepository:
    def __init__(self, api: ListingsApiClient):
        self.api = api

    async def get_properties(self) -> Result[list[Property]]:
        return await _resolve("listings", self.api.fetch_properties, to_domain_list)

    async def get_property_details(self, listing_id: int) -> Result[Property]:
        return await _resolve(
            f"listing {listing_id}",
            lambda: self.api.fetch_property_details(listing_id),
            to_domain,
        )
