# premium_estate/adapters/clients/listings_api.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ...config import settings
from ..wire import WireProperty, WirePropertyList

log = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class ApiResponse(Generic[M]):
    """
    Raw outcome of one GET, before any domain mapping.

    body is None when the server answered with nothing usable: empty payload,
    JSON `null`, invalid JSON, or a shape that does not validate. It is never
    parsed for non-2xx answers.
    """

    status_code: int
    reason: str
    body: M | None = None

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300


class ListingsApiClient:
    """
    HTTP client for the public listings API.

    Transport failures (DNS, connect, timeout, TLS) propagate as
    httpx.TransportError; HTTP status handling is left to the caller.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout_s: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = ((base_url if base_url is not None else settings.LISTINGS_BASE_URL) or "").rstrip("/")
        self.timeout_s = float(timeout_s if timeout_s is not None else settings.HTTP_TIMEOUT_S)
        self._client = client
        self._owns_client = client is None

    def _headers(self) -> dict[str, str]:
        return {"accept": "application/json", "user-agent": settings.HTTP_USER_AGENT}

    def _build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout_s))
        return self._client

    async def _get(self, path: str, model: type[M]) -> ApiResponse[M]:
        url = self._build_url(path)
        log.debug("GET %s", url)

        resp = await self._http().get(url, headers=self._headers())
        out: ApiResponse[M] = ApiResponse(status_code=resp.status_code, reason=resp.reason_phrase)
        if not out.is_successful:
            log.debug("GET %s -> %s %s", url, resp.status_code, resp.reason_phrase)
            return out

        return ApiResponse(status_code=out.status_code, reason=out.reason, body=_parse_body(url, resp, model))

    async def fetch_properties(self) -> ApiResponse[WirePropertyList]:
        return await self._get("listings.json", WirePropertyList)

    async def fetch_property_details(self, listing_id: int) -> ApiResponse[WireProperty]:
        return await self._get(f"listings/{int(listing_id)}.json", WireProperty)

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ListingsApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def _parse_body(url: str, resp: httpx.Response, model: type[M]) -> M | None:
    if not resp.content or not resp.content.strip():
        return None

    try:
        data = resp.json()
    except ValueError as e:
        log.warning("GET %s: body is not JSON (%s)", url, e)
        return None

    if data is None:
        return None

    try:
        return model.model_validate(data)
    except ValidationError as e:
        log.warning("GET %s: body does not match %s (%d errors)", url, model.__name__, e.error_count())
        return None
