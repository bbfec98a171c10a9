# premium_estate/presentation/property_details.py
from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace

from ..adapters.repos.base import PropertyRepository
from ..domain.result import Result
from ..domain.types import Property
from .state import StateHolder


@dataclass(frozen=True)
class PropertyDetailsUiState:
    property: Property | None = None
    is_loading: bool = False
    error: str | None = None


def _apply(state: PropertyDetailsUiState, result: Result[Property]) -> PropertyDetailsUiState:
    if result.is_success:
        return replace(state, property=result.value, is_loading=False, error=None)
    return replace(state, is_loading=False, error=result.error_message)


class PropertyDetailsStateHolder(StateHolder[PropertyDetailsUiState]):
    """Detail screen state. Nothing is fetched until load_details() is called."""

    def __init__(self, repository: PropertyRepository, *, drop_stale: bool | None = None) -> None:
        super().__init__(PropertyDetailsUiState(), drop_stale=drop_stale)
        self.repository = repository
        self.listing_id: int | None = None

    def load_details(self, listing_id: int) -> asyncio.Task:
        self.listing_id = listing_id
        return self._launch(lambda: self.repository.get_property_details(listing_id), _apply)

    def retry(self, listing_id: int | None = None) -> asyncio.Task:
        if listing_id is None:
            listing_id = self.listing_id
        if listing_id is None:
            raise ValueError("retry() before any load_details(): no listing id to reload")
        return self.load_details(listing_id)
