# premium_estate/presentation/property_list.py
from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace

from ..adapters.repos.base import PropertyRepository
from ..domain.result import Result
from ..domain.types import Property
from .state import StateHolder


@dataclass(frozen=True)
class PropertyListUiState:
    properties: tuple[Property, ...] = ()
    is_loading: bool = True
    error: str | None = None


def _apply(state: PropertyListUiState, result: Result[list[Property]]) -> PropertyListUiState:
    if result.is_success:
        return replace(state, properties=tuple(result.value or ()), is_loading=False, error=None)
    # keep whatever was listed before
    return replace(state, is_loading=False, error=result.error_message)


class PropertyListStateHolder(StateHolder[PropertyListUiState]):
    """
    Listing screen state. Starts loading as soon as it is created, so it must
    be constructed inside a running event loop.
    """

    def __init__(self, repository: PropertyRepository, *, drop_stale: bool | None = None) -> None:
        super().__init__(PropertyListUiState(), drop_stale=drop_stale)
        self.repository = repository
        self._load_properties()

    def _load_properties(self) -> asyncio.Task:
        return self._launch(self.repository.get_properties, _apply)

    def retry(self) -> asyncio.Task:
        return self._load_properties()
