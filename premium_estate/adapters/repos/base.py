# premium_estate/adapters/repos/base.py
from __future__ import annotations

from typing import Protocol

from ...domain.result import Result
from ...domain.types import Property


class PropertyRepository(Protocol):
    """The only data interface state holders depend on."""

    async def get_properties(self) -> Result[list[Property]]:
        ...

    async def get_property_details(self, listing_id: int) -> Result[Property]:
        ...
