# premium_estate/adapters/wire.py
"""
Wire models: the listings API JSON exactly as transmitted.

Field names follow the API (camelCase keys via aliases) so that a payload
validates 1:1. Nothing here knows about OfferType; see adapters.mapper.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WireProperty(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    city: str
    area: float
    price: float
    professional: str
    property_type: str = Field(..., alias="propertyType")
    offer_type: int = Field(..., alias="offerType")
    bedrooms: int | None = None
    rooms: int | None = None
    url: str | None = None


class WirePropertyList(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    items: list[WireProperty]
    # May exceed len(items) upstream; not used (no pagination).
    total_count: int = Field(..., alias="totalCount")
