# premium_estate/domain/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OfferType(int, Enum):
    """Listing category. Values are the upstream integer codes."""

    UNKNOWN = 0
    SALE = 1
    RENT = 2
    SOLD = 3
    RENTED = 4


@dataclass(frozen=True)
class Property:
    id: int
    city: str
    area: float
    price: float  # EUR
    professional: str
    property_type: str
    offer_type: OfferType
    bedrooms: int | None = None
    rooms: int | None = None
    # None means the listing has no picture; do not render a placeholder.
    image_url: str | None = None

    @property
    def has_image(self) -> bool:
        return bool(self.image_url)
