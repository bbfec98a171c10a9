# premium_estate/domain/formatting.py
"""Display helpers shared by list and detail renderers."""
from __future__ import annotations

from typing import Any

from .types import OfferType

OFFER_TYPE_LABELS: dict[OfferType, str] = {
    OfferType.SALE: "For Sale",
    OfferType.RENT: "For Rent",
    OfferType.SOLD: "Sold",
    OfferType.RENTED: "Rented",
    OfferType.UNKNOWN: "Unknown",
}


def offer_type_label(offer_type: OfferType) -> str:
    return OFFER_TYPE_LABELS.get(offer_type, "Unknown")


def format_price(price: float) -> str:
    """850000.0 -> '€850,000.00'. Prices are always EUR."""
    sign = "-" if price < 0 else ""
    return f"{sign}€{abs(price):,.2f}"


def format_area(area: float) -> str:
    # Truncated, not rounded: 79.9 -> '79 m²'
    return f"{int(area)} m²"


def parse_listing_id(raw: Any) -> int:
    """
    Navigation argument -> listing id.
    Anything that is not an integer string falls back to 0.
    """
    if raw is None:
        return 0
    try:
        return int(str(raw).strip())
    except ValueError:
        return 0
