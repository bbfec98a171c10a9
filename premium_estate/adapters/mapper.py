# premium_estate/adapters/mapper.py
from __future__ import annotations

from typing import Iterable

from ..domain.types import OfferType, Property
from .wire import WireProperty, WirePropertyList

_OFFER_TYPES: dict[int, OfferType] = {
    1: OfferType.SALE,
    2: OfferType.RENT,
    3: OfferType.SOLD,
    4: OfferType.RENTED,
}


def offer_type_from_code(code: int) -> OfferType:
    """Unrecognized codes (0, negative, out of range) degrade to UNKNOWN."""
    return _OFFER_TYPES.get(code, OfferType.UNKNOWN)


def to_domain(wire: WireProperty) -> Property:
    return Property(
        id=wire.id,
        city=wire.city,
        area=wire.area,
        price=wire.price,
        professional=wire.professional,
        property_type=wire.property_type,
        offer_type=offer_type_from_code(wire.offer_type),
        bedrooms=wire.bedrooms,
        rooms=wire.rooms,
        # an empty url means no image
        image_url=wire.url or None,
    )


def to_domain_many(items: Iterable[WireProperty]) -> list[Property]:
    return [to_domain(x) for x in items]


def to_domain_list(wire: WirePropertyList) -> list[Property]:
    # totalCount is dropped: there is no pagination to feed it into.
    return to_domain_many(wire.items)
