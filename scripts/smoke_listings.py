# scripts/smoke_listings.py
import asyncio
import logging
import os

from premium_estate.bootstrap import build_api_client, build_details_holder, build_list_holder, build_repository
from premium_estate.config import settings
from premium_estate.domain.formatting import format_area, format_price, offer_type_label, parse_listing_id


def _quiet_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


async def main():
    _quiet_logging()

    async with build_api_client() as api:
        repo = build_repository(api)

        listing = build_list_holder(repo)
        await listing.join()
        st = listing.state
        if st.error:
            print("list error:", st.error)
        for p in st.properties:
            print(p.id, p.city, p.property_type, format_price(p.price), format_area(p.area), offer_type_label(p.offer_type))
        listing.close()

        raw_id = os.environ.get("LISTING_ID")
        if raw_id is None:
            return

        details = build_details_holder(repo)
        await details.load_details(parse_listing_id(raw_id))
        print(details.state)
        details.close()


if __name__ == "__main__":
    asyncio.run(main())
