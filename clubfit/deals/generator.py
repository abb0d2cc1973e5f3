from __future__ import annotations

import logging
from decimal import Decimal

from ..config import DEFAULT_FITTING_CONFIG, FittingConfig
from .models import Retailer, RetailerDealCreate
from .pricing import convert_price, to_minor_units

logger = logging.getLogger(__name__)

OUT_OF_STOCK_SHIPPING_TIME = "Ships in 1-2 weeks"

# UK golf retailers
RETAILERS: list[Retailer] = [
    Retailer(
        name="American Golf",
        price_adjustment=0,
        shipping=Decimal("0"),
        in_stock=True,
        image_url_template="https://www.americangolf.co.uk/on/demandware.static/-/Sites-master-catalog/default/dwd79c3d5e/images-square/zoom/{club_id}-1.jpg",
    ),
    Retailer(
        name="Clubhouse Golf",
        price_adjustment=-15,
        shipping=Decimal("4.99"),
        in_stock=True,
        image_url_template="https://www.clubhousegolf.co.uk/acatalog/{club_id}-1.jpg",
    ),
    Retailer(
        name="Golf Online",
        price_adjustment=10,
        shipping=Decimal("0"),
        in_stock=True,
        image_url_template="https://www.golfonline.co.uk/media/catalog/product/{club_id}.jpg",
    ),
    Retailer(
        name="Snainton Golf",
        price_adjustment=-5,
        shipping=Decimal("3.99"),
        in_stock=False,
        image_url_template="https://www.snaintongolf.co.uk/images/products/{club_id}.jpg",
    ),
]


def generate_deals(
    club_id: int,
    base_price: int,
    retailers: list[Retailer] | None = None,
    config: FittingConfig = DEFAULT_FITTING_CONFIG,
) -> list[RetailerDealCreate]:
    """One deal per retailer for a stored club. Deterministic for fixed inputs."""
    retailers = RETAILERS if retailers is None else retailers
    local_price = convert_price(base_price, config.gbp_conversion_rate)

    deals = [
        RetailerDealCreate(
            retailer_name=retailer.name,
            price=local_price + retailer.price_adjustment,
            shipping=to_minor_units(retailer.shipping),
            in_stock=retailer.in_stock,
            shipping_time=None if retailer.in_stock else OUT_OF_STOCK_SHIPPING_TIME,
            image_url=retailer.image_url_template.format(club_id=club_id),
            club_id=club_id,
        )
        for retailer in retailers
    ]
    logger.debug("Generated %d deals for club %s at %s pence", len(deals), club_id, local_price)
    return deals
