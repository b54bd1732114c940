"""Resolve a product id into pricing inputs and price it.

The five lookups are independent and run concurrently; the engine only runs
once all of them have completed. Only a missing (or unavailable) product is
an error. Every other empty lookup collapses to zeros.
"""

from __future__ import annotations

import asyncio

import structlog

from jewelcalc.catalog.gateway import CatalogGateway
from jewelcalc.errors import ProductNotFoundError
from jewelcalc.pricing.engine import compute_price
from jewelcalc.pricing.models import ZERO, PriceBreakdown, PriceInputs, PricingContext

logger = structlog.get_logger(__name__)


async def assemble_pricing_context(gateway: CatalogGateway, product_id: int) -> PricingContext:
    """Fan out the five lookups and normalise their results.

    Raises:
        ProductNotFoundError: product is absent or not available
        Exception: any storage error from a lookup, unchanged
    """
    product, metal, diamond, components, purity = await asyncio.gather(
        gateway.get_available_product(product_id),
        gateway.get_metal_price(product_id),
        gateway.get_diamond_price(product_id),
        gateway.get_pricing_components(product_id),
        gateway.get_purity(product_id),
    )

    if product is None:
        logger.info("product_not_found", product_id=product_id)
        raise ProductNotFoundError(product_id)

    inputs = PriceInputs(
        metal_price_per_gram=metal.price_per_gram if metal else ZERO,
        base_weight=product.base_weight,
        making_charges=product.making_charges,
        diamond_price_per_carat=diamond.price_per_carat if diamond else ZERO,
        diamond_carat=diamond.carat if diamond else ZERO,
        tax_percentage=components.tax_percentage if components else ZERO,
        exchange_discount=components.exchange_discount if components else ZERO,
    )

    return PricingContext(
        product_id=product_id,
        inputs=inputs,
        purity_percentage=purity.purity_percentage if purity else ZERO,
    )


async def price_product(gateway: CatalogGateway, product_id: int) -> PriceBreakdown:
    """Look up everything for product_id and compute its price breakdown."""
    context = await assemble_pricing_context(gateway, product_id)
    breakdown = compute_price(context.inputs)

    logger.info(
        "price_computed",
        product_id=product_id,
        base_price=str(breakdown.base_price),
        final_price=str(breakdown.final_price),
        purity_percentage=str(context.purity_percentage),
    )
    return breakdown
