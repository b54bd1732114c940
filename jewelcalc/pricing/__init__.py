"""Pricing engine and lookup assembly."""

from jewelcalc.pricing.assembly import assemble_pricing_context, price_product
from jewelcalc.pricing.engine import compute_price, round2
from jewelcalc.pricing.models import PriceBreakdown, PriceInputs, PricingContext

__all__ = [
    "PriceInputs",
    "PriceBreakdown",
    "PricingContext",
    "compute_price",
    "round2",
    "assemble_pricing_context",
    "price_product",
]
