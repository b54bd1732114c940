"""Data structures flowing through the pricing pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal

ZERO = Decimal("0")


@dataclass(frozen=True, slots=True)
class PriceInputs:
    """Fully defaulted numeric inputs for compute_price()."""

    metal_price_per_gram: Decimal = ZERO
    base_weight: Decimal = ZERO
    making_charges: Decimal = ZERO
    diamond_price_per_carat: Decimal = ZERO
    diamond_carat: Decimal = ZERO
    tax_percentage: Decimal = ZERO
    exchange_discount: Decimal = ZERO


@dataclass(frozen=True, slots=True)
class PriceBreakdown:
    metal_cost: Decimal
    diamond_cost: Decimal
    making_charges: Decimal
    base_price: Decimal
    tax_amount: Decimal
    exchange_discount: Decimal
    final_price: Decimal

    def as_dict(self) -> dict[str, float]:
        """JSON-friendly view with money as floats.

        Floats drop trailing zeros, so final_price 1500.00 becomes 1500.0;
        the two-place Decimal stays on the breakdown itself.
        """
        return {key: float(value) for key, value in asdict(self).items()}


@dataclass(frozen=True, slots=True)
class PricingContext:
    """Normalised lookup results for one product.

    purity_percentage is resolved for forward compatibility only; the
    formula does not consume it.
    """

    product_id: int
    inputs: PriceInputs
    purity_percentage: Decimal = ZERO
