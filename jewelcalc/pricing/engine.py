"""Sale price computation.

    base_price  = metal_price_per_gram * base_weight
                + making_charges
                + diamond_price_per_carat * diamond_carat
    tax_amount  = base_price * tax_percentage / 100
    final_price = round2(base_price + tax_amount - exchange_discount)

Only final_price is rounded. A discount larger than base_price + tax_amount
yields a negative final_price; that is passed through, not clamped.

All arithmetic runs in a local decimal context sized to the inputs, so
intermediate costs are exact whatever their magnitude.
"""

from __future__ import annotations

from dataclasses import fields
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from numbers import Number
from typing import Iterable

from jewelcalc.errors import InvalidInputError
from jewelcalc.pricing.models import PriceBreakdown, PriceInputs

HUNDRED = Decimal("100")
CENT = Decimal("0.01")

# Headroom for carries from the three additions and the /100 shift
_PRECISION_SLACK = 8


def _digits(value: Decimal) -> int:
    """Integer plus fractional digits needed to hold value exactly."""
    integer_digits = max(value.adjusted() + 1, 1)
    fraction_digits = max(-value.as_tuple().exponent, 0)
    return integer_digits + fraction_digits


def _exact_precision(values: Iterable[Decimal]) -> int:
    # A product never needs more digits than its factors combined
    return sum(_digits(v) for v in values) + _PRECISION_SLACK


def round2(value: Decimal) -> Decimal:
    """Quantize to two decimal places, half-up."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _digits(value) + 3)
        ctx.Emax, ctx.Emin = MAX_EMAX, MIN_EMIN
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_decimal(field_name: str, value: object) -> Decimal:
    """Coerce a numeric input to a finite Decimal.

    Floats go through str() so 5.5 becomes Decimal("5.5"), not its binary
    expansion.

    Raises:
        InvalidInputError: for NaN, infinities, booleans and non-numbers
    """
    if isinstance(value, bool) or not isinstance(value, (Number, Decimal, str)):
        raise InvalidInputError(field_name, value)

    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise InvalidInputError(field_name, value) from None

    if not result.is_finite():
        raise InvalidInputError(field_name, value)
    return result


def compute_price(inputs: PriceInputs) -> PriceBreakdown:
    """Compute the price breakdown for fully defaulted inputs.

    Pure and deterministic: identical inputs always give identical output.

    Raises:
        InvalidInputError: if any input is not a finite number
    """
    values = {f.name: to_decimal(f.name, getattr(inputs, f.name)) for f in fields(inputs)}

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _exact_precision(values.values()))
        ctx.Emax, ctx.Emin = MAX_EMAX, MIN_EMIN

        metal_cost = values["metal_price_per_gram"] * values["base_weight"]
        diamond_cost = values["diamond_price_per_carat"] * values["diamond_carat"]
        base_price = metal_cost + values["making_charges"] + diamond_cost
        tax_amount = base_price * values["tax_percentage"] / HUNDRED
        final_price = round2(base_price + tax_amount - values["exchange_discount"])

    return PriceBreakdown(
        metal_cost=metal_cost,
        diamond_cost=diamond_cost,
        making_charges=values["making_charges"],
        base_price=base_price,
        tax_amount=tax_amount,
        exchange_discount=values["exchange_discount"],
        final_price=final_price,
    )
