"""Unit tests for the pricing engine.

Covers the fixed formula, rounding of the final price only, and rejection of
non-finite inputs.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from jewelcalc.errors import InvalidInputError
from jewelcalc.pricing.engine import compute_price, round2, to_decimal
from jewelcalc.pricing.models import PriceInputs


class TestFormula:
    """Reference scenarios."""

    def test_reference_ring(self, sample_inputs):
        breakdown = compute_price(sample_inputs)

        assert breakdown.metal_cost == Decimal("30250")
        assert breakdown.diamond_cost == Decimal("75000")
        assert breakdown.making_charges == Decimal("1500")
        assert breakdown.base_price == Decimal("106750")
        assert breakdown.tax_amount == Decimal("3202.5")
        assert breakdown.exchange_discount == Decimal("200")
        assert breakdown.final_price == Decimal("109752.50")

    def test_making_charges_only(self):
        breakdown = compute_price(PriceInputs(making_charges=Decimal("1500")))

        assert breakdown.metal_cost == 0
        assert breakdown.diamond_cost == 0
        assert breakdown.tax_amount == 0
        assert str(breakdown.final_price) == "1500.00"

    def test_tax_applies_to_full_base_price(self):
        inputs = PriceInputs(
            metal_price_per_gram=Decimal("100"),
            base_weight=Decimal("2"),
            making_charges=Decimal("50"),
            tax_percentage=Decimal("10"),
        )
        breakdown = compute_price(inputs)

        assert breakdown.base_price == Decimal("250")
        assert breakdown.tax_amount == Decimal("25")
        assert breakdown.final_price == Decimal("275.00")

    def test_discount_applied_after_tax(self):
        inputs = PriceInputs(
            making_charges=Decimal("1000"),
            tax_percentage=Decimal("10"),
            exchange_discount=Decimal("100"),
        )

        # (1000 + 100) - 100, not (1000 - 100) * 1.1
        assert compute_price(inputs).final_price == Decimal("1000.00")

    def test_negative_final_price_is_not_clamped(self):
        inputs = PriceInputs(making_charges=Decimal("100"), exchange_discount=Decimal("250"))

        breakdown = compute_price(inputs)

        assert breakdown.final_price == Decimal("-150.00")

    def test_tax_percentage_is_not_clamped(self):
        inputs = PriceInputs(making_charges=Decimal("100"), tax_percentage=Decimal("150"))

        assert compute_price(inputs).final_price == Decimal("250.00")


class TestRounding:
    """Only the final price is rounded."""

    def test_intermediates_keep_full_precision(self):
        inputs = PriceInputs(
            metal_price_per_gram=Decimal("5499.99"),
            base_weight=Decimal("3.333"),
            tax_percentage=Decimal("3"),
        )
        breakdown = compute_price(inputs)

        assert breakdown.metal_cost == Decimal("18331.46667")
        assert breakdown.tax_amount == Decimal("549.9440001")
        assert breakdown.final_price == Decimal("18881.41")

    @pytest.mark.parametrize(
        "making, expected",
        [
            (Decimal("10.005"), "10.01"),
            (Decimal("10.004"), "10.00"),
            (Decimal("0.1"), "0.10"),
            (Decimal("7"), "7.00"),
            (Decimal("-0.005"), "-0.01"),
        ],
    )
    def test_final_price_has_exactly_two_places(self, making, expected):
        breakdown = compute_price(PriceInputs(making_charges=making))

        assert str(breakdown.final_price) == expected
        assert breakdown.final_price.as_tuple().exponent == -2

    def test_large_finite_amount_is_priced(self):
        breakdown = compute_price(PriceInputs(making_charges=Decimal("1e30")))

        assert breakdown.final_price == Decimal("1e30")
        assert str(breakdown.final_price) == "1" + "0" * 30 + ".00"

    def test_wide_products_are_not_rounded(self):
        weight = Decimal("99999999999999999999.999")
        inputs = PriceInputs(metal_price_per_gram=weight, base_weight=weight)

        breakdown = compute_price(inputs)

        # (10**20 - 0.001) ** 2, 46 significant digits
        exact = Decimal("9" * 22 + "8" + "0" * 17 + ".000001")
        assert breakdown.metal_cost == exact
        assert breakdown.final_price == Decimal("9" * 22 + "8" + "0" * 17 + ".00")

    def test_round2_handles_values_beyond_default_precision(self):
        assert str(round2(Decimal("12345678901234567890123456789.125"))) == (
            "12345678901234567890123456789.13"
        )

    def test_round2_is_half_up(self):
        assert round2(Decimal("2.675")) == Decimal("2.68")
        assert round2(Decimal("2.665")) == Decimal("2.67")


class TestDeterminism:
    def test_identical_inputs_give_identical_output(self, sample_inputs):
        first = compute_price(sample_inputs)
        second = compute_price(replace(sample_inputs))

        assert first == second
        assert first.as_dict() == second.as_dict()

    def test_float_inputs_match_decimal_inputs(self, sample_inputs):
        float_inputs = PriceInputs(
            metal_price_per_gram=5500,
            base_weight=5.5,
            making_charges=1500,
            diamond_price_per_carat=50000,
            diamond_carat=1.5,
            tax_percentage=3,
            exchange_discount=200,
        )

        assert compute_price(float_inputs) == compute_price(sample_inputs)


class TestInvalidInput:
    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf"), Decimal("NaN")])
    def test_non_finite_input_is_rejected(self, bad):
        inputs = PriceInputs(making_charges=Decimal("100"), base_weight=bad)

        with pytest.raises(InvalidInputError) as exc_info:
            compute_price(inputs)

        assert exc_info.value.field_name == "base_weight"

    @pytest.mark.parametrize("bad", [None, "abc", True, object()])
    def test_non_numeric_input_is_rejected(self, bad):
        with pytest.raises(InvalidInputError):
            to_decimal("tax_percentage", bad)

    def test_numeric_string_is_accepted(self):
        assert to_decimal("base_weight", "5.5") == Decimal("5.5")


def test_as_dict_returns_floats(sample_inputs):
    data = compute_price(sample_inputs).as_dict()

    assert data == {
        "metal_cost": 30250.0,
        "diamond_cost": 75000.0,
        "making_charges": 1500.0,
        "base_price": 106750.0,
        "tax_amount": 3202.5,
        "exchange_discount": 200.0,
        "final_price": 109752.5,
    }


def test_as_dict_final_price_is_float_of_two_place_decimal():
    breakdown = compute_price(PriceInputs(making_charges=Decimal("1500")))

    assert str(breakdown.final_price) == "1500.00"
    assert breakdown.as_dict()["final_price"] == 1500.0
    assert isinstance(breakdown.as_dict()["final_price"], float)
