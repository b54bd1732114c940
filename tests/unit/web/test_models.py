"""Tests for jewelcalc.web.models - Request body models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from jewelcalc.web.models import (
    DiamondCreate,
    InventoryCreate,
    MetalCreate,
    PriceRequest,
    PricingComponentsUpdate,
    ProductCreate,
)


class TestPriceRequest:
    def test_camel_case_product_id(self):
        assert PriceRequest.model_validate({"payload": {"prodId": 4}}).payload.product_id == 4

    def test_missing_payload_defaults_to_no_product(self):
        assert PriceRequest.model_validate({}).payload.product_id is None


class TestProductCreate:
    def test_aliases_and_defaults(self):
        body = ProductCreate.model_validate(
            {"name": "Ring", "baseWeight": "5.5", "makingCharges": 1500, "isGIACertified": True}
        )

        assert body.base_weight == Decimal("5.5")
        assert body.is_gia_certified is True
        assert body.is_bis_hallmarked is False
        assert body.is_available is True
        assert body.missing_fields() == []

    def test_missing_fields_lists_each_absent_field(self):
        assert ProductCreate().missing_fields() == ["name", "base_weight", "making_charges"]

    def test_empty_name_counts_as_missing(self):
        body = ProductCreate(name="", base_weight=Decimal("1"), making_charges=Decimal("1"))

        assert body.missing_fields() == ["name"]

    def test_negative_making_charges_rejected(self):
        with pytest.raises(ValidationError):
            ProductCreate(name="Ring", base_weight=Decimal("1"), making_charges=Decimal("-1"))


class TestOtherModels:
    def test_metal_missing_fields(self):
        assert MetalCreate(name="Gold").missing_fields() == ["price_per_gram"]

    def test_diamond_missing_fields(self):
        assert DiamondCreate(carat=Decimal("0.5")).missing_fields() == ["price_per_carat"]

    def test_pricing_components_default_to_zero(self):
        body = PricingComponentsUpdate()

        assert body.tax_percentage == Decimal("0")
        assert body.exchange_discount == Decimal("0")

    def test_inventory_snake_case_names_accepted(self):
        body = InventoryCreate(product_id=1, metal_id=2, purity_id=3, ring_size_id=4)

        assert body.quantity == 0
