"""Pytest configuration and fixtures for JewelCalc tests.

Provides common fixtures for testing.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from jewelcalc.catalog.records import (
    DiamondPriceRecord,
    MetalPriceRecord,
    PricingComponentsRecord,
    ProductRecord,
    PurityRecord,
)
from jewelcalc.config import reset_config
from jewelcalc.pricing.models import PriceInputs
from tests.fakes import FakeCatalogGateway


@pytest.fixture
def solitaire_ring() -> ProductRecord:
    """5.5 g ring with 1500 making charges."""
    return ProductRecord(id=1, base_weight=Decimal("5.5"), making_charges=Decimal("1500"))


@pytest.fixture
def full_gateway(solitaire_ring: ProductRecord) -> FakeCatalogGateway:
    """Gateway where every lookup returns a row."""
    return FakeCatalogGateway(
        product=solitaire_ring,
        metal=MetalPriceRecord(metal_id=2, price_per_gram=Decimal("5500")),
        diamond=DiamondPriceRecord(
            diamond_id=7, carat=Decimal("1.5"), price_per_carat=Decimal("50000")
        ),
        components=PricingComponentsRecord(
            tax_percentage=Decimal("3"), exchange_discount=Decimal("200")
        ),
        purity=PurityRecord(purity_id=3, purity_percentage=Decimal("91.6")),
    )


@pytest.fixture
def sample_inputs() -> PriceInputs:
    """Inputs for the reference ring: 109752.50 final price."""
    return PriceInputs(
        metal_price_per_gram=Decimal("5500"),
        base_weight=Decimal("5.5"),
        making_charges=Decimal("1500"),
        diamond_price_per_carat=Decimal("50000"),
        diamond_carat=Decimal("1.5"),
        tax_percentage=Decimal("3"),
        exchange_discount=Decimal("200"),
    )


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ACCESS_SECRET", "test-access-secret")
    monkeypatch.setenv("REFRESH_SECRET", "test-refresh-secret")
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    reset_config()
    yield
    reset_config()
