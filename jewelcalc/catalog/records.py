"""Lookup results returned by a CatalogGateway."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class ProductRecord:
    id: int
    base_weight: Decimal
    making_charges: Decimal


@dataclass(frozen=True, slots=True)
class MetalPriceRecord:
    metal_id: int
    price_per_gram: Decimal


@dataclass(frozen=True, slots=True)
class DiamondPriceRecord:
    diamond_id: int
    carat: Decimal
    price_per_carat: Decimal


@dataclass(frozen=True, slots=True)
class PricingComponentsRecord:
    tax_percentage: Decimal
    exchange_discount: Decimal


@dataclass(frozen=True, slots=True)
class PurityRecord:
    purity_id: int
    purity_percentage: Decimal
