"""Shared Pydantic models for the JewelCalc web API.

Usage:
    from jewelcalc.web.models import MetalCreate

    @router.post("/create")
    async def create_metal(body: MetalCreate):
        ...
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    """Accepts the camelCase keys the storefront sends as well as snake_case."""

    model_config = ConfigDict(populate_by_name=True)


# ============================================================================
# Pricing Models
# ============================================================================


class PricePayload(CamelModel):
    product_id: Optional[int] = Field(default=None, alias="prodId")


class PriceRequest(BaseModel):
    """Body of POST /api/products/calc-price: {"payload": {"prodId": 1}}."""

    payload: PricePayload = Field(default_factory=PricePayload)


# ============================================================================
# Catalog Create Models
# ============================================================================
#
# Required fields are Optional here so a missing one yields the catalog's
# own 400 "Missing required fields" instead of FastAPI's 422.


class ProductCreate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    base_weight: Optional[Decimal] = Field(default=None, alias="baseWeight", ge=0)
    making_charges: Optional[Decimal] = Field(default=None, alias="makingCharges", ge=0)
    is_bis_hallmarked: bool = Field(default=False, alias="isBISHallmarked")
    is_gia_certified: bool = Field(default=False, alias="isGIACertified")
    is_available: bool = Field(default=True, alias="isAvailable")

    def missing_fields(self) -> list[str]:
        return [
            name
            for name in ("name", "base_weight", "making_charges")
            if not getattr(self, name)
        ]


class MetalCreate(CamelModel):
    name: Optional[str] = None
    purity: Optional[str] = None
    color: Optional[str] = None
    price_per_gram: Optional[Decimal] = Field(default=None, alias="pricePerGram", ge=0)
    is_alloy: bool = Field(default=False, alias="isAlloy")
    description: Optional[str] = None

    def missing_fields(self) -> list[str]:
        return [name for name in ("name", "price_per_gram") if not getattr(self, name)]


class DiamondCreate(CamelModel):
    carat: Optional[Decimal] = Field(default=None, ge=0)
    quality: Optional[str] = None
    price_per_carat: Optional[Decimal] = Field(default=None, alias="pricePerCarat", ge=0)

    def missing_fields(self) -> list[str]:
        return [name for name in ("carat", "price_per_carat") if not getattr(self, name)]


# ============================================================================
# Association & Inventory Models
# ============================================================================


class MetalLink(CamelModel):
    metal_id: int = Field(alias="metalId")


class DiamondLink(CamelModel):
    diamond_id: int = Field(alias="diamondId")


class PricingComponentsUpdate(CamelModel):
    tax_percentage: Decimal = Field(default=Decimal("0"), alias="taxPercentage", ge=0, le=100)
    exchange_discount: Decimal = Field(default=Decimal("0"), alias="exchangeDiscount", ge=0)


class PurityLevelCreate(CamelModel):
    label: str
    purity_percentage: Decimal = Field(alias="purityPercentage", ge=0, le=100)


class RingSizeCreate(CamelModel):
    label: str


class InventoryCreate(CamelModel):
    product_id: int = Field(alias="prodId")
    metal_id: int = Field(alias="metalId")
    purity_id: int = Field(alias="purityId")
    ring_size_id: int = Field(alias="ringSizeId")
    quantity: int = 0


__all__ = [
    "PricePayload",
    "PriceRequest",
    "ProductCreate",
    "MetalCreate",
    "DiamondCreate",
    "MetalLink",
    "DiamondLink",
    "PricingComponentsUpdate",
    "PurityLevelCreate",
    "RingSizeCreate",
    "InventoryCreate",
]
