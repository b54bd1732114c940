"""Catalog lookups backing price assembly and availability checks.

CatalogGateway is the storage capability handed to the pricing core; the
SQLAlchemy implementation below is what the web app and CLI inject. Every
lookup returns None when no row matches so callers decide the default.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jewelcalc.catalog.records import (
    DiamondPriceRecord,
    MetalPriceRecord,
    PricingComponentsRecord,
    ProductRecord,
    PurityRecord,
)
from jewelcalc.db.models import (
    DiamondModel,
    InventoryModel,
    MetalModel,
    PricingComponentsModel,
    ProductDiamondModel,
    ProductMetalModel,
    ProductModel,
    PurityLevelModel,
)

logger = structlog.get_logger(__name__)


class CatalogGateway(Protocol):
    """Read-only lookups keyed by product id."""

    async def get_available_product(self, product_id: int) -> ProductRecord | None: ...

    async def get_metal_price(self, product_id: int) -> MetalPriceRecord | None: ...

    async def get_diamond_price(self, product_id: int) -> DiamondPriceRecord | None: ...

    async def get_pricing_components(self, product_id: int) -> PricingComponentsRecord | None: ...

    async def get_purity(self, product_id: int) -> PurityRecord | None: ...

    async def get_inventory_quantity(
        self, product_id: int, metal_id: int, purity_id: int, ring_size_id: int
    ) -> int | None: ...


class SqlCatalogGateway:
    """CatalogGateway over async SQLAlchemy.

    session_factory is any zero-argument callable returning an AsyncSession
    (the sessionmaker from get_session_factory(), or an async_sessionmaker).
    Each lookup opens its own short-lived session from it, so the
    pricing lookups can be awaited concurrently without sharing a session.
    Where an association allows several rows, the lowest association id wins.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory

    async def _first(self, stmt):
        async with self._session_factory() as session:
            result = await session.execute(stmt.limit(1))
            return result.first()

    async def get_available_product(self, product_id: int) -> ProductRecord | None:
        row = await self._first(
            select(ProductModel.id, ProductModel.base_weight, ProductModel.making_charges).where(
                ProductModel.id == product_id,
                ProductModel.is_available.is_(True),
            )
        )
        if row is None:
            return None
        return ProductRecord(id=row.id, base_weight=row.base_weight, making_charges=row.making_charges)

    async def get_metal_price(self, product_id: int) -> MetalPriceRecord | None:
        row = await self._first(
            select(MetalModel.id, MetalModel.price_per_gram)
            .join(ProductMetalModel, ProductMetalModel.metal_id == MetalModel.id)
            .where(ProductMetalModel.product_id == product_id)
            .order_by(ProductMetalModel.id.asc())
        )
        if row is None:
            return None
        return MetalPriceRecord(metal_id=row.id, price_per_gram=row.price_per_gram)

    async def get_diamond_price(self, product_id: int) -> DiamondPriceRecord | None:
        row = await self._first(
            select(DiamondModel.id, DiamondModel.carat, DiamondModel.price_per_carat)
            .join(ProductDiamondModel, ProductDiamondModel.diamond_id == DiamondModel.id)
            .where(ProductDiamondModel.product_id == product_id)
            .order_by(ProductDiamondModel.id.asc())
        )
        if row is None:
            return None
        return DiamondPriceRecord(
            diamond_id=row.id, carat=row.carat, price_per_carat=row.price_per_carat
        )

    async def get_pricing_components(self, product_id: int) -> PricingComponentsRecord | None:
        row = await self._first(
            select(
                PricingComponentsModel.tax_percentage,
                PricingComponentsModel.exchange_discount,
            ).where(PricingComponentsModel.product_id == product_id)
        )
        if row is None:
            return None
        return PricingComponentsRecord(
            tax_percentage=row.tax_percentage, exchange_discount=row.exchange_discount
        )

    async def get_purity(self, product_id: int) -> PurityRecord | None:
        # inventory ⋈ metals ⋈ purity_levels, first inventory row for the product
        row = await self._first(
            select(PurityLevelModel.id, PurityLevelModel.purity_percentage)
            .select_from(InventoryModel)
            .join(MetalModel, MetalModel.id == InventoryModel.metal_id)
            .join(PurityLevelModel, PurityLevelModel.id == InventoryModel.purity_id)
            .where(InventoryModel.product_id == product_id)
            .order_by(InventoryModel.id.asc())
        )
        if row is None:
            return None
        return PurityRecord(purity_id=row.id, purity_percentage=row.purity_percentage)

    async def get_inventory_quantity(
        self, product_id: int, metal_id: int, purity_id: int, ring_size_id: int
    ) -> int | None:
        row = await self._first(
            select(InventoryModel.quantity).where(
                InventoryModel.product_id == product_id,
                InventoryModel.metal_id == metal_id,
                InventoryModel.purity_id == purity_id,
                InventoryModel.ring_size_id == ring_size_id,
            )
        )
        if row is None:
            logger.debug(
                "inventory_combination_missing",
                product_id=product_id,
                metal_id=metal_id,
                purity_id=purity_id,
                ring_size_id=ring_size_id,
            )
            return None
        return row.quantity
