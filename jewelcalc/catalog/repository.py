"""Database queries for catalog CRUD (products, metals, diamonds, inventory)."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Sequence

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from jewelcalc.db.models import (
    Base,
    DiamondModel,
    InventoryModel,
    MetalModel,
    PricingComponentsModel,
    ProductDiamondModel,
    ProductMetalModel,
    ProductModel,
    PurityLevelModel,
    RingSizeModel,
)


def model_to_dict(model: Base) -> dict[str, Any]:
    """Column values of a model instance, with Decimal → float and datetime → ISO."""
    data: dict[str, Any] = {}
    for column in inspect(model).mapper.column_attrs:
        value = getattr(model, column.key)
        if isinstance(value, Decimal):
            value = float(value)
        elif isinstance(value, datetime):
            value = value.isoformat()
        data[column.key] = value
    return data


async def _add(session: AsyncSession, model: Base) -> Base:
    session.add(model)
    await session.flush()
    await session.refresh(model)
    return model


async def _all(session: AsyncSession, model_cls: type[Base]) -> Sequence[Base]:
    result = await session.execute(select(model_cls).order_by(model_cls.id))
    return result.scalars().all()


# ============================================================================
# Products
# ============================================================================


async def create_product(
    session: AsyncSession,
    name: str,
    base_weight: Decimal,
    making_charges: Decimal,
    description: str | None = None,
    is_bis_hallmarked: bool = False,
    is_gia_certified: bool = False,
    is_available: bool = True,
) -> ProductModel:
    return await _add(
        session,
        ProductModel(
            name=name,
            description=description,
            base_weight=base_weight,
            making_charges=making_charges,
            is_bis_hallmarked=is_bis_hallmarked,
            is_gia_certified=is_gia_certified,
            is_available=is_available,
        ),
    )


async def list_products(session: AsyncSession) -> Sequence[ProductModel]:
    return await _all(session, ProductModel)


async def get_product(session: AsyncSession, product_id: int) -> ProductModel | None:
    return await session.get(ProductModel, product_id)


async def link_metal(session: AsyncSession, product_id: int, metal_id: int) -> ProductMetalModel:
    return await _add(session, ProductMetalModel(product_id=product_id, metal_id=metal_id))


async def link_diamond(
    session: AsyncSession, product_id: int, diamond_id: int
) -> ProductDiamondModel:
    return await _add(session, ProductDiamondModel(product_id=product_id, diamond_id=diamond_id))


async def upsert_pricing_components(
    session: AsyncSession,
    product_id: int,
    tax_percentage: Decimal,
    exchange_discount: Decimal,
) -> PricingComponentsModel:
    """Create or replace the tax/discount row for a product."""
    result = await session.execute(
        select(PricingComponentsModel).where(PricingComponentsModel.product_id == product_id)
    )
    components = result.scalar_one_or_none()

    if components is None:
        return await _add(
            session,
            PricingComponentsModel(
                product_id=product_id,
                tax_percentage=tax_percentage,
                exchange_discount=exchange_discount,
            ),
        )

    components.tax_percentage = tax_percentage
    components.exchange_discount = exchange_discount
    await session.flush()
    return components


# ============================================================================
# Metals & Diamonds
# ============================================================================


async def create_metal(
    session: AsyncSession,
    name: str,
    price_per_gram: Decimal,
    purity: str | None = None,
    color: str | None = None,
    is_alloy: bool = False,
    description: str | None = None,
) -> MetalModel:
    return await _add(
        session,
        MetalModel(
            name=name,
            purity=purity,
            color=color,
            price_per_gram=price_per_gram,
            is_alloy=is_alloy,
            description=description,
        ),
    )


async def list_metals(session: AsyncSession) -> Sequence[MetalModel]:
    return await _all(session, MetalModel)


async def get_metal(session: AsyncSession, metal_id: int) -> MetalModel | None:
    return await session.get(MetalModel, metal_id)


async def create_diamond(
    session: AsyncSession,
    carat: Decimal,
    price_per_carat: Decimal,
    quality: str | None = None,
) -> DiamondModel:
    return await _add(
        session, DiamondModel(carat=carat, quality=quality, price_per_carat=price_per_carat)
    )


async def list_diamonds(session: AsyncSession) -> Sequence[DiamondModel]:
    return await _all(session, DiamondModel)


async def get_diamond(session: AsyncSession, diamond_id: int) -> DiamondModel | None:
    return await session.get(DiamondModel, diamond_id)


# ============================================================================
# Reference data & inventory
# ============================================================================


async def create_purity_level(
    session: AsyncSession, label: str, purity_percentage: Decimal
) -> PurityLevelModel:
    return await _add(session, PurityLevelModel(label=label, purity_percentage=purity_percentage))


async def list_purity_levels(session: AsyncSession) -> Sequence[PurityLevelModel]:
    return await _all(session, PurityLevelModel)


async def create_ring_size(session: AsyncSession, label: str) -> RingSizeModel:
    return await _add(session, RingSizeModel(label=label))


async def list_ring_sizes(session: AsyncSession) -> Sequence[RingSizeModel]:
    return await _all(session, RingSizeModel)


async def create_inventory(
    session: AsyncSession,
    product_id: int,
    metal_id: int,
    purity_id: int,
    ring_size_id: int,
    quantity: int,
) -> InventoryModel:
    return await _add(
        session,
        InventoryModel(
            product_id=product_id,
            metal_id=metal_id,
            purity_id=purity_id,
            ring_size_id=ring_size_id,
            quantity=quantity,
        ),
    )
