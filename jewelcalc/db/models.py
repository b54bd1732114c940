"""SQLAlchemy async database models for JewelCalc.

Maps the jewellery catalog schema: products, metals, diamonds, their
association tables, per-product pricing components and the inventory matrix.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class ProductModel(Base):
    """Catalog product (ring, pendant, ...)."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)

    # Pricing basis
    base_weight: Mapped[Decimal] = mapped_column(Numeric(10, 3), nullable=False)  # grams
    making_charges: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    # Certification
    is_bis_hallmarked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_gia_certified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    is_available: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        CheckConstraint("base_weight >= 0", name="check_product_base_weight"),
        CheckConstraint("making_charges >= 0", name="check_product_making_charges"),
    )


class MetalModel(Base):
    """Metal with its current price per gram."""

    __tablename__ = "metals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    purity: Mapped[str | None] = mapped_column(Text)  # "22K", "925", ...
    color: Mapped[str | None] = mapped_column(Text)
    price_per_gram: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    is_alloy: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class DiamondModel(Base):
    """Diamond grade with price per carat."""

    __tablename__ = "diamonds"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    carat: Mapped[Decimal] = mapped_column(Numeric(8, 3), nullable=False)
    quality: Mapped[str | None] = mapped_column(Text)
    price_per_carat: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class ProductMetalModel(Base):
    """Product ↔ metal association. Lowest id wins when several exist."""

    __tablename__ = "product_metal"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    metal_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("metals.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (UniqueConstraint("product_id", "metal_id", name="uq_product_metal"),)


class ProductDiamondModel(Base):
    """Product ↔ diamond association. Lowest id wins when several exist."""

    __tablename__ = "product_diamond"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    diamond_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("diamonds.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (UniqueConstraint("product_id", "diamond_id", name="uq_product_diamond"),)


class PricingComponentsModel(Base):
    """Per-product tax percentage and flat exchange discount."""

    __tablename__ = "pricing_components"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    tax_percentage: Mapped[Decimal] = mapped_column(
        Numeric(5, 2), nullable=False, default=Decimal("0")
    )
    exchange_discount: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0")
    )

    __table_args__ = (
        CheckConstraint(
            "tax_percentage >= 0 AND tax_percentage <= 100",
            name="check_pricing_tax_percentage",
        ),
    )


class PurityLevelModel(Base):
    """Alloy purity level (e.g. 22K = 91.6%)."""

    __tablename__ = "purity_levels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    label: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    purity_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)


class RingSizeModel(Base):
    """Ring size reference data."""

    __tablename__ = "ring_sizes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    label: Mapped[str] = mapped_column(Text, nullable=False, unique=True)


class InventoryModel(Base):
    """Stock for one product/metal/purity/ring-size combination."""

    __tablename__ = "inventory"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False
    )
    metal_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("metals.id", ondelete="CASCADE"), nullable=False
    )
    purity_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("purity_levels.id", ondelete="CASCADE"), nullable=False
    )
    ring_size_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("ring_sizes.id", ondelete="CASCADE"), nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint(
            "product_id", "metal_id", "purity_id", "ring_size_id", name="uq_inventory_combination"
        ),
        Index("idx_inventory_product", "product_id"),
    )
