"""Database layer for JewelCalc with async SQLAlchemy."""

from jewelcalc.db.connection import get_session, get_session_factory, init_db
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

__all__ = [
    "Base",
    "ProductModel",
    "MetalModel",
    "DiamondModel",
    "ProductMetalModel",
    "ProductDiamondModel",
    "PricingComponentsModel",
    "PurityLevelModel",
    "RingSizeModel",
    "InventoryModel",
    "get_session",
    "get_session_factory",
    "init_db",
]
