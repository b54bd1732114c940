"""Catalog lookups, availability checks and CRUD queries."""

from jewelcalc.catalog.availability import AvailabilityResult, StockStatus, check_availability
from jewelcalc.catalog.gateway import CatalogGateway, SqlCatalogGateway

__all__ = [
    "AvailabilityResult",
    "StockStatus",
    "check_availability",
    "CatalogGateway",
    "SqlCatalogGateway",
]
