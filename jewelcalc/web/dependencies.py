"""Shared dependencies for JewelCalc web routes.

Dependencies are injected using FastAPI's Depends() system, which lets tests
swap the storage capability through app.dependency_overrides.

Usage:
    from fastapi import Depends
    from jewelcalc.web.dependencies import get_catalog_gateway

    @router.post("/calc-price")
    async def calc_price(gateway: CatalogGateway = Depends(get_catalog_gateway)):
        ...
"""

from __future__ import annotations

from jewelcalc.catalog.gateway import CatalogGateway, SqlCatalogGateway
from jewelcalc.db.connection import get_session_factory


def get_catalog_gateway() -> CatalogGateway:
    """Catalog lookups bound to the application's session factory."""
    return SqlCatalogGateway(get_session_factory())
