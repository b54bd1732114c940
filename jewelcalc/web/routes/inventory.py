"""Inventory and reference-data routes.

Routes:
- POST /api/purity-levels   - Create a purity level
- GET  /api/purity-levels   - List purity levels
- POST /api/ring-sizes      - Create a ring size
- GET  /api/ring-sizes      - List ring sizes
- POST /api/inventory       - Record stock for a product/metal/purity/ring-size
"""

from __future__ import annotations

from fastapi import APIRouter

from jewelcalc.catalog import repository
from jewelcalc.db.connection import get_session
from jewelcalc.web.models import InventoryCreate, PurityLevelCreate, RingSizeCreate

router = APIRouter(prefix="/api", tags=["inventory"])


@router.post("/purity-levels", status_code=201)
async def create_purity_level(body: PurityLevelCreate):
    async with get_session() as session:
        level = await repository.create_purity_level(
            session, label=body.label, purity_percentage=body.purity_percentage
        )
        data = repository.model_to_dict(level)

    return {"success": True, "data": data}


@router.get("/purity-levels")
async def list_purity_levels():
    async with get_session() as session:
        levels = await repository.list_purity_levels(session)
        data = [repository.model_to_dict(level) for level in levels]

    return {"success": True, "data": data}


@router.post("/ring-sizes", status_code=201)
async def create_ring_size(body: RingSizeCreate):
    async with get_session() as session:
        size = await repository.create_ring_size(session, label=body.label)
        data = repository.model_to_dict(size)

    return {"success": True, "data": data}


@router.get("/ring-sizes")
async def list_ring_sizes():
    async with get_session() as session:
        sizes = await repository.list_ring_sizes(session)
        data = [repository.model_to_dict(size) for size in sizes]

    return {"success": True, "data": data}


@router.post("/inventory", status_code=201)
async def create_inventory(body: InventoryCreate):
    # Unknown ids or a duplicate combination surface as IntegrityError (400/409)
    async with get_session() as session:
        record = await repository.create_inventory(
            session,
            product_id=body.product_id,
            metal_id=body.metal_id,
            purity_id=body.purity_id,
            ring_size_id=body.ring_size_id,
            quantity=body.quantity,
        )
        data = repository.model_to_dict(record)

    return {"success": True, "data": data}
