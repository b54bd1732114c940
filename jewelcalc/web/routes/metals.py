"""Metal routes.

Routes:
- POST /api/metals/create       - Create a metal
- GET  /api/metals              - List metals
- GET  /api/metals/export       - Download all metals as CSV
- GET  /api/metals/{metal_id}   - Metal details
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from jewelcalc.catalog import repository
from jewelcalc.catalog.export import export_metals_csv
from jewelcalc.db.connection import get_session
from jewelcalc.web.models import MetalCreate

router = APIRouter(prefix="/api/metals", tags=["metals"])


@router.post("/create", status_code=201)
async def create_metal(body: MetalCreate):
    if body.missing_fields():
        raise HTTPException(status_code=400, detail="Missing required fields")

    async with get_session() as session:
        metal = await repository.create_metal(
            session,
            name=body.name,
            price_per_gram=body.price_per_gram,
            purity=body.purity,
            color=body.color,
            is_alloy=body.is_alloy,
            description=body.description,
        )
        data = repository.model_to_dict(metal)

    return {"success": True, "data": data}


@router.get("")
async def list_metals():
    async with get_session() as session:
        metals = await repository.list_metals(session)
        data = [repository.model_to_dict(m) for m in metals]

    return {"success": True, "data": data}


@router.get("/export")
async def export_metals():
    """Stream every metal as CSV."""

    async def _rows():
        async with get_session() as session:
            async for chunk in export_metals_csv(session):
                yield chunk

    filename = f"metals_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    return StreamingResponse(
        _rows(),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/{metal_id}")
async def get_metal(metal_id: int):
    async with get_session() as session:
        metal = await repository.get_metal(session, metal_id)
        if metal is None:
            raise HTTPException(status_code=404, detail="Metal not found")
        data = repository.model_to_dict(metal)

    return {"success": True, "data": data}
