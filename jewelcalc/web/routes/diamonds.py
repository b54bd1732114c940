"""Diamond routes.

Routes:
- POST /api/diamonds/create         - Create a diamond grade
- GET  /api/diamonds                - List diamonds
- GET  /api/diamonds/{diamond_id}   - Diamond details
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from jewelcalc.catalog import repository
from jewelcalc.db.connection import get_session
from jewelcalc.web.models import DiamondCreate

router = APIRouter(prefix="/api/diamonds", tags=["diamonds"])


@router.post("/create", status_code=201)
async def create_diamond(body: DiamondCreate):
    if body.missing_fields():
        raise HTTPException(status_code=400, detail="Missing required fields")

    async with get_session() as session:
        diamond = await repository.create_diamond(
            session,
            carat=body.carat,
            price_per_carat=body.price_per_carat,
            quality=body.quality,
        )
        data = repository.model_to_dict(diamond)

    return {"success": True, "data": data}


@router.get("")
async def list_diamonds():
    async with get_session() as session:
        diamonds = await repository.list_diamonds(session)
        data = [repository.model_to_dict(d) for d in diamonds]

    return {"success": True, "data": data}


@router.get("/{diamond_id}")
async def get_diamond(diamond_id: int):
    async with get_session() as session:
        diamond = await repository.get_diamond(session, diamond_id)
        if diamond is None:
            raise HTTPException(status_code=404, detail="Diamond not found")
        data = repository.model_to_dict(diamond)

    return {"success": True, "data": data}
