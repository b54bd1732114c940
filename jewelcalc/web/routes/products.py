"""Product routes: catalog CRUD, price calculation and stock availability.

Routes:
- POST /api/products/create                 - Create a product
- GET  /api/products                        - List products
- POST /api/products/calc-price             - Compute the sale price breakdown
- GET  /api/products/availability           - Stock for product/metal/purity/ring size
- GET  /api/products/{product_id}           - Product details
- POST /api/products/{product_id}/metals    - Associate a metal
- POST /api/products/{product_id}/diamonds  - Associate a diamond
- PUT  /api/products/{product_id}/pricing   - Set tax % and exchange discount
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from jewelcalc.catalog import repository
from jewelcalc.catalog.availability import check_availability
from jewelcalc.catalog.gateway import CatalogGateway
from jewelcalc.db.connection import get_session
from jewelcalc.errors import MissingParameterError, ProductNotFoundError
from jewelcalc.pricing.assembly import price_product
from jewelcalc.web.dependencies import get_catalog_gateway
from jewelcalc.web.models import (
    DiamondLink,
    MetalLink,
    PriceRequest,
    PricingComponentsUpdate,
    ProductCreate,
)

router = APIRouter(prefix="/api/products", tags=["products"])


async def _require_product(session, product_id: int):
    product = await repository.get_product(session, product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


# ============================================================================
# Catalog Routes
# ============================================================================


@router.post("/create", status_code=201)
async def create_product(body: ProductCreate):
    missing = body.missing_fields()
    if missing:
        raise HTTPException(status_code=400, detail="Missing required fields")

    async with get_session() as session:
        product = await repository.create_product(
            session,
            name=body.name,
            description=body.description,
            base_weight=body.base_weight,
            making_charges=body.making_charges,
            is_bis_hallmarked=body.is_bis_hallmarked,
            is_gia_certified=body.is_gia_certified,
            is_available=body.is_available,
        )
        data = repository.model_to_dict(product)

    return {"success": True, "data": data}


@router.get("")
async def list_products():
    async with get_session() as session:
        products = await repository.list_products(session)
        data = [repository.model_to_dict(p) for p in products]

    return {"success": True, "data": data}


# ============================================================================
# Pricing & Availability Routes
# ============================================================================


@router.post("/calc-price")
async def calculate_price(
    body: PriceRequest,
    gateway: CatalogGateway = Depends(get_catalog_gateway),
):
    """Compute the price breakdown for one product.

    Unknown and unavailable products both answer 404 with the same body.
    """
    product_id = body.payload.product_id
    # 0 is rejected along with a missing id
    if not product_id:
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "message": "Payload must contain product Id to calculate final product price",
            },
        )

    try:
        breakdown = await price_product(gateway, product_id)
    except ProductNotFoundError as exc:
        return JSONResponse(status_code=404, content={"success": False, "message": str(exc)})

    return {"success": True, "price_details": breakdown.as_dict()}


@router.get("/availability")
async def product_availability(
    prod_id: int | None = Query(default=None, alias="prodId"),
    metal_id: int | None = Query(default=None, alias="metalId"),
    purity_id: int | None = Query(default=None, alias="purityId"),
    ring_size_id: int | None = Query(default=None, alias="ringSizeId"),
    gateway: CatalogGateway = Depends(get_catalog_gateway),
):
    """Report stock for an exact product/metal/purity/ring-size combination."""
    try:
        result = await check_availability(gateway, prod_id, metal_id, purity_id, ring_size_id)
    except MissingParameterError as exc:
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": str(exc), "missing": exc.missing},
        )

    return result.as_dict()


# ============================================================================
# Product Detail & Association Routes
# ============================================================================


@router.get("/{product_id}")
async def get_product(product_id: int):
    async with get_session() as session:
        product = await _require_product(session, product_id)
        data = repository.model_to_dict(product)

    return {"success": True, "data": data}


@router.post("/{product_id}/metals", status_code=201)
async def add_product_metal(product_id: int, body: MetalLink):
    async with get_session() as session:
        await _require_product(session, product_id)
        if await repository.get_metal(session, body.metal_id) is None:
            raise HTTPException(status_code=404, detail="Metal not found")
        link = await repository.link_metal(session, product_id, body.metal_id)
        data = repository.model_to_dict(link)

    return {"success": True, "data": data}


@router.post("/{product_id}/diamonds", status_code=201)
async def add_product_diamond(product_id: int, body: DiamondLink):
    async with get_session() as session:
        await _require_product(session, product_id)
        if await repository.get_diamond(session, body.diamond_id) is None:
            raise HTTPException(status_code=404, detail="Diamond not found")
        link = await repository.link_diamond(session, product_id, body.diamond_id)
        data = repository.model_to_dict(link)

    return {"success": True, "data": data}


@router.put("/{product_id}/pricing")
async def set_pricing_components(product_id: int, body: PricingComponentsUpdate):
    async with get_session() as session:
        await _require_product(session, product_id)
        components = await repository.upsert_pricing_components(
            session,
            product_id,
            tax_percentage=body.tax_percentage,
            exchange_discount=body.exchange_discount,
        )
        data = repository.model_to_dict(components)

    return {"success": True, "data": data}
