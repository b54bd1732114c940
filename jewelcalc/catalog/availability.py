"""Stock check for a product/metal/purity/ring-size combination."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from jewelcalc.catalog.gateway import CatalogGateway
from jewelcalc.errors import MissingParameterError

logger = structlog.get_logger(__name__)


class StockStatus(str, Enum):
    IN_STOCK = "in_stock"
    OUT_OF_STOCK = "out_of_stock"
    UNSUPPORTED = "unsupported"


_MESSAGES = {
    StockStatus.IN_STOCK: "Product is in stock",
    StockStatus.OUT_OF_STOCK: "Product is Out of Stock",
    StockStatus.UNSUPPORTED: "The combination of multiple inventory factors is not supported",
}


@dataclass(frozen=True, slots=True)
class AvailabilityResult:
    available: bool
    quantity: int | None
    status: StockStatus

    @property
    def message(self) -> str:
        return _MESSAGES[self.status]

    def as_dict(self) -> dict:
        return {
            "available": self.available,
            "quantity": self.quantity,
            "status": self.status.value,
            "message": self.message,
        }


async def check_availability(
    gateway: CatalogGateway,
    product_id: int | None,
    metal_id: int | None,
    purity_id: int | None,
    ring_size_id: int | None,
) -> AvailabilityResult:
    """Report stock for the exact 4-tuple; read-only.

    Raises:
        MissingParameterError: if any identifier is None (no lookup is made)
    """
    params = {
        "prodId": product_id,
        "metalId": metal_id,
        "purityId": purity_id,
        "ringSizeId": ring_size_id,
    }
    missing = [name for name, value in params.items() if value is None]
    if missing:
        raise MissingParameterError(missing)

    quantity = await gateway.get_inventory_quantity(product_id, metal_id, purity_id, ring_size_id)

    if quantity is None:
        result = AvailabilityResult(available=False, quantity=None, status=StockStatus.UNSUPPORTED)
    elif quantity <= 0:
        result = AvailabilityResult(available=False, quantity=quantity, status=StockStatus.OUT_OF_STOCK)
    else:
        result = AvailabilityResult(available=True, quantity=quantity, status=StockStatus.IN_STOCK)

    logger.info(
        "availability_checked",
        product_id=product_id,
        metal_id=metal_id,
        purity_id=purity_id,
        ring_size_id=ring_size_id,
        status=result.status.value,
        quantity=result.quantity,
    )
    return result
