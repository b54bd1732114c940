"""JewelCalc API route modules.

Each module exports a `router` object (APIRouter instance) that the main app
includes in jewelcalc.web.app.

Usage:
    from jewelcalc.web.routes import products
    app.include_router(products.router)
"""

from jewelcalc.web.routes import auth, diamonds, health, inventory, metals, products

__all__ = [
    "auth",
    "diamonds",
    "health",
    "inventory",
    "metals",
    "products",
]
