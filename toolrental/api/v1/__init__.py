"""Version 1 routers."""

from toolrental.api.v1.payment_routes import router as payment_router
from toolrental.api.v1.rent_routes import router as rent_router

__all__ = ["rent_router", "payment_router"]
