"""Entry point for the Tool Rental FastAPI application."""

from fastapi import FastAPI

from toolrental.api.v1 import payment_router, rent_router
from toolrental.core.config import settings
from toolrental.core.database import Base, engine
from toolrental.core.error_handlers import register_exception_handlers

# Ensure database tables exist when the application starts (for development purposes).
Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.PROJECT_NAME)

register_exception_handlers(app)

app.include_router(rent_router, prefix=settings.API_PREFIX)
app.include_router(payment_router, prefix=settings.API_PREFIX)


__all__ = ["app"]
