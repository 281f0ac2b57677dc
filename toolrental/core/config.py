"""Configuration settings for the tool rental service."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Tool Rental Service")
    API_PREFIX: str = os.getenv("API_PREFIX", "/api/toolrental/v1")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./toolrental.db")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change_me")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ADMIN_ROLE: str = os.getenv("ADMIN_ROLE", "ADMIN")
    PAYPAL_CLIENT_ID: str = os.getenv("PAYPAL_CLIENT_ID", "")
    PAYPAL_CLIENT_SECRET: str = os.getenv("PAYPAL_CLIENT_SECRET", "")
    PAYPAL_BASE_URL: str = os.getenv(
        "PAYPAL_BASE_URL",
        "https://api-m.sandbox.paypal.com",
    )
    PAYPAL_RETURN_URL: str = os.getenv(
        "PAYPAL_RETURN_URL",
        "http://localhost:5173/payment/success",
    )
    PAYPAL_CANCEL_URL: str = os.getenv(
        "PAYPAL_CANCEL_URL",
        "http://localhost:5173/payment/cancel",
    )
    PAYPAL_BRAND_NAME: str = os.getenv("PAYPAL_BRAND_NAME", "CraftingStable")
    PAYPAL_TIMEOUT: float = float(os.getenv("PAYPAL_TIMEOUT", "10"))


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


__all__ = ["settings", "Settings", "get_settings"]
