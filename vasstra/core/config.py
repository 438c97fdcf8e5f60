# vasstra/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized storefront settings loaded from environment.

    Every field has a default so the storefront can start without a .env.

    Optional env vars (.env):
      - API_URL (REST backend base URL, e.g. https://shop.example/api)
      - STORAGE_DATABASE_URL (SQLAlchemy URL for persisted client state;
        when unset, state lives in memory for the process lifetime)
      - REQUEST_TIMEOUT_SECONDS
    """

    PROJECT_NAME: str = "Vasstra Storefront"
    API_URL: str = "http://localhost:5000/api"

    # Persisted client state
    STORAGE_DATABASE_URL: str | None = None

    # Storage keys (must stay stable within one deployment)
    CART_STORAGE_KEY: str = "vasstra-cart"
    WISHLIST_STORAGE_KEY: str = "vasstra-wishlist"
    RECENTLY_VIEWED_STORAGE_KEY: str = "vasstra-recently-viewed"
    REVIEWS_STORAGE_KEY: str = "vasstra_reviews"
    AUTH_TOKEN_STORAGE_KEY: str = "vasstra_auth_token"
    AUTH_USER_STORAGE_KEY: str = "vasstra_auth_user"

    # Network
    REQUEST_TIMEOUT_SECONDS: float = 10.0

    # Catalog / recommendations
    PRODUCT_FETCH_LIMIT: int = 8
    RELATED_PRODUCTS_LIMIT: int = 4
    RECENTLY_VIEWED_MAX: int = 10

    # Checkout
    DEFAULT_COUNTRY: str = "India"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import.
    """
    return Settings()
