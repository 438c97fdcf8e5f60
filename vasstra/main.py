# vasstra/main.py
from contextlib import asynccontextmanager
from dataclasses import dataclass
import logging

import httpx

from vasstra.core.api_client import ApiClient
from vasstra.core.auth import SessionStore
from vasstra.core.config import Settings, get_settings
from vasstra.core.notifications import Notifier
from vasstra.core.storage import KeyValueStore, MemoryKeyValueStore, SqlKeyValueStore
from vasstra.database import build_engine, create_db_and_tables
from vasstra.repositories.json_repo import JsonListRepository
from vasstra.schemas.cart import CartItem
from vasstra.schemas.product import Product
from vasstra.schemas.review import Review
from vasstra.schemas.wishlist import RecentlyViewedItem, WishlistItem
from vasstra.services.cart_service import CartService
from vasstra.services.order_service import OrderService
from vasstra.services.product_service import ProductService
from vasstra.services.recently_viewed_service import RecentlyViewedService
from vasstra.services.related_products import get_related_products
from vasstra.services.review_service import ReviewService
from vasstra.services.wishlist_service import WishlistService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@dataclass
class StorefrontContext:
    """
    Everything the storefront UI needs, built once at startup and passed
    down explicitly. There are no module-level store singletons.
    """

    settings: Settings
    store: KeyValueStore
    notifier: Notifier
    session: SessionStore
    api: ApiClient
    cart: CartService
    wishlist: WishlistService
    orders: OrderService
    products: ProductService
    recently_viewed: RecentlyViewedService
    reviews: ReviewService

    def related_products(
        self,
        current: Product,
        pool: list[Product],
        limit: int | None = None,
    ) -> list[Product]:
        return get_related_products(
            current, pool, limit or self.settings.RELATED_PRODUCTS_LIMIT
        )


def build_store(settings: Settings) -> KeyValueStore:
    """
    SQL-backed store when STORAGE_DATABASE_URL is set, memory otherwise.
    """
    if not settings.STORAGE_DATABASE_URL:
        logger.info("No STORAGE_DATABASE_URL set, client state kept in memory")
        return MemoryKeyValueStore()

    engine = build_engine(settings.STORAGE_DATABASE_URL)
    create_db_and_tables(engine)
    return SqlKeyValueStore(engine)


def create_context(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> StorefrontContext:
    """
    Wire stores, session and API client together.

    Args:
        settings: defaults to get_settings().
        store: key/value backend; defaults to build_store(settings).
        transport: optional httpx transport (tests pass an ASGI transport).
    """
    settings = settings or get_settings()
    store = store if store is not None else build_store(settings)

    notifier = Notifier()
    session = SessionStore(
        store,
        token_key=settings.AUTH_TOKEN_STORAGE_KEY,
        user_key=settings.AUTH_USER_STORAGE_KEY,
    )
    api = ApiClient(settings, session, transport=transport)

    orders = OrderService(api, session, notifier, default_country=settings.DEFAULT_COUNTRY)
    session.subscribe(orders.on_session_change)

    return StorefrontContext(
        settings=settings,
        store=store,
        notifier=notifier,
        session=session,
        api=api,
        cart=CartService(
            JsonListRepository(store, settings.CART_STORAGE_KEY, CartItem),
            notifier,
        ),
        wishlist=WishlistService(
            JsonListRepository(store, settings.WISHLIST_STORAGE_KEY, WishlistItem),
            notifier,
        ),
        orders=orders,
        products=ProductService(api, default_limit=settings.PRODUCT_FETCH_LIMIT),
        recently_viewed=RecentlyViewedService(
            JsonListRepository(
                store, settings.RECENTLY_VIEWED_STORAGE_KEY, RecentlyViewedItem
            ),
            max_items=settings.RECENTLY_VIEWED_MAX,
        ),
        reviews=ReviewService(
            JsonListRepository(store, settings.REVIEWS_STORAGE_KEY, Review),
        ),
    )


@asynccontextmanager
async def lifespan(context: StorefrontContext):
    """
    Storefront lifespan handler.

    Startup:
      - Populate the order cache if a session was restored from storage.

    Shutdown:
      - Close the HTTP client.
    """
    logger.info(f"🔄 Startup: {context.settings.PROJECT_NAME} -> {context.settings.API_URL}")
    if context.session.is_authenticated:
        await context.orders.refresh_orders()
    try:
        yield context
    finally:
        await context.api.aclose()
        logger.info("✅ Shutdown: HTTP client closed.")
