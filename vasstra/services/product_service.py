# vasstra/services/product_service.py
import logging
import math
from typing import Any

import httpx
from pydantic import ValidationError

from vasstra.core.api_client import ApiClient
from vasstra.schemas.product import Product, ProductListResponse

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "ethnic_wear"


def _discount_percent(price: float, original_price: float | None) -> int:
    if not original_price:
        return 0
    return math.floor((original_price - price) / original_price * 100 + 0.5)


def normalize_product(raw: dict[str, Any]) -> Product:
    """
    Turn a raw product document from the API into a Product.

    Rules:
      - id mirrors _id
      - missing numbers default to 0, missing strings to ""
      - originalPrice falls back to price
      - image falls back to the first gallery image, and the gallery
        falls back to [image]
      - stock must be numeric, anything else counts as 0
      - isNew accepts both isNewProduct and isNew
    """
    price = raw.get("price") or 0
    original_price = raw.get("originalPrice")
    images = raw.get("images") or []
    image = raw.get("image") or (images[0] if images else "")
    stock = raw.get("stock")
    reviews = raw.get("reviews")

    return Product(
        mongo_id=raw.get("_id"),
        id=raw.get("_id"),
        name=raw.get("name") or "",
        price=price,
        original_price=original_price or price or 0,
        discount=_discount_percent(price, original_price),
        image=image,
        hover_image=raw.get("hoverImage") or "",
        images=images if images else ([raw["image"]] if raw.get("image") else []),
        category=raw.get("category") or DEFAULT_CATEGORY,
        subcategory=raw.get("subcategory") or "",
        sizes=raw.get("sizes") or [],
        colors=raw.get("colors") or [],
        description=raw.get("description") or "",
        stock=int(stock) if isinstance(stock, (int, float)) and not isinstance(stock, bool) else 0,
        is_active=raw.get("isActive") is not False,
        is_new=bool(raw.get("isNewProduct")) or bool(raw.get("isNew")),
        is_bestseller=bool(raw.get("isBestseller")),
        is_summer=bool(raw.get("isSummer")),
        is_winter=bool(raw.get("isWinter")),
        created_at=raw.get("createdAt"),
        rating=raw.get("rating"),
        reviews=reviews if isinstance(reviews, int) and not isinstance(reviews, bool) else None,
    )


class ProductService:
    """
    Read-only catalog access for product grids and recommendations.

    Every fetch is bounded by the client timeout and degrades to an empty
    list: a slow or broken backend must never block a page.
    """

    def __init__(self, api: ApiClient, default_limit: int = 8):
        self.api = api
        self.default_limit = default_limit

    async def fetch_products(
        self,
        limit: int | None = None,
        category: str | None = None,
        search: str | None = None,
        timeout: float | None = None,
    ) -> list[Product]:
        limit = limit or self.default_limit
        params: dict[str, Any] = {"limit": limit}
        if category and category != "all":
            params["category"] = category
        if search:
            params["search"] = search

        try:
            response = await self.api.get("/products", params=params, timeout=timeout)
        except httpx.TimeoutException:
            # Slow backend: show the empty state quietly.
            logger.debug("Product fetch timed out")
            return []
        except httpx.HTTPError as e:
            logger.error(f"Error fetching products: {e}")
            return []

        if not response.is_success:
            logger.error(f"Error fetching products: API Error: {response.status_code}")
            return []

        try:
            data = ProductListResponse.model_validate(response.json())
            if not data.success:
                return []
            return [normalize_product(p) for p in data.products[:limit]]
        except (ValueError, ValidationError) as e:
            logger.error(f"Error fetching products: {e}")
            return []
