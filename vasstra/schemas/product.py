# vasstra/schemas/product.py
from typing import Any

from pydantic import Field

from vasstra.schemas.common import CamelModel, ProductId


class Product(CamelModel):
    """
    Normalized catalog product (read-only reference data).

    Built from raw API documents by
    vasstra.services.product_service.normalize_product.
    """

    mongo_id: str | None = Field(default=None, alias="_id")
    id: ProductId | None = None
    name: str = ""
    price: float = 0
    original_price: float = 0
    discount: int = 0
    image: str = ""
    hover_image: str = ""
    images: list[str] = Field(default_factory=list)
    category: str = "ethnic_wear"
    subcategory: str = ""
    sizes: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    description: str = ""
    stock: int = 0
    is_active: bool = True
    is_new: bool = False
    is_bestseller: bool = False
    is_summer: bool = False
    is_winter: bool = False
    created_at: str | None = None
    rating: float | None = None
    reviews: int | None = None

    @property
    def product_id(self) -> ProductId | None:
        return self.mongo_id or self.id


class ProductListResponse(CamelModel):
    """
    Envelope of GET /products. Products stay raw dicts here and are
    normalized one by one afterwards.
    """

    success: bool = False
    products: list[dict[str, Any]] = Field(default_factory=list)
