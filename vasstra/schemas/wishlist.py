# vasstra/schemas/wishlist.py
from vasstra.schemas.common import CamelModel, ProductId


class WishlistItem(CamelModel):
    """
    A liked product. Uniqueness key is id alone (no size variants).
    """

    id: ProductId
    name: str
    price: float
    original_price: float
    image: str = ""
    category: str = ""
    discount: int = 0


class RecentlyViewedItem(CamelModel):
    id: ProductId
    name: str
    price: float
    original_price: float
    discount: int = 0
    image: str = ""
    hover_image: str = ""
    category: str = ""
    subcategory: str | None = None
    # epoch milliseconds
    viewed_at: int
