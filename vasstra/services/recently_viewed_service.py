# vasstra/services/recently_viewed_service.py
import time

from vasstra.repositories.json_repo import JsonListRepository
from vasstra.schemas.common import ProductId
from vasstra.schemas.product import Product
from vasstra.schemas.wishlist import RecentlyViewedItem
from vasstra.services.base import PersistentListStore


class RecentlyViewedService(PersistentListStore[RecentlyViewedItem]):
    """
    Most-recent-first history of product pages the shopper opened.

    Re-viewing a product moves it to the front; the list is capped at
    `max_items`. No notifications, this runs silently on page views.
    """

    def __init__(self, repo: JsonListRepository[RecentlyViewedItem], max_items: int = 10):
        super().__init__(repo)
        self.max_items = max_items

    def add_to_recently_viewed(self, product: Product) -> None:
        product_id = product.product_id
        filtered = [item for item in self._items if item.id != product_id]
        entry = RecentlyViewedItem(
            id=product_id,
            name=product.name,
            price=product.price,
            original_price=product.original_price,
            discount=product.discount,
            image=product.image,
            hover_image=product.hover_image,
            category=product.category,
            subcategory=product.subcategory,
            viewed_at=int(time.time() * 1000),
        )
        self._commit([entry, *filtered][: self.max_items])

    def get_recently_viewed(
        self,
        exclude_id: ProductId | None = None,
        limit: int = 4,
    ) -> list[RecentlyViewedItem]:
        return [item for item in self._items if item.id != exclude_id][:limit]

    def clear_recently_viewed(self) -> None:
        self._commit([])
