# vasstra/services/wishlist_service.py
from vasstra.core.notifications import Notifier
from vasstra.repositories.json_repo import JsonListRepository
from vasstra.schemas.common import ProductId
from vasstra.schemas.wishlist import WishlistItem
from vasstra.services.base import PersistentListStore


class WishlistService(PersistentListStore[WishlistItem]):
    """
    Deduplicated set of liked products, keyed by product id.

    toggle_wishlist is the entry point used by product cards; add/remove
    are exposed for pages that need one direction only.
    """

    def __init__(self, repo: JsonListRepository[WishlistItem], notifier: Notifier):
        super().__init__(repo)
        self.notifier = notifier

    def is_in_wishlist(self, product_id: ProductId) -> bool:
        return any(item.id == product_id for item in self._items)

    def add_to_wishlist(self, item: WishlistItem) -> None:
        """
        No-op if the product is already liked.
        """
        if self.is_in_wishlist(item.id):
            return
        self.notifier.success(f"Added {item.name} to wishlist")
        self._commit([*self._items, item])

    def remove_from_wishlist(self, product_id: ProductId) -> None:
        removed = next((i for i in self._items if i.id == product_id), None)
        if removed is None:
            return
        self.notifier.info(f"Removed {removed.name} from wishlist")
        self._commit([i for i in self._items if i.id != product_id])

    def toggle_wishlist(self, item: WishlistItem) -> None:
        if self.is_in_wishlist(item.id):
            self.remove_from_wishlist(item.id)
        else:
            self.add_to_wishlist(item)

    @property
    def total_items(self) -> int:
        return len(self._items)
