# vasstra/services/cart_service.py
from vasstra.core.notifications import Notifier
from vasstra.repositories.json_repo import JsonListRepository
from vasstra.schemas.cart import CartItem, CartItemCreate
from vasstra.schemas.common import ProductId
from vasstra.services.base import PersistentListStore


class CartService(PersistentListStore[CartItem]):
    """
    Business logic for the shopper's cart.

    Responsibilities:
      - merge lines by (product id, size)
      - keep quantity >= 1 (dropping to 0 removes the line)
      - derive totals on every read (never stored)
      - persist the full cart after each mutation
      - emit toast notifications for user-visible changes

    Inputs are trusted: prices and ids are not validated here.
    """

    def __init__(self, repo: JsonListRepository[CartItem], notifier: Notifier):
        super().__init__(repo)
        self.notifier = notifier
        self.is_cart_open = False

    # ---- internal helpers ----

    def _find_index(self, product_id: ProductId, size: str | None) -> int:
        for index, item in enumerate(self._items):
            if item.id == product_id and item.size == size:
                return index
        return -1

    # ---- public operations ----

    def add_to_cart(self, item: CartItemCreate, quantity: int = 1) -> None:
        """
        Add `quantity` units of a product snapshot.

        An existing (id, size) line is incremented; otherwise a new
        line is appended. Opens the cart drawer either way.
        """
        items = self.items
        index = self._find_index(item.id, item.size)

        if index > -1:
            existing = items[index]
            items[index] = existing.model_copy(
                update={"quantity": existing.quantity + quantity}
            )
            self.notifier.success(f"Updated {item.name} quantity in cart")
        else:
            snapshot = item.model_dump(exclude={"quantity"})
            items.append(CartItem(**snapshot, quantity=quantity))
            self.notifier.success(f"Added {item.name} to cart")

        self.is_cart_open = True
        self._commit(items)

    def remove_from_cart(self, product_id: ProductId, size: str | None = None) -> None:
        """
        Remove the (id, size) line. Silent no-op if it is not in the cart.
        """
        index = self._find_index(product_id, size)
        if index == -1:
            return

        items = self.items
        removed = items.pop(index)
        self.notifier.info(f"Removed {removed.name} from cart")
        self._commit(items)

    def update_quantity(
        self,
        product_id: ProductId,
        quantity: int,
        size: str | None = None,
    ) -> None:
        """
        Set a line's quantity directly. Anything below 1 removes the line.
        """
        if quantity < 1:
            self.remove_from_cart(product_id, size)
            return

        index = self._find_index(product_id, size)
        if index == -1:
            return

        items = self.items
        items[index] = items[index].model_copy(update={"quantity": quantity})
        self._commit(items)

    def clear_cart(self) -> None:
        self._commit([])
        self.notifier.info("Cart cleared")

    def set_cart_open(self, is_open: bool) -> None:
        self.is_cart_open = is_open

    # ---- derived values ----

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def subtotal(self) -> float:
        return sum(item.line_total for item in self._items)

    @property
    def total_savings(self) -> float:
        return sum(item.line_savings for item in self._items)
