# vasstra/schemas/cart.py
from pydantic import Field

from vasstra.schemas.common import CamelModel, ProductId


class CartItemCreate(CamelModel):
    """
    Product snapshot handed to add_to_cart (everything but quantity).

    Price, name and image are captured at add time; later catalog
    changes do not touch lines already in the cart.
    """

    id: ProductId
    name: str
    price: float
    original_price: float
    image: str = ""
    size: str | None = None
    category: str = ""


class CartItem(CartItemCreate):
    """
    A cart line. Uniqueness key is (id, size).
    """

    quantity: int = Field(default=1, description="Always >= 1 while in the cart")

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    @property
    def line_savings(self) -> float:
        return (self.original_price - self.price) * self.quantity
