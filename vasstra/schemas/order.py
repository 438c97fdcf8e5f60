# vasstra/schemas/order.py
from typing import Any, Literal

from pydantic import Field

from vasstra.schemas.common import CamelModel

OrderStatus = Literal[
    "pending", "confirmed", "processing", "shipped", "delivered", "cancelled"
]


class OrderItem(CamelModel):
    """
    Snapshot of a purchased line, frozen at checkout.
    """

    # populated to a product document by the tracking endpoint
    product_id: str | dict[str, Any] | None = None
    name: str = ""
    price: float = 0
    quantity: int = 1
    image: str = ""
    size: str | None = None
    color: str | None = None


class ShippingAddress(CamelModel):
    """
    Address as the checkout form collects it.

    Several spellings exist in the wild (street/address,
    pincode/zipCode, firstName+lastName/name); they are reconciled
    in OrderService before anything is sent to the server.
    """

    first_name: str | None = None
    last_name: str | None = None
    name: str | None = None
    street: str | None = None
    address: str | None = None
    city: str = ""
    state: str = ""
    pincode: str | None = None
    zip_code: str | None = None
    country: str | None = None
    phone: str | None = None


class OrderShippingAddress(CamelModel):
    """
    Normalized address accepted by POST /orders.
    """

    name: str = ""
    street: str | None = None
    city: str = ""
    state: str = ""
    zip_code: str | None = None
    country: str = "India"
    phone: str = ""


class Order(CamelModel):
    """
    Server-authoritative order. Immutable on the client once created;
    only `status` moves, and only server-side.
    """

    mongo_id: str | None = Field(default=None, alias="_id")
    id: str | None = None
    items: list[OrderItem] = Field(default_factory=list)
    subtotal: float | None = None
    shipping: float | None = None
    total: float | None = None
    total_amount: float | None = None
    status: OrderStatus = "pending"
    created_at: str | None = None
    shipping_address: OrderShippingAddress | None = None
    payment_method: str | None = None
    tracking_id: str | None = None

    @property
    def order_id(self) -> str | None:
        return self.mongo_id or self.id


class OrderDraft(CamelModel):
    """
    What the checkout page hands to OrderService.add_order.
    """

    items: list[OrderItem]
    subtotal: float | None = None
    shipping: float | None = None
    total: float | None = None
    total_amount: float | None = None
    shipping_address: ShippingAddress | None = None


# ---- request / response envelopes ----


class OrderCreateRequest(CamelModel):
    items: list[OrderItem]
    total_amount: float | None
    shipping_address: OrderShippingAddress
    payment_method: str
    payment_details: dict[str, Any] | None = None


class OrderCreateResponse(CamelModel):
    success: bool = True
    order: Order
    message: str | None = None


class MyOrdersResponse(CamelModel):
    success: bool = True
    orders: list[Order] | None = None
    total: int | None = None


class TrackOrderResponse(CamelModel):
    success: bool = True
    order: Order


class ApiErrorResponse(CamelModel):
    error: str | None = None
