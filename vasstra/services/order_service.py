# vasstra/services/order_service.py
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from vasstra.core.api_client import ApiClient
from vasstra.core.auth import SessionStore
from vasstra.core.errors import ApiError
from vasstra.core.notifications import Notifier
from vasstra.schemas.order import (
    ApiErrorResponse,
    MyOrdersResponse,
    Order,
    OrderCreateRequest,
    OrderCreateResponse,
    OrderDraft,
    OrderShippingAddress,
    ShippingAddress,
    TrackOrderResponse,
)

logger = logging.getLogger(__name__)


class OrderService:
    """
    Cache of the signed-in shopper's orders plus order submission.

    Responsibilities:
      - refresh the cache from GET /orders/my-orders (full replace)
      - normalize checkout data and submit it to POST /orders
      - follow the session: cleared on logout, refreshed on login
      - look up orders locally and track them publicly by tracking id

    The cache is never partially mutated: a failed refresh keeps the old
    list, a failed submission adds nothing.
    """

    def __init__(
        self,
        api: ApiClient,
        session: SessionStore,
        notifier: Notifier,
        default_country: str = "India",
    ):
        self.api = api
        self.session = session
        self.notifier = notifier
        self.default_country = default_country
        self.orders: list[Order] = []
        self.is_loading = False

    # ---- internal helpers ----

    def _normalize_address(self, address: ShippingAddress | None) -> OrderShippingAddress:
        """
        Reconcile the checkout form's address spellings:
          - firstName + lastName -> name
          - street | address     -> street
          - pincode | zipCode    -> zipCode
          - country defaults to the store country, phone to ""
        """
        address = address or ShippingAddress()
        full_name = f"{address.first_name or ''} {address.last_name or ''}".strip()
        return OrderShippingAddress(
            name=full_name,
            street=address.street or address.address,
            city=address.city,
            state=address.state,
            zip_code=address.pincode or address.zip_code,
            country=address.country or self.default_country,
            phone=address.phone or "",
        )

    @staticmethod
    def _error_detail(response: httpx.Response, default: str) -> str:
        try:
            body = ApiErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            return default
        return body.error or default

    # ---- public operations ----

    async def refresh_orders(self) -> None:
        """
        Replace the cache with the server's order list.

        Guests are a no-op. Failures are logged and leave the cache as is.
        """
        if not self.session.token:
            return

        token = self.session.token
        self.is_loading = True
        try:
            response = await self.api.get("/orders/my-orders", auth=True)
            if self.session.token != token:
                logger.info("Session changed during order refresh, dropping response")
            elif response.is_success:
                data = MyOrdersResponse.model_validate(response.json())
                self.orders = data.orders or []
            else:
                logger.warning(f"Order refresh failed with status {response.status_code}")
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.error(f"Error fetching orders: {e}")
        finally:
            self.is_loading = False

    async def add_order(
        self,
        draft: OrderDraft,
        payment_method: str,
        payment_details: dict[str, Any] | None = None,
    ) -> str:
        """
        Submit a new order and return its id.

        Steps:
          1. Require a session token (AuthenticationError otherwise).
          2. Normalize the shipping address.
          3. POST /orders; non-2xx raises ApiError with the server message.
          4. Refresh the cache and return order._id (or order.id).
        """
        self.session.require_token()

        payload = OrderCreateRequest(
            items=draft.items,
            total_amount=draft.total_amount or draft.total,
            shipping_address=self._normalize_address(draft.shipping_address),
            payment_method=payment_method,
            payment_details=payment_details,
        )

        try:
            response = await self.api.post(
                "/orders",
                json=payload.model_dump(mode="json", by_alias=True),
                auth=True,
            )
        except httpx.HTTPError as e:
            logger.error(f"Error creating order: {e}")
            self.notifier.error("Failed to create order")
            raise

        if not response.is_success:
            detail = self._error_detail(response, "Failed to create order")
            logger.error(f"Error creating order: {response.status_code} {detail}")
            self.notifier.error(detail)
            raise ApiError(status_code=response.status_code, detail=detail)

        created = OrderCreateResponse.model_validate(response.json()).order
        logger.info(f"✅ Order {created.order_id} created")

        await self.refresh_orders()
        return created.order_id

    def get_order(self, order_id: str) -> Order | None:
        for order in self.orders:
            if order.mongo_id == order_id or order.id == order_id:
                return order
        return None

    async def track_order(self, tracking_id: str) -> Order | None:
        """
        Public lookup by courier tracking id. No session needed.

        Returns None when the id is unknown or the backend is unreachable.
        """
        try:
            response = await self.api.get(f"/orders/track/{tracking_id}")
        except httpx.HTTPError as e:
            logger.error(f"Error tracking order {tracking_id}: {e}")
            return None

        if not response.is_success:
            logger.info(f"No order for tracking id {tracking_id} ({response.status_code})")
            return None

        return TrackOrderResponse.model_validate(response.json()).order

    async def on_session_change(self, session: SessionStore) -> None:
        """
        Session listener: refresh on login, drop the cache on logout.
        """
        if session.is_authenticated:
            await self.refresh_orders()
        else:
            self.orders = []
