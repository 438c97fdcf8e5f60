# tests/fake_backend.py
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

VALID_TOKEN = "good-token"

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class BackendState:
    """
    In-memory stand-in for the storefront REST backend.
    """

    orders: list[dict[str, Any]] = field(default_factory=list)
    products: list[dict[str, Any]] = field(default_factory=list)
    fail_order_listing: bool = False
    received_orders: list[dict[str, Any]] = field(default_factory=list)
    listing_calls: int = 0
    product_queries: list[dict[str, str]] = field(default_factory=list)


def build_fake_backend(state: BackendState) -> FastAPI:
    orders_router = APIRouter(prefix="/orders", tags=["Orders"])
    products_router = APIRouter(prefix="/products", tags=["Products"])

    def require_token(
        credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    ) -> str:
        if credentials is None or credentials.credentials != VALID_TOKEN:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired token",
            )
        return credentials.credentials

    @orders_router.get("/my-orders")
    def my_orders(token: str = Depends(require_token)):
        state.listing_calls += 1
        if state.fail_order_listing:
            return JSONResponse(status_code=500, content={"error": "Failed to fetch orders"})
        return {"success": True, "orders": state.orders, "total": len(state.orders)}

    @orders_router.post("", status_code=status.HTTP_201_CREATED)
    def create_order(payload: dict[str, Any], token: str = Depends(require_token)):
        state.received_orders.append(payload)

        if not payload.get("items"):
            return JSONResponse(
                status_code=400,
                content={"error": "Order must contain at least one item"},
            )
        if not payload.get("totalAmount") or payload["totalAmount"] <= 0:
            return JSONResponse(status_code=400, content={"error": "Invalid total amount"})

        order = {
            "_id": f"ord{len(state.orders) + 1:04d}",
            "items": payload["items"],
            "totalAmount": payload["totalAmount"],
            "shippingAddress": payload["shippingAddress"],
            "paymentMethod": payload["paymentMethod"],
            "status": "confirmed",
            "trackingId": f"TRK{len(state.orders) + 1:04d}",
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }
        state.orders.insert(0, order)
        return {"success": True, "order": order, "message": "Order created successfully"}

    @orders_router.get("/track/{tracking_id}")
    def track(tracking_id: str):
        for order in state.orders:
            if order.get("trackingId") == tracking_id:
                return {"success": True, "order": order}
        return JSONResponse(
            status_code=404,
            content={"error": "Order not found with this tracking ID"},
        )

    @products_router.get("")
    def list_products(limit: int = 20, category: str | None = None, search: str | None = None):
        state.product_queries.append(
            {k: v for k, v in {"limit": str(limit), "category": category, "search": search}.items() if v}
        )
        products = state.products
        if category:
            products = [p for p in products if p.get("category") == category]
        if search:
            products = [p for p in products if search.lower() in p.get("name", "").lower()]
        return {"success": True, "products": products[:limit]}

    app = FastAPI(title="Fake storefront backend")
    app.include_router(orders_router, prefix="/api")
    app.include_router(products_router, prefix="/api")
    return app
