# vasstra/core/errors.py
from typing import Any


class StorefrontError(Exception):
    """
    Base class for errors surfaced to storefront callers.
    """


class AuthenticationError(StorefrontError):
    """
    Raised when an operation needs a session token and none is present.

    Never retried; the caller is expected to send the shopper to login.
    """

    def __init__(self, detail: str = "User not authenticated"):
        super().__init__(detail)
        self.detail = detail


class ApiError(StorefrontError):
    """
    The REST backend answered with a non-2xx status.

    Mirrors the (status_code, detail) shape of FastAPI's HTTPException so
    the UI layer can show `detail` directly.
    """

    def __init__(self, status_code: int, detail: Any = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")
