# vasstra/core/api_client.py
from typing import Any

import httpx

from vasstra.core.auth import SessionStore
from vasstra.core.config import Settings


class ApiClient:
    """
    Thin async wrapper around httpx for the storefront REST backend.

    - base URL and timeout come from Settings
    - `auth=True` attaches the session's Bearer header
    - responses are returned as-is; status handling belongs to services

    Transport failures (connect errors, timeouts) surface as
    httpx.HTTPError subclasses. There is no retry.
    """

    def __init__(
        self,
        settings: Settings,
        session: SessionStore,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.session = session
        self.timeout = settings.REQUEST_TIMEOUT_SECONDS
        self._client = httpx.AsyncClient(
            base_url=settings.API_URL.rstrip("/"),
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def _headers(self, auth: bool) -> dict[str, str]:
        return self.session.auth_headers() if auth else {}

    async def get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        auth: bool = False,
        timeout: float | None = None,
    ) -> httpx.Response:
        return await self._client.get(
            path,
            params=params,
            headers=self._headers(auth),
            timeout=timeout if timeout is not None else self.timeout,
        )

    async def post(
        self,
        path: str,
        *,
        json: Any = None,
        auth: bool = False,
    ) -> httpx.Response:
        return await self._client.post(path, json=json, headers=self._headers(auth))

    async def aclose(self) -> None:
        await self._client.aclose()
