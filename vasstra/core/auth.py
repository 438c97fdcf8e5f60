# vasstra/core/auth.py
import logging
from typing import Awaitable, Callable

from pydantic import ValidationError

from vasstra.core.errors import AuthenticationError
from vasstra.core.storage import KeyValueStore
from vasstra.schemas.user import AuthUser

logger = logging.getLogger(__name__)

SessionListener = Callable[["SessionStore"], Awaitable[None]]


class SessionStore:
    """
    Holds the shopper's session token and user snapshot.

    Flow:
      1. On construction, hydrate token + user from the key/value store.
         A corrupt user snapshot logs the shopper out (both keys removed).
      2. start()/end() persist the change and then await every listener,
         which is how the order cache follows login/logout.

    Login and signup HTTP calls live outside this package; they hand the
    resulting token and user to start().
    """

    def __init__(self, store: KeyValueStore, token_key: str, user_key: str):
        self.store = store
        self.token_key = token_key
        self.user_key = user_key
        self._listeners: list[SessionListener] = []

        self.token: str | None = None
        self.user: AuthUser | None = None
        self._hydrate()

    def _hydrate(self) -> None:
        stored_token = self.store.get(self.token_key)
        stored_user = self.store.get(self.user_key)

        if not (stored_token and stored_user):
            return

        try:
            self.user = AuthUser.model_validate_json(stored_user)
            self.token = stored_token
        except ValidationError:
            logger.warning("Stored auth user is corrupt, clearing session")
            self.store.remove(self.token_key)
            self.store.remove(self.user_key)

    # ---- read side ----

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.user)

    def require_token(self) -> str:
        """
        Return the active token.

        Raises:
            AuthenticationError: if no session is active.
        """
        if not self.token:
            raise AuthenticationError("User not authenticated")
        return self.token

    def auth_headers(self) -> dict[str, str]:
        """
        Bearer header for the active session, or {} for guests.
        """
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    # ---- lifecycle ----

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def start(self, token: str, user: AuthUser) -> None:
        """
        Begin a session (after a successful login/signup).
        """
        self.token = token
        self.user = user
        self.store.set(self.token_key, token)
        self.store.set(self.user_key, user.model_dump_json(by_alias=True))
        logger.info(f"Session started for {user.email}")
        await self._emit()

    async def end(self) -> None:
        """
        Logout: forget token and user everywhere.
        """
        self.token = None
        self.user = None
        self.store.remove(self.token_key)
        self.store.remove(self.user_key)
        logger.info("Session ended")
        await self._emit()

    async def _emit(self) -> None:
        for listener in list(self._listeners):
            await listener(self)
