# tests/test_session.py
import asyncio

import pytest

from vasstra.core.auth import SessionStore
from vasstra.core.errors import AuthenticationError

TOKEN_KEY = "vasstra_auth_token"
USER_KEY = "vasstra_auth_user"


def make_session(store) -> SessionStore:
    return SessionStore(store, token_key=TOKEN_KEY, user_key=USER_KEY)


def test_guest_session(memory_store):
    session = make_session(memory_store)

    assert session.is_authenticated is False
    assert session.auth_headers() == {}
    with pytest.raises(AuthenticationError):
        session.require_token()


def test_start_persists_and_rehydrates(memory_store, shopper):
    session = make_session(memory_store)
    asyncio.run(session.start("tok", shopper))

    restored = make_session(memory_store)

    assert restored.is_authenticated
    assert restored.user == shopper
    assert restored.auth_headers() == {"Authorization": "Bearer tok"}
    assert restored.require_token() == "tok"


def test_corrupt_user_snapshot_logs_out(memory_store):
    memory_store.set(TOKEN_KEY, "tok")
    memory_store.set(USER_KEY, "{broken")

    session = make_session(memory_store)

    assert session.is_authenticated is False
    assert memory_store.get(TOKEN_KEY) is None
    assert memory_store.get(USER_KEY) is None


def test_listeners_follow_login_and_logout(memory_store, shopper):
    session = make_session(memory_store)
    events = []

    async def listener(s: SessionStore) -> None:
        events.append(s.is_authenticated)

    unsubscribe = session.subscribe(listener)

    async def scenario():
        await session.start("tok", shopper)
        await session.end()
        unsubscribe()
        await session.start("tok", shopper)

    asyncio.run(scenario())

    assert events == [True, False]
