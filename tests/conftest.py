# tests/conftest.py
import httpx
import pytest

from fake_backend import BackendState, build_fake_backend
from vasstra.core.config import Settings
from vasstra.core.notifications import Notifier
from vasstra.core.storage import MemoryKeyValueStore
from vasstra.main import create_context
from vasstra.schemas.user import AuthUser


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, API_URL="http://testserver/api")


@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def backend_state() -> BackendState:
    return BackendState()


@pytest.fixture
def make_context(settings, memory_store, backend_state):
    """
    Build a StorefrontContext wired to the fake backend over ASGI.
    """

    def _make(store=None, transport=None):
        transport = transport or httpx.ASGITransport(app=build_fake_backend(backend_state))
        return create_context(
            settings,
            store=store if store is not None else memory_store,
            transport=transport,
        )

    return _make


@pytest.fixture
def shopper() -> AuthUser:
    return AuthUser(id="u1", email="asha@example.com", name="Asha", role="user")

