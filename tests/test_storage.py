# tests/test_storage.py
import pytest

from factories import make_cart_item
from vasstra.core.storage import MemoryKeyValueStore, SqlKeyValueStore
from vasstra.database import build_engine, create_db_and_tables
from vasstra.repositories.json_repo import JsonListRepository
from vasstra.schemas.cart import CartItem
from vasstra.services.cart_service import CartService


@pytest.fixture
def sql_store(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'state.db'}")
    create_db_and_tables(engine)
    yield SqlKeyValueStore(engine)
    engine.dispose()


def test_memory_store_basics():
    store = MemoryKeyValueStore({"a": "1"})

    assert store.get("a") == "1"
    store.set("a", "2")
    assert store.get("a") == "2"
    store.remove("a")
    store.remove("a")
    assert store.get("a") is None


def test_sql_store_set_overwrite_remove(sql_store):
    assert sql_store.get("vasstra-cart") is None

    sql_store.set("vasstra-cart", "[]")
    sql_store.set("vasstra-cart", '[{"id": 1}]')
    assert sql_store.get("vasstra-cart") == '[{"id": 1}]'

    sql_store.remove("vasstra-cart")
    sql_store.remove("never-set")
    assert sql_store.get("vasstra-cart") is None


def test_cart_survives_restart_on_sql_store(sql_store, notifier):
    repo = JsonListRepository(sql_store, "vasstra-cart", CartItem)
    cart = CartService(repo, notifier)
    cart.add_to_cart(make_cart_item(1, size="M"), 2)
    cart.add_to_cart(make_cart_item("64f0", price=499, original_price=499))

    restarted = CartService(JsonListRepository(sql_store, "vasstra-cart", CartItem), notifier)

    assert restarted.items == cart.items
    assert restarted.total_items == 3


def test_schema_mismatch_is_treated_as_empty(memory_store):
    memory_store.set("vasstra-cart", '[{"unexpected": true}]')
    repo = JsonListRepository(memory_store, "vasstra-cart", CartItem)

    assert repo.load() == []
