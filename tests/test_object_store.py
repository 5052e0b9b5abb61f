import pytest

from menuflow.services.exceptions import NotFoundError, ObjectStoreError, TypeMismatchError
from menuflow.state.models import SessionState
from menuflow.state.store import ObjectStore


def test_store_and_get_round_trip() -> None:
    store = ObjectStore({})
    store.store("result", 42)
    assert store.get("result") == 42
    assert store.get("result", int) == 42
    assert "result" in store
    assert len(store) == 1


def test_store_overwrites_existing_key() -> None:
    store = ObjectStore({})
    store.store("name", "first")
    store.store("name", "second")
    assert store.get("name", str) == "second"
    assert len(store) == 1


def test_missing_key_raises_not_found() -> None:
    with pytest.raises(NotFoundError, match="missing"):
        ObjectStore({}).get("missing")


def test_wrong_type_raises_type_mismatch() -> None:
    store = ObjectStore({})
    store.store("result", "42")
    with pytest.raises(TypeMismatchError, match="expected int"):
        store.get("result", int)


def test_store_errors_share_a_base_class() -> None:
    assert issubclass(NotFoundError, ObjectStoreError)
    assert issubclass(TypeMismatchError, ObjectStoreError)


def test_remove_and_clear_all() -> None:
    store = ObjectStore({})
    store.store("a", 1)
    store.store("b", 2)
    store.remove("a")
    store.remove("never stored")
    assert "a" not in store
    store.clear_all()
    assert len(store) == 0


def test_store_writes_through_to_session_slots() -> None:
    session = SessionState()
    store = ObjectStore(session.slots)
    store.store("key", [1, 2])
    assert session.slots == {"key": [1, 2]}
