"""
Tests for the Entity Store: per-collection put/get/values and the
will attach operations.

Run with: pytest tests/test_store.py -v
"""

import pytest
from sqlalchemy.orm import sessionmaker

from app.modules.estate_planning.models import User, Executor, Will, Asset, Beneficiary
from app.modules.estate_planning.store import EntityStore


@pytest.fixture
def store(db_session):
    return EntityStore(db_session)


@pytest.fixture
def stored_will(store):
    store.users.put(User(id="u1", name="Alice", email="alice@x.com", created_at=1))
    store.executors.put(Executor(id="e1", name="Bob", contact="bob@x.com", created_at=2))
    return store.wills.put(Will(id="w1", user_id="u1", executor_id="e1", is_executed=False, created_at=3))


class TestCollection:

    def test_get_missing_returns_none(self, store):
        assert store.users.get("nope") is None

    def test_put_then_get(self, store):
        store.users.put(User(id="u1", name="Alice", email="alice@x.com", created_at=10))

        user = store.users.get("u1")
        assert user.name == "Alice"
        assert user.created_at == 10

    def test_put_overwrites(self, store):
        user = store.users.put(User(id="u1", name="Alice", email="alice@x.com", created_at=10))
        user.email = "alice@y.com"
        store.users.put(user)

        assert store.users.get("u1").email == "alice@y.com"
        assert len(store.users) == 1

    def test_put_fresh_instance_over_existing_id(self, store):
        store.users.put(User(id="u1", name="Alice", email="a@x.com", created_at=10))

        returned = store.users.put(User(id="u1", name="Alice", email="b@x.com", created_at=10))

        assert returned is store.users.get("u1")
        assert returned.email == "b@x.com"
        assert len(store.users) == 1

    def test_put_from_another_session(self, store, db_session, engine):
        store.users.put(User(id="u1", name="Alice", email="a@x.com", created_at=10))

        other_session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
        try:
            other = EntityStore(other_session)
            other.users.put(User(id="u1", name="Alice", email="b@x.com", created_at=10))
            loaded = other.users.get("u1")
            assert loaded.email == "b@x.com"
        finally:
            other_session.close()

        db_session.expire_all()
        assert store.users.get("u1").email == "b@x.com"
        assert len(store.users) == 1

        # A detached instance from the closed session can be put back
        loaded.email = "c@x.com"
        returned = store.users.put(loaded)

        assert returned is not loaded
        assert returned in db_session
        assert store.users.get("u1").email == "c@x.com"

    def test_values_in_insertion_order(self, store):
        for i, name in enumerate(["Carol", "Alice", "Bob"]):
            store.users.put(User(id=f"id-{9 - i}", name=name, email=f"{name}@x.com", created_at=i))

        assert [u.name for u in store.users.values()] == ["Carol", "Alice", "Bob"]

    def test_values_empty(self, store):
        assert store.executors.values() == []
        assert len(store.executors) == 0


class TestAttach:

    def test_attach_asset_updates_will_and_collection(self, store, stored_will):
        store.attach_asset(stored_will, Asset(id="a1", will_id="w1", name="Car", value=10000, created_at=4))

        will = store.wills.get("w1")
        assert [a.id for a in will.assets] == ["a1"]
        assert store.assets.get("a1") is will.assets[0]

    def test_attach_assigns_positions_in_order(self, store, stored_will):
        for i, name in enumerate(["House", "Car", "Boat"]):
            store.attach_asset(stored_will, Asset(id=f"a{i}", will_id="w1", name=name, value=i, created_at=10 + i))

        will = store.wills.get("w1")
        assert [a.name for a in will.assets] == ["House", "Car", "Boat"]
        assert [a.position for a in will.assets] == [0, 1, 2]

    def test_attach_beneficiary_updates_will_and_collection(self, store, stored_will):
        store.attach_beneficiary(
            stored_will, Beneficiary(id="b1", will_id="w1", name="Carol", share=100, created_at=4)
        )

        will = store.wills.get("w1")
        assert [b.name for b in will.beneficiaries] == ["Carol"]
        assert store.beneficiaries.get("b1").will_id == "w1"

    def test_failed_attach_leaves_both_views_unchanged(self, store, stored_will, db_session, monkeypatch):
        def failing_commit():
            raise RuntimeError("disk full")

        monkeypatch.setattr(db_session, "commit", failing_commit)

        with pytest.raises(RuntimeError):
            store.attach_asset(stored_will, Asset(id="a1", will_id="w1", name="Car", value=1, created_at=4))

        monkeypatch.undo()
        assert store.assets.get("a1") is None
        assert store.wills.get("w1").assets == []
        assert store.assets.values() == []
