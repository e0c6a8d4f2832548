"""
Tests for the Alembic migrations: the schema they build matches the models
and holds the full unsigned 64-bit amount range.

Run with: pytest tests/test_migrations.py -v
"""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.modules.estate_planning.queries import RegistryQueries
from app.modules.estate_planning.services import WillService

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"


@pytest.fixture
def migrated_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setattr(settings, "DATABASE_URL", url)

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    command.upgrade(config, "head")
    return url


class TestUpgrade:

    def test_creates_all_tables(self, migrated_url):
        engine = create_engine(migrated_url)
        try:
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()

        assert {"users", "executors", "wills", "assets", "beneficiaries"} <= tables

    def test_amounts_survive_the_migrated_schema(self, migrated_url):
        engine = create_engine(migrated_url)
        session = sessionmaker(bind=engine)()
        try:
            service = WillService(session)
            alice = service.create_user("Alice", "alice@x.com")
            bob = service.create_executor("Bob", "bob@x.com")
            will = service.create_will(alice.id, bob.id)
            service.add_asset(will.id, "Estate", 2**64 - 1)
            service.add_beneficiary(will.id, "Carol", 2**63)

            session.expire_all()
            stored = RegistryQueries(session).get_will(will.id)
            assert stored.assets[0].value == 2**64 - 1
            assert stored.beneficiaries[0].share == 2**63
        finally:
            session.close()
            engine.dispose()
