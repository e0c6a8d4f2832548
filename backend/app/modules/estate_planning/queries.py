"""
Read-only lookups over the estate planning records.

Single-record lookups raise ``NotFoundError`` for unknown ids. Listing a
whole collection raises ``EmptyCollectionError`` when it holds no records
rather than returning an empty list; callers treat "nothing stored yet"
as its own case. Per-will and per-user listings are not collections and
may be empty.
"""

from typing import List, Type

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, EmptyCollectionError
from app.modules.estate_planning.schemas import (
    RecordBase,
    UserRecord,
    ExecutorRecord,
    WillRecord,
    AssetRecord,
    BeneficiaryRecord,
)
from app.modules.estate_planning.store import Collection, EntityStore


def _get(collection: Collection, record_id: str, schema: Type[RecordBase], label: str):
    row = collection.get(record_id)
    if row is None:
        raise NotFoundError(f"{label} not found.")
    return schema.model_validate(row)


def _get_all(collection: Collection, schema: Type[RecordBase], label: str) -> list:
    rows = collection.values()
    if not rows:
        raise EmptyCollectionError(f"No {label} found.")
    return [schema.model_validate(row) for row in rows]


class RegistryQueries:
    """Query layer; reads the entity store directly, bypassing the Will Service."""

    def __init__(self, db: Session):
        self.store = EntityStore(db)

    # Users

    def get_user(self, user_id: str) -> UserRecord:
        return _get(self.store.users, user_id, UserRecord, "User")

    def get_all_users(self) -> List[UserRecord]:
        return _get_all(self.store.users, UserRecord, "users")

    def get_user_wills(self, user_id: str) -> List[WillRecord]:
        """Wills made by a user, oldest first."""
        user = self.store.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found.")
        return [WillRecord.model_validate(will) for will in user.wills]

    # Executors

    def get_executor(self, executor_id: str) -> ExecutorRecord:
        return _get(self.store.executors, executor_id, ExecutorRecord, "Executor")

    def get_all_executors(self) -> List[ExecutorRecord]:
        return _get_all(self.store.executors, ExecutorRecord, "executors")

    # Wills

    def get_will(self, will_id: str) -> WillRecord:
        return _get(self.store.wills, will_id, WillRecord, "Will")

    def get_all_wills(self) -> List[WillRecord]:
        return _get_all(self.store.wills, WillRecord, "wills")

    def get_will_assets(self, will_id: str) -> List[AssetRecord]:
        return self.get_will(will_id).assets

    def get_will_beneficiaries(self, will_id: str) -> List[BeneficiaryRecord]:
        return self.get_will(will_id).beneficiaries

    # Standalone assets and beneficiaries

    def get_asset(self, asset_id: str) -> AssetRecord:
        return _get(self.store.assets, asset_id, AssetRecord, "Asset")

    def get_all_assets(self) -> List[AssetRecord]:
        return _get_all(self.store.assets, AssetRecord, "assets")

    def get_beneficiary(self, beneficiary_id: str) -> BeneficiaryRecord:
        return _get(self.store.beneficiaries, beneficiary_id, BeneficiaryRecord, "Beneficiary")

    def get_all_beneficiaries(self) -> List[BeneficiaryRecord]:
        return _get_all(self.store.beneficiaries, BeneficiaryRecord, "beneficiaries")
