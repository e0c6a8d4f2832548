"""
Entity Store for the estate planning records.

Five collections (users, executors, wills, assets, beneficiaries), each an
ordered id -> record mapping backed by one table. The store has no
relational rules of its own apart from ``attach_asset`` and
``attach_beneficiary``, which add a child to a will and to its standalone
collection in one transaction.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app.modules.estate_planning.models import User, Executor, Will, Asset, Beneficiary

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", User, Executor, Will, Asset, Beneficiary)


class Collection(Generic[ModelT]):
    """One table viewed as an insertion-ordered key-value map."""

    def __init__(self, store: "EntityStore", model: Type[ModelT]):
        self.store = store
        self.model = model

    def put(self, record: ModelT) -> ModelT:
        """
        Insert or overwrite the record under its id.

        ``record`` may be a fresh instance or one loaded by another session;
        its state is merged onto the row with the same id. Returns the
        instance attached to this store's session.
        """
        merged = self.store.db.merge(record)
        self.store.commit(f"put {self.model.__tablename__}/{merged.id}")
        return merged

    def get(self, record_id: str) -> Optional[ModelT]:
        """Return the record, or None when the id is unknown."""
        return self.store.db.get(self.model, record_id)

    def values(self) -> List[ModelT]:
        """All records in insertion order."""
        return (
            self.store.db.query(self.model)
            .order_by(self.model.created_at, self.model.id)
            .all()
        )

    def __len__(self) -> int:
        return self.store.db.query(self.model).count()


class EntityStore:
    """
    Storage handle over a database session.

    A fresh store per session; tests get isolation by binding each one to
    its own in-memory engine.
    """

    def __init__(self, db: Session):
        self.db = db
        self.users: Collection[User] = Collection(self, User)
        self.executors: Collection[Executor] = Collection(self, Executor)
        self.wills: Collection[Will] = Collection(self, Will)
        self.assets: Collection[Asset] = Collection(self, Asset)
        self.beneficiaries: Collection[Beneficiary] = Collection(self, Beneficiary)

    def attach_asset(self, will: Will, asset: Asset) -> Will:
        """
        Append ``asset`` to the will's asset list and store it as a
        standalone asset. Both happen or neither does.
        """
        asset.will_id = will.id
        asset.position = len(will.assets)
        will.assets.append(asset)
        self.db.add(asset)
        self.commit(f"attach asset {asset.id} to will {will.id}")
        return will

    def attach_beneficiary(self, will: Will, beneficiary: Beneficiary) -> Will:
        """Beneficiary counterpart of ``attach_asset``."""
        beneficiary.will_id = will.id
        beneficiary.position = len(will.beneficiaries)
        will.beneficiaries.append(beneficiary)
        self.db.add(beneficiary)
        self.commit(f"attach beneficiary {beneficiary.id} to will {will.id}")
        return will

    def commit(self, action: str) -> None:
        """Commit the pending writes, rolling everything back on failure."""
        try:
            self.db.commit()
        except Exception as e:
            logger.error(f"[ENTITY_STORE] Error during {action}: {e}")
            self.db.rollback()
            raise
