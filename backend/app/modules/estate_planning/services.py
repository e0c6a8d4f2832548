"""
Will Service: the write side of the estate planning registry.

Handles:
1. Creating users and executors (required text fields must be non-blank)
2. Creating wills for an existing user and executor
3. Attaching assets and beneficiaries to an existing will
4. Reassigning a will's executor

Every write runs under one process-wide lock, so an operation's reads,
checks and writes never interleave with another write.
"""

import logging
import threading
from typing import Callable, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError, NotFoundError
from app.core.identifiers import Clock, clock as default_clock, new_id
from app.modules.estate_planning.models import User, Executor, Will, Asset, Beneficiary
from app.modules.estate_planning.schemas import MAX_AMOUNT, UserRecord, ExecutorRecord, WillRecord
from app.modules.estate_planning.store import EntityStore

logger = logging.getLogger(__name__)

# Serializes all writes against the entity store
_write_lock = threading.RLock()


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check_amount(label: str, amount: int) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int) or not 0 <= amount <= MAX_AMOUNT:
        logger.warning(f"Rejected {label.lower()} {amount!r}: outside 0..{MAX_AMOUNT}")
        raise ValidationError(f"{label} must be an integer between 0 and {MAX_AMOUNT}.")


class WillService:
    """
    Service for creating registry records and mutating wills.

    Returns records as snapshots (pydantic models); raises
    ``ValidationError`` or ``NotFoundError`` when a request is rejected.
    """

    def __init__(
        self,
        db: Session,
        id_factory: Callable[[], str] = new_id,
        clock: Clock = default_clock,
    ):
        self.store = EntityStore(db)
        self.new_id = id_factory
        self.clock = clock

    def create_user(self, name: Optional[str], email: Optional[str]) -> UserRecord:
        """Create and store a user. Name and email must both be non-blank."""
        if _is_blank(name) or _is_blank(email):
            logger.warning("Rejected user creation: name or email missing")
            raise ValidationError("Name and email are required.")

        with _write_lock:
            user = User(id=self.new_id(), name=name, email=email, created_at=self.clock.now_ns())
            user = self.store.users.put(user)
            logger.info(f"Created user {user.id}")
            return UserRecord.model_validate(user)

    def create_executor(self, name: Optional[str], contact: Optional[str]) -> ExecutorRecord:
        """Create and store an executor. Name and contact must both be non-blank."""
        if _is_blank(name) or _is_blank(contact):
            logger.warning("Rejected executor creation: name or contact missing")
            raise ValidationError("Name and contact are required.")

        with _write_lock:
            executor = Executor(id=self.new_id(), name=name, contact=contact, created_at=self.clock.now_ns())
            executor = self.store.executors.put(executor)
            logger.info(f"Created executor {executor.id}")
            return ExecutorRecord.model_validate(executor)

    def create_will(self, user_id: str, executor_id: str) -> WillRecord:
        """Create an empty, unexecuted will for an existing user and executor."""
        with _write_lock:
            if self.store.users.get(user_id) is None:
                logger.warning(f"Rejected will creation: user {user_id} not found")
                raise NotFoundError("User not found.")
            if self.store.executors.get(executor_id) is None:
                logger.warning(f"Rejected will creation: executor {executor_id} not found")
                raise NotFoundError("Executor not found.")

            will = Will(
                id=self.new_id(),
                user_id=user_id,
                executor_id=executor_id,
                is_executed=False,
                created_at=self.clock.now_ns(),
            )
            will = self.store.wills.put(will)
            logger.info(f"Created will {will.id} for user {user_id}")
            return WillRecord.model_validate(will)

    def add_asset(self, will_id: str, name: str, value: int) -> WillRecord:
        """
        Append a new asset to a will.

        The asset lands in the will's list and in the standalone asset
        collection together. Returns the updated will.
        """
        _check_amount("Value", value)
        with _write_lock:
            will = self._get_will(will_id, "asset")
            asset = Asset(id=self.new_id(), will_id=will_id, name=name, value=value, created_at=self.clock.now_ns())
            self.store.attach_asset(will, asset)
            logger.info(f"Added asset {asset.id} to will {will_id}")
            return WillRecord.model_validate(will)

    def add_beneficiary(self, will_id: str, name: str, share: int) -> WillRecord:
        """Append a new beneficiary to a will. Mirrors ``add_asset``."""
        _check_amount("Share", share)
        with _write_lock:
            will = self._get_will(will_id, "beneficiary")
            beneficiary = Beneficiary(
                id=self.new_id(), will_id=will_id, name=name, share=share, created_at=self.clock.now_ns()
            )
            self.store.attach_beneficiary(will, beneficiary)
            logger.info(f"Added beneficiary {beneficiary.id} to will {will_id}")
            return WillRecord.model_validate(will)

    def assign_executor(self, will_id: str, executor_id: str) -> WillRecord:
        """Point a will at a different existing executor. Prior assignments are not kept."""
        with _write_lock:
            will = self._get_will(will_id, "executor assignment")
            if self.store.executors.get(executor_id) is None:
                logger.warning(f"Rejected executor assignment: executor {executor_id} not found")
                raise NotFoundError("Executor not found.")

            will.executor_id = executor_id
            will = self.store.wills.put(will)
            logger.info(f"Assigned executor {executor_id} to will {will_id}")
            return WillRecord.model_validate(will)

    def _get_will(self, will_id: str, action: str) -> Will:
        will = self.store.wills.get(will_id)
        if will is None:
            logger.warning(f"Rejected {action}: will {will_id} not found")
            raise NotFoundError("Will not found.")
        return will
