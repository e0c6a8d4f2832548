"""
Request payloads and record shapes for the estate planning API.

Records serialize with camelCase keys (``createdAt``, ``willId``,
``isExecuted``); Python code uses the snake_case attribute names.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from app.core.timezone import format_ns_for_api

# Asset values and beneficiary shares are unsigned 64-bit integers
MAX_AMOUNT = 2**64 - 1


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; snake_case names work as well."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Payloads

class UserPayload(CamelModel):
    """Request body for creating a user. Blank fields are rejected by the service."""
    name: Optional[str] = None
    email: Optional[str] = None


class ExecutorPayload(CamelModel):
    """Request body for creating an executor."""
    name: Optional[str] = None
    contact: Optional[str] = None


class WillPayload(CamelModel):
    """Request body for creating a will."""
    user_id: str
    executor_id: str


class AssetPayload(CamelModel):
    """Request body for adding an asset to a will."""
    will_id: str
    name: str
    value: int = Field(ge=0, le=MAX_AMOUNT)


class BeneficiaryPayload(CamelModel):
    """Request body for adding a beneficiary to a will."""
    will_id: str
    name: str
    share: int = Field(ge=0, le=MAX_AMOUNT)


class AssignExecutorPayload(CamelModel):
    """Request body for reassigning a will's executor."""
    will_id: str
    executor_id: str


# Records

class RecordBase(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: int

    @computed_field(alias="createdAtIso")
    @property
    def created_at_iso(self) -> Optional[str]:
        return format_ns_for_api(self.created_at)


class UserRecord(RecordBase):
    name: str
    email: str


class ExecutorRecord(RecordBase):
    name: str
    contact: str


class AssetRecord(RecordBase):
    will_id: str
    name: str
    value: int


class BeneficiaryRecord(RecordBase):
    will_id: str
    name: str
    share: int


class WillRecord(RecordBase):
    """A will with its assets and beneficiaries in insertion order."""
    user_id: str
    executor_id: str
    assets: List[AssetRecord] = []
    beneficiaries: List[BeneficiaryRecord] = []
    is_executed: bool = False
