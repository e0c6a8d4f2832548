"""
Estate Planning API routes.
Handles users, executors, wills, and the assets and beneficiaries attached to wills.

Registry errors raised by the service and query layers are turned into
JSON responses by the handlers registered in app.main.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.modules.estate_planning.queries import RegistryQueries
from app.modules.estate_planning.services import WillService
from app.modules.estate_planning.schemas import (
    UserPayload,
    ExecutorPayload,
    WillPayload,
    AssetPayload,
    BeneficiaryPayload,
    AssignExecutorPayload,
    UserRecord,
    ExecutorRecord,
    WillRecord,
    AssetRecord,
    BeneficiaryRecord,
)

router = APIRouter()


def get_will_service(db: Session = Depends(get_db)) -> WillService:
    return WillService(db)


def get_queries(db: Session = Depends(get_db)) -> RegistryQueries:
    return RegistryQueries(db)


# Users

@router.post("/users", response_model=UserRecord, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserPayload, service: WillService = Depends(get_will_service)):
    """Register a testator. Name and email are required."""
    return service.create_user(payload.name, payload.email)


@router.get("/users", response_model=List[UserRecord])
async def list_users(queries: RegistryQueries = Depends(get_queries)):
    """List all users. 404 when none exist."""
    return queries.get_all_users()


@router.get("/users/{user_id}", response_model=UserRecord)
async def get_user(user_id: str, queries: RegistryQueries = Depends(get_queries)):
    return queries.get_user(user_id)


@router.get("/users/{user_id}/wills", response_model=List[WillRecord])
async def list_user_wills(user_id: str, queries: RegistryQueries = Depends(get_queries)):
    """Wills made by a user, oldest first (may be empty)."""
    return queries.get_user_wills(user_id)


# Executors

@router.post("/executors", response_model=ExecutorRecord, status_code=status.HTTP_201_CREATED)
async def create_executor(payload: ExecutorPayload, service: WillService = Depends(get_will_service)):
    """Register an executor. Name and contact are required."""
    return service.create_executor(payload.name, payload.contact)


@router.get("/executors", response_model=List[ExecutorRecord])
async def list_executors(queries: RegistryQueries = Depends(get_queries)):
    """List all executors. 404 when none exist."""
    return queries.get_all_executors()


@router.get("/executors/{executor_id}", response_model=ExecutorRecord)
async def get_executor(executor_id: str, queries: RegistryQueries = Depends(get_queries)):
    return queries.get_executor(executor_id)


# Wills

@router.post("/wills", response_model=WillRecord, status_code=status.HTTP_201_CREATED)
async def create_will(payload: WillPayload, service: WillService = Depends(get_will_service)):
    """Create an empty will binding an existing user and executor."""
    return service.create_will(payload.user_id, payload.executor_id)


@router.post("/wills/assign-executor", response_model=WillRecord)
async def assign_executor(payload: AssignExecutorPayload, service: WillService = Depends(get_will_service)):
    """Replace a will's executor with another existing executor."""
    return service.assign_executor(payload.will_id, payload.executor_id)


@router.get("/wills", response_model=List[WillRecord])
async def list_wills(queries: RegistryQueries = Depends(get_queries)):
    """List all wills. 404 when none exist."""
    return queries.get_all_wills()


@router.get("/wills/{will_id}", response_model=WillRecord)
async def get_will(will_id: str, queries: RegistryQueries = Depends(get_queries)):
    """Get a will with its assets and beneficiaries."""
    return queries.get_will(will_id)


@router.get("/wills/{will_id}/assets", response_model=List[AssetRecord])
async def list_will_assets(will_id: str, queries: RegistryQueries = Depends(get_queries)):
    return queries.get_will_assets(will_id)


@router.get("/wills/{will_id}/beneficiaries", response_model=List[BeneficiaryRecord])
async def list_will_beneficiaries(will_id: str, queries: RegistryQueries = Depends(get_queries)):
    return queries.get_will_beneficiaries(will_id)


# Assets

@router.post("/assets", response_model=WillRecord, status_code=status.HTTP_201_CREATED)
async def add_asset(payload: AssetPayload, service: WillService = Depends(get_will_service)):
    """Attach a new asset to a will. Returns the updated will."""
    return service.add_asset(payload.will_id, payload.name, payload.value)


@router.get("/assets", response_model=List[AssetRecord])
async def list_assets(queries: RegistryQueries = Depends(get_queries)):
    return queries.get_all_assets()


@router.get("/assets/{asset_id}", response_model=AssetRecord)
async def get_asset(asset_id: str, queries: RegistryQueries = Depends(get_queries)):
    return queries.get_asset(asset_id)


# Beneficiaries

@router.post("/beneficiaries", response_model=WillRecord, status_code=status.HTTP_201_CREATED)
async def add_beneficiary(payload: BeneficiaryPayload, service: WillService = Depends(get_will_service)):
    """Name a new beneficiary on a will. Returns the updated will."""
    return service.add_beneficiary(payload.will_id, payload.name, payload.share)


@router.get("/beneficiaries", response_model=List[BeneficiaryRecord])
async def list_beneficiaries(queries: RegistryQueries = Depends(get_queries)):
    return queries.get_all_beneficiaries()


@router.get("/beneficiaries/{beneficiary_id}", response_model=BeneficiaryRecord)
async def get_beneficiary(beneficiary_id: str, queries: RegistryQueries = Depends(get_queries)):
    return queries.get_beneficiary(beneficiary_id)
