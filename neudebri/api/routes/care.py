"""Departments and wound care endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from neudebri.core.dependencies import get_patient_id, get_storage_service
from neudebri.schemas import (
    Department,
    DepartmentCreate,
    WoundRecord,
    WoundRecordCreate,
)
from neudebri.services import StorageService

router = APIRouter(tags=["care"])


@router.get("/departments", response_model=List[Department])
async def get_departments(storage: StorageService = Depends(get_storage_service)):
    return storage.get_departments()


@router.post("/departments", response_model=Department, status_code=201)
async def create_department(
    payload: DepartmentCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_department(payload)


@router.get("/wound-care", response_model=List[WoundRecord])
async def get_wound_records(
    patient_id: str = Depends(get_patient_id),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_wound_records(patient_id)


@router.post("/wound-care", response_model=WoundRecord, status_code=201)
async def create_wound_record(
    payload: WoundRecordCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_wound_record(payload)
