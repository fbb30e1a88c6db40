"""Clinical record endpoints: health records, vital signs, lab results."""

from typing import List

from fastapi import APIRouter, Depends

from neudebri.core.dependencies import get_patient_id, get_storage_service
from neudebri.schemas import (
    HealthRecord,
    HealthRecordCreate,
    LabResult,
    LabResultCreate,
    LabResultWithDoctor,
    VitalSigns,
    VitalSignsCreate,
)
from neudebri.services import StorageService

router = APIRouter(tags=["clinical"])


# ============================================================
# HEALTH RECORDS
# ============================================================


@router.get("/health-records", response_model=List[HealthRecord])
async def get_health_records(
    patient_id: str = Depends(get_patient_id),
    storage: StorageService = Depends(get_storage_service),
):
    """Medical history for a patient, newest first."""
    return storage.get_health_records(patient_id)


@router.post("/health-records", response_model=HealthRecord, status_code=201)
async def create_health_record(
    payload: HealthRecordCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_health_record(payload)


# ============================================================
# VITAL SIGNS
# ============================================================


@router.get("/vital-signs", response_model=List[VitalSigns])
async def get_vital_signs(
    patient_id: str = Depends(get_patient_id),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_vital_signs(patient_id)


@router.post("/vital-signs", response_model=VitalSigns, status_code=201)
async def create_vital_signs(
    payload: VitalSignsCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_vital_signs(payload)


# ============================================================
# LAB RESULTS
# ============================================================


@router.get("/lab-results", response_model=List[LabResultWithDoctor])
async def get_lab_results(
    patient_id: str = Depends(get_patient_id),
    storage: StorageService = Depends(get_storage_service),
):
    """Lab results with the ordering doctor attached, newest order first."""
    return storage.get_lab_results(patient_id)


@router.post("/lab-results", response_model=LabResult, status_code=201)
async def create_lab_result(
    payload: LabResultCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_lab_result(payload)
