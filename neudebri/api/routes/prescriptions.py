"""Prescription endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from neudebri.core.dependencies import Identity, get_identity, get_storage_service
from neudebri.schemas import (
    MessageResponse,
    Prescription,
    PrescriptionCreate,
    PrescriptionWithDoctor,
)
from neudebri.services import StorageService

router = APIRouter(prefix="/prescriptions", tags=["prescriptions"])


@router.get("", response_model=List[PrescriptionWithDoctor])
async def get_prescriptions(
    identity: Identity = Depends(get_identity),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_prescriptions(identity.user_id, identity.role)


@router.post("", response_model=Prescription, status_code=201)
async def create_prescription(
    payload: PrescriptionCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_prescription(payload)


@router.post("/{prescription_id}/refill", response_model=MessageResponse)
async def request_refill(
    prescription_id: str, storage: StorageService = Depends(get_storage_service)
):
    """
    Submit a refill request.

    Always acknowledged; the prescription itself is left unchanged.
    """
    return MessageResponse(message=storage.request_prescription_refill(prescription_id))
