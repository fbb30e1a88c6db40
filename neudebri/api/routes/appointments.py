"""Appointment endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from neudebri.core.dependencies import Identity, get_identity, get_storage_service
from neudebri.schemas import (
    Appointment,
    AppointmentCreate,
    AppointmentStatusUpdate,
    AppointmentWithDetails,
)
from neudebri.services import StorageService

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.get("", response_model=List[AppointmentWithDetails])
async def get_appointments(
    identity: Identity = Depends(get_identity),
    storage: StorageService = Depends(get_storage_service),
):
    """Appointments visible to ``userId`` as ``role``, with patient and doctor."""
    return storage.get_appointments(identity.user_id, identity.role)


@router.get("/upcoming", response_model=List[AppointmentWithDetails])
async def get_upcoming_appointments(
    identity: Identity = Depends(get_identity),
    storage: StorageService = Depends(get_storage_service),
):
    """Future, non-cancelled appointments, soonest first."""
    return storage.get_upcoming_appointments(identity.user_id, identity.role)


@router.get("/virtual", response_model=List[AppointmentWithDetails])
async def get_virtual_appointments(
    identity: Identity = Depends(get_identity),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_virtual_appointments(identity.user_id, identity.role)


@router.post("", response_model=Appointment, status_code=201)
async def create_appointment(
    payload: AppointmentCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_appointment(payload)


@router.patch("/{appointment_id}/cancel", response_model=Appointment)
async def cancel_appointment(
    appointment_id: str, storage: StorageService = Depends(get_storage_service)
):
    appointment = storage.cancel_appointment(appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment


@router.patch("/{appointment_id}/status", response_model=Appointment)
async def update_appointment_status(
    appointment_id: str,
    payload: AppointmentStatusUpdate,
    storage: StorageService = Depends(get_storage_service),
):
    appointment = storage.update_appointment_status(appointment_id, payload.status)
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment
