"""User directory endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from neudebri.core.dependencies import Identity, get_identity, get_storage_service
from neudebri.schemas import UserPublic
from neudebri.services import StorageService

router = APIRouter(tags=["users"])


@router.get("/users/patients", response_model=List[UserPublic])
async def get_patients(storage: StorageService = Depends(get_storage_service)):
    return [user.to_public() for user in storage.get_all_patients()]


@router.get("/users/doctors", response_model=List[UserPublic])
async def get_doctors(storage: StorageService = Depends(get_storage_service)):
    """Clinical staff (doctors and nurses)."""
    return [user.to_public() for user in storage.get_all_doctors()]


@router.get("/users/contacts", response_model=List[UserPublic])
async def get_contacts(
    identity: Identity = Depends(get_identity),
    storage: StorageService = Depends(get_storage_service),
):
    """Patients see clinical staff; everyone else sees patients."""
    contacts = storage.get_contacts(identity.user_id, identity.role)
    return [user.to_public() for user in contacts]


@router.patch("/users/{user_id}/deactivate", response_model=UserPublic)
async def deactivate_user(
    user_id: str, storage: StorageService = Depends(get_storage_service)
):
    user = storage.deactivate_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user.to_public()


@router.get("/nurses", response_model=List[UserPublic])
async def get_nurses(storage: StorageService = Depends(get_storage_service)):
    return [user.to_public() for user in storage.get_nurses()]
