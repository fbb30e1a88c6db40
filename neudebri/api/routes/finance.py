"""Billing, insurance and payment endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from neudebri.core.dependencies import get_patient_id, get_storage_service
from neudebri.schemas import (
    BillingRecord,
    BillingRecordCreate,
    InsuranceProvider,
    Payment,
    PaymentCreate,
)
from neudebri.services import StorageService

router = APIRouter(prefix="/finance", tags=["finance"])


@router.get("/billing", response_model=List[BillingRecord])
async def get_billing(
    patient_id: str = Depends(get_patient_id),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_billing_for_patient(patient_id)


@router.post("/billing", response_model=BillingRecord, status_code=201)
async def create_billing_record(
    payload: BillingRecordCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_billing_record(payload)


@router.get("/insurances", response_model=List[InsuranceProvider])
async def get_insurances(storage: StorageService = Depends(get_storage_service)):
    return storage.get_insurance_providers()


@router.get("/payments", response_model=List[Payment])
async def get_payments(
    billing_id: Optional[str] = Query(None, alias="billingId"),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_payments(billing_id)


@router.post("/payments", response_model=Payment, status_code=201)
async def create_payment(
    payload: PaymentCreate,
    storage: StorageService = Depends(get_storage_service),
):
    """Record a payment; the referenced bill becomes ``paid`` or ``partial``."""
    return storage.create_payment(payload)
