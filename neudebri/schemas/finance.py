"""
Billing, payment and insurance schemas.
"""

from typing import Literal, Optional

from neudebri.schemas.base import CamelModel

BillingStatus = Literal["pending", "paid", "partial", "cancelled"]


class InsuranceProvider(CamelModel):
    id: str
    name: str
    code: str


class BillingRecordCreate(CamelModel):
    patient_id: str
    amount: float
    invoice_number: str
    currency: str = "KES"
    status: BillingStatus = "pending"
    insurance_provider_id: Optional[str] = None
    description: Optional[str] = None


class BillingRecord(BillingRecordCreate):
    id: str
    created_at: str


class PaymentCreate(CamelModel):
    billing_id: str
    amount: float
    currency: str = "KES"
    method: Optional[str] = None  # cash, card, mobile_money, insurance
    reference: Optional[str] = None


class Payment(PaymentCreate):
    id: str
    paid_at: str
