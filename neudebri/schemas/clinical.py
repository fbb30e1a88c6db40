"""
Clinical schemas: appointments, health records, vitals, labs,
prescriptions, messages, departments and wound care.

Each entity has a ``*Create`` input model carrying the field defaults and
a stored model adding the generated ``id``. The ``*With*`` models are
read-time views with related users attached.
"""

from typing import List, Literal, Optional

from neudebri.schemas.base import CamelModel
from neudebri.schemas.users import UserPublic

AppointmentStatus = Literal[
    "scheduled", "confirmed", "in_progress", "completed", "cancelled", "no_show"
]
AppointmentType = Literal["in_person", "virtual", "follow_up", "emergency"]
LabResultStatus = Literal["pending", "in_progress", "completed", "reviewed"]
PrescriptionStatus = Literal["active", "completed", "cancelled", "on_hold"]


# ============================================================
# APPOINTMENTS
# ============================================================


class AppointmentCreate(CamelModel):
    patient_id: str
    doctor_id: str
    date_time: str
    end_time: str
    type: AppointmentType
    status: AppointmentStatus
    reason: Optional[str] = None
    notes: Optional[str] = None
    department: Optional[str] = None


class Appointment(AppointmentCreate):
    id: str


class AppointmentWithDetails(Appointment):
    """Appointment with patient and doctor attached; null when dangling."""

    patient: Optional[UserPublic] = None
    doctor: Optional[UserPublic] = None


class AppointmentStatusUpdate(CamelModel):
    status: AppointmentStatus


# ============================================================
# HEALTH RECORDS / VITALS / LABS
# ============================================================


class HealthRecordCreate(CamelModel):
    patient_id: str
    record_type: str  # diagnosis, condition, allergy, surgery, immunization
    title: str
    date: str
    description: Optional[str] = None
    doctor_id: Optional[str] = None
    severity: Optional[str] = None  # mild, moderate, severe
    status: Optional[str] = None  # active, resolved, chronic


class HealthRecord(HealthRecordCreate):
    id: str


class VitalSignsCreate(CamelModel):
    patient_id: str
    recorded_at: str
    recorded_by: Optional[str] = None
    blood_pressure_systolic: Optional[int] = None
    blood_pressure_diastolic: Optional[int] = None
    heart_rate: Optional[int] = None
    temperature: Optional[str] = None
    respiratory_rate: Optional[int] = None
    oxygen_saturation: Optional[int] = None
    weight: Optional[str] = None
    height: Optional[str] = None
    notes: Optional[str] = None


class VitalSigns(VitalSignsCreate):
    id: str


class LabResultCreate(CamelModel):
    patient_id: str
    test_name: str
    ordered_date: str
    status: LabResultStatus
    test_code: Optional[str] = None
    ordered_by: Optional[str] = None
    result_date: Optional[str] = None
    result: Optional[str] = None
    normal_range: Optional[str] = None
    unit: Optional[str] = None
    is_abnormal: bool = False
    notes: Optional[str] = None


class LabResult(LabResultCreate):
    id: str


class LabResultWithDoctor(LabResult):
    ordered_by_doctor: Optional[UserPublic] = None


# ============================================================
# PRESCRIPTIONS
# ============================================================


class PrescriptionCreate(CamelModel):
    patient_id: str
    doctor_id: str
    medication_name: str
    dosage: str
    frequency: str
    start_date: str
    status: PrescriptionStatus
    route: Optional[str] = None  # oral, injection, topical
    end_date: Optional[str] = None
    refills_remaining: int = 0
    refills_total: int = 0
    instructions: Optional[str] = None
    pharmacy: Optional[str] = None
    notes: Optional[str] = None


class Prescription(PrescriptionCreate):
    id: str


class PrescriptionWithDoctor(Prescription):
    doctor: Optional[UserPublic] = None


# ============================================================
# MESSAGES
# ============================================================


class MessageCreate(CamelModel):
    sender_id: str
    receiver_id: str
    content: str
    sent_at: Optional[str] = None
    subject: Optional[str] = None
    read_at: Optional[str] = None
    is_read: bool = False
    is_archived: bool = False
    priority: str = "normal"  # low, normal, high, urgent
    attachments: Optional[List[str]] = None


class Message(MessageCreate):
    id: str
    sent_at: str


class MessageWithParties(Message):
    sender: Optional[UserPublic] = None
    receiver: Optional[UserPublic] = None


# ============================================================
# DEPARTMENTS / WOUND CARE
# ============================================================


class DepartmentCreate(CamelModel):
    name: str
    description: Optional[str] = None
    head_doctor_id: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    is_active: bool = True


class Department(DepartmentCreate):
    id: str


class WoundRecordCreate(CamelModel):
    patient_id: str
    date: str
    wound_type: str
    nurse_id: Optional[str] = None
    doctor_id: Optional[str] = None
    size: Optional[str] = None
    stage: Optional[str] = None
    description: Optional[str] = None
    treatment_plan: Optional[str] = None
    photos: Optional[List[str]] = None
    notes: Optional[str] = None


class WoundRecord(WoundRecordCreate):
    id: str
