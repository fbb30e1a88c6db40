"""
Schemas package initialization.
"""

from neudebri.schemas.base import CamelModel, HealthCheck, MessageResponse, ErrorResponse
from neudebri.schemas.users import (
    UserRole,
    UserCreate,
    UserPublic,
    User,
    LoginRequest,
    AuthResponse,
)
from neudebri.schemas.clinical import (
    AppointmentCreate,
    Appointment,
    AppointmentWithDetails,
    AppointmentStatusUpdate,
    HealthRecordCreate,
    HealthRecord,
    VitalSignsCreate,
    VitalSigns,
    LabResultCreate,
    LabResult,
    LabResultWithDoctor,
    PrescriptionCreate,
    Prescription,
    PrescriptionWithDoctor,
    MessageCreate,
    Message,
    MessageWithParties,
    DepartmentCreate,
    Department,
    WoundRecordCreate,
    WoundRecord,
)
from neudebri.schemas.finance import (
    InsuranceProvider,
    BillingRecordCreate,
    BillingRecord,
    PaymentCreate,
    Payment,
)
from neudebri.schemas.hr import (
    EmployeeRecordCreate,
    EmployeeRecord,
    EmployeeRecordUpdate,
    ShiftScheduleCreate,
    ShiftSchedule,
    AttendanceRecordCreate,
    AttendanceRecord,
    LeaveRequestCreate,
    LeaveRequest,
    LeaveDecision,
    PayrollRecordCreate,
    PayrollRecord,
    PerformanceReviewCreate,
    PerformanceReview,
    CertificationCreate,
    Certification,
    AssetAllocationCreate,
    AssetAllocation,
)
from neudebri.schemas.ipd import Ward, Admission, AdmissionView, WardLoad, WardOccupancy
from neudebri.schemas.stats import DashboardStats, HRStats

__all__ = [
    "CamelModel",
    "HealthCheck",
    "MessageResponse",
    "ErrorResponse",
    # Users
    "UserRole",
    "UserCreate",
    "UserPublic",
    "User",
    "LoginRequest",
    "AuthResponse",
    # Clinical
    "AppointmentCreate",
    "Appointment",
    "AppointmentWithDetails",
    "AppointmentStatusUpdate",
    "HealthRecordCreate",
    "HealthRecord",
    "VitalSignsCreate",
    "VitalSigns",
    "LabResultCreate",
    "LabResult",
    "LabResultWithDoctor",
    "PrescriptionCreate",
    "Prescription",
    "PrescriptionWithDoctor",
    "MessageCreate",
    "Message",
    "MessageWithParties",
    "DepartmentCreate",
    "Department",
    "WoundRecordCreate",
    "WoundRecord",
    # Finance
    "InsuranceProvider",
    "BillingRecordCreate",
    "BillingRecord",
    "PaymentCreate",
    "Payment",
    # HR
    "EmployeeRecordCreate",
    "EmployeeRecord",
    "EmployeeRecordUpdate",
    "ShiftScheduleCreate",
    "ShiftSchedule",
    "AttendanceRecordCreate",
    "AttendanceRecord",
    "LeaveRequestCreate",
    "LeaveRequest",
    "LeaveDecision",
    "PayrollRecordCreate",
    "PayrollRecord",
    "PerformanceReviewCreate",
    "PerformanceReview",
    "CertificationCreate",
    "Certification",
    "AssetAllocationCreate",
    "AssetAllocation",
    # IPD
    "Ward",
    "Admission",
    "AdmissionView",
    "WardLoad",
    "WardOccupancy",
    # Aggregates
    "DashboardStats",
    "HRStats",
]
