"""
HR schemas: employees and their per-employee collections.

``employee_id`` on the employee record is the staff code shown on the
badge; on every other HR entity it references ``EmployeeRecord.id``.
Server-managed fields (``created_at``, workflow ``status``) are absent
from the ``*Create`` models and set by the storage service.
"""

from typing import Literal, Optional

from pydantic import Field

from neudebri.schemas.base import CamelModel

EmployeeStatus = Literal["active", "on_leave", "inactive"]
AttendanceStatus = Literal["present", "absent", "late", "half_day"]
LeaveStatus = Literal["pending", "approved", "rejected"]
PayrollStatus = Literal["pending", "processed", "paid"]
ReviewStatus = Literal["draft", "submitted", "acknowledged"]


class EmployeeRecordCreate(CamelModel):
    employee_id: str
    first_name: str
    last_name: str
    designation: str
    department: str
    join_date: str
    salary: float
    user_id: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    employment_type: str = "full_time"
    currency: str = "KES"
    status: EmployeeStatus = "active"


class EmployeeRecord(EmployeeRecordCreate):
    id: str
    created_at: str
    updated_at: str


class EmployeeRecordUpdate(CamelModel):
    """Partial update; only the fields sent are applied."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    designation: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[float] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    employment_type: Optional[str] = None
    currency: Optional[str] = None
    status: Optional[EmployeeStatus] = None


class ShiftScheduleCreate(CamelModel):
    employee_id: str
    date: str
    shift_type: str  # morning, evening, night, on_call
    start_time: str
    end_time: str
    department: Optional[str] = None
    notes: Optional[str] = None


class ShiftSchedule(ShiftScheduleCreate):
    id: str
    created_at: str


class AttendanceRecordCreate(CamelModel):
    employee_id: str
    date: str
    status: AttendanceStatus
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    notes: Optional[str] = None


class AttendanceRecord(AttendanceRecordCreate):
    id: str
    created_at: str


class LeaveRequestCreate(CamelModel):
    employee_id: str
    leave_type: str  # annual, sick, maternity, study
    start_date: str
    end_date: str
    reason: Optional[str] = None


class LeaveRequest(LeaveRequestCreate):
    id: str
    status: LeaveStatus = "pending"
    approved_by: Optional[str] = None
    approval_date: Optional[str] = None
    created_at: str


class LeaveDecision(CamelModel):
    approved_by: str


class PayrollRecordCreate(CamelModel):
    employee_id: str
    month: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    basic_salary: float
    allowances: float = 0
    deductions: float = 0
    net_salary: Optional[float] = None
    currency: str = "KES"


class PayrollRecord(PayrollRecordCreate):
    id: str
    net_salary: float
    status: PayrollStatus = "pending"
    created_at: str


class PerformanceReviewCreate(CamelModel):
    employee_id: str
    reviewer_id: str
    review_period: str
    rating: float
    strengths: Optional[str] = None
    improvements: Optional[str] = None
    goals: Optional[str] = None


class PerformanceReview(PerformanceReviewCreate):
    id: str
    status: ReviewStatus = "draft"
    created_at: str


class CertificationCreate(CamelModel):
    employee_id: str
    name: str
    issuing_body: str
    issue_date: str
    expiry_date: Optional[str] = None
    certificate_number: Optional[str] = None


class Certification(CertificationCreate):
    id: str
    created_at: str


class AssetAllocationCreate(CamelModel):
    employee_id: str
    asset_name: str
    asset_type: str
    allocated_date: str
    serial_number: Optional[str] = None
    return_date: Optional[str] = None
    condition: str = "good"
    status: str = "allocated"
    notes: Optional[str] = None


class AssetAllocation(AssetAllocationCreate):
    id: str
    created_at: str
