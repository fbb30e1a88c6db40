"""
HR endpoints.

Employee records plus the per-employee collections (attendance, leave,
payroll, reviews, shifts, certifications, assets) and the HR summary.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from neudebri.core.dependencies import get_stats_service, get_storage_service
from neudebri.schemas import (
    AssetAllocation,
    AssetAllocationCreate,
    AttendanceRecord,
    AttendanceRecordCreate,
    Certification,
    CertificationCreate,
    EmployeeRecord,
    EmployeeRecordCreate,
    EmployeeRecordUpdate,
    HRStats,
    LeaveDecision,
    LeaveRequest,
    LeaveRequestCreate,
    PayrollRecord,
    PayrollRecordCreate,
    PerformanceReview,
    PerformanceReviewCreate,
    ShiftSchedule,
    ShiftScheduleCreate,
)
from neudebri.services import StatsService, StorageService

router = APIRouter(prefix="/hr", tags=["hr"])


def employee_filter(employee_id: Optional[str] = Query(None, alias="employeeId")):
    return employee_id


# ============================================================
# EMPLOYEES
# ============================================================


@router.get("/employees", response_model=List[EmployeeRecord])
async def get_employees(storage: StorageService = Depends(get_storage_service)):
    return storage.get_employees()


@router.post("/employees", response_model=EmployeeRecord, status_code=201)
async def create_employee(
    payload: EmployeeRecordCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_employee(payload)


@router.get("/employees/{employee_id}", response_model=EmployeeRecord)
async def get_employee(
    employee_id: str, storage: StorageService = Depends(get_storage_service)
):
    employee = storage.get_employee_by_id(employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.patch("/employees/{employee_id}", response_model=EmployeeRecord)
async def update_employee(
    employee_id: str,
    payload: EmployeeRecordUpdate,
    storage: StorageService = Depends(get_storage_service),
):
    employee = storage.update_employee(employee_id, payload)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


# ============================================================
# ATTENDANCE
# ============================================================


@router.get("/attendance", response_model=List[AttendanceRecord])
async def get_attendance(
    employee_id: Optional[str] = Depends(employee_filter),
    month: Optional[str] = Query(None),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    storage: StorageService = Depends(get_storage_service),
):
    """Attendance, optionally narrowed by employee, ``YYYY-MM`` month or range."""
    return storage.get_attendance_records(employee_id, month, start_date, end_date)


@router.post("/attendance", response_model=AttendanceRecord, status_code=201)
async def create_attendance(
    payload: AttendanceRecordCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_attendance_record(payload)


# ============================================================
# LEAVE
# ============================================================


@router.get("/leaves", response_model=List[LeaveRequest])
async def get_leaves(
    employee_id: Optional[str] = Depends(employee_filter),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_leave_requests(employee_id)


@router.post("/leaves", response_model=LeaveRequest, status_code=201)
async def create_leave(
    payload: LeaveRequestCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_leave_request(payload)


@router.patch("/leaves/{leave_id}/approve", response_model=LeaveRequest)
async def approve_leave(
    leave_id: str,
    payload: LeaveDecision,
    storage: StorageService = Depends(get_storage_service),
):
    leave = storage.approve_leave_request(leave_id, payload.approved_by)
    if not leave:
        raise HTTPException(status_code=404, detail="Leave request not found")
    return leave


@router.patch("/leaves/{leave_id}/reject", response_model=LeaveRequest)
async def reject_leave(
    leave_id: str,
    payload: LeaveDecision,
    storage: StorageService = Depends(get_storage_service),
):
    leave = storage.reject_leave_request(leave_id, payload.approved_by)
    if not leave:
        raise HTTPException(status_code=404, detail="Leave request not found")
    return leave


# ============================================================
# PAYROLL / REVIEWS
# ============================================================


@router.get("/payroll", response_model=List[PayrollRecord])
async def get_payroll(
    employee_id: Optional[str] = Depends(employee_filter),
    month: Optional[str] = Query(None),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_payroll_records(employee_id, month)


@router.post("/payroll", response_model=PayrollRecord, status_code=201)
async def create_payroll(
    payload: PayrollRecordCreate,
    storage: StorageService = Depends(get_storage_service),
):
    """Create a payroll entry; ``netSalary`` is derived when omitted."""
    return storage.create_payroll_record(payload)


@router.get("/performance-reviews", response_model=List[PerformanceReview])
async def get_performance_reviews(
    employee_id: Optional[str] = Depends(employee_filter),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_performance_reviews(employee_id)


@router.post(
    "/performance-reviews", response_model=PerformanceReview, status_code=201
)
async def create_performance_review(
    payload: PerformanceReviewCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_performance_review(payload)


# ============================================================
# SHIFTS / CERTIFICATIONS / ASSETS
# ============================================================


@router.get("/shifts", response_model=List[ShiftSchedule])
async def get_shifts(
    employee_id: Optional[str] = Depends(employee_filter),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_shift_schedules(employee_id, start_date, end_date)


@router.post("/shifts", response_model=ShiftSchedule, status_code=201)
async def create_shift(
    payload: ShiftScheduleCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_shift_schedule(payload)


@router.get("/certifications", response_model=List[Certification])
async def get_certifications(
    employee_id: Optional[str] = Depends(employee_filter),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_certifications(employee_id)


@router.post("/certifications", response_model=Certification, status_code=201)
async def create_certification(
    payload: CertificationCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_certification(payload)


@router.get("/assets", response_model=List[AssetAllocation])
async def get_assets(
    employee_id: Optional[str] = Depends(employee_filter),
    storage: StorageService = Depends(get_storage_service),
):
    return storage.get_asset_allocations(employee_id)


@router.post("/assets", response_model=AssetAllocation, status_code=201)
async def create_asset(
    payload: AssetAllocationCreate,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_asset_allocation(payload)


# ============================================================
# SUMMARY
# ============================================================


@router.get("/stats", response_model=HRStats)
async def get_hr_stats(stats: StatsService = Depends(get_stats_service)):
    return stats.get_hr_stats()
