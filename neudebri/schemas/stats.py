"""
Aggregate views recomputed on every request.
"""

from typing import Dict

from neudebri.schemas.base import CamelModel


class DashboardStats(CamelModel):
    total_patients: int
    total_doctors: int
    appointments_today: int
    appointments_this_week: int
    pending_lab_results: int
    active_prescriptions: int
    unread_messages: int
    virtual_care_sessions: int


class HRStats(CamelModel):
    total_employees: int
    active_employees: int
    on_leave_count: int
    absence_rate: float
    department_breakdown: Dict[str, int]
    upcoming_leave_requests: int
    pending_payroll: int
    certifications_expiring: int
