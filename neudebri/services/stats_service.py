"""
Dashboard, HR and ward aggregates.

Nothing is cached or persisted: every figure is recomputed from the
scoped queries of ``StorageService`` on each call, so the counts always
agree with the lists the same user sees.
"""

import logging
from datetime import timedelta
from typing import Dict

from neudebri.schemas import DashboardStats, HRStats, WardLoad, WardOccupancy
from neudebri.services.storage_service import StorageService
from neudebri.utils import (
    in_window,
    parse_iso_or_none,
    start_of_day,
    start_of_week,
)
from neudebri.utils.dates import DAY, WEEK

logger = logging.getLogger(__name__)

PENDING_LAB_STATUSES = ("pending", "in_progress")


class StatsService:
    """Aggregate views over the store."""

    def __init__(self, storage: StorageService, certification_expiry_days: int = 30):
        self.storage = storage
        self.store = storage.store
        self.certification_expiry_days = certification_expiry_days

    def get_dashboard_stats(self, user_id: str, role: str) -> DashboardStats:
        """
        Role-scoped dashboard counters.

        Windows are ``[startOfDay, +24h)`` for today and ``[startOfWeek,
        +7d)`` for the week, with the week starting on Sunday. Cancelled
        appointments count toward today but not toward the week.
        """
        now = self.store.now()
        today = start_of_day(now)
        week = start_of_week(now)

        appointments = self.storage.get_appointments(user_id, role)
        messages = self.storage.get_messages(user_id)
        prescriptions = self.storage.get_prescriptions(user_id, role)
        lab_results = self.storage.get_lab_results(user_id) if role == "patient" else []

        appointments_today = 0
        appointments_this_week = 0
        virtual_sessions = 0
        for appointment in appointments:
            starts = parse_iso_or_none(appointment.date_time)
            if starts is None:
                continue
            if in_window(starts, today, DAY):
                appointments_today += 1
            if in_window(starts, week, WEEK):
                if appointment.status != "cancelled":
                    appointments_this_week += 1
                if appointment.type == "virtual":
                    virtual_sessions += 1

        return DashboardStats(
            total_patients=len(self.storage.get_all_patients()),
            total_doctors=len(self.storage.get_all_doctors()),
            appointments_today=appointments_today,
            appointments_this_week=appointments_this_week,
            pending_lab_results=sum(
                1 for r in lab_results if r.status in PENDING_LAB_STATUSES
            ),
            active_prescriptions=sum(1 for p in prescriptions if p.status == "active"),
            unread_messages=sum(
                1 for m in messages if not m.is_read and m.receiver_id == user_id
            ),
            virtual_care_sessions=virtual_sessions,
        )

    def get_hr_stats(self) -> HRStats:
        employees = self.store.employees.all()
        attendance = self.store.attendance.all()

        absences = sum(1 for record in attendance if record.status == "absent")
        absence_rate = (absences / len(attendance)) * 100 if attendance else 0.0

        departments: Dict[str, int] = {}
        for employee in employees:
            departments[employee.department] = departments.get(employee.department, 0) + 1

        return HRStats(
            total_employees=len(employees),
            active_employees=sum(1 for e in employees if e.status == "active"),
            on_leave_count=sum(1 for e in employees if e.status == "on_leave"),
            absence_rate=round(absence_rate, 2),
            department_breakdown=departments,
            upcoming_leave_requests=len(
                self.store.leaves.filter(lambda leave: leave.status == "pending")
            ),
            pending_payroll=len(self.store.payroll.filter(lambda p: p.status == "pending")),
            certifications_expiring=self.count_expiring_certifications(),
        )

    def count_expiring_certifications(self) -> int:
        """Certifications expiring between today and today + N days, inclusive."""
        today = self.store.now().date()
        horizon = today + timedelta(days=self.certification_expiry_days)
        count = 0
        for cert in self.store.certifications.all():
            expiry = parse_iso_or_none(cert.expiry_date)
            if expiry is not None and today <= expiry.date() <= horizon:
                count += 1
        return count

    def get_ward_occupancy(self) -> WardOccupancy:
        """Per-ward load plus the mean of per-ward occupancy ratios."""
        loads = [
            WardLoad(
                ward_id=ward.id,
                name=ward.name,
                capacity=ward.capacity,
                occupied=ward.occupied,
                available=max(ward.capacity - ward.occupied, 0),
                occupancy_rate=round(ward.occupied / ward.capacity * 100, 2),
            )
            for ward in self.storage.get_wards()
        ]
        mean_rate = 0.0
        if loads:
            mean_rate = sum(w.occupied / w.capacity for w in loads) / len(loads) * 100
        return WardOccupancy(
            wards=loads,
            total_capacity=sum(w.capacity for w in loads),
            total_occupied=sum(w.occupied for w in loads),
            occupancy_rate=round(mean_rate, 2),
        )
