"""
Test dashboard, HR and ward aggregates.
"""

import pytest

from neudebri.schemas import AppointmentCreate, CertificationCreate
from neudebri.services import StatsService, StorageService


def test_patient_dashboard(stats):
    data = stats.get_dashboard_stats("patient-001", "patient")
    assert data.total_patients == 1
    assert data.total_doctors == 3
    assert data.appointments_today == 0
    assert data.appointments_this_week == 2
    assert data.pending_lab_results == 1
    assert data.active_prescriptions == 2
    assert data.unread_messages == 2
    assert data.virtual_care_sessions == 1


def test_doctor_dashboard_has_no_pending_labs(stats):
    data = stats.get_dashboard_stats("doctor-001", "doctor")
    assert data.pending_lab_results == 0
    assert data.active_prescriptions == 2
    assert data.appointments_this_week == 1
    assert data.virtual_care_sessions == 0


def test_cancelled_counts_today_but_not_week(storage, stats):
    storage.create_appointment(
        AppointmentCreate(
            patient_id="patient-001",
            doctor_id="doctor-001",
            date_time="2026-10-19T15:00:00.000Z",
            end_time="2026-10-19T15:30:00.000Z",
            type="in_person",
            status="cancelled",
        )
    )
    data = stats.get_dashboard_stats("patient-001", "patient")
    assert data.appointments_today == 1
    assert data.appointments_this_week == 2


def test_week_starts_on_sunday(storage, stats):
    for stamp in ("2026-10-18T00:00:00.000Z", "2026-10-25T00:00:00.000Z"):
        storage.create_appointment(
            AppointmentCreate(
                patient_id="patient-001",
                doctor_id="doctor-001",
                date_time=stamp,
                end_time=stamp,
                type="virtual",
                status="scheduled",
            )
        )
    data = stats.get_dashboard_stats("patient-001", "patient")
    # Sunday the 18th is inside the window, Sunday the 25th is not
    assert data.appointments_this_week == 3
    assert data.virtual_care_sessions == 2


def test_empty_store_dashboard(empty_store):
    data = StatsService(StorageService(empty_store)).get_dashboard_stats(
        "anyone", "admin"
    )
    assert data.model_dump() == {
        "total_patients": 0,
        "total_doctors": 0,
        "appointments_today": 0,
        "appointments_this_week": 0,
        "pending_lab_results": 0,
        "active_prescriptions": 0,
        "unread_messages": 0,
        "virtual_care_sessions": 0,
    }


def test_hr_stats(stats):
    data = stats.get_hr_stats()
    assert data.total_employees == 4
    assert data.active_employees == 3
    assert data.on_leave_count == 1
    assert data.absence_rate == 25.0
    assert data.department_breakdown == {
        "Internal Medicine": 2,
        "Cardiology": 1,
        "Administration": 1,
    }
    assert data.upcoming_leave_requests == 1
    assert data.pending_payroll == 1
    assert data.certifications_expiring == 1


def test_hr_stats_empty(empty_store):
    data = StatsService(StorageService(empty_store)).get_hr_stats()
    assert data.absence_rate == 0
    assert data.department_breakdown == {}


@pytest.mark.parametrize(
    "expiry,counted",
    [
        ("2026-10-19", True),
        ("2026-11-18", True),
        ("2026-11-19", False),
        ("2026-10-18", False),
    ],
)
def test_certification_expiry_window_is_inclusive(storage, stats, expiry, counted):
    baseline = stats.count_expiring_certifications()
    storage.create_certification(
        CertificationCreate(
            employee_id="emp-002",
            name="ACLS",
            issuing_body="AHA",
            issue_date="2024-11-18",
            expiry_date=expiry,
        )
    )
    assert stats.count_expiring_certifications() == baseline + int(counted)


def test_ward_occupancy(stats):
    data = stats.get_ward_occupancy()
    assert data.total_capacity == 23
    assert data.total_occupied == 18
    assert data.occupancy_rate == 78.33
    icu = next(w for w in data.wards if w.ward_id == "ward-002")
    assert icu.available == 1
    assert icu.occupancy_rate == 75.0
