"""Storage service: role-scoped reads, read-time joins and mutations."""

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, TypeVar

from neudebri.core.exceptions import DuplicateUsernameError
from neudebri.schemas import (
    AdmissionView,
    Appointment,
    AppointmentCreate,
    AppointmentWithDetails,
    AssetAllocation,
    AssetAllocationCreate,
    AttendanceRecord,
    AttendanceRecordCreate,
    BillingRecord,
    BillingRecordCreate,
    Certification,
    CertificationCreate,
    Department,
    DepartmentCreate,
    EmployeeRecord,
    EmployeeRecordCreate,
    EmployeeRecordUpdate,
    HealthRecord,
    HealthRecordCreate,
    InsuranceProvider,
    LabResult,
    LabResultCreate,
    LabResultWithDoctor,
    LeaveRequest,
    LeaveRequestCreate,
    Message,
    MessageCreate,
    MessageWithParties,
    Payment,
    PaymentCreate,
    PayrollRecord,
    PayrollRecordCreate,
    PerformanceReview,
    PerformanceReviewCreate,
    Prescription,
    PrescriptionCreate,
    PrescriptionWithDoctor,
    ShiftSchedule,
    ShiftScheduleCreate,
    User,
    UserCreate,
    UserPublic,
    VitalSigns,
    VitalSignsCreate,
    Ward,
    WoundRecord,
    WoundRecordCreate,
)
from neudebri.services.store import HospitalStore
from neudebri.services.visibility import EntityKind, visibility_predicate
from neudebri.utils import parse_iso_or_none, to_iso

logger = logging.getLogger(__name__)

R = TypeVar("R")

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _sort_by_date(
    records: Iterable[R], key: Callable[[R], Optional[str]], newest_first: bool = True
) -> List[R]:
    """Sort records on an ISO date attribute; unparsable dates sort as oldest."""
    return sorted(
        records,
        key=lambda record: parse_iso_or_none(key(record)) or _EPOCH,
        reverse=newest_first,
    )


def _in_date_range(
    value: str, start_date: Optional[str], end_date: Optional[str]
) -> bool:
    """Inclusive ISO string range check on the date part of ``value``."""
    day = value[:10]
    if start_date and day < start_date[:10]:
        return False
    if end_date and day > end_date[:10]:
        return False
    return True


class StorageService:
    """Query and mutation operations over a ``HospitalStore``."""

    def __init__(self, store: HospitalStore):
        """Initialize with the store to operate on."""
        self.store = store

    # ============================================================
    # USERS
    # ============================================================

    def get_user(self, user_id: str) -> Optional[User]:
        return self.store.users.get(user_id)

    def resolve_user(self, user_id: Optional[str]) -> Optional[UserPublic]:
        """
        Weak-reference lookup used by every read-time join.

        Returns None for an absent or dangling id; the caller renders the
        joined field as null.
        """
        if not user_id:
            return None
        user = self.store.users.get(user_id)
        if user is None:
            logger.debug(f"Dangling user reference: {user_id}")
            return None
        return user.to_public()

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.store.users.find(lambda user: user.username == username)

    def create_user(self, data: UserCreate) -> User:
        """Create a user; usernames are unique within the store."""
        if self.get_user_by_username(data.username) is not None:
            raise DuplicateUsernameError(data.username)
        user = self.store.users.create(data)
        logger.info(f"Registered {user.role} user {user.username} ({user.id})")
        return user

    def get_users_by_role(self, role: str) -> List[User]:
        return self.store.users.filter(lambda user: user.role == role)

    def get_all_patients(self) -> List[User]:
        return self.get_users_by_role("patient")

    def get_all_doctors(self) -> List[User]:
        """Clinical staff: doctors and nurses."""
        return self.store.users.filter(lambda user: user.role in ("doctor", "nurse"))

    def get_nurses(self) -> List[User]:
        return self.get_users_by_role("nurse")

    def get_contacts(self, user_id: str, role: str) -> List[User]:
        return self.store.users.filter(
            visibility_predicate(EntityKind.CONTACT, role, user_id)
        )

    def deactivate_user(self, user_id: str) -> Optional[User]:
        """Soft-disable a user account."""
        user = self.store.users.update(user_id, {"is_active": False})
        if user is not None:
            logger.info(f"Deactivated user {user_id}")
        return user

    # ============================================================
    # APPOINTMENTS
    # ============================================================

    def _with_details(self, appointment: Appointment) -> AppointmentWithDetails:
        return AppointmentWithDetails(
            **appointment.model_dump(),
            patient=self.resolve_user(appointment.patient_id),
            doctor=self.resolve_user(appointment.doctor_id),
        )

    def get_appointments(self, user_id: str, role: str) -> List[AppointmentWithDetails]:
        visible = self.store.appointments.filter(
            visibility_predicate(EntityKind.APPOINTMENT, role, user_id)
        )
        return [self._with_details(appointment) for appointment in visible]

    def get_upcoming_appointments(
        self, user_id: str, role: str
    ) -> List[AppointmentWithDetails]:
        """Non-cancelled appointments at or after now, soonest first."""
        now = self.store.now()
        upcoming = [
            appointment
            for appointment in self.get_appointments(user_id, role)
            if appointment.status != "cancelled"
            and (parse_iso_or_none(appointment.date_time) or _EPOCH) >= now
        ]
        return _sort_by_date(upcoming, lambda a: a.date_time, newest_first=False)

    def get_virtual_appointments(
        self, user_id: str, role: str
    ) -> List[AppointmentWithDetails]:
        return [
            appointment
            for appointment in self.get_appointments(user_id, role)
            if appointment.type == "virtual"
        ]

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        return self.store.appointments.create(data)

    def update_appointment_status(
        self, appointment_id: str, status: str
    ) -> Optional[Appointment]:
        """Overwrite the status; no transition rules are enforced."""
        appointment = self.store.appointments.update(appointment_id, {"status": status})
        if appointment is not None:
            logger.info(f"Appointment {appointment_id} -> {status}")
        return appointment

    def cancel_appointment(self, appointment_id: str) -> Optional[Appointment]:
        return self.update_appointment_status(appointment_id, "cancelled")

    # ============================================================
    # HEALTH RECORDS / VITALS / LABS
    # ============================================================

    def get_health_records(self, patient_id: str) -> List[HealthRecord]:
        records = self.store.health_records.filter(
            lambda record: record.patient_id == patient_id
        )
        return _sort_by_date(records, lambda r: r.date)

    def create_health_record(self, data: HealthRecordCreate) -> HealthRecord:
        return self.store.health_records.create(data)

    def get_vital_signs(self, patient_id: str) -> List[VitalSigns]:
        vitals = self.store.vital_signs.filter(lambda v: v.patient_id == patient_id)
        return _sort_by_date(vitals, lambda v: v.recorded_at)

    def create_vital_signs(self, data: VitalSignsCreate) -> VitalSigns:
        return self.store.vital_signs.create(data)

    def get_lab_results(self, patient_id: str) -> List[LabResultWithDoctor]:
        results = self.store.lab_results.filter(lambda r: r.patient_id == patient_id)
        return [
            LabResultWithDoctor(
                **result.model_dump(),
                ordered_by_doctor=self.resolve_user(result.ordered_by),
            )
            for result in _sort_by_date(results, lambda r: r.ordered_date)
        ]

    def create_lab_result(self, data: LabResultCreate) -> LabResult:
        return self.store.lab_results.create(data)

    # ============================================================
    # PRESCRIPTIONS
    # ============================================================

    def get_prescriptions(self, user_id: str, role: str) -> List[PrescriptionWithDoctor]:
        visible = self.store.prescriptions.filter(
            visibility_predicate(EntityKind.PRESCRIPTION, role, user_id)
        )
        return [
            PrescriptionWithDoctor(
                **prescription.model_dump(),
                doctor=self.resolve_user(prescription.doctor_id),
            )
            for prescription in visible
        ]

    def create_prescription(self, data: PrescriptionCreate) -> Prescription:
        return self.store.prescriptions.create(data)

    def request_prescription_refill(self, prescription_id: str) -> str:
        """
        Acknowledge a refill request.

        The request is only logged; ``refills_remaining`` is not touched.
        """
        logger.info(f"Refill requested for prescription {prescription_id}")
        return "Refill request submitted successfully"

    # ============================================================
    # MESSAGES
    # ============================================================

    def get_messages(self, user_id: str) -> List[MessageWithParties]:
        """Messages sent or received by the user, newest first."""
        messages = self.store.messages.filter(
            lambda m: m.sender_id == user_id or m.receiver_id == user_id
        )
        return [
            MessageWithParties(
                **message.model_dump(),
                sender=self.resolve_user(message.sender_id),
                receiver=self.resolve_user(message.receiver_id),
            )
            for message in _sort_by_date(messages, lambda m: m.sent_at)
        ]

    def create_message(self, data: MessageCreate) -> Message:
        return self.store.messages.create(
            data, sent_at=data.sent_at or to_iso(self.store.now())
        )

    def mark_message_as_read(self, message_id: str) -> Optional[Message]:
        """Mark read; the first read timestamp is kept on repeated calls."""
        message = self.store.messages.get(message_id)
        if message is None:
            return None
        patch = {"is_read": True}
        if message.read_at is None:
            patch["read_at"] = to_iso(self.store.now())
        return self.store.messages.update(message_id, patch)

    # ============================================================
    # DEPARTMENTS / WOUND CARE
    # ============================================================

    def get_departments(self) -> List[Department]:
        return self.store.departments.all()

    def create_department(self, data: DepartmentCreate) -> Department:
        return self.store.departments.create(data)

    def get_wound_records(self, patient_id: str) -> List[WoundRecord]:
        records = self.store.wound_records.filter(lambda w: w.patient_id == patient_id)
        return _sort_by_date(records, lambda w: w.date)

    def create_wound_record(self, data: WoundRecordCreate) -> WoundRecord:
        return self.store.wound_records.create(data)

    # ============================================================
    # FINANCE
    # ============================================================

    def get_billing_for_patient(self, patient_id: str) -> List[BillingRecord]:
        bills = self.store.billings.filter(lambda b: b.patient_id == patient_id)
        return _sort_by_date(bills, lambda b: b.created_at)

    def create_billing_record(self, data: BillingRecordCreate) -> BillingRecord:
        return self.store.billings.create(data, created_at=to_iso(self.store.now()))

    def get_insurance_providers(self) -> List[InsuranceProvider]:
        return self.store.insurances.all()

    def get_payments(self, billing_id: Optional[str] = None) -> List[Payment]:
        payments = self.store.payments.filter(
            lambda p: billing_id is None or p.billing_id == billing_id
        )
        return _sort_by_date(payments, lambda p: p.paid_at)

    def create_payment(self, data: PaymentCreate) -> Payment:
        """
        Record a payment and settle its bill.

        A payment covering the billed amount marks the bill ``paid``, a
        smaller one ``partial``. A bill already ``paid`` stays ``paid``.
        A payment against an unknown bill is recorded with no side effect.
        """
        payment = self.store.payments.create(data, paid_at=to_iso(self.store.now()))

        billing = self.store.billings.get(data.billing_id)
        if billing is None:
            logger.warning(
                f"Payment {payment.id} references unknown bill {data.billing_id}"
            )
            return payment

        if billing.status != "paid":
            status = "paid" if data.amount >= billing.amount else "partial"
            self.store.billings.update(billing.id, {"status": status})
            logger.info(f"Bill {billing.id} -> {status} after payment {payment.id}")
        return payment

    # ============================================================
    # HR: EMPLOYEES
    # ============================================================

    def get_employees(self) -> List[EmployeeRecord]:
        return _sort_by_date(self.store.employees.all(), lambda e: e.created_at)

    def get_employee_by_id(self, employee_id: str) -> Optional[EmployeeRecord]:
        return self.store.employees.get(employee_id)

    def create_employee(self, data: EmployeeRecordCreate) -> EmployeeRecord:
        stamp = to_iso(self.store.now())
        return self.store.employees.create(data, created_at=stamp, updated_at=stamp)

    def update_employee(
        self, employee_id: str, data: EmployeeRecordUpdate
    ) -> Optional[EmployeeRecord]:
        # null means "leave unchanged"
        patch = data.model_dump(exclude_unset=True, exclude_none=True)
        if employee_id not in self.store.employees:
            return None
        patch["updated_at"] = to_iso(self.store.now())
        return self.store.employees.update(employee_id, patch)

    # ============================================================
    # HR: ATTENDANCE / LEAVE / PAYROLL
    # ============================================================

    def get_attendance_records(
        self,
        employee_id: Optional[str] = None,
        month: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[AttendanceRecord]:
        """Attendance filtered by employee, ``YYYY-MM`` prefix and date range."""

        def matches(record: AttendanceRecord) -> bool:
            if employee_id and record.employee_id != employee_id:
                return False
            if month and not record.date.startswith(month):
                return False
            return _in_date_range(record.date, start_date, end_date)

        return _sort_by_date(self.store.attendance.filter(matches), lambda a: a.date)

    def create_attendance_record(self, data: AttendanceRecordCreate) -> AttendanceRecord:
        return self.store.attendance.create(data, created_at=to_iso(self.store.now()))

    def get_leave_requests(self, employee_id: Optional[str] = None) -> List[LeaveRequest]:
        leaves = self.store.leaves.filter(
            lambda leave: not employee_id or leave.employee_id == employee_id
        )
        return _sort_by_date(leaves, lambda leave: leave.created_at)

    def create_leave_request(self, data: LeaveRequestCreate) -> LeaveRequest:
        return self.store.leaves.create(
            data, status="pending", created_at=to_iso(self.store.now())
        )

    def _decide_leave(
        self, leave_id: str, status: str, decided_by: str
    ) -> Optional[LeaveRequest]:
        leave = self.store.leaves.update(
            leave_id,
            {
                "status": status,
                "approved_by": decided_by,
                "approval_date": to_iso(self.store.now()),
            },
        )
        if leave is not None:
            logger.info(f"Leave request {leave_id} {status} by {decided_by}")
        return leave

    def approve_leave_request(
        self, leave_id: str, approved_by: str
    ) -> Optional[LeaveRequest]:
        return self._decide_leave(leave_id, "approved", approved_by)

    def reject_leave_request(
        self, leave_id: str, rejected_by: str
    ) -> Optional[LeaveRequest]:
        return self._decide_leave(leave_id, "rejected", rejected_by)

    def get_payroll_records(
        self, employee_id: Optional[str] = None, month: Optional[str] = None
    ) -> List[PayrollRecord]:
        records = self.store.payroll.filter(
            lambda p: (not employee_id or p.employee_id == employee_id)
            and (not month or p.month == month)
        )
        return _sort_by_date(records, lambda p: p.created_at)

    def create_payroll_record(self, data: PayrollRecordCreate) -> PayrollRecord:
        net_salary = data.net_salary
        if net_salary is None:
            net_salary = data.basic_salary + data.allowances - data.deductions
        return self.store.payroll.create(
            data,
            net_salary=net_salary,
            status="pending",
            created_at=to_iso(self.store.now()),
        )

    # ============================================================
    # HR: REVIEWS / SHIFTS / CERTIFICATIONS / ASSETS
    # ============================================================

    def get_performance_reviews(
        self, employee_id: Optional[str] = None
    ) -> List[PerformanceReview]:
        reviews = self.store.reviews.filter(
            lambda r: not employee_id or r.employee_id == employee_id
        )
        return _sort_by_date(reviews, lambda r: r.created_at)

    def create_performance_review(
        self, data: PerformanceReviewCreate
    ) -> PerformanceReview:
        return self.store.reviews.create(
            data, status="draft", created_at=to_iso(self.store.now())
        )

    def get_shift_schedules(
        self,
        employee_id: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[ShiftSchedule]:
        shifts = self.store.shifts.filter(
            lambda s: (not employee_id or s.employee_id == employee_id)
            and _in_date_range(s.date, start_date, end_date)
        )
        return _sort_by_date(shifts, lambda s: s.created_at)

    def create_shift_schedule(self, data: ShiftScheduleCreate) -> ShiftSchedule:
        return self.store.shifts.create(data, created_at=to_iso(self.store.now()))

    def get_certifications(self, employee_id: Optional[str] = None) -> List[Certification]:
        certs = self.store.certifications.filter(
            lambda c: not employee_id or c.employee_id == employee_id
        )
        return _sort_by_date(certs, lambda c: c.issue_date)

    def create_certification(self, data: CertificationCreate) -> Certification:
        return self.store.certifications.create(
            data, created_at=to_iso(self.store.now())
        )

    def get_asset_allocations(
        self, employee_id: Optional[str] = None
    ) -> List[AssetAllocation]:
        assets = self.store.assets.filter(
            lambda a: not employee_id or a.employee_id == employee_id
        )
        return _sort_by_date(assets, lambda a: a.created_at)

    def create_asset_allocation(self, data: AssetAllocationCreate) -> AssetAllocation:
        return self.store.assets.create(data, created_at=to_iso(self.store.now()))

    # ============================================================
    # IPD (WARDS / ADMISSIONS)
    # ============================================================

    def get_wards(self) -> List[Ward]:
        return self.store.wards.all()

    def get_admissions(self, search: Optional[str] = None) -> List[AdmissionView]:
        """Admissions with ward names; ``search`` matches patient or ward name."""
        term = (search or "").strip().lower()
        views = []
        for admission in self.store.admissions.all():
            ward = self.store.wards.get(admission.ward_id)
            view = AdmissionView(
                **admission.model_dump(), ward_name=ward.name if ward else None
            )
            if term and not (
                term in view.patient_name.lower()
                or term in (view.ward_name or "").lower()
            ):
                continue
            views.append(view)
        return views
