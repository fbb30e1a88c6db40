"""
Demo seed data.

Loaded into a fresh ``HospitalStore`` at startup. Time-relative records
(appointments, vitals, labs, prescriptions, messages, HR activity) are
placed around the store clock's ``now`` so the dashboards always have
something upcoming and something recent.
"""

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from neudebri.schemas import (
    Admission,
    Appointment,
    AssetAllocation,
    AttendanceRecord,
    BillingRecord,
    Certification,
    Department,
    EmployeeRecord,
    HealthRecord,
    InsuranceProvider,
    LabResult,
    LeaveRequest,
    Message,
    PayrollRecord,
    Prescription,
    ShiftSchedule,
    User,
    VitalSigns,
    Ward,
    WoundRecord,
)
from neudebri.utils import to_iso

if TYPE_CHECKING:
    from neudebri.services.store import HospitalStore

PATIENT_ID = "patient-001"
DOCTOR_ID = "doctor-001"
DOCTOR2_ID = "doctor-002"
ADMIN_ID = "admin-001"
NURSE_ID = "nurse-001"

DEMO_PASSWORD = "password"

# Demo persona switch: role -> seeded user id
DEMO_USERS = {
    "patient": PATIENT_ID,
    "doctor": DOCTOR_ID,
    "nurse": NURSE_ID,
    "admin": ADMIN_ID,
}

APPOINTMENT_LENGTH = timedelta(minutes=30)


def _day(now: datetime, offset_days: int) -> str:
    return (now + timedelta(days=offset_days)).date().isoformat()


def load_seed_data(store: "HospitalStore") -> None:
    """Populate every table of ``store`` with the demo records."""
    now = store.now()
    _seed_users(store)
    _seed_departments(store)
    _seed_appointments(store, now)
    _seed_clinical(store, now)
    _seed_messages(store, now)
    _seed_finance(store, now)
    _seed_hr(store, now)
    _seed_wards(store)


def _seed_users(store: "HospitalStore") -> None:
    users = [
        User(
            id=PATIENT_ID,
            username="patient",
            password=DEMO_PASSWORD,
            email="john.doe@email.com",
            first_name="John",
            last_name="Doe",
            role="patient",
            phone="+254 712 345 678",
            date_of_birth="1985-06-15",
            gender="male",
            address="123 Health Street, Nairobi, Kenya",
        ),
        User(
            id=DOCTOR_ID,
            username="doctor",
            password=DEMO_PASSWORD,
            email="dr.smith@neudebri.com",
            first_name="Sarah",
            last_name="Smith",
            role="doctor",
            phone="+254 722 111 222",
            date_of_birth="1978-03-20",
            gender="female",
            address="Neudebri Medical Center",
            specialty="Internal Medicine",
            license_number="KEN-MED-12345",
            department="Internal Medicine",
        ),
        User(
            id=DOCTOR2_ID,
            username="doctor2",
            password=DEMO_PASSWORD,
            email="dr.johnson@neudebri.com",
            first_name="Michael",
            last_name="Johnson",
            role="doctor",
            phone="+254 722 333 444",
            date_of_birth="1982-09-10",
            gender="male",
            address="Neudebri Medical Center",
            specialty="Cardiology",
            license_number="KEN-MED-67890",
            department="Cardiology",
        ),
        User(
            id=ADMIN_ID,
            username="admin",
            password=DEMO_PASSWORD,
            email="admin@neudebri.com",
            first_name="Admin",
            last_name="User",
            role="admin",
            phone="+254 700 000 000",
            date_of_birth="1990-01-01",
            gender="other",
            address="Neudebri Health System HQ",
            department="Administration",
        ),
        User(
            id=NURSE_ID,
            username="nurse",
            password=DEMO_PASSWORD,
            email="nurse.mary@neudebri.com",
            first_name="Mary",
            last_name="Wanjiku",
            role="nurse",
            phone="+254 711 555 666",
            date_of_birth="1992-07-25",
            gender="female",
            address="Neudebri Medical Center",
            specialty="General Nursing",
            license_number="KEN-NUR-11111",
            department="Internal Medicine",
        ),
    ]
    for user in users:
        store.users.insert(user)


def _seed_departments(store: "HospitalStore") -> None:
    departments = [
        ("Internal Medicine", "General medical care and diagnostics", "Building A, Floor 2", "+254 20 111 1111"),
        ("Cardiology", "Heart and cardiovascular care", "Building B, Floor 1", "+254 20 222 2222"),
        ("Pediatrics", "Child and adolescent healthcare", "Building A, Floor 3", "+254 20 333 3333"),
        ("Laboratory", "Diagnostic testing and analysis", "Building C, Floor 1", "+254 20 444 4444"),
        ("Radiology", "Medical imaging services", "Building C, Floor 2", "+254 20 555 5555"),
        ("Pharmacy", "Medication dispensing and consultation", "Building A, Floor 1", "+254 20 666 6666"),
    ]
    heads = {0: DOCTOR_ID, 1: DOCTOR2_ID}
    for i, (name, description, location, phone) in enumerate(departments):
        store.departments.insert(
            Department(
                id=f"dept-{i + 1}",
                name=name,
                description=description,
                head_doctor_id=heads.get(i),
                location=location,
                phone=phone,
            )
        )


def _seed_appointments(store: "HospitalStore", now: datetime) -> None:
    appointments = [
        (2, DOCTOR_ID, "in_person", "scheduled", "Annual physical examination", "Internal Medicine"),
        (5, DOCTOR2_ID, "virtual", "confirmed", "Follow-up on blood pressure management", "Cardiology"),
        (-7, DOCTOR_ID, "in_person", "completed", "Flu symptoms consultation", "Internal Medicine"),
    ]
    for i, (offset, doctor_id, kind, status, reason, department) in enumerate(appointments):
        start = now + timedelta(days=offset)
        store.appointments.insert(
            Appointment(
                id=f"apt-{i + 1}",
                patient_id=PATIENT_ID,
                doctor_id=doctor_id,
                date_time=to_iso(start),
                end_time=to_iso(start + APPOINTMENT_LENGTH),
                type=kind,
                status=status,
                reason=reason,
                department=department,
            )
        )


def _seed_clinical(store: "HospitalStore", now: datetime) -> None:
    health_records = [
        ("condition", "Hypertension", "Essential hypertension, well controlled with medication", "2023-01-15", "moderate", "chronic"),
        ("allergy", "Penicillin", "Allergic reaction to penicillin-based antibiotics", "2020-05-10", "severe", "active"),
        ("allergy", "Shellfish", "Mild allergic reaction to shellfish", "2019-08-22", "mild", "active"),
        ("immunization", "COVID-19 Vaccine (Pfizer)", "Third booster dose administered", "2023-11-01", None, None),
        ("immunization", "Influenza Vaccine", "Annual flu shot", "2024-10-15", None, None),
        ("surgery", "Appendectomy", "Laparoscopic appendectomy performed successfully", "2018-03-20", None, "resolved"),
    ]
    for i, (record_type, title, description, date, severity, status) in enumerate(health_records):
        store.health_records.insert(
            HealthRecord(
                id=f"hr-{i + 1}",
                patient_id=PATIENT_ID,
                record_type=record_type,
                title=title,
                description=description,
                date=date,
                doctor_id=DOCTOR_ID,
                severity=severity,
                status=status,
            )
        )

    vitals = [
        (128, 82, 72, "98.4", 16, 98, "78"),
        (130, 85, 75, "98.6", 18, 97, "78.5"),
        (125, 80, 70, "98.2", 15, 99, "77.8"),
    ]
    for i, (systolic, diastolic, heart_rate, temp, resp, spo2, weight) in enumerate(vitals):
        store.vital_signs.insert(
            VitalSigns(
                id=f"vs-{i + 1}",
                patient_id=PATIENT_ID,
                recorded_at=to_iso(now - timedelta(days=30 * i)),
                recorded_by=NURSE_ID,
                blood_pressure_systolic=systolic,
                blood_pressure_diastolic=diastolic,
                heart_rate=heart_rate,
                temperature=temp,
                respiratory_rate=resp,
                oxygen_saturation=spo2,
                weight=weight,
                height="175",
            )
        )

    labs = [
        ("Complete Blood Count (CBC)", "CBC-001", "completed", "Normal", "N/A", "", False),
        ("Hemoglobin A1C", "HBA1C-001", "completed", "5.8", "4.0-5.6", "%", True),
        ("Lipid Panel", "LIPID-001", "completed", "Total: 195", "<200", "mg/dL", False),
        ("Thyroid Panel (TSH)", "TSH-001", "pending", None, "0.4-4.0", "mIU/L", False),
    ]
    for i, (name, code, status, result, normal_range, unit, abnormal) in enumerate(labs):
        result_date = None
        if status == "completed":
            result_date = to_iso(now - timedelta(days=5 * i))
        store.lab_results.insert(
            LabResult(
                id=f"lab-{i + 1}",
                patient_id=PATIENT_ID,
                test_name=name,
                test_code=code,
                ordered_by=DOCTOR_ID,
                ordered_date=to_iso(now - timedelta(days=7 * (i + 1))),
                result_date=result_date,
                status=status,
                result=result,
                normal_range=normal_range,
                unit=unit,
                is_abnormal=abnormal,
            )
        )

    prescriptions = [
        ("Lisinopril", "10mg", "Once daily", 2, 3, "active", "Take in the morning with water"),
        ("Metformin", "500mg", "Twice daily", 1, 2, "active", "Take with meals"),
        ("Atorvastatin", "20mg", "Once daily", 0, 3, "completed", "Take at bedtime"),
    ]
    for i, (name, dosage, frequency, remaining, total, status, instructions) in enumerate(prescriptions):
        store.prescriptions.insert(
            Prescription(
                id=f"rx-{i + 1}",
                patient_id=PATIENT_ID,
                doctor_id=DOCTOR_ID,
                medication_name=name,
                dosage=dosage,
                frequency=frequency,
                route="oral",
                start_date=to_iso(now - timedelta(days=90 - i * 30)),
                refills_remaining=remaining,
                refills_total=total,
                status=status,
                instructions=instructions,
                pharmacy="Neudebri Pharmacy",
            )
        )

    store.wound_records.insert(
        WoundRecord(
            id="wound-1",
            patient_id=PATIENT_ID,
            nurse_id=NURSE_ID,
            doctor_id=DOCTOR_ID,
            date=to_iso(now),
            wound_type="Pressure Ulcer",
            size="2cm x 1cm",
            stage="Stage II",
            description="Small superficial ulcer on left heel",
            treatment_plan="Cleanse with saline, apply dressing twice daily",
            notes="Monitor for infection",
        )
    )


def _seed_messages(store: "HospitalStore", now: datetime) -> None:
    messages = [
        (
            DOCTOR_ID,
            PATIENT_ID,
            "Lab Results Available",
            "Dear John,\n\nYour recent lab results are now available in your patient portal. "
            "Your A1C is slightly elevated at 5.8%. I recommend we discuss dietary adjustments "
            "at your next appointment.\n\nBest regards,\nDr. Sarah Smith",
            "normal",
            False,
        ),
        (
            PATIENT_ID,
            DOCTOR_ID,
            "Question about medication",
            "Dr. Smith,\n\nI've been experiencing some dizziness after taking my blood pressure "
            "medication in the morning. Should I be concerned?\n\nThank you,\nJohn",
            "high",
            True,
        ),
        (
            DOCTOR2_ID,
            PATIENT_ID,
            "Upcoming Virtual Appointment",
            "Hello John,\n\nThis is a reminder about your upcoming virtual consultation on "
            "cardiology follow-up. Please ensure you have your blood pressure readings from the "
            "past week ready to discuss.\n\nSee you soon,\nDr. Michael Johnson",
            "normal",
            False,
        ),
    ]
    for i, (sender, receiver, subject, content, priority, is_read) in enumerate(messages):
        sent_at = to_iso(now - timedelta(days=2 * i))
        store.messages.insert(
            Message(
                id=f"msg-{i + 1}",
                sender_id=sender,
                receiver_id=receiver,
                subject=subject,
                content=content,
                sent_at=sent_at,
                read_at=sent_at if is_read else None,
                is_read=is_read,
                priority=priority,
            )
        )


def _seed_finance(store: "HospitalStore", now: datetime) -> None:
    store.insurances.insert(
        InsuranceProvider(id="ins-1", name="Sanitas Health Insurance", code="SAN-001")
    )
    store.insurances.insert(
        InsuranceProvider(id="ins-2", name="National Health Cover", code="NHC-KE")
    )
    store.billings.insert(
        BillingRecord(
            id="bill-1",
            patient_id=PATIENT_ID,
            amount=12000,
            currency="KES",
            status="pending",
            insurance_provider_id="ins-1",
            invoice_number="INV-1001",
            created_at=to_iso(now),
            description="Wound care consultation and dressing",
        )
    )


def _seed_hr(store: "HospitalStore", now: datetime) -> None:
    employees = [
        ("emp-001", DOCTOR_ID, "NDB-DOC-001", "Sarah", "Smith", "Consultant Physician", "Internal Medicine", "2015-04-01", 450000, "active"),
        ("emp-002", DOCTOR2_ID, "NDB-DOC-002", "Michael", "Johnson", "Consultant Cardiologist", "Cardiology", "2018-09-15", 520000, "active"),
        ("emp-003", NURSE_ID, "NDB-NUR-001", "Mary", "Wanjiku", "Registered Nurse", "Internal Medicine", "2020-02-01", 120000, "on_leave"),
        ("emp-004", ADMIN_ID, "NDB-ADM-001", "Admin", "User", "Hospital Administrator", "Administration", "2019-01-10", 200000, "active"),
    ]
    for i, (emp_id, user_id, code, first, last, designation, department, joined, salary, status) in enumerate(employees):
        stamp = to_iso(now - timedelta(days=len(employees) - i))
        store.employees.insert(
            EmployeeRecord(
                id=emp_id,
                user_id=user_id,
                employee_id=code,
                first_name=first,
                last_name=last,
                designation=designation,
                department=department,
                join_date=joined,
                salary=salary,
                status=status,
                created_at=stamp,
                updated_at=stamp,
            )
        )

    stamp = to_iso(now)
    attendance = [
        ("emp-001", "present", "08:02", "17:05"),
        ("emp-002", "present", "07:55", "16:40"),
        ("emp-003", "absent", None, None),
        ("emp-004", "late", "09:20", "17:30"),
    ]
    for i, (emp_id, status, check_in, check_out) in enumerate(attendance):
        store.attendance.insert(
            AttendanceRecord(
                id=f"att-{i + 1}",
                employee_id=emp_id,
                date=_day(now, -1),
                status=status,
                check_in=check_in,
                check_out=check_out,
                created_at=stamp,
            )
        )

    store.leaves.insert(
        LeaveRequest(
            id="leave-1",
            employee_id="emp-003",
            leave_type="annual",
            start_date=_day(now, -1),
            end_date=_day(now, 6),
            reason="Family visit",
            status="pending",
            created_at=stamp,
        )
    )
    store.payroll.insert(
        PayrollRecord(
            id="pay-1",
            employee_id="emp-001",
            month=now.strftime("%Y-%m"),
            basic_salary=450000,
            allowances=35000,
            deductions=90000,
            net_salary=395000,
            status="pending",
            created_at=stamp,
        )
    )
    store.certifications.insert(
        Certification(
            id="cert-1",
            employee_id="emp-003",
            name="Basic Life Support (BLS)",
            issuing_body="Kenya Red Cross",
            issue_date=_day(now, -720),
            expiry_date=_day(now, 10),
            certificate_number="BLS-2211",
            created_at=stamp,
        )
    )
    store.certifications.insert(
        Certification(
            id="cert-2",
            employee_id="emp-001",
            name="Medical Practice License",
            issuing_body="Kenya Medical Practitioners and Dentists Council",
            issue_date=_day(now, -30),
            expiry_date=_day(now, 335),
            certificate_number="KEN-MED-12345",
            created_at=stamp,
        )
    )
    store.assets.insert(
        AssetAllocation(
            id="asset-1",
            employee_id="emp-001",
            asset_name="Dell Latitude 5440",
            asset_type="laptop",
            serial_number="DL5440-00921",
            allocated_date=_day(now, -200),
            created_at=stamp,
        )
    )
    store.shifts.insert(
        ShiftSchedule(
            id="shift-1",
            employee_id="emp-001",
            date=_day(now, 1),
            shift_type="morning",
            start_time="07:00",
            end_time="15:00",
            department="Internal Medicine",
            created_at=stamp,
        )
    )


def _seed_wards(store: "HospitalStore") -> None:
    wards = [
        ("ward-001", "General Ward A", "General", 6, 5),
        ("ward-002", "ICU Ward", "ICU", 4, 3),
        ("ward-003", "Pediatric Ward", "Pediatric", 8, 6),
        ("ward-004", "Maternity Ward", "Maternity", 5, 4),
    ]
    for ward_id, name, kind, capacity, occupied in wards:
        store.wards.insert(
            Ward(id=ward_id, name=name, type=kind, capacity=capacity, occupied=occupied)
        )

    admissions = [
        ("adm-001", "James Kamau", "ward-001", "A-01", "2026-01-20", "Dr. Sarah Johnson", "Hypertension", "admitted"),
        ("adm-002", "Mary Kipchoge", "ward-002", "ICU-02", "2026-01-18", "Dr. Ahmed Hassan", "Post-surgery Recovery", "critical"),
        ("adm-003", "Baby Ochieng", "ward-003", "P-03", "2026-01-22", "Dr. Emily Carter", "Acute Gastroenteritis", "stable"),
    ]
    for adm_id, patient, ward_id, bed, admitted, doctor, diagnosis, status in admissions:
        store.admissions.insert(
            Admission(
                id=adm_id,
                patient_name=patient,
                ward_id=ward_id,
                bed_no=bed,
                admission_date=admitted,
                doctor_name=doctor,
                diagnosis=diagnosis,
                status=status,
            )
        )
