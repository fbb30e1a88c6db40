"""
In-memory entity store.

One ``EntityTable`` per entity type maps id -> record. ``HospitalStore``
bundles the tables with the clock used for every time-relative query and
is constructed explicitly (one per application, one per test).
"""

import logging
import threading
from datetime import datetime
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

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
    Payment,
    PayrollRecord,
    PerformanceReview,
    Prescription,
    ShiftSchedule,
    User,
    VitalSigns,
    Ward,
    WoundRecord,
)
from neudebri.services.seed import load_seed_data
from neudebri.utils import generate_id, utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class EntityTable(Generic[T]):
    """Id-keyed collection of one entity type."""

    def __init__(self, name: str, model: Type[T]):
        self.name = name
        self.model = model
        self._rows: Dict[str, T] = {}
        self._lock = threading.RLock()
        # Accept both attribute names and camelCase aliases in patches
        self._field_names: Dict[str, str] = {}
        for field_name, info in model.model_fields.items():
            self._field_names[field_name] = field_name
            if info.alias:
                self._field_names[info.alias] = field_name

    def create(self, data: Optional[BaseModel] = None, **fields: Any) -> T:
        """
        Store a new record under a freshly generated id.

        Args:
            data: Input model; its defaults fill every absent optional field
            **fields: Server-managed values overlaid on the input

        Returns:
            The stored record
        """
        payload = data.model_dump() if data is not None else {}
        payload.update(fields)
        payload["id"] = generate_id()
        record = self.model.model_validate(payload)
        with self._lock:
            self._rows[record.id] = record
        return record

    def insert(self, record: T) -> T:
        """Store a fully formed record under its own id."""
        with self._lock:
            self._rows[record.id] = record
        return record

    def get(self, record_id: Optional[str]) -> Optional[T]:
        if record_id is None:
            return None
        with self._lock:
            return self._rows.get(record_id)

    def update(self, record_id: str, patch: Mapping[str, Any]) -> Optional[T]:
        """
        Merge ``patch`` into an existing record in place.

        Unknown keys and ``id`` are ignored. The merged record is validated
        against the table's model before anything is written. Returns None
        when the record does not exist.

        Raises:
            pydantic.ValidationError: If the patch breaks the record's schema
        """
        changes: Dict[str, Any] = {}
        for key, value in patch.items():
            field_name = self._field_names.get(key)
            if field_name is None or field_name == "id":
                continue
            changes[field_name] = value

        with self._lock:
            record = self._rows.get(record_id)
            if record is None:
                return None
            validated = self.model.model_validate({**record.model_dump(), **changes})
            for field_name in changes:
                setattr(record, field_name, getattr(validated, field_name))
            return record

    def all(self) -> List[T]:
        with self._lock:
            return list(self._rows.values())

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [record for record in self.all() if predicate(record)]

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for record in self.all():
            if predicate(record):
                return record
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._rows


class HospitalStore:
    """All entity tables plus the clock."""

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        seed: bool = True,
    ):
        self.clock = clock

        self.users: EntityTable[User] = EntityTable("user", User)
        self.appointments: EntityTable[Appointment] = EntityTable(
            "appointment", Appointment
        )
        self.health_records: EntityTable[HealthRecord] = EntityTable(
            "health_record", HealthRecord
        )
        self.vital_signs: EntityTable[VitalSigns] = EntityTable(
            "vital_signs", VitalSigns
        )
        self.lab_results: EntityTable[LabResult] = EntityTable("lab_result", LabResult)
        self.prescriptions: EntityTable[Prescription] = EntityTable(
            "prescription", Prescription
        )
        self.messages: EntityTable[Message] = EntityTable("message", Message)
        self.departments: EntityTable[Department] = EntityTable(
            "department", Department
        )
        self.wound_records: EntityTable[WoundRecord] = EntityTable(
            "wound_record", WoundRecord
        )

        # Finance
        self.billings: EntityTable[BillingRecord] = EntityTable(
            "billing", BillingRecord
        )
        self.insurances: EntityTable[InsuranceProvider] = EntityTable(
            "insurance", InsuranceProvider
        )
        self.payments: EntityTable[Payment] = EntityTable("payment", Payment)

        # HR
        self.employees: EntityTable[EmployeeRecord] = EntityTable(
            "employee", EmployeeRecord
        )
        self.shifts: EntityTable[ShiftSchedule] = EntityTable("shift", ShiftSchedule)
        self.attendance: EntityTable[AttendanceRecord] = EntityTable(
            "attendance", AttendanceRecord
        )
        self.leaves: EntityTable[LeaveRequest] = EntityTable("leave", LeaveRequest)
        self.payroll: EntityTable[PayrollRecord] = EntityTable(
            "payroll", PayrollRecord
        )
        self.reviews: EntityTable[PerformanceReview] = EntityTable(
            "review", PerformanceReview
        )
        self.certifications: EntityTable[Certification] = EntityTable(
            "certification", Certification
        )
        self.assets: EntityTable[AssetAllocation] = EntityTable(
            "asset", AssetAllocation
        )

        # IPD
        self.wards: EntityTable[Ward] = EntityTable("ward", Ward)
        self.admissions: EntityTable[Admission] = EntityTable("admission", Admission)

        if seed:
            load_seed_data(self)
            logger.info(
                "Seeded demo data: "
                + ", ".join(f"{t.name}={len(t)}" for t in self.tables() if len(t))
            )

    def now(self) -> datetime:
        return self.clock()

    def tables(self) -> List[EntityTable]:
        return [
            value for value in vars(self).values() if isinstance(value, EntityTable)
        ]
