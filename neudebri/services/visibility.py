"""
Role-based read scoping.

The rule of who sees which records is defined once here and applied to
every role-scoped collection:

- appointments and prescriptions: a patient sees records where they are
  the patient; a doctor or nurse sees records where they are the doctor;
  an admin (or any unrecognized role) sees everything.
- contacts: the inverse over users. A patient sees clinical staff,
  everyone else sees patients.
"""

from enum import Enum
from typing import Any, Callable

CLINICAL_ROLES = frozenset({"doctor", "nurse"})

# Which field of a scoped record carries the owning user, per role
OWNER_FIELD_BY_ROLE = {
    "patient": "patient_id",
    "doctor": "doctor_id",
    "nurse": "doctor_id",
}


class EntityKind(str, Enum):
    """Collections subject to role scoping."""

    APPOINTMENT = "appointment"
    PRESCRIPTION = "prescription"
    CONTACT = "contact"


Predicate = Callable[[Any], bool]


def _everything(_record: Any) -> bool:
    return True


def visibility_predicate(kind: EntityKind, role: str, user_id: str) -> Predicate:
    """
    Build the predicate selecting what ``user_id`` acting as ``role`` may see.

    Args:
        kind: Collection being read
        role: Requesting role (free text; unknown roles see everything)
        user_id: Requesting user

    Returns:
        Callable taking a record and returning True when visible
    """
    if kind is EntityKind.CONTACT:
        if role == "patient":
            return lambda user: user.role in CLINICAL_ROLES
        return lambda user: user.role == "patient"

    owner_field = OWNER_FIELD_BY_ROLE.get(role)
    if owner_field is None:
        return _everything
    return lambda record: getattr(record, owner_field) == user_id
