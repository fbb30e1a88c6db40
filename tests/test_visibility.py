"""
Test role-based read scoping.
"""

from types import SimpleNamespace

import pytest

from neudebri.services import EntityKind, visibility_predicate

RECORDS = [
    SimpleNamespace(id="r1", patient_id="p1", doctor_id="d1"),
    SimpleNamespace(id="r2", patient_id="p2", doctor_id="d1"),
    SimpleNamespace(id="r3", patient_id="p1", doctor_id="d2"),
]

USERS = [
    SimpleNamespace(id="p1", role="patient"),
    SimpleNamespace(id="d1", role="doctor"),
    SimpleNamespace(id="n1", role="nurse"),
    SimpleNamespace(id="a1", role="admin"),
]


def visible(kind, role, user_id, rows):
    predicate = visibility_predicate(kind, role, user_id)
    return [row.id for row in rows if predicate(row)]


@pytest.mark.parametrize("kind", [EntityKind.APPOINTMENT, EntityKind.PRESCRIPTION])
def test_patient_sees_own_records(kind):
    assert visible(kind, "patient", "p1", RECORDS) == ["r1", "r3"]


@pytest.mark.parametrize("role", ["doctor", "nurse"])
def test_clinical_staff_see_records_they_own(role):
    assert visible(EntityKind.APPOINTMENT, role, "d1", RECORDS) == ["r1", "r2"]


@pytest.mark.parametrize("role", ["admin", "auditor", ""])
def test_other_roles_see_everything(role):
    assert visible(EntityKind.PRESCRIPTION, role, "x", RECORDS) == ["r1", "r2", "r3"]


def test_patient_contacts_are_clinical_staff():
    assert visible(EntityKind.CONTACT, "patient", "p1", USERS) == ["d1", "n1"]


@pytest.mark.parametrize("role", ["doctor", "nurse", "admin"])
def test_staff_contacts_are_patients(role):
    assert visible(EntityKind.CONTACT, role, "d1", USERS) == ["p1"]
