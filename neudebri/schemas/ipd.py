"""
In-patient department (ward/bed console) schemas.
"""

from typing import List, Optional

from pydantic import Field

from neudebri.schemas.base import CamelModel


class Ward(CamelModel):
    id: str
    name: str
    type: str
    capacity: int = Field(..., gt=0)
    occupied: int = Field(0, ge=0)


class Admission(CamelModel):
    id: str
    patient_name: str
    ward_id: str
    bed_no: str
    admission_date: str
    status: str  # admitted, critical, stable, discharged
    patient_id: Optional[str] = None
    doctor_name: Optional[str] = None
    diagnosis: Optional[str] = None


class AdmissionView(Admission):
    """Admission with the ward name resolved; null when the ward is unknown."""

    ward_name: Optional[str] = None


class WardLoad(CamelModel):
    ward_id: str
    name: str
    capacity: int
    occupied: int
    available: int
    occupancy_rate: float


class WardOccupancy(CamelModel):
    wards: List[WardLoad]
    total_capacity: int
    total_occupied: int
    occupancy_rate: float
