"""Inpatient ward and bed console endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from neudebri.core.dependencies import get_stats_service, get_storage_service
from neudebri.schemas import AdmissionView, Ward, WardOccupancy
from neudebri.services import StatsService, StorageService

router = APIRouter(prefix="/ipd", tags=["ipd"])


@router.get("/wards", response_model=List[Ward])
async def get_wards(storage: StorageService = Depends(get_storage_service)):
    return storage.get_wards()


@router.get("/admissions", response_model=List[AdmissionView])
async def get_admissions(
    search: Optional[str] = Query(None),
    storage: StorageService = Depends(get_storage_service),
):
    """Admissions with ward names, filtered by patient or ward name."""
    return storage.get_admissions(search)


@router.get("/occupancy", response_model=WardOccupancy)
async def get_occupancy(stats: StatsService = Depends(get_stats_service)):
    return stats.get_ward_occupancy()
