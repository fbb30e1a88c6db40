"""
Shared dependencies for FastAPI dependency injection.

The store lives on ``app.state`` and reaches handlers only through these
dependencies, so every application (and every test) owns its own data.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Query, Request

from neudebri.core.config import Settings
from neudebri.services import AuthService, HospitalStore, StatsService, StorageService


@dataclass(frozen=True)
class Identity:
    """Who a read is scoped to."""

    user_id: str
    role: str


def get_settings_dependency(request: Request) -> Settings:
    """Dependency to get the application's settings."""
    return request.app.state.settings


def get_store(request: Request) -> HospitalStore:
    """Dependency to get the application's store."""
    return request.app.state.store


def get_storage_service(store: HospitalStore = Depends(get_store)) -> StorageService:
    return StorageService(store)


def get_stats_service(
    storage: StorageService = Depends(get_storage_service),
    settings: Settings = Depends(get_settings_dependency),
) -> StatsService:
    return StatsService(
        storage, certification_expiry_days=settings.certification_expiry_days
    )


def get_auth_service(
    storage: StorageService = Depends(get_storage_service),
) -> AuthService:
    return AuthService(storage)


def get_identity(
    user_id: Optional[str] = Query(None, alias="userId"),
    role: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings_dependency),
) -> Identity:
    """``userId``/``role`` query parameters, defaulting to the demo identity."""
    return Identity(
        user_id=user_id or settings.default_user_id,
        role=role or settings.default_role,
    )


def get_patient_id(
    patient_id: Optional[str] = Query(None, alias="patientId"),
    settings: Settings = Depends(get_settings_dependency),
) -> str:
    """``patientId`` query parameter, defaulting to the demo patient."""
    return patient_id or settings.default_user_id
