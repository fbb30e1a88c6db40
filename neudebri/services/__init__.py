"""
Services package initialization.
"""

from neudebri.services.store import EntityTable, HospitalStore
from neudebri.services.storage_service import StorageService
from neudebri.services.stats_service import StatsService
from neudebri.services.auth_service import AuthService
from neudebri.services.visibility import EntityKind, visibility_predicate

__all__ = [
    "EntityTable",
    "HospitalStore",
    "StorageService",
    "StatsService",
    "AuthService",
    "EntityKind",
    "visibility_predicate",
]
