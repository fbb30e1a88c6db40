"""
API routes aggregation.
"""

from fastapi import APIRouter

from neudebri.api.routes.appointments import router as appointments_router
from neudebri.api.routes.auth import router as auth_router
from neudebri.api.routes.care import router as care_router
from neudebri.api.routes.clinical import router as clinical_router
from neudebri.api.routes.dashboard import router as dashboard_router
from neudebri.api.routes.finance import router as finance_router
from neudebri.api.routes.hr import router as hr_router
from neudebri.api.routes.ipd import router as ipd_router
from neudebri.api.routes.messages import router as messages_router
from neudebri.api.routes.prescriptions import router as prescriptions_router
from neudebri.api.routes.users import router as users_router

router = APIRouter()

# Include sub-routers
router.include_router(auth_router)
router.include_router(dashboard_router)
router.include_router(users_router)
router.include_router(appointments_router)
router.include_router(clinical_router)
router.include_router(prescriptions_router)
router.include_router(messages_router)
router.include_router(care_router)
router.include_router(finance_router)
router.include_router(hr_router)
router.include_router(ipd_router)
