"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.dashboard_routes import router as dashboard_router
from app.api.routes.company_routes import router as company_router
from app.api.routes.student_routes import router as student_router
from app.api.routes.job_profile_routes import router as job_profile_router
from app.api.routes.training_routes import router as training_router, enrollment_router
from app.api.routes.application_routes import router as application_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(dashboard_router)
api_router.include_router(company_router)
api_router.include_router(student_router)
api_router.include_router(job_profile_router)
api_router.include_router(training_router)
api_router.include_router(enrollment_router)
api_router.include_router(application_router)
