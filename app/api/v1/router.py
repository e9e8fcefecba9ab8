"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, cycles, dashboard, subjects

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    subjects.router, prefix="/subjects", tags=["Subjects"]
)
api_router.include_router(
    cycles.router, prefix="/cycles", tags=["Study cycles"]
)
api_router.include_router(
    dashboard.router, tags=["Dashboard"]
)
