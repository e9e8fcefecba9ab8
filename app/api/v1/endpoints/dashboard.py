"""
Dashboard and preference endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.cycle import DashboardResponse
from app.schemas.user_settings import UserSettingsResponse
from app.services.cycle_service import CycleService
from app.services.user_settings_service import UserSettingsService

router = APIRouter()


@router.get("/dashboard", summary="Settings, active cycle and overall progress.", response_model=DashboardResponse, )
def get_dashboard(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CycleService(db)
    return service.get_dashboard(user.id)


@router.get("/settings", summary="Your study preferences.", response_model=UserSettingsResponse, )
def get_settings(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = UserSettingsService(db)
    return service.get_settings(user.id)
