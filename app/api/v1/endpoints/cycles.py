"""
Study cycle endpoints.

Cycle creation from a weekly budget, hour tracking and reset.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.cycle import (ActiveCycleResponse, AssignmentResponse, CycleCreate, CycleCreatedResponse,
                               CycleResponse, HoursAdjustment, )
from app.schemas.subject import MessageResponse
from app.services.cycle_service import CycleService

router = APIRouter()


@router.get("", summary="Cycle history, newest first.", response_model=list[CycleResponse], )
def list_cycles(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CycleService(db)
    return service.list_cycles(user.id)


@router.post("", summary="Create a cycle from a weekly hour budget.", response_model=CycleCreatedResponse,
             status_code=status.HTTP_201_CREATED, )
def create_cycle(data: CycleCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    """Allocates the budget across all current subjects by difficulty and weight."""
    service = CycleService(db)
    cycle = service.create_cycle(user.id, data.weekly_hours, data.name)
    return CycleCreatedResponse(message="Ciclo criado!", cycle=cycle)


@router.get("/active", summary="Active cycle with per-subject progress.", response_model=ActiveCycleResponse, )
def get_active_cycle(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CycleService(db)
    cycle = service.get_active_cycle(user.id)
    if cycle is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active cycle", )
    return cycle


@router.post("/reset", summary="Close the active cycle and ask for a new budget.", response_model=MessageResponse, )
def reset_cycle(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CycleService(db)
    service.reset_cycle(user.id)
    return MessageResponse(message="Ciclo resetado")


@router.patch("/assignments/{assignment_id}/hours", summary="Add or remove completed hours.",
              response_model=AssignmentResponse, )
def adjust_hours(assignment_id: int, data: HoursAdjustment, db: Session = Depends(get_db),
                 user: User = Depends(get_current_user), ):
    service = CycleService(db)
    return service.adjust_hours(user.id, assignment_id, data.delta)
