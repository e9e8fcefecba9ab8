"""
Subject endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.subject import MessageResponse, SubjectCreate, SubjectCreatedResponse, SubjectResponse
from app.services.subject_service import SubjectService

router = APIRouter()


@router.get("", summary="List your subjects (by name).", response_model=list[SubjectResponse], )
def list_subjects(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SubjectService(db)
    return service.list_subjects(user.id)


@router.post("", summary="Register a subject.", response_model=SubjectCreatedResponse,
             status_code=status.HTTP_201_CREATED, )
def create_subject(data: SubjectCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    """New subjects join the plan when the next cycle is created."""
    service = SubjectService(db)
    subject = service.create_subject(user.id, data)
    return SubjectCreatedResponse(message="Matéria adicionada!", subject=subject)


@router.delete("/{subject_id}", summary="Remove a subject.", response_model=MessageResponse, )
def delete_subject(subject_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SubjectService(db)
    service.delete_subject(user.id, subject_id)
    return MessageResponse(message="Matéria removida")
