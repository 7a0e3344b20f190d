from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.email_template import (
    EmailTemplateCreate,
    EmailTemplateUpdate,
    EmailTemplateResponse,
    TemplateField,
)
from app.services.email_template import email_template_service
from app.core.club_context import get_club_id

router = APIRouter()


@router.get("/fields", response_model=List[TemplateField])
def get_template_fields(current_user: User = Depends(get_current_user)):
    """Placeholders that can be used as {{field}} in a template."""
    return email_template_service.get_fields()


@router.post("", response_model=EmailTemplateResponse, status_code=status.HTTP_201_CREATED)
def create_email_template(
    template_data: EmailTemplateCreate,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id),
    current_user: User = Depends(get_current_user)
):
    """
    Save a new email template.

    Returns 422 if the subject or content does not parse or uses a field
    not listed by `/fields`.
    """
    return email_template_service.create_template(
        db=db,
        template_data=template_data,
        club_id=_club_id,
        user_id=current_user.id
    )


@router.get("", response_model=List[EmailTemplateResponse])
def get_email_templates(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    return email_template_service.get_templates(db=db, club_id=_club_id, skip=skip, limit=limit)


@router.get("/{template_id}", response_model=EmailTemplateResponse)
def get_email_template(
    template_id: int,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    return email_template_service.get_template(db=db, template_id=template_id, club_id=_club_id)


@router.put("/{template_id}", response_model=EmailTemplateResponse)
def update_email_template(
    template_id: int,
    template_data: EmailTemplateUpdate,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    return email_template_service.update_template(
        db=db,
        template_id=template_id,
        template_data=template_data,
        club_id=_club_id
    )


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_email_template(
    template_id: int,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    email_template_service.delete_template(db=db, template_id=template_id, club_id=_club_id)
    return None
