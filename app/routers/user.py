from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.user import ProfileResponse, ProfileUpdate
from app.services.user import user_service

router = APIRouter()


@router.get("/me", response_model=ProfileResponse)
def get_my_profile(current_user: User = Depends(get_current_user)):
    return user_service.get_profile(current_user)


@router.patch("/me", response_model=ProfileResponse)
def update_my_profile(
    profile_data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Update the signed-in user's name or avatar.

    The avatar image itself is uploaded to object storage by the client;
    this stores its public URL.
    """
    return user_service.update_profile(db=db, current_user=current_user, profile_data=profile_data)
