from fastapi import APIRouter, Depends, HTTPException, status, Header
from sqlalchemy.orm import Session
from app.database import get_db
from app.core.config import settings
from app.core.logging_config import logger
from app.crud.club import club as club_crud
from app.crud.user import user as user_crud
from app.schemas.club import ClubInviteRequest, ClubInviteResponse

router = APIRouter()


def verify_admin_key(x_admin_key: str = Header(...)):
    """Verify the admin API key from the x-admin-key header."""
    if not settings.ADMIN_API_KEY or x_admin_key != settings.ADMIN_API_KEY:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin API key"
        )


@router.post("/clubs/invite", response_model=ClubInviteResponse, status_code=status.HTTP_201_CREATED)
def create_club(
    request: ClubInviteRequest,
    db: Session = Depends(get_db),
    _: None = Depends(verify_admin_key)
):
    """
    Create a new club and its first user.

    The user signs in through the hosted auth service; tokens it issues
    carry this user's id.

    Raises:
        HTTPException: If email already exists
    """
    if user_crud.get_by_email(db, email=request.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this email already exists"
        )

    try:
        club, user = club_crud.create_with_user(
            db=db,
            club_name=request.club_name,
            email=request.email,
            full_name=request.full_name
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(f"Invited club id={club.id} '{club.name}' with user id={user.id}")
    return ClubInviteResponse(
        club_id=club.id,
        club_name=club.name,
        user_id=user.id,
        user_email=user.email
    )
