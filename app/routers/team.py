from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.team import TeamCreate, TeamUpdate, TeamResponse
from app.services.team import team_service
from app.core.club_context import get_club_id
from app.core.logging_config import logger

router = APIRouter()


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
def create_team(
    team_data: TeamCreate,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id),
    current_user: User = Depends(get_current_user)
):
    """
    Create a new team with its officials.

    The club is identified from the JWT token.
    """
    try:
        logger.info(f"Creating team: name={team_data.name}, club_id={_club_id}")
        return team_service.create_team(
            db=db,
            team_data=team_data,
            club_id=_club_id,
            user_id=current_user.id
        )
    except Exception as e:
        logger.error(f"Error creating team: {type(e).__name__}: {str(e)}")
        raise


@router.get("", response_model=List[TeamResponse])
def get_teams(
    skip: int = 0,
    limit: int = 100,
    is_opponent: Optional[bool] = None,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    """
    Retrieve the club's teams, newest first.

    Args:
        skip: Number of records to skip (default: 0)
        limit: Maximum number of records to return (default: 100)
        is_opponent: Only opponent teams (true) or only home teams (false)
    """
    return team_service.get_teams(
        db=db,
        club_id=_club_id,
        skip=skip,
        limit=limit,
        is_opponent=is_opponent
    )


@router.get("/{team_id}", response_model=TeamResponse)
def get_team(
    team_id: int,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    return team_service.get_team(db=db, team_id=team_id, club_id=_club_id)


@router.put("/{team_id}", response_model=TeamResponse)
def update_team(
    team_id: int,
    team_data: TeamUpdate,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    """
    Update a team. When `officials` is sent, it replaces the team's
    current officials.
    """
    return team_service.update_team(
        db=db,
        team_id=team_id,
        team_data=team_data,
        club_id=_club_id
    )


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_team(
    team_id: int,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    team_service.delete_team(db=db, team_id=team_id, club_id=_club_id)
    return None
