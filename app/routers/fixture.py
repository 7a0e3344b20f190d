from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.fixture import (
    FixtureCreate,
    FixtureUpdate,
    FixtureResponse,
    FixtureEmailRequest,
    FixtureEmailResponse,
)
from app.services.fixture import fixture_service
from app.services.email_template import email_template_service
from app.core.club_context import get_club_id
from app.core.logging_config import logger

router = APIRouter()


@router.post("", response_model=FixtureResponse, status_code=status.HTTP_201_CREATED)
def create_fixture(
    fixture_data: FixtureCreate,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id),
    current_user: User = Depends(get_current_user)
):
    """
    Schedule a fixture between two of the club's teams at one of its pitches.
    """
    logger.info(
        f"Creating fixture: home={fixture_data.home_team_id}, away={fixture_data.away_team_id}, "
        f"club_id={_club_id}"
    )
    return fixture_service.create_fixture(
        db=db,
        fixture_data=fixture_data,
        club_id=_club_id,
        user_id=current_user.id
    )


@router.get("", response_model=List[FixtureResponse])
def get_fixtures(
    skip: int = 0,
    limit: int = 100,
    upcoming: bool = False,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    """
    Retrieve the club's fixtures in kick-off order.

    Args:
        upcoming: Only fixtures that have not kicked off yet
    """
    return fixture_service.get_fixtures(
        db=db,
        club_id=_club_id,
        skip=skip,
        limit=limit,
        upcoming=upcoming
    )


@router.get("/{fixture_id}", response_model=FixtureResponse)
def get_fixture(
    fixture_id: int,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    return fixture_service.get_fixture(db=db, fixture_id=fixture_id, club_id=_club_id)


@router.put("/{fixture_id}", response_model=FixtureResponse)
def update_fixture(
    fixture_id: int,
    fixture_data: FixtureUpdate,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    return fixture_service.update_fixture(
        db=db,
        fixture_id=fixture_id,
        fixture_data=fixture_data,
        club_id=_club_id
    )


@router.delete("/{fixture_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_fixture(
    fixture_id: int,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    fixture_service.delete_fixture(db=db, fixture_id=fixture_id, club_id=_club_id)
    return None


@router.post("/{fixture_id}/email", response_model=FixtureEmailResponse)
def render_fixture_email(
    fixture_id: int,
    request: FixtureEmailRequest = FixtureEmailRequest(),
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    """
    Render the match email for a fixture.

    Uses the stored template given by `template_id`, or the built-in
    match notification when none is given.
    """
    fixture = fixture_service.get_fixture(db=db, fixture_id=fixture_id, club_id=_club_id)
    return email_template_service.render_fixture_email(
        db=db,
        fixture=fixture,
        club_id=_club_id,
        template_id=request.template_id
    )
