from typing import List, Optional
from datetime import datetime, timezone
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.crud.fixture import fixture as fixture_crud
from app.crud.team import team as team_crud
from app.crud.pitch import pitch as pitch_crud
from app.schemas.fixture import FixtureCreate, FixtureUpdate
from app.models.fixture import Fixture
from app.core.logging_config import logger


class FixtureService:
    """
    Service layer for fixtures.

    Both teams and the pitch must belong to the caller's club, and a team
    can never play itself.
    """

    def __init__(self):
        self.crud = fixture_crud

    def _check_references(
        self,
        db: Session,
        club_id: int,
        home_team_id: int,
        away_team_id: int,
        pitch_id: int
    ) -> None:
        """
        Raises:
            HTTPException 400: If the teams are the same or a reference is not the club's
        """
        if home_team_id == away_team_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Home and away teams must be different"
            )

        found = {t.id for t in team_crud.get_many_by_ids(db=db, ids=[home_team_id, away_team_id], club_id=club_id)}
        for label, team_id in (("Home", home_team_id), ("Away", away_team_id)):
            if team_id not in found:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"{label} team {team_id} not found"
                )

        if not pitch_crud.get(db=db, id=pitch_id, club_id=club_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Pitch {pitch_id} not found"
            )

    def get_fixture(self, db: Session, fixture_id: int, club_id: int) -> Fixture:
        """
        Get a fixture by ID with club isolation.

        Raises:
            HTTPException 404: If fixture not found
        """
        fixture = self.crud.get(db=db, id=fixture_id, club_id=club_id)

        if not fixture:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Fixture not found"
            )

        return fixture

    def get_fixtures(
        self,
        db: Session,
        club_id: int,
        skip: int = 0,
        limit: int = 100,
        upcoming: bool = False
    ) -> List[Fixture]:
        from_date: Optional[datetime] = datetime.now(timezone.utc) if upcoming else None
        return self.crud.get_multi(
            db=db,
            skip=skip,
            limit=limit,
            club_id=club_id,
            from_date=from_date
        )

    def create_fixture(
        self,
        db: Session,
        fixture_data: FixtureCreate,
        club_id: int,
        user_id: Optional[int] = None
    ) -> Fixture:
        self._check_references(
            db,
            club_id,
            fixture_data.home_team_id,
            fixture_data.away_team_id,
            fixture_data.pitch_id
        )
        created = self.crud.create(db=db, obj_in=fixture_data, club_id=club_id, created_by=user_id)
        logger.info(
            f"Created fixture id={created.id}: team {created.home_team_id} v {created.away_team_id} "
            f"at pitch {created.pitch_id} on {created.match_date} for club={club_id}"
        )
        # Reload with teams and pitch
        return self.get_fixture(db=db, fixture_id=created.id, club_id=club_id)

    def update_fixture(
        self,
        db: Session,
        fixture_id: int,
        fixture_data: FixtureUpdate,
        club_id: int
    ) -> Fixture:
        fixture = self.get_fixture(db=db, fixture_id=fixture_id, club_id=club_id)
        update_data = fixture_data.model_dump(exclude_unset=True)

        if {"home_team_id", "away_team_id", "pitch_id"} & update_data.keys():
            self._check_references(
                db,
                club_id,
                update_data.get("home_team_id") or fixture.home_team_id,
                update_data.get("away_team_id") or fixture.away_team_id,
                update_data.get("pitch_id") or fixture.pitch_id
            )

        self.crud.update(db=db, db_obj=fixture, obj_in=update_data)
        return self.get_fixture(db=db, fixture_id=fixture_id, club_id=club_id)

    def delete_fixture(self, db: Session, fixture_id: int, club_id: int) -> None:
        deleted = self.crud.delete(db=db, id=fixture_id, club_id=club_id)

        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Fixture not found"
            )


fixture_service = FixtureService()
