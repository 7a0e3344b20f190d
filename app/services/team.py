from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.crud.team import team as team_crud
from app.schemas.team import TeamCreate, TeamUpdate
from app.models.team import Team
from app.core.logging_config import logger


class TeamService:
    """
    Service layer for teams and their officials.
    """

    def __init__(self):
        self.crud = team_crud

    def get_team(
        self,
        db: Session,
        team_id: int,
        club_id: int
    ) -> Team:
        """
        Get a team by ID with club isolation.

        Raises:
            HTTPException 404: If team not found
        """
        team = self.crud.get(db=db, id=team_id, club_id=club_id)

        if not team:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Team not found"
            )

        return team

    def get_teams(
        self,
        db: Session,
        club_id: int,
        skip: int = 0,
        limit: int = 100,
        is_opponent: Optional[bool] = None
    ) -> List[Team]:
        return self.crud.get_multi(
            db=db,
            skip=skip,
            limit=limit,
            club_id=club_id,
            is_opponent=is_opponent
        )

    def create_team(
        self,
        db: Session,
        team_data: TeamCreate,
        club_id: int,
        user_id: Optional[int] = None
    ) -> Team:
        team = self.crud.create(db=db, obj_in=team_data, club_id=club_id, created_by=user_id)
        logger.info(f"Created team id={team.id} with {len(team.officials)} officials for club={club_id}")
        return team

    def update_team(
        self,
        db: Session,
        team_id: int,
        team_data: TeamUpdate,
        club_id: int
    ) -> Team:
        team = self.get_team(db=db, team_id=team_id, club_id=club_id)
        return self.crud.update(db=db, db_obj=team, obj_in=team_data)

    def delete_team(
        self,
        db: Session,
        team_id: int,
        club_id: int
    ) -> None:
        """
        Delete a team together with its officials.

        Raises:
            HTTPException 404: If team not found
        """
        deleted = self.crud.delete(db=db, id=team_id, club_id=club_id)

        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Team not found"
            )


team_service = TeamService()
