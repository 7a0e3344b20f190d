from typing import Optional, List, Dict, Any
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, desc
from app.crud.base import CRUDBase
from app.models.team import Team, TeamOfficial
from app.schemas.team import TeamCreate, TeamUpdate


class CRUDTeam(CRUDBase[Team, TeamCreate, TeamUpdate]):
    """
    CRUD operations for Team model.

    Officials are owned by their team: they are created with it, replaced
    as a whole on update and deleted with it.
    """

    def get(self, db: Session, id: int, club_id: int) -> Optional[Team]:
        stmt = select(Team).where(
            Team.id == id,
            Team.club_id == club_id
        ).options(selectinload(Team.officials))
        return db.execute(stmt).scalar_one_or_none()

    def get_multi(
        self,
        db: Session,
        *,
        skip: int = 0,
        limit: int = 100,
        club_id: int,
        is_opponent: Optional[bool] = None
    ) -> List[Team]:
        """
        Get the club's teams, newest first, optionally only home or only
        opponent teams.
        """
        stmt = select(Team).where(Team.club_id == club_id).options(selectinload(Team.officials))

        if is_opponent is not None:
            stmt = stmt.where(Team.is_opponent == is_opponent)

        stmt = stmt.order_by(desc(Team.created_at), desc(Team.id)).offset(skip).limit(limit)
        return list(db.execute(stmt).scalars().all())

    def create(
        self,
        db: Session,
        *,
        obj_in: TeamCreate,
        club_id: int,
        created_by: Optional[int] = None
    ) -> Team:
        """
        Create a team and its officials in one transaction.
        """
        obj_data = obj_in.model_dump(exclude={"officials"})
        db_obj = Team(club_id=club_id, created_by=created_by, **obj_data)
        db_obj.officials = [TeamOfficial(**official.model_dump()) for official in obj_in.officials]
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: Team,
        obj_in: TeamUpdate | Dict[str, Any]
    ) -> Team:
        """
        Update team fields; a provided officials list replaces the old one.
        """
        if isinstance(obj_in, dict):
            update_data = dict(obj_in)
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        officials = update_data.pop("officials", None)
        if officials is not None:
            db_obj.officials = [TeamOfficial(**dict(official)) for official in officials]

        return super().update(db=db, db_obj=db_obj, obj_in=update_data)

    def get_many_by_ids(self, db: Session, *, ids: List[int], club_id: int) -> List[Team]:
        stmt = select(Team).where(Team.id.in_(ids), Team.club_id == club_id)
        return list(db.execute(stmt).scalars().all())


team = CRUDTeam(Team)
