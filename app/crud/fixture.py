from typing import Optional, List
from datetime import datetime
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select
from app.crud.base import CRUDBase
from app.models.fixture import Fixture
from app.schemas.fixture import FixtureCreate, FixtureUpdate


class CRUDFixture(CRUDBase[Fixture, FixtureCreate, FixtureUpdate]):
    """CRUD operations for Fixture model, always loading teams and pitch"""

    def _with_relations(self, stmt):
        return stmt.options(
            selectinload(Fixture.home_team),
            selectinload(Fixture.away_team),
            selectinload(Fixture.pitch)
        )

    def get(self, db: Session, id: int, club_id: int) -> Optional[Fixture]:
        stmt = self._with_relations(select(Fixture).where(
            Fixture.id == id,
            Fixture.club_id == club_id
        ))
        return db.execute(stmt).scalar_one_or_none()

    def get_multi(
        self,
        db: Session,
        *,
        skip: int = 0,
        limit: int = 100,
        club_id: int,
        from_date: Optional[datetime] = None
    ) -> List[Fixture]:
        """
        Get the club's fixtures in kick-off order.

        Args:
            from_date: Only fixtures kicking off at or after this time
        """
        stmt = select(Fixture).where(Fixture.club_id == club_id)

        if from_date is not None:
            stmt = stmt.where(Fixture.match_date >= from_date)

        stmt = self._with_relations(stmt).order_by(Fixture.match_date, Fixture.id).offset(skip).limit(limit)
        return list(db.execute(stmt).scalars().all())


fixture = CRUDFixture(Fixture)
