from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select, func
from app.crud.base import CRUDBase
from app.models.fixture import Fixture
from app.models.pitch import Pitch
from app.schemas.pitch import PitchCreate, PitchUpdate


class CRUDPitch(CRUDBase[Pitch, PitchCreate, PitchUpdate]):
    """CRUD operations for Pitch model"""

    def get_multi(
        self,
        db: Session,
        *,
        skip: int = 0,
        limit: int = 100,
        club_id: int
    ) -> List[Pitch]:
        # Pitches are picked from a list, so keep them alphabetical
        stmt = select(Pitch).where(
            Pitch.club_id == club_id
        ).order_by(Pitch.name, Pitch.id).offset(skip).limit(limit)
        return list(db.execute(stmt).scalars().all())


    def count_fixtures(self, db: Session, *, pitch_id: int) -> int:
        stmt = select(func.count(Fixture.id)).where(Fixture.pitch_id == pitch_id)
        return db.execute(stmt).scalar_one()


pitch = CRUDPitch(Pitch)
