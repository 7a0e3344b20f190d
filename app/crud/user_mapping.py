from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select
from typing import Optional, Dict
from app.models.user_column_mapping import UserColumnMapping
from app.core.logging_config import logger


class UserMappingCRUD:
    """CRUD operations for UserColumnMapping"""

    def get_by_club_and_type(
        self,
        db: Session,
        club_id: int,
        entity_type: str
    ) -> Optional[UserColumnMapping]:
        """Get the club's saved mapping for an entity type"""
        stmt = select(UserColumnMapping).where(
            UserColumnMapping.club_id == club_id,
            UserColumnMapping.entity_type == entity_type
        )
        return db.execute(stmt).scalars().first()

    def create_or_update(
        self,
        db: Session,
        club_id: int,
        entity_type: str,
        mapping_config: Dict[str, str]
    ) -> UserColumnMapping:
        """Create or update the club's default mapping"""
        existing = self.get_by_club_and_type(db, club_id, entity_type)

        if existing:
            existing.mapping_config = mapping_config
            db.commit()
            db.refresh(existing)
            logger.info(f"Updated mapping for club={club_id}, entity={entity_type}")
            return existing

        try:
            new_mapping = UserColumnMapping(
                club_id=club_id,
                entity_type=entity_type,
                mapping_config=mapping_config
            )
            db.add(new_mapping)
            db.commit()
            db.refresh(new_mapping)
            logger.info(f"Created mapping for club={club_id}, entity={entity_type}")
            return new_mapping
        except IntegrityError:
            # Another request inserted the row between our check and insert
            db.rollback()
            existing = self.get_by_club_and_type(db, club_id, entity_type)
            if not existing:
                raise
            existing.mapping_config = mapping_config
            db.commit()
            db.refresh(existing)
            logger.info(f"Updated mapping (race) for club={club_id}, entity={entity_type}")
            return existing


user_mapping_crud = UserMappingCRUD()
