from sqlalchemy.orm import Session
from typing import Optional, Dict
from app.crud.user_mapping import user_mapping_crud
from app.models.user_column_mapping import UserColumnMapping
from app.core.logging_config import logger


class UserMappingService:
    """Service for managing a club's saved column mappings"""

    def get_mapping(
        self,
        db: Session,
        club_id: int,
        entity_type: str
    ) -> Optional[UserColumnMapping]:
        return user_mapping_crud.get_by_club_and_type(db, club_id, entity_type)

    def get_default_mapping(
        self,
        db: Session,
        club_id: int,
        entity_type: str
    ) -> Optional[Dict[str, str]]:
        """
        Get the club's saved default mapping for an entity type

        Args:
            db: Database session
            club_id: Club ID
            entity_type: Entity type (e.g., "team")

        Returns:
            Mapping configuration dict or None
        """
        mapping = self.get_mapping(db, club_id, entity_type)
        if mapping:
            logger.info(f"Loaded default mapping for club={club_id}, entity={entity_type}")
            return mapping.mapping_config
        return None

    def save_mapping(
        self,
        db: Session,
        club_id: int,
        entity_type: str,
        mapping_config: Dict[str, str]
    ) -> UserColumnMapping:
        """
        Save or update the club's default mapping

        Args:
            db: Database session
            club_id: Club ID
            entity_type: Entity type (e.g., "team")
            mapping_config: Mapping configuration {field: column header}

        Returns:
            Created or updated UserColumnMapping
        """
        return user_mapping_crud.create_or_update(
            db=db,
            club_id=club_id,
            entity_type=entity_type,
            mapping_config=mapping_config
        )


user_mapping_service = UserMappingService()
