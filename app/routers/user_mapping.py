from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.club_context import get_club_id
from app.core.logging_config import logger
from app.schemas.user_mapping import UserMappingCreate, UserMappingResponse
from app.services.user_mapping import user_mapping_service


router = APIRouter()


@router.get("/{entity_type}", response_model=UserMappingResponse)
def get_user_mapping(
    entity_type: str,
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id)
):
    """
    Get the club's saved default column mapping for an entity type

    Args:
        entity_type: Entity type (e.g., "team")

    Returns:
        UserMappingResponse with saved mapping config or 404
    """
    mapping = user_mapping_service.get_mapping(db=db, club_id=club_id, entity_type=entity_type)

    if not mapping:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No default mapping found for entity type '{entity_type}'"
        )

    return mapping


@router.post("", response_model=UserMappingResponse, status_code=status.HTTP_201_CREATED)
def save_user_mapping(
    mapping_data: UserMappingCreate,
    db: Session = Depends(get_db),
    club_id: int = Depends(get_club_id)
):
    """
    Save or update the club's default column mapping
    """
    try:
        return user_mapping_service.save_mapping(
            db=db,
            club_id=club_id,
            entity_type=mapping_data.entity_type,
            mapping_config=mapping_data.mapping_config
        )
    except Exception as e:
        logger.error(f"Error saving user mapping: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save mapping: {str(e)}"
        )
