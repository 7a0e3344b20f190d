from pydantic import BaseModel, ConfigDict
from typing import Dict


class UserMappingCreate(BaseModel):
    """Request to save the club's default mapping"""
    entity_type: str
    mapping_config: Dict[str, str]


class UserMappingResponse(BaseModel):
    """Saved mapping for an entity type"""
    id: int
    club_id: int
    entity_type: str
    mapping_config: Dict[str, str]

    model_config = ConfigDict(from_attributes=True)
