from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from app.models.pitch import PitchSurface, PitchLighting


class Amenities(BaseModel):
    changing_rooms: bool = False
    toilets: bool = False
    refreshments: bool = False


class PitchBase(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    address_line1: str = Field(..., min_length=1)
    address_line2: Optional[str] = None
    city: str = Field(..., min_length=1)
    county: Optional[str] = None
    postal_code: str = Field(..., min_length=1, max_length=16)
    surface_type: PitchSurface = PitchSurface.grass
    lighting_type: PitchLighting = PitchLighting.none
    parking_info: Optional[str] = None
    access_instructions: Optional[str] = None
    equipment_requirements: Optional[str] = None
    amenities: Amenities = Amenities()
    usage_restrictions: Optional[str] = None
    special_instructions: Optional[str] = None

class PitchCreate(PitchBase):
    # Looked up from the address when omitted
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)

class PitchUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=255)
    address_line1: Optional[str] = Field(None, min_length=1)
    address_line2: Optional[str] = None
    city: Optional[str] = Field(None, min_length=1)
    county: Optional[str] = None
    postal_code: Optional[str] = Field(None, min_length=1, max_length=16)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    surface_type: Optional[PitchSurface] = None
    lighting_type: Optional[PitchLighting] = None
    parking_info: Optional[str] = None
    access_instructions: Optional[str] = None
    equipment_requirements: Optional[str] = None
    amenities: Optional[Amenities] = None
    usage_restrictions: Optional[str] = None
    special_instructions: Optional[str] = None

class PitchResponse(PitchBase):
    id: int
    club_id: int
    latitude: float
    longitude: float
    map_url: str
    amenities: Optional[Amenities] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GeocodeRequest(BaseModel):
    postal_code: str = Field(..., min_length=1, max_length=16)
    address_line1: Optional[str] = None
    city: Optional[str] = None


class GeocodeResult(BaseModel):
    """Result of geocoding an address"""
    address: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    formatted_address: Optional[str] = None
    map_url: Optional[str] = None
    quality_score: Optional[float] = None  # 0-1, confidence in geocoding
    error: Optional[str] = None


class MapTokenResponse(BaseModel):
    token: str
