from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.pitch import (
    PitchCreate,
    PitchUpdate,
    PitchResponse,
    GeocodeRequest,
    GeocodeResult,
    MapTokenResponse,
)
from app.services.pitch import pitch_service
from app.core.club_context import get_club_id
from app.core.logging_config import logger

router = APIRouter()


@router.post("/geocode", response_model=GeocodeResult)
def geocode_pitch_address(
    request: GeocodeRequest,
    _club_id: int = Depends(get_club_id)
):
    """
    Look up coordinates for a postcode (and optional street and town).

    Failures are reported in the `error` field rather than as an HTTP error,
    so the form can ask the user to place the pin by hand.
    """
    result = pitch_service.geocode(
        request.postal_code,
        address_line1=request.address_line1,
        city=request.city
    )
    if result.error:
        logger.info(f"Geocode lookup for '{result.address}' returned no match: {result.error}")
    return result


@router.get("/map-token", response_model=MapTokenResponse)
def get_map_token(current_user: User = Depends(get_current_user)):
    return MapTokenResponse(token=pitch_service.get_map_token())


@router.post("", response_model=PitchResponse, status_code=status.HTTP_201_CREATED)
def create_pitch(
    pitch_data: PitchCreate,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id),
    current_user: User = Depends(get_current_user)
):
    """
    Create a new pitch.

    If latitude/longitude are omitted the address is geocoded; a 422 is
    returned when no location can be found.
    """
    logger.info(f"Creating pitch: name={pitch_data.name}, club_id={_club_id}")
    return pitch_service.create_pitch(
        db=db,
        pitch_data=pitch_data,
        club_id=_club_id,
        user_id=current_user.id
    )


@router.get("", response_model=List[PitchResponse])
def get_pitches(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    return pitch_service.get_pitches(db=db, club_id=_club_id, skip=skip, limit=limit)


@router.get("/{pitch_id}", response_model=PitchResponse)
def get_pitch(
    pitch_id: int,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    return pitch_service.get_pitch(db=db, pitch_id=pitch_id, club_id=_club_id)


@router.put("/{pitch_id}", response_model=PitchResponse)
def update_pitch(
    pitch_id: int,
    pitch_data: PitchUpdate,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    return pitch_service.update_pitch(
        db=db,
        pitch_id=pitch_id,
        pitch_data=pitch_data,
        club_id=_club_id
    )


@router.delete("/{pitch_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pitch(
    pitch_id: int,
    db: Session = Depends(get_db),
    _club_id: int = Depends(get_club_id)
):
    pitch_service.delete_pitch(db=db, pitch_id=pitch_id, club_id=_club_id)
    return None
