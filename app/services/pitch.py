from typing import List, Optional, Dict, Any
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.crud.pitch import pitch as pitch_crud
from app.schemas.pitch import PitchCreate, PitchUpdate, GeocodeResult
from app.models.pitch import Pitch
from app.services.geocoding import geocoding_service, build_map_url, format_address
from app.core.config import settings
from app.core.logging_config import logger

ADDRESS_FIELDS = ("address_line1", "city", "postal_code")


class PitchService:
    """
    Service layer for pitch management.

    Every pitch is stored with coordinates. When a client does not send
    latitude and longitude the address is geocoded before saving.
    """

    def __init__(self):
        self.crud = pitch_crud

    def geocode(
        self,
        postal_code: str,
        address_line1: Optional[str] = None,
        city: Optional[str] = None
    ) -> GeocodeResult:
        address = format_address(postal_code, address_line1=address_line1, city=city)
        return geocoding_service.geocode_address(address)

    def _resolve_location(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Fill in latitude, longitude and map_url for a pitch payload.

        Raises:
            HTTPException 422: If the address cannot be geocoded
        """
        if data.get("latitude") is None or data.get("longitude") is None:
            result = self.geocode(
                data["postal_code"],
                address_line1=data.get("address_line1"),
                city=data.get("city")
            )
            if result.error:
                logger.warning(f"Geocoding failed for pitch '{data.get('name')}': {result.error}")
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail=f"Could not locate the pitch address: {result.error}"
                )
            data["latitude"] = result.lat
            data["longitude"] = result.lng

        data["map_url"] = build_map_url(data["latitude"], data["longitude"])
        return data

    def get_pitch(self, db: Session, pitch_id: int, club_id: int) -> Pitch:
        """
        Get a pitch by ID with club isolation.

        Raises:
            HTTPException 404: If pitch not found
        """
        pitch = self.crud.get(db=db, id=pitch_id, club_id=club_id)

        if not pitch:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Pitch not found"
            )

        return pitch

    def get_pitches(
        self,
        db: Session,
        club_id: int,
        skip: int = 0,
        limit: int = 100
    ) -> List[Pitch]:
        return self.crud.get_multi(db=db, skip=skip, limit=limit, club_id=club_id)

    def create_pitch(
        self,
        db: Session,
        pitch_data: PitchCreate,
        club_id: int,
        user_id: Optional[int] = None
    ) -> Pitch:
        data = self._resolve_location(pitch_data.model_dump())
        pitch = self.crud.create(db=db, obj_in=data, club_id=club_id, created_by=user_id)
        logger.info(f"Created pitch id={pitch.id} at ({pitch.latitude}, {pitch.longitude}) for club={club_id}")
        return pitch

    def update_pitch(
        self,
        db: Session,
        pitch_id: int,
        pitch_data: PitchUpdate,
        club_id: int
    ) -> Pitch:
        """
        Update a pitch.

        Changing the address without sending new coordinates geocodes the
        new address. Sending coordinates alone only moves the map pin.
        """
        pitch = self.get_pitch(db=db, pitch_id=pitch_id, club_id=club_id)
        update_data = pitch_data.model_dump(exclude_unset=True)

        address_changed = any(
            field in update_data and update_data[field] != getattr(pitch, field)
            for field in ADDRESS_FIELDS
        )
        coords_sent = "latitude" in update_data or "longitude" in update_data

        if address_changed or coords_sent:
            merged = {
                "name": pitch.name,
                "address_line1": update_data.get("address_line1", pitch.address_line1),
                "city": update_data.get("city", pitch.city),
                "postal_code": update_data.get("postal_code", pitch.postal_code),
                "latitude": update_data.get("latitude", None if address_changed else pitch.latitude),
                "longitude": update_data.get("longitude", None if address_changed else pitch.longitude),
            }
            located = self._resolve_location(merged)
            update_data.update({
                "latitude": located["latitude"],
                "longitude": located["longitude"],
                "map_url": located["map_url"],
            })

        return self.crud.update(db=db, db_obj=pitch, obj_in=update_data)

    def delete_pitch(self, db: Session, pitch_id: int, club_id: int) -> None:
        """
        Delete a pitch that no fixture uses.

        Raises:
            HTTPException 404: If pitch not found
            HTTPException 409: If fixtures are still scheduled there
        """
        pitch = self.get_pitch(db=db, pitch_id=pitch_id, club_id=club_id)

        fixture_count = self.crud.count_fixtures(db=db, pitch_id=pitch.id)
        if fixture_count:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Pitch is used by {fixture_count} fixture(s) and cannot be deleted"
            )

        self.crud.delete(db=db, id=pitch_id, club_id=club_id)

    def get_map_token(self) -> str:
        """
        Public token for the client-side map widget.

        Raises:
            HTTPException 500: If no token is configured
        """
        if not settings.MAPS_PUBLIC_TOKEN:
            logger.error("Map token requested but MAPS_PUBLIC_TOKEN is not set")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Map token not configured"
            )
        return settings.MAPS_PUBLIC_TOKEN


pitch_service = PitchService()
