import googlemaps
from typing import Optional
from app.core.config import settings
from app.core.logging_config import logger
from app.schemas.pitch import GeocodeResult


def build_map_url(lat: float, lng: float) -> str:
    return f"https://www.google.com/maps?q={lat},{lng}"


def format_address(
    postal_code: str,
    address_line1: Optional[str] = None,
    city: Optional[str] = None
) -> str:
    """Join the known address parts into one geocoding query"""
    parts = [address_line1, city, postal_code]
    return ", ".join(part.strip() for part in parts if part and part.strip())


class GeocodingService:
    """Google Maps Geocoding API integration for pitch locations"""

    def __init__(self):
        if settings.GOOGLE_MAPS_API_KEY:
            self.client = googlemaps.Client(key=settings.GOOGLE_MAPS_API_KEY)
            logger.info("Google Maps geocoding client initialized")
        else:
            self.client = None
            logger.warning("Google Maps API key not configured - geocoding disabled")
        self.region = settings.GEOCODING_REGION

    def geocode_address(self, address: str) -> GeocodeResult:
        """
        Geocode an address or postcode, restricted to the configured country.

        Args:
            address: Address string to geocode

        Returns:
            GeocodeResult with lat/lng or error message
        """
        if not self.client:
            return GeocodeResult(
                address=address,
                error="Geocoding service not configured"
            )

        if not address or not address.strip():
            return GeocodeResult(
                address=address,
                error="Empty address provided"
            )

        try:
            result = self.client.geocode(address, components={"country": self.region})

            if not result:
                return GeocodeResult(
                    address=address,
                    error="Could not find a location for this address",
                    quality_score=0.0
                )

            # First result is the best match
            location_data = result[0]
            geometry = location_data.get('geometry', {})
            location = geometry.get('location', {})

            lat = location.get('lat')
            lng = location.get('lng')

            if lat is None or lng is None:
                return GeocodeResult(
                    address=address,
                    error="Invalid address - no coordinates found",
                    quality_score=0.0
                )

            if not self.validate_location(lat, lng):
                return GeocodeResult(
                    address=address,
                    error=f"Invalid coordinates - lat={lat}, lng={lng} out of range",
                    quality_score=0.0
                )

            return GeocodeResult(
                address=address,
                lat=lat,
                lng=lng,
                formatted_address=location_data.get('formatted_address'),
                map_url=build_map_url(lat, lng),
                quality_score=self._calculate_quality_score(geometry.get('location_type', ''))
            )

        except googlemaps.exceptions.ApiError as e:
            logger.error(f"Google Maps API error for address '{address}': {str(e)}")
            return GeocodeResult(
                address=address,
                error=f"API error: {str(e)}"
            )
        except (googlemaps.exceptions.TransportError, googlemaps.exceptions.Timeout) as e:
            logger.error(f"Geocoding request failed for address '{address}': {str(e)}")
            return GeocodeResult(
                address=address,
                error=f"Geocoding failed: {str(e)}"
            )

    def _calculate_quality_score(self, location_type: str) -> float:
        """
        Quality score (0.0 to 1.0) from Google's location type.

        Postcode lookups usually come back as GEOMETRIC_CENTER or APPROXIMATE.
        """
        quality_map = {
            'ROOFTOP': 1.0,
            'RANGE_INTERPOLATED': 0.8,
            'GEOMETRIC_CENTER': 0.5,
            'APPROXIMATE': 0.3
        }
        return quality_map.get(location_type, 0.5)

    def validate_location(self, lat: float, lng: float) -> bool:
        return -90 <= lat <= 90 and -180 <= lng <= 180


geocoding_service = GeocodingService()
