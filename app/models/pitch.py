import enum
from sqlalchemy import Column, Integer, String, Float, ForeignKey, Enum, Text
from app.database import Base, TimestampMixin, JSONType


class PitchSurface(str, enum.Enum):
    grass = "grass"
    artificial_grass = "artificial_grass"
    hybrid = "hybrid"
    three_g = "3g"
    four_g = "4g"
    five_g = "5g"
    astroturf = "astroturf"
    other = "other"


class PitchLighting(str, enum.Enum):
    none = "none"
    floodlights = "floodlights"
    natural_only = "natural_only"
    partial = "partial"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Pitch(Base, TimestampMixin):
    __tablename__ = "pitch"

    id = Column(Integer, primary_key=True, index=True)
    club_id = Column(Integer, ForeignKey("club.id", ondelete="CASCADE"), nullable=False, index=True)
    created_by = Column(Integer, ForeignKey("user.id"), nullable=True)
    name = Column(String, nullable=False)

    address_line1 = Column(String, nullable=False)
    address_line2 = Column(String, nullable=True)
    city = Column(String, nullable=False)
    county = Column(String, nullable=True)
    postal_code = Column(String, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    map_url = Column(String, nullable=False)

    # Stored by value so "3g" etc. round-trip unchanged
    surface_type = Column(
        Enum(PitchSurface, values_callable=_enum_values),
        nullable=False,
        default=PitchSurface.grass,
    )
    lighting_type = Column(
        Enum(PitchLighting, values_callable=_enum_values),
        nullable=False,
        default=PitchLighting.none,
    )

    parking_info = Column(Text, nullable=True)
    access_instructions = Column(Text, nullable=True)
    equipment_requirements = Column(Text, nullable=True)
    amenities = Column(JSONType, nullable=True)  # {"changing_rooms": bool, "toilets": bool, "refreshments": bool}
    usage_restrictions = Column(Text, nullable=True)
    special_instructions = Column(Text, nullable=True)
