"""
Farm locations: the showcase presets and farms created from map clicks.
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

import structlog

from .alea_prng import AleaPRNG
from .geography import GeographicAttributes, GeographyOptions, derive_geography, validate_coordinates
from .suitability import resolve_crop_type, score_suitability
from ..utils import random as prng_utils

logger = structlog.get_logger()


@dataclass
class FarmLocation:
    """A farm the player can manage."""

    id: str
    name: str
    lat: float
    lng: float
    crop_type: str
    country: str
    description: str
    geography: Optional[GeographicAttributes] = None
    suitability_score: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "location": {"lat": self.lat, "lng": self.lng},
            "crop_type": self.crop_type,
            "country": self.country,
            "description": self.description,
            "geography": self.geography.to_dict() if self.geography else None,
            "suitability_score": self.suitability_score,
        }


PRESET_FARMS: List[FarmLocation] = [
    FarmLocation(
        id="corn-iowa",
        name="Heartland Corn Farm",
        lat=42.0308,
        lng=-93.6319,
        crop_type="Corn Production",
        country="USA (Iowa)",
        description="Large-scale corn farm in the heart of the American Midwest. "
        "Known for high-yield corn production and sustainable farming practices.",
    ),
    FarmLocation(
        id="wheat-kansas",
        name="Prairie Gold Wheat",
        lat=38.5266,
        lng=-96.7265,
        crop_type="Wheat Production",
        country="USA (Kansas)",
        description="Traditional wheat farm spanning thousands of acres in the Great Plains. "
        "Critical for global grain supply.",
    ),
    FarmLocation(
        id="rice-vietnam",
        name="Mekong Delta Rice",
        lat=10.4583,
        lng=106.3417,
        crop_type="Rice Production",
        country="Vietnam",
        description="Sustainable rice farm in the fertile Mekong Delta. "
        "Feeds millions while preserving traditional farming methods.",
    ),
    FarmLocation(
        id="coffee-colombia",
        name="Andean Coffee Estate",
        lat=4.5709,
        lng=-75.6173,
        crop_type="Coffee Production",
        country="Colombia",
        description="High-altitude coffee farm in the Colombian Andes. "
        "Produces premium arabica beans with sustainable practices.",
    ),
    FarmLocation(
        id="soy-brazil",
        name="Cerrado Soybean",
        lat=-15.7801,
        lng=-47.9292,
        crop_type="Soybean Production",
        country="Brazil",
        description="Modern soybean operation in the Brazilian Cerrado. "
        "Major contributor to global protein supply.",
    ),
    FarmLocation(
        id="tomato-spain",
        name="Mediterranean Tomato",
        lat=36.7213,
        lng=-4.4214,
        crop_type="Tomato Production",
        country="Spain",
        description="High-tech greenhouse tomato farm using precision agriculture "
        "and water conservation techniques.",
    ),
    FarmLocation(
        id="potato-peru",
        name="Andes Potato Farm",
        lat=-11.0853,
        lng=-77.0438,
        crop_type="Potato Production",
        country="Peru",
        description="Traditional potato farm in the Peruvian Andes, "
        "home to hundreds of native potato varieties.",
    ),
    FarmLocation(
        id="dairy-newzealand",
        name="Canterbury Dairy",
        lat=-43.5321,
        lng=172.6362,
        crop_type="Dairy Production",
        country="New Zealand",
        description="Pasture-based dairy farm known for sustainable practices "
        "and high-quality milk production.",
    ),
]

_PRESETS_BY_ID: Dict[str, FarmLocation] = {farm.id: farm for farm in PRESET_FARMS}


def get_preset_farm(farm_id: str) -> FarmLocation:
    """Preset farm by id; raises KeyError if unknown."""
    if farm_id not in _PRESETS_BY_ID:
        raise KeyError(f"Unknown preset farm: {farm_id}")
    return _PRESETS_BY_ID[farm_id]


def region_name(lat: float, lng: float) -> str:
    """Coarse region label from bounding boxes, checked in order."""
    if lat > 49 and -125 < lng < -60:
        return "Canada"
    if 25 < lat < 49 and -125 < lng < -65:
        return "USA"
    if -35 < lat < 25 and -120 < lng < -30:
        return "Central/South America"
    if lat > 35 and -10 < lng < 70:
        return "Europe/Middle East"
    if lat > -35 and 70 < lng < 180:
        return "Asia/Oceania"
    if lat > -35 and -20 < lng < 55:
        return "Africa"
    return "International Waters"


def with_geography(
    farm: FarmLocation,
    rng: Optional[AleaPRNG] = None,
    options: Optional[GeographyOptions] = None,
) -> FarmLocation:
    """Copy of a farm with geography and suitability filled in."""
    geography = derive_geography(farm.lat, farm.lng, rng, options=options)
    return replace(
        farm,
        geography=geography,
        suitability_score=score_suitability(geography, farm.crop_type),
    )


def farm_from_coordinates(
    lat: float,
    lng: float,
    crop_type: str = "Corn Production",
    rng: Optional[AleaPRNG] = None,
    options: Optional[GeographyOptions] = None,
) -> FarmLocation:
    """
    Build a custom farm at a clicked map location.

    Raises:
        InvalidCoordinateError: for non-finite or out-of-range coordinates
    """
    lat, lng = validate_coordinates(lat, lng)
    crop_type = resolve_crop_type(crop_type)
    geography = derive_geography(lat, lng, rng, options=options)
    suitability = score_suitability(geography, crop_type)

    farm = FarmLocation(
        id=f"farm-{lat:.4f}-{lng:.4f}",
        name=f"{crop_type.split(' ')[0]} Farm",
        lat=lat,
        lng=lng,
        crop_type=crop_type,
        country=region_name(lat, lng),
        description=(
            f"Custom {crop_type.lower()} farm at coordinates {lat:.4f}, {lng:.4f}. "
            f"Climate: {geography.temperature}°C, {geography.rainfall}mm rainfall annually. "
            f"Soil: {geography.soil_type.value} with pH {geography.soil_ph}. "
            f"Elevation: {geography.elevation}m above sea level."
        ),
        geography=geography,
        suitability_score=suitability,
    )
    logger.info("Created farm", farm_id=farm.id, region=farm.country, suitability=suitability)
    return farm


def random_location(rng: Optional[AleaPRNG] = None) -> Tuple[float, float]:
    """Random (lat, lng) between 80°S and 80°N."""
    rng = rng or prng_utils.get_prng()
    lat = rng.jitter(160.0)
    lng = rng.jitter(360.0)
    return lat, lng
