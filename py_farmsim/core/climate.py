"""
Latitude-based climate zones.

Each zone carries the baseline temperature, rainfall, moisture and
dominant soil that the geography model perturbs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class SoilType(str, Enum):
    """Soil classes known to the game."""

    CLAY = "clay"
    SANDY = "sandy"
    LOAM = "loam"
    ROCKY = "rocky"
    PEAT = "peat"


# Order matters: random soil picks index into this list
SOIL_TYPES: List[SoilType] = [
    SoilType.CLAY,
    SoilType.SANDY,
    SoilType.LOAM,
    SoilType.ROCKY,
    SoilType.PEAT,
]


class ClimateZoneName(str, Enum):
    """Latitude bands from pole to equator."""

    POLAR = "Polar"
    SUBARCTIC = "Subarctic"
    CONTINENTAL = "Continental"
    SUBTROPICAL = "Subtropical"
    TROPICAL = "Tropical"
    EQUATORIAL = "Equatorial"


@dataclass(frozen=True)
class ClimateZone:
    """Baseline environment of a latitude band."""

    name: ClimateZoneName
    min_abs_latitude: float  # Inclusive lower bound of |lat|
    base_temperature: float  # °C
    base_rainfall: float  # mm/year
    base_moisture: float  # %
    dominant_soil: SoilType


CLIMATE_ZONES: Dict[ClimateZoneName, ClimateZone] = {
    ClimateZoneName.POLAR: ClimateZone(
        ClimateZoneName.POLAR, 66.5, -5, 300, 85, SoilType.ROCKY
    ),
    ClimateZoneName.SUBARCTIC: ClimateZone(
        ClimateZoneName.SUBARCTIC, 60.0, 5, 500, 75, SoilType.PEAT
    ),
    ClimateZoneName.CONTINENTAL: ClimateZone(
        ClimateZoneName.CONTINENTAL, 40.0, 15, 800, 65, SoilType.LOAM
    ),
    ClimateZoneName.SUBTROPICAL: ClimateZone(
        ClimateZoneName.SUBTROPICAL, 30.0, 22, 1200, 70, SoilType.CLAY
    ),
    ClimateZoneName.TROPICAL: ClimateZone(
        ClimateZoneName.TROPICAL, 23.5, 27, 2000, 80, SoilType.CLAY
    ),
    ClimateZoneName.EQUATORIAL: ClimateZone(
        ClimateZoneName.EQUATORIAL, 0.0, 26, 2500, 85, SoilType.LOAM
    ),
}


def classify_climate_zone(lat: float) -> ClimateZone:
    """
    Classify a latitude into its climate zone.

    Zones are checked from the pole towards the equator and the first one
    whose lower bound is reached wins, so 66.5 is Polar and 66.49 is
    Subarctic.
    """
    abs_lat = abs(lat)
    for zone in CLIMATE_ZONES.values():
        if abs_lat >= zone.min_abs_latitude:
            return zone
    # Only reachable for NaN, which validation rejects upstream
    return CLIMATE_ZONES[ClimateZoneName.EQUATORIAL]
