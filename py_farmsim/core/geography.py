"""
Synthetic geography for a map location.

This module implements:
- Elevation from proximity to reference mountain ranges
- A periodic coastal-influence proxy from longitude
- Temperature, rainfall, moisture and water availability with jitter
- Soil type selection with optional random noise, and soil pH

The numbers are plausible rather than real: no elevation or shoreline
data is consulted. Every random draw goes through an injectable source so
that a seeded or constant generator gives exact, repeatable output.
"""

import math
from dataclasses import asdict, dataclass
from typing import List, Optional

import numpy as np
import structlog

from .alea_prng import AleaPRNG
from .climate import SOIL_TYPES, ClimateZone, ClimateZoneName, SoilType, classify_climate_zone
from ..utils import random as prng_utils
from ..utils.numeric import round_half_up

logger = structlog.get_logger()


class InvalidCoordinateError(ValueError):
    """Raised for coordinates that are not finite or outside the globe."""


@dataclass(frozen=True)
class MountainRange:
    """Reference peak used by the elevation model."""

    name: str
    lat: float
    lng: float
    elevation: float  # meters added at the reference point


@dataclass
class GeographyOptions:
    """Tunable constants of the geography model."""

    # Elevation
    base_elevation: float = 200.0  # meters
    mountain_radius: float = 10.0  # degrees of influence around a range
    elevation_jitter: float = 400.0
    mountain_ranges: List[MountainRange] = None

    # Coastal proxy
    coastal_period: float = 60.0  # degrees of longitude
    coastal_width: float = 20.0  # degrees from the boundary with any influence

    # Temperature
    lapse_rate: float = 0.006  # °C per meter
    coastal_moderation: float = 3.0
    temperature_jitter: float = 10.0

    # Rainfall
    orographic_threshold: float = 1000.0  # meters
    orographic_factor: float = 0.5
    coastal_rainfall: float = 300.0
    continental_rainfall: float = -200.0
    rainfall_jitter: float = 400.0
    min_rainfall: int = 100

    # Moisture
    moisture_elevation_threshold: float = 500.0
    moisture_jitter: float = 20.0
    moisture_range: tuple = (20, 100)

    # Water availability
    base_water_level: float = 60.0
    lowland_threshold: float = 100.0
    water_jitter: float = 25.0
    water_range: tuple = (10, 100)

    # Soil
    soil_noise_probability: float = 0.2
    ph_jitter: float = 2.0
    ph_range: tuple = (3.0, 9.0)

    def __post_init__(self):
        if self.mountain_ranges is None:
            self.mountain_ranges = [
                MountainRange("Rockies", 40.0, -105.0, 2000.0),
                MountainRange("Alps", 46.0, 8.0, 1500.0),
                MountainRange("Himalayas", 28.0, 84.0, 3000.0),
                MountainRange("Andes", -22.0, -65.0, 2500.0),
            ]
        if not 0.0 <= self.soil_noise_probability <= 1.0:
            raise ValueError("soil_noise_probability must be between 0 and 1")


@dataclass(frozen=True)
class GeographicAttributes:
    """Environmental attributes derived for one location."""

    soil_type: SoilType
    water_level: int  # 0-100 %
    moisture_level: int  # 0-100 %
    temperature: int  # °C
    rainfall: int  # mm/year
    soil_ph: float  # one decimal
    elevation: int  # meters
    climate_zone: Optional[ClimateZoneName] = None
    coastal_influence: Optional[float] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["soil_type"] = self.soil_type.value
        if self.climate_zone is not None:
            data["climate_zone"] = self.climate_zone.value
        return data


# Base pH by soil; loam is the fallback
SOIL_BASE_PH = {
    SoilType.PEAT: 4.5,
    SoilType.SANDY: 6.5,
    SoilType.CLAY: 7.2,
    SoilType.ROCKY: 7.8,
    SoilType.LOAM: 6.8,
}


def validate_coordinates(lat, lng):
    """
    Check that a coordinate pair is usable.

    Returns:
        (lat, lng) as floats

    Raises:
        InvalidCoordinateError: if either value is not a finite number in range
    """
    try:
        lat = float(lat)
        lng = float(lng)
    except (TypeError, ValueError) as e:
        raise InvalidCoordinateError(f"Coordinates must be numeric: {e}") from e

    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise InvalidCoordinateError(f"Coordinates must be finite, got ({lat}, {lng})")
    if not -90.0 <= lat <= 90.0:
        raise InvalidCoordinateError(f"Latitude {lat} outside [-90, 90]")
    if not -180.0 <= lng <= 180.0:
        raise InvalidCoordinateError(f"Longitude {lng} outside [-180, 180]")
    return lat, lng


def estimate_elevation(
    lat: float, lng: float, rng: AleaPRNG, options: Optional[GeographyOptions] = None
) -> int:
    """
    Elevation in meters from distance to the reference mountain ranges.

    Each range within mountain_radius degrees adds its peak elevation scaled
    linearly by closeness. Consumes one draw for jitter.
    """
    options = options or GeographyOptions()
    elevation = options.base_elevation

    for mountain in options.mountain_ranges:
        distance = math.hypot(lat - mountain.lat, lng - mountain.lng)
        if distance < options.mountain_radius:
            elevation += mountain.elevation * (1 - distance / options.mountain_radius)

    elevation += rng.jitter(options.elevation_jitter)
    return max(0, round_half_up(elevation))


def coastal_influence(lng: float, options: Optional[GeographyOptions] = None) -> float:
    """
    Coastal influence in [0, 1] from a longitude-periodic proxy.

    Uses a truncated modulo (sign follows the dividend) so western
    longitudes behave as in the browser game.
    """
    options = options or GeographyOptions()
    proximity = min(
        abs(math.fmod(lng, options.coastal_period)),
        abs(math.fmod(lng + 180.0, options.coastal_period)),
    )
    return max(0.0, (options.coastal_width - proximity) / options.coastal_width)


def river_proximity(lat: float, lng: float) -> float:
    """Simplified river distribution in [-1, 1]."""
    return math.sin(lat * 0.1) * math.cos(lng * 0.1)


def determine_soil_type(
    zone: ClimateZone,
    elevation: float,
    coastal: float,
    rainfall: float,
    temperature: float,
) -> SoilType:
    """Deterministic soil choice before noise is applied."""
    if elevation > 2000:
        return SoilType.ROCKY
    if coastal > 0.7:
        return SoilType.SANDY
    if rainfall > 2000 and temperature > 20:
        return SoilType.CLAY
    if temperature < 5:
        return SoilType.PEAT
    return zone.dominant_soil


def base_soil_ph(soil_type: SoilType) -> float:
    return SOIL_BASE_PH.get(soil_type, SOIL_BASE_PH[SoilType.LOAM])


def derive_geography(
    lat: float,
    lng: float,
    rng: Optional[AleaPRNG] = None,
    noise_rng: Optional[AleaPRNG] = None,
    options: Optional[GeographyOptions] = None,
) -> GeographicAttributes:
    """
    Derive synthetic geographic attributes for a location.

    Args:
        lat: Latitude in degrees, [-90, 90]
        lng: Longitude in degrees, [-180, 180]
        rng: Jitter source; defaults to the shared PRNG
        noise_rng: Source for the soil-noise step; defaults to rng
        options: Model constants

    Returns:
        GeographicAttributes with every bounded field clamped

    Raises:
        InvalidCoordinateError: for non-finite or out-of-range coordinates
    """
    lat, lng = validate_coordinates(lat, lng)
    options = options or GeographyOptions()
    rng = rng or prng_utils.get_prng()
    noise_rng = noise_rng or rng

    zone = classify_climate_zone(lat)
    elevation = estimate_elevation(lat, lng, rng, options)
    coastal = coastal_influence(lng, options)

    temperature = round_half_up(
        zone.base_temperature
        - elevation * options.lapse_rate
        + coastal * options.coastal_moderation
        + rng.jitter(options.temperature_jitter)
    )

    orographic = (
        elevation * options.orographic_factor
        if elevation > options.orographic_threshold
        else 0.0
    )
    rainfall = max(
        options.min_rainfall,
        round_half_up(
            zone.base_rainfall
            + orographic
            + coastal * options.coastal_rainfall
            + (1 - coastal) * options.continental_rainfall
            + rng.jitter(options.rainfall_jitter)
        ),
    )

    elevation_moisture = (
        -elevation * 0.01 if elevation > options.moisture_elevation_threshold else 0.0
    )
    moisture = round_half_up(
        zone.base_moisture
        + elevation_moisture
        + (rainfall - 800) * 0.02
        + coastal * 15
        + rng.jitter(options.moisture_jitter)
    )
    moisture_level = int(np.clip(moisture, *options.moisture_range))

    groundwater = 20.0 if elevation < options.lowland_threshold else -elevation * 0.02
    water = round_half_up(
        options.base_water_level
        + (rainfall - 800) * 0.03
        + river_proximity(lat, lng) * 20
        + groundwater
        + coastal * 10
        + rng.jitter(options.water_jitter)
    )
    water_level = int(np.clip(water, *options.water_range))

    soil_type = determine_soil_type(zone, elevation, coastal, rainfall, temperature)
    if noise_rng.random() < options.soil_noise_probability:
        soil_type = noise_rng.choice(SOIL_TYPES)

    ph = round_half_up(base_soil_ph(soil_type) + rng.jitter(options.ph_jitter), 1)
    soil_ph = float(np.clip(ph, *options.ph_range))

    attributes = GeographicAttributes(
        soil_type=soil_type,
        water_level=water_level,
        moisture_level=moisture_level,
        temperature=temperature,
        rainfall=rainfall,
        soil_ph=soil_ph,
        elevation=elevation,
        climate_zone=zone.name,
        coastal_influence=round(coastal, 4),
    )
    logger.debug(
        "Derived geography",
        lat=lat,
        lng=lng,
        zone=zone.name.value,
        soil=soil_type.value,
        temperature=temperature,
        rainfall=rainfall,
    )
    return attributes
