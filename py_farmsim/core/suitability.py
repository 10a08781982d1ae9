"""
Crop suitability scoring.

A location's derived attributes are compared against a static table of
crop requirements. Temperature, rainfall and pH score 100 inside their
range and fall off linearly with distance from the range midpoint; soil
scores 100 for a preferred type and a flat 60 otherwise. The overall
score is the rounded mean of the four.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .climate import SoilType
from .geography import GeographicAttributes
from ..utils.numeric import round_half_up

DEFAULT_CROP = "Corn Production"

SOIL_MISMATCH_SCORE = 60
TEMPERATURE_PENALTY = 5.0  # points per °C from the midpoint
RAINFALL_PENALTY = 0.1  # points per mm from the midpoint
PH_PENALTY = 20.0  # points per pH unit from the midpoint


@dataclass(frozen=True)
class CropRequirement:
    """Growing conditions a crop tolerates."""

    temp_range: Tuple[float, float]
    rainfall_range: Tuple[float, float]
    preferred_soil: Tuple[SoilType, ...]
    ph_range: Tuple[float, float]


CROP_REQUIREMENTS: Dict[str, CropRequirement] = {
    "Corn Production": CropRequirement(
        (15, 30), (600, 1200), (SoilType.LOAM, SoilType.CLAY), (6.0, 7.0)
    ),
    "Wheat Production": CropRequirement(
        (10, 25), (400, 800), (SoilType.LOAM, SoilType.CLAY), (6.5, 7.5)
    ),
    "Rice Production": CropRequirement(
        (20, 35), (1000, 2500), (SoilType.CLAY, SoilType.LOAM), (5.5, 7.0)
    ),
    "Coffee Production": CropRequirement(
        (18, 24), (1200, 2000), (SoilType.LOAM, SoilType.CLAY), (6.0, 7.0)
    ),
    "Soybean Production": CropRequirement(
        (20, 30), (500, 1000), (SoilType.LOAM, SoilType.CLAY), (6.0, 7.5)
    ),
    "Tomato Production": CropRequirement(
        (18, 27), (400, 800), (SoilType.LOAM, SoilType.SANDY), (6.0, 7.0)
    ),
    "Potato Production": CropRequirement(
        (15, 20), (400, 700), (SoilType.LOAM, SoilType.SANDY), (5.5, 6.5)
    ),
    "Dairy Production": CropRequirement(
        (5, 25), (600, 1500), (SoilType.LOAM, SoilType.CLAY), (6.0, 7.5)
    ),
}

# Short names accepted in addition to the full identifiers
CROP_ALIASES = {
    "corn": "Corn Production",
    "wheat": "Wheat Production",
    "rice": "Rice Production",
    "coffee": "Coffee Production",
    "soybean": "Soybean Production",
    "soy": "Soybean Production",
    "tomato": "Tomato Production",
    "potato": "Potato Production",
    "dairy": "Dairy Production",
    "pasture": "Dairy Production",
}


@dataclass(frozen=True)
class SuitabilityBreakdown:
    """Component scores and the overall score."""

    crop_type: str
    temperature_score: float
    rainfall_score: float
    soil_score: float
    ph_score: float
    overall: int


def resolve_crop_type(crop_id: str) -> str:
    """Canonical crop identifier; unknown identifiers fall back to corn."""
    if crop_id in CROP_REQUIREMENTS:
        return crop_id
    if isinstance(crop_id, str):
        alias = CROP_ALIASES.get(crop_id.strip().lower())
        if alias:
            return alias
    return DEFAULT_CROP


def get_crop_requirement(crop_id: str) -> CropRequirement:
    return CROP_REQUIREMENTS[resolve_crop_type(crop_id)]


def _range_score(value: float, value_range: Tuple[float, float], penalty: float) -> float:
    low, high = value_range
    if low <= value <= high:
        return 100.0
    midpoint = (low + high) / 2
    return max(0.0, 100.0 - abs(value - midpoint) * penalty)


def score_components(attrs: GeographicAttributes, crop_id: str) -> SuitabilityBreakdown:
    """
    Score each requirement separately.

    Args:
        attrs: Derived geography of the location
        crop_id: Crop identifier; unknown values use the corn profile

    Returns:
        SuitabilityBreakdown with every component in [0, 100]
    """
    crop_type = resolve_crop_type(crop_id)
    requirement = CROP_REQUIREMENTS[crop_type]

    temperature_score = _range_score(
        attrs.temperature, requirement.temp_range, TEMPERATURE_PENALTY
    )
    rainfall_score = _range_score(
        attrs.rainfall, requirement.rainfall_range, RAINFALL_PENALTY
    )
    soil_score = 100.0 if attrs.soil_type in requirement.preferred_soil else float(SOIL_MISMATCH_SCORE)
    ph_score = _range_score(attrs.soil_ph, requirement.ph_range, PH_PENALTY)

    overall = round_half_up(
        (temperature_score + rainfall_score + soil_score + ph_score) / 4
    )
    return SuitabilityBreakdown(
        crop_type=crop_type,
        temperature_score=temperature_score,
        rainfall_score=rainfall_score,
        soil_score=soil_score,
        ph_score=ph_score,
        overall=overall,
    )


def score_suitability(attrs: GeographicAttributes, crop_id: str) -> int:
    """Overall 0-100 suitability of a location for a crop."""
    return score_components(attrs, crop_id).overall


def suitability_rating(score: int) -> str:
    """Display band for a score."""
    if score >= 80:
        return "high"
    if score >= 60:
        return "moderate"
    return "low"


def is_known_crop(crop_id: str) -> bool:
    """True when crop_id names one of the tabulated crops or an alias."""
    if crop_id in CROP_REQUIREMENTS:
        return True
    return isinstance(crop_id, str) and crop_id.strip().lower() in CROP_ALIASES
