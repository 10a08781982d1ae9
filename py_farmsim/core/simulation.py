"""
Nine-cell farm simulation.

A farm is a small grid of cells, each seeded from the geography of a
point a few meters from the farm centre plus independent per-cell
variation. The simulation averages the cells and applies rule-based
adjustments per crop to produce a health score, an expected yield, risk
factors and recommendations.
"""

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

import numpy as np
import structlog

from .alea_prng import AleaPRNG
from .geography import GeographyOptions, derive_geography, validate_coordinates
from .seasons import SEASON_YIELD_MULTIPLIER, Season, parse_season
from .suitability import is_known_crop, resolve_crop_type
from ..utils import random as prng_utils
from ..utils.numeric import round_half_up

logger = structlog.get_logger()

DEFAULT_CELL_COUNT = 9
CELL_OFFSET_SPREAD = 0.001  # degrees
IDEAL_CELL_TEMPERATURE = 22.0


@dataclass
class FarmCell:
    """Adjustable growing parameters of one farm cell."""

    id: int
    crop_type: str
    temperature: float  # °C
    nitrogen_level: float  # 0-100
    organic_matter: float  # % 0-100
    soil_ph: float
    irrigation_frequency: float  # times per week
    fertilizer_amount: float  # kg per hectare
    health: float  # 0-100
    elevation: int  # meters

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class OptimalRange:
    """Conditions under which a crop earns health bonuses."""

    temp_min: float
    temp_max: float
    ph_min: float
    ph_max: float
    nitrogen_min: float


CROP_OPTIMAL_RANGES: Dict[str, OptimalRange] = {
    "Corn Production": OptimalRange(18, 27, 6.0, 6.8, 60),
    "Wheat Production": OptimalRange(15, 25, 6.0, 7.0, 50),
    "Rice Production": OptimalRange(20, 35, 5.5, 6.5, 40),
    "Coffee Production": OptimalRange(18, 24, 6.0, 7.0, 45),
    "Soybean Production": OptimalRange(20, 30, 6.0, 7.0, 30),
    "Tomato Production": OptimalRange(18, 24, 6.0, 6.8, 70),
    "Potato Production": OptimalRange(15, 20, 5.8, 6.2, 55),
    "Dairy Production": OptimalRange(15, 25, 6.5, 7.0, 80),
}

# Tons per hectare at full health
BASE_YIELD: Dict[str, float] = {
    "Corn Production": 8.5,
    "Wheat Production": 3.2,
    "Rice Production": 6.8,
    "Coffee Production": 1.8,
    "Soybean Production": 2.9,
    "Tomato Production": 45.2,
    "Potato Production": 22.1,
    "Dairy Production": 8.4,
}
DEFAULT_BASE_YIELD = 5.0

HEALTH_RANGE = (70, 95)
INITIAL_HEALTH_RANGE = (50, 95)

NO_RISKS = "No significant risks detected"
DEFAULT_RECOMMENDATIONS = [
    "Current conditions are optimal - maintain current practices",
    "Monitor weather conditions regularly",
]


@dataclass
class SimulationResult:
    """Outcome of a farm simulation run."""

    overall_health: int
    expected_yield: float  # tons per hectare
    risk_factors: List[str]
    recommendations: List[str]
    confidence: int
    season: Season = Season.SUMMER
    averages: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["season"] = self.season.value
        return data


def initialize_farm_cells(
    lat: float,
    lng: float,
    crop_type: str,
    rng: Optional[AleaPRNG] = None,
    cell_count: int = DEFAULT_CELL_COUNT,
    options: Optional[GeographyOptions] = None,
) -> List[FarmCell]:
    """
    Create the farm grid around a location.

    Each cell gets its own geography at a small random offset, then
    independent variation for temperature, nutrients, pH, irrigation,
    fertilizer and starting health.
    """
    lat, lng = validate_coordinates(lat, lng)
    if cell_count < 1:
        raise ValueError("cell_count must be at least 1")
    rng = rng or prng_utils.get_prng()
    crop_type = resolve_crop_type(crop_type)

    cells = []
    for cell_id in range(cell_count):
        cell_lat = float(np.clip(lat + rng.jitter(CELL_OFFSET_SPREAD), -90.0, 90.0))
        cell_lng = float(np.clip(lng + rng.jitter(CELL_OFFSET_SPREAD), -180.0, 180.0))
        geo = derive_geography(cell_lat, cell_lng, rng, options=options)

        temp_optimality = max(0.0, 100.0 - abs(geo.temperature - IDEAL_CELL_TEMPERATURE) * 2)
        initial_health = round_half_up(
            (temp_optimality + geo.moisture_level + geo.water_level) / 3
        )

        cells.append(
            FarmCell(
                id=cell_id,
                crop_type=crop_type,
                temperature=geo.temperature + rng.jitter(5.0),
                nitrogen_level=rng.uniform(40.0, 80.0),
                organic_matter=rng.uniform(20.0, 80.0),
                soil_ph=geo.soil_ph + rng.jitter(1.0),
                irrigation_frequency=rng.uniform(2.0, 7.0),
                fertilizer_amount=rng.uniform(100.0, 300.0),
                health=float(np.clip(initial_health + rng.random() * 20, *INITIAL_HEALTH_RANGE)),
                elevation=geo.elevation,
            )
        )

    logger.info("Initialized farm cells", lat=lat, lng=lng, crop=crop_type, cells=len(cells))
    return cells


def _cell_averages(cells: List[FarmCell]) -> Dict[str, float]:
    columns = [
        "temperature",
        "nitrogen_level",
        "organic_matter",
        "soil_ph",
        "irrigation_frequency",
        "fertilizer_amount",
        "health",
    ]
    values = np.array([[getattr(cell, name) for name in columns] for cell in cells], dtype=float)
    means = values.mean(axis=0)
    return {name: float(mean) for name, mean in zip(columns, means)}


def simulate_farm(
    cells: List[FarmCell],
    crop_type: str,
    season=Season.SUMMER,
    rng: Optional[AleaPRNG] = None,
) -> SimulationResult:
    """
    Predict health and yield for a farm.

    Args:
        cells: Farm cells, typically from initialize_farm_cells
        crop_type: Crop identifier; unknown crops use corn's optimal ranges
            and a generic base yield
        season: Current season
        rng: Source for yield variation and confidence

    Returns:
        SimulationResult

    Raises:
        ValueError: if cells is empty or season is unknown
    """
    if not cells:
        raise ValueError("Cannot simulate a farm without cells")
    season = parse_season(season)
    rng = rng or prng_utils.get_prng()

    crop_key = resolve_crop_type(crop_type)
    optimal = CROP_OPTIMAL_RANGES[crop_key]
    averages = _cell_averages(cells)
    avg_temp = averages["temperature"]
    avg_ph = averages["soil_ph"]
    avg_nitrogen = averages["nitrogen_level"]
    avg_organic = averages["organic_matter"]

    risk_factors: List[str] = []
    recommendations: List[str] = []

    if avg_temp < optimal.temp_min:
        risk_factors.append("Temperature below optimal range")
        recommendations.append("Consider greenhouse cultivation or wait for warmer season")
    elif avg_temp > optimal.temp_max:
        risk_factors.append("Temperature above optimal range")
        recommendations.append("Increase irrigation and consider shade cloth protection")

    if avg_ph < optimal.ph_min:
        risk_factors.append("Soil pH too acidic")
        recommendations.append("Apply lime to increase soil pH")
    elif avg_ph > optimal.ph_max:
        risk_factors.append("Soil pH too alkaline")
        recommendations.append("Apply sulfur to decrease soil pH")

    if avg_nitrogen < optimal.nitrogen_min:
        risk_factors.append("Nitrogen deficiency")
        recommendations.append("Increase nitrogen-rich fertilizer application")

    if avg_organic < 30:
        risk_factors.append("Low organic matter content")
        recommendations.append("Add compost or organic fertilizers to improve soil structure")
    elif avg_organic > 80:
        risk_factors.append("Excessive organic matter")
        recommendations.append("Balance organic matter levels for optimal nutrient availability")

    if averages["irrigation_frequency"] < 2:
        recommendations.append("Consider increasing irrigation frequency for better yields")

    health_score = averages["health"]
    if optimal.temp_min <= avg_temp <= optimal.temp_max:
        health_score += 5
    if optimal.ph_min <= avg_ph <= optimal.ph_max:
        health_score += 5
    if avg_nitrogen >= optimal.nitrogen_min:
        health_score += 5
    if 30 <= avg_organic <= 70:
        health_score += 3
    health_score = float(np.clip(health_score, *HEALTH_RANGE))

    base_yield = BASE_YIELD[crop_key] if is_known_crop(crop_type) else DEFAULT_BASE_YIELD
    expected_yield = base_yield * (health_score / 100) * (1 + rng.random() * 0.2 - 0.1)
    final_yield = expected_yield * SEASON_YIELD_MULTIPLIER[season]

    if not recommendations:
        recommendations = list(DEFAULT_RECOMMENDATIONS)

    result = SimulationResult(
        overall_health=round_half_up(health_score),
        expected_yield=round_half_up(final_yield, 1),
        risk_factors=risk_factors or [NO_RISKS],
        recommendations=recommendations,
        confidence=round_half_up(85 + rng.random() * 10),
        season=season,
        averages=averages,
    )
    logger.info(
        "Farm simulation complete",
        crop=crop_key,
        season=season.value,
        health=result.overall_health,
        expected_yield=result.expected_yield,
        risks=len(risk_factors),
    )
    return result
