"""
Core farm simulation functionality.
"""

from .alea_prng import AleaPRNG, ConstantPRNG
from .climate import ClimateZone, ClimateZoneName, SoilType, classify_climate_zone
from .geography import (
    GeographicAttributes,
    GeographyOptions,
    InvalidCoordinateError,
    derive_geography,
)
from .suitability import CROP_REQUIREMENTS, CropRequirement, score_components, score_suitability
from .seasons import Season, next_season
from .simulation import FarmCell, SimulationResult, initialize_farm_cells, simulate_farm
from .farms import PRESET_FARMS, FarmLocation, farm_from_coordinates

__all__ = ['AleaPRNG', 'ConstantPRNG',
           'ClimateZone', 'ClimateZoneName', 'SoilType', 'classify_climate_zone',
           'GeographicAttributes', 'GeographyOptions', 'InvalidCoordinateError', 'derive_geography',
           'CROP_REQUIREMENTS', 'CropRequirement', 'score_components', 'score_suitability',
           'Season', 'next_season',
           'FarmCell', 'SimulationResult', 'initialize_farm_cells', 'simulate_farm',
           'PRESET_FARMS', 'FarmLocation', 'farm_from_coordinates']
