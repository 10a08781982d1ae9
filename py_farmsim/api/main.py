"""FastAPI main application."""

import logging
from typing import List, Optional, Tuple

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.climate import SoilType
from ..core.farms import (
    PRESET_FARMS,
    FarmLocation,
    farm_from_coordinates,
    get_preset_farm,
    random_location,
    with_geography,
)
from ..core.geography import (
    GeographicAttributes,
    GeographyOptions,
    InvalidCoordinateError,
    derive_geography,
)
from ..core.seasons import SEASON_STATS, SEASON_YIELD_MULTIPLIER, next_season, parse_season
from ..core.simulation import BASE_YIELD, FarmCell, initialize_farm_cells, simulate_farm
from ..core.suitability import (
    CROP_REQUIREMENTS,
    DEFAULT_CROP,
    resolve_crop_type,
    score_components,
    suitability_rating,
)
from ..utils.random import prng_for

# Configure logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer()
        if settings.log_format == "console"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Farm Simulation API",
    description="Synthetic geography, crop suitability and farm simulation for the farm game",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class GeographyResponse(BaseModel):
    """Derived attributes of a location."""

    lat: float
    lng: float
    soil_type: SoilType
    water_level: int
    moisture_level: int
    temperature: int
    rainfall: int
    soil_ph: float
    elevation: int
    climate_zone: Optional[str] = None
    coastal_influence: Optional[float] = None


class AttributesInput(BaseModel):
    """Attributes to score; only the first four affect suitability."""

    temperature: float
    rainfall: float
    soil_type: SoilType
    soil_ph: float = Field(..., ge=0, le=14)
    water_level: int = Field(50, ge=0, le=100)
    moisture_level: int = Field(50, ge=0, le=100)
    elevation: int = Field(0, ge=0)


class SuitabilityRequest(BaseModel):
    attributes: AttributesInput
    crop_type: str = Field(DEFAULT_CROP, description="Crop identifier; unknown values score as corn")


class SuitabilityResponse(BaseModel):
    crop_type: str
    temperature_score: float
    rainfall_score: float
    soil_score: float
    ph_score: float
    overall: int
    rating: str


class CropInfo(BaseModel):
    crop_type: str
    temp_range: Tuple[float, float]
    rainfall_range: Tuple[float, float]
    preferred_soil: List[SoilType]
    ph_range: Tuple[float, float]
    base_yield: float


class Location(BaseModel):
    lat: float
    lng: float


class FarmResponse(BaseModel):
    id: str
    name: str
    location: Location
    crop_type: str
    country: str
    description: str
    geography: Optional[GeographyResponse] = None
    suitability_score: Optional[int] = None
    suitability_rating: Optional[str] = None


class FarmRequest(BaseModel):
    """Request to create a farm at a map location."""

    lat: float = Field(..., description="Latitude in degrees")
    lng: float = Field(..., description="Longitude in degrees")
    crop_type: str = Field(DEFAULT_CROP, description="Crop identifier")
    seed: Optional[str] = Field(None, description="Seed for reproducible geography")


class CellModel(BaseModel):
    id: int
    crop_type: str
    temperature: float
    nitrogen_level: float = Field(..., ge=0, le=100)
    organic_matter: float = Field(..., ge=0, le=100)
    soil_ph: float = Field(..., ge=0, le=14)
    irrigation_frequency: float = Field(..., ge=0)
    fertilizer_amount: float = Field(..., ge=0)
    health: float = Field(..., ge=0, le=100)
    elevation: int


class SimulationRequest(BaseModel):
    """Request to simulate a farm, optionally with edited cells."""

    lat: float
    lng: float
    crop_type: str = Field(DEFAULT_CROP)
    season: str = Field("summer", description="spring, summer, autumn or winter")
    seed: Optional[str] = Field(None, description="Seed for reproducible cells and yield")
    cells: Optional[List[CellModel]] = Field(None, description="Cells to simulate instead of generated ones")


class SimulationResultModel(BaseModel):
    overall_health: int
    expected_yield: float
    risk_factors: List[str]
    recommendations: List[str]
    confidence: int
    season: str


class SimulationResponse(BaseModel):
    crop_type: str
    cells: List[CellModel]
    result: SimulationResultModel


class SeasonResponse(BaseModel):
    season: str
    health: int
    moisture: int
    temperature: int
    yield_multiplier: float
    next_season: str


def _geography_options() -> GeographyOptions:
    return GeographyOptions(soil_noise_probability=settings.soil_noise_probability)


def _geography_response(lat: float, lng: float, geo: GeographicAttributes) -> GeographyResponse:
    return GeographyResponse(lat=lat, lng=lng, **geo.to_dict())


def _farm_response(farm: FarmLocation) -> FarmResponse:
    geography = None
    rating = None
    if farm.geography is not None:
        geography = _geography_response(farm.lat, farm.lng, farm.geography)
    if farm.suitability_score is not None:
        rating = suitability_rating(farm.suitability_score)
    return FarmResponse(
        id=farm.id,
        name=farm.name,
        location=Location(lat=farm.lat, lng=farm.lng),
        crop_type=farm.crop_type,
        country=farm.country,
        description=farm.description,
        geography=geography,
        suitability_score=farm.suitability_score,
        suitability_rating=rating,
    )


@app.exception_handler(InvalidCoordinateError)
async def invalid_coordinate_handler(request: Request, exc: InvalidCoordinateError):
    logger.warning("Rejected coordinates", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# Event handlers
@app.on_event("startup")
async def startup_event():
    logger.info(
        "Starting Farm Simulation API",
        version=__version__,
        soil_noise_probability=settings.soil_noise_probability,
    )


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Farm Simulation API")


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Farm Simulation API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/geography", response_model=GeographyResponse)
async def get_geography(lat: float, lng: float, seed: Optional[str] = None):
    """Derive geography for a location; pass a seed for repeatable output."""
    geo = derive_geography(lat, lng, prng_for(seed), options=_geography_options())
    return _geography_response(lat, lng, geo)


@app.get("/crops", response_model=List[CropInfo])
async def list_crops():
    """Crop requirement table."""
    return [
        CropInfo(
            crop_type=crop_type,
            temp_range=req.temp_range,
            rainfall_range=req.rainfall_range,
            preferred_soil=list(req.preferred_soil),
            ph_range=req.ph_range,
            base_yield=BASE_YIELD[crop_type],
        )
        for crop_type, req in CROP_REQUIREMENTS.items()
    ]


@app.post("/suitability", response_model=SuitabilityResponse)
async def post_suitability(request: SuitabilityRequest):
    """Score attributes against a crop."""
    attrs = GeographicAttributes(**request.attributes.model_dump())
    breakdown = score_components(attrs, request.crop_type)
    return SuitabilityResponse(
        crop_type=breakdown.crop_type,
        temperature_score=breakdown.temperature_score,
        rainfall_score=breakdown.rainfall_score,
        soil_score=breakdown.soil_score,
        ph_score=breakdown.ph_score,
        overall=breakdown.overall,
        rating=suitability_rating(breakdown.overall),
    )


@app.get("/farms/presets", response_model=List[FarmResponse])
async def list_preset_farms():
    """Showcase farms."""
    return [_farm_response(farm) for farm in PRESET_FARMS]


@app.get("/farms/presets/{farm_id}", response_model=FarmResponse)
async def get_preset(farm_id: str, seed: Optional[str] = None):
    """Preset farm with derived geography and suitability."""
    try:
        farm = get_preset_farm(farm_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Farm not found")
    return _farm_response(with_geography(farm, prng_for(seed), options=_geography_options()))


@app.post("/farms", response_model=FarmResponse)
async def create_farm(request: FarmRequest):
    """Create a custom farm at a map location."""
    logger.info("Farm requested", lat=request.lat, lng=request.lng, crop=request.crop_type)
    farm = farm_from_coordinates(
        request.lat,
        request.lng,
        request.crop_type,
        prng_for(request.seed),
        options=_geography_options(),
    )
    return _farm_response(farm)


@app.get("/farms/random", response_model=FarmResponse)
async def create_random_farm(crop_type: str = DEFAULT_CROP, seed: Optional[str] = None):
    """Create a farm at a random location."""
    rng = prng_for(seed)
    lat, lng = random_location(rng)
    return _farm_response(farm_from_coordinates(lat, lng, crop_type, rng, options=_geography_options()))


@app.post("/farms/simulate", response_model=SimulationResponse)
async def run_simulation(request: SimulationRequest):
    """Run the farm simulation, generating cells unless they are supplied."""
    rng = prng_for(request.seed)
    try:
        season = parse_season(request.season)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if request.cells is not None:
        cells = [FarmCell(**cell.model_dump()) for cell in request.cells]
    else:
        cells = initialize_farm_cells(
            request.lat,
            request.lng,
            request.crop_type,
            rng,
            cell_count=settings.farm_cell_count,
            options=_geography_options(),
        )

    try:
        result = simulate_farm(cells, request.crop_type, season, rng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SimulationResponse(
        crop_type=resolve_crop_type(request.crop_type),
        cells=[CellModel(**cell.to_dict()) for cell in cells],
        result=SimulationResultModel(
            overall_health=result.overall_health,
            expected_yield=result.expected_yield,
            risk_factors=result.risk_factors,
            recommendations=result.recommendations,
            confidence=result.confidence,
            season=result.season.value,
        ),
    )


@app.get("/seasons/{season}", response_model=SeasonResponse)
async def get_season(season: str):
    """Headline stats for a season."""
    try:
        parsed = parse_season(season)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    stats = SEASON_STATS[parsed]
    return SeasonResponse(
        season=parsed.value,
        health=stats.health,
        moisture=stats.moisture,
        temperature=stats.temperature,
        yield_multiplier=SEASON_YIELD_MULTIPLIER[parsed],
        next_season=next_season(parsed).value,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
