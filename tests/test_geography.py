"""Tests for the synthetic geography model."""

import math

import pytest

from py_farmsim.core.alea_prng import AleaPRNG, ConstantPRNG
from py_farmsim.core.climate import ClimateZoneName, SoilType
from py_farmsim.core.geography import (
    GeographyOptions,
    InvalidCoordinateError,
    base_soil_ph,
    coastal_influence,
    derive_geography,
    estimate_elevation,
    river_proximity,
    validate_coordinates,
)

IOWA = (42.0308, -93.6319)
HIMALAYAS = (28.0, 84.0)


class TestZeroJitter:
    """Exact output with every random draw at its midpoint."""

    @pytest.fixture
    def flat(self):
        return ConstantPRNG(0.5)

    def test_iowa(self, flat):
        geo = derive_geography(*IOWA, rng=flat)

        assert geo.climate_zone == ClimateZoneName.CONTINENTAL
        assert geo.coastal_influence == 0.0
        assert geo.elevation == 200
        assert geo.temperature == 14  # 15 - 1.2 lapse
        assert geo.rainfall == 600  # 800 - 200 continentality
        assert geo.moisture_level == 61
        assert geo.water_level == 67
        assert geo.soil_type == SoilType.LOAM
        assert geo.soil_ph == 6.8

    def test_himalayas_are_high_cold_and_rocky(self, flat):
        geo = derive_geography(*HIMALAYAS, rng=flat)

        assert geo.climate_zone == ClimateZoneName.TROPICAL
        assert geo.elevation == 3200
        assert geo.temperature == 8
        assert geo.rainfall == 3400  # orographic boost above 1000 m
        assert geo.moisture_level == 100
        assert 70 <= geo.water_level <= 71
        assert geo.soil_type == SoilType.ROCKY
        assert geo.soil_ph == 7.8

    def test_coastal_location_is_sandy(self, flat):
        geo = derive_geography(50.0, 2.0, rng=flat)
        assert geo.coastal_influence == pytest.approx(0.9)
        assert geo.soil_type == SoilType.SANDY
        assert geo.soil_ph == 6.5

    def test_hot_wet_location_is_clay(self, flat):
        geo = derive_geography(0.0, 30.0, rng=flat)
        assert geo.climate_zone == ClimateZoneName.EQUATORIAL
        assert geo.temperature == 25
        assert geo.rainfall == 2300
        assert geo.soil_type == SoilType.CLAY

    def test_cold_location_is_peat(self, flat):
        geo = derive_geography(70.0, 30.0, rng=flat)
        assert geo.climate_zone == ClimateZoneName.POLAR
        assert geo.temperature == -6
        assert geo.rainfall == 100
        assert geo.soil_type == SoilType.PEAT
        assert geo.soil_ph == 4.5


class TestComponents:
    """Test the deterministic building blocks."""

    @pytest.mark.parametrize(
        "lng, expected",
        [
            (0.0, 1.0),
            (60.0, 1.0),
            (-60.0, 1.0),
            (10.0, 0.5),
            (-10.0, 0.5),
            (30.0, 0.0),
            (-93.6319, 0.0),
        ],
    )
    def test_coastal_influence(self, lng, expected):
        assert coastal_influence(lng) == pytest.approx(expected)

    def test_coastal_influence_bounds(self):
        for lng in range(-180, 181, 7):
            assert 0.0 <= coastal_influence(float(lng)) <= 1.0

    def test_elevation_peaks_at_reference_point(self):
        flat = ConstantPRNG()
        assert estimate_elevation(46.0, 8.0, flat) == 1700
        assert estimate_elevation(40.0, -105.0, flat) == 2200
        assert estimate_elevation(0.0, 0.0, flat) == 200

    def test_elevation_never_negative(self):
        low = ConstantPRNG(0.0)  # -200 jitter
        options = GeographyOptions(base_elevation=50.0)
        assert estimate_elevation(0.0, 0.0, low, options) == 0

    def test_river_proximity(self):
        assert river_proximity(0.0, 0.0) == 0.0
        assert river_proximity(10.0, 0.0) == pytest.approx(math.sin(1.0))

    def test_base_soil_ph(self):
        assert base_soil_ph(SoilType.PEAT) == 4.5
        assert base_soil_ph(SoilType.LOAM) == 6.8
        assert base_soil_ph(SoilType.ROCKY) == 7.8


class TestBounds:
    """Every bounded field is clamped whatever the jitter."""

    def _check(self, geo):
        assert 20 <= geo.moisture_level <= 100
        assert 10 <= geo.water_level <= 100
        assert geo.rainfall >= 100
        assert geo.elevation >= 0
        assert 3.0 <= geo.soil_ph <= 9.0
        assert geo.soil_type in set(SoilType)
        assert isinstance(geo.temperature, int)
        assert round(geo.soil_ph, 1) == geo.soil_ph

    def test_seeded_sweep(self):
        prng = AleaPRNG("bounds-sweep")
        for lat in range(-90, 91, 15):
            for lng in range(-180, 181, 30):
                self._check(derive_geography(lat, lng, rng=prng))

    @pytest.mark.parametrize("value", [0.0, 0.999])
    def test_extreme_jitter(self, value):
        prng = ConstantPRNG(value)
        for lat, lng in [(-90, -180), (90, 180), IOWA, HIMALAYAS, (-22, -65), (0, 0)]:
            self._check(derive_geography(lat, lng, rng=prng))

    def test_rainfall_floor(self):
        geo = derive_geography(70.0, 30.0, rng=ConstantPRNG(0.0))
        assert geo.rainfall == 100


class TestRandomness:
    """Jitter, reproducibility and the soil noise step."""

    def test_same_seed_same_output(self):
        a = derive_geography(*IOWA, rng=AleaPRNG("iowa"))
        b = derive_geography(*IOWA, rng=AleaPRNG("iowa"))
        assert a == b

    def test_repeated_calls_vary(self):
        prng = AleaPRNG("vary")
        results = {derive_geography(*IOWA, rng=prng) for _ in range(10)}
        assert len(results) > 1

    def test_soil_noise_replaces_soil(self):
        # 0.1 < 0.2 triggers noise and picks the first soil type
        geo = derive_geography(*IOWA, rng=ConstantPRNG(0.1))
        assert geo.soil_type == SoilType.CLAY

    def test_soil_noise_can_be_disabled(self):
        options = GeographyOptions(soil_noise_probability=0.0)
        geo = derive_geography(*IOWA, rng=ConstantPRNG(0.1), options=options)
        assert geo.soil_type == SoilType.LOAM

    def test_separate_noise_source(self):
        geo = derive_geography(*IOWA, rng=ConstantPRNG(), noise_rng=ConstantPRNG(0.1))
        assert geo.temperature == 14
        assert geo.rainfall == 600
        assert geo.soil_type == SoilType.CLAY
        assert geo.soil_ph == 7.2

    def test_invalid_noise_probability(self):
        with pytest.raises(ValueError):
            GeographyOptions(soil_noise_probability=1.5)

    def test_default_source_used_when_none_given(self):
        geo = derive_geography(*IOWA)
        assert geo.climate_zone == ClimateZoneName.CONTINENTAL


class TestValidation:
    """Coordinates outside the globe are rejected."""

    @pytest.mark.parametrize(
        "lat, lng",
        [
            (90.01, 0.0),
            (-91.0, 0.0),
            (0.0, 180.5),
            (0.0, -181.0),
            (float("nan"), 0.0),
            (0.0, float("inf")),
            ("north", 0.0),
            (None, 0.0),
        ],
    )
    def test_rejects_bad_coordinates(self, lat, lng):
        with pytest.raises(InvalidCoordinateError):
            derive_geography(lat, lng, rng=ConstantPRNG())

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_coordinates(100, 0)

    def test_edges_are_valid(self):
        assert validate_coordinates(90, -180) == (90.0, -180.0)
        assert validate_coordinates("-45.5", "12") == (-45.5, 12.0)


class TestSerialization:

    def test_to_dict(self):
        data = derive_geography(*IOWA, rng=ConstantPRNG()).to_dict()
        assert data["soil_type"] == "loam"
        assert data["climate_zone"] == "Continental"
        assert set(data) >= {
            "soil_type",
            "water_level",
            "moisture_level",
            "temperature",
            "rainfall",
            "soil_ph",
            "elevation",
        }
