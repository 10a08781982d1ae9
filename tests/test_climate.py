"""Tests for climate zone classification."""

import pytest

from py_farmsim.core.climate import (
    CLIMATE_ZONES,
    ClimateZoneName,
    SoilType,
    classify_climate_zone,
)


class TestClimateZones:
    """Test latitude band classification."""

    @pytest.mark.parametrize(
        "lat, expected",
        [
            (90.0, ClimateZoneName.POLAR),
            (66.5, ClimateZoneName.POLAR),
            (-66.5, ClimateZoneName.POLAR),
            (66.49, ClimateZoneName.SUBARCTIC),
            (60.0, ClimateZoneName.SUBARCTIC),
            (59.99, ClimateZoneName.CONTINENTAL),
            (40.0, ClimateZoneName.CONTINENTAL),
            (-42.0, ClimateZoneName.CONTINENTAL),
            (39.9, ClimateZoneName.SUBTROPICAL),
            (30.0, ClimateZoneName.SUBTROPICAL),
            (23.5, ClimateZoneName.TROPICAL),
            (-23.5, ClimateZoneName.TROPICAL),
            (23.49, ClimateZoneName.EQUATORIAL),
            (0.0, ClimateZoneName.EQUATORIAL),
        ],
    )
    def test_latitude_breakpoints(self, lat, expected):
        assert classify_climate_zone(lat).name == expected

    def test_hemispheres_are_symmetric(self):
        for lat in [5, 25, 35, 45, 62, 70, 89]:
            assert classify_climate_zone(lat) == classify_climate_zone(-lat)

    def test_continental_baseline(self):
        zone = classify_climate_zone(42.0308)
        assert zone.name == ClimateZoneName.CONTINENTAL
        assert zone.base_temperature == 15
        assert zone.base_rainfall == 800
        assert zone.base_moisture == 65
        assert zone.dominant_soil == SoilType.LOAM

    def test_table_is_complete(self):
        assert set(CLIMATE_ZONES) == set(ClimateZoneName)
        polar = CLIMATE_ZONES[ClimateZoneName.POLAR]
        assert polar.base_temperature == -5
        assert polar.dominant_soil == SoilType.ROCKY

    def test_zones_ordered_from_pole(self):
        bounds = [zone.min_abs_latitude for zone in CLIMATE_ZONES.values()]
        assert bounds == sorted(bounds, reverse=True)
