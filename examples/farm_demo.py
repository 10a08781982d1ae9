"""
Example walking a farm through a year of seasons.
"""

from py_farmsim.core import (
    AleaPRNG,
    PRESET_FARMS,
    Season,
    initialize_farm_cells,
    next_season,
    simulate_farm,
)
from py_farmsim.core.farms import with_geography
from py_farmsim.core.suitability import suitability_rating


def main():
    seed = "farm_demo"
    prng = AleaPRNG(seed)

    print("Preset farms:")
    for farm in PRESET_FARMS:
        farm = with_geography(farm, prng)
        geo = farm.geography
        print(
            f"  {farm.name:<28} {farm.crop_type:<20} "
            f"{geo.climate_zone.value:<12} {geo.temperature:>4}°C {geo.rainfall:>5}mm "
            f"{geo.soil_type.value:<6} pH {geo.soil_ph}  "
            f"suitability {farm.suitability_score} ({suitability_rating(farm.suitability_score)})"
        )

    farm = PRESET_FARMS[0]
    cells = initialize_farm_cells(farm.lat, farm.lng, farm.crop_type, rng=prng)

    print(f"\nSimulating {farm.name} over one year:")
    season = Season.SPRING
    for _ in range(4):
        result = simulate_farm(cells, farm.crop_type, season, rng=prng)
        print(
            f"  {season.value:<7} health {result.overall_health}%  "
            f"yield {result.expected_yield} t/ha  confidence {result.confidence}%"
        )
        for risk in result.risk_factors:
            print(f"    - {risk}")
        season = next_season(season)


if __name__ == "__main__":
    main()
