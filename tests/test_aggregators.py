from datetime import date

import pytest

from krishi_analytics.agents.common import aggregators
from krishi_analytics.agents.common.models import Band, SoilSample
from krishi_analytics.agents.common.reference import (
    base_water_for, base_yield_for, crop_catalog, normalize_soil_type, pest_profiles_for
)
from krishi_analytics.core.exceptions import InsufficientDataError


def test_variance_is_population_variance():
    assert aggregators.variance([20, 22, 24]) == pytest.approx(8 / 3)
    assert aggregators.variance([25, 25, 25]) == 0


def test_empty_series_raises():
    with pytest.raises(InsufficientDataError):
        aggregators.mean([])
    with pytest.raises(InsufficientDataError):
        aggregators.variance([])


def test_rain_distribution(make_weather):
    steady = make_weather(date(2024, 1, 1), 10, rainfall=5)
    assert aggregators.rain_distribution(steady) == (True, 0)

    bursty = make_weather(date(2024, 1, 1), 2, rainfall=0) + make_weather(date(2024, 1, 3), 1, rainfall=30)
    distribution = aggregators.rain_distribution(bursty)
    assert not distribution.even
    assert distribution.heavy_periods == 1


def test_dry_season_is_not_even(make_weather):
    assert not aggregators.rain_distribution(make_weather(date(2024, 1, 1), 5, rainfall=0)).even


def test_nutrient_balance(healthy_soil):
    assert aggregators.nutrient_balance(healthy_soil) == pytest.approx(0.8 ** (1 / 3))
    assert aggregators.nutrient_balance(healthy_soil) == pytest.approx(0.928, abs=1e-3)


def test_nutrient_balance_zero_nutrient():
    soil = SoilSample(ph=7, moisture_pct=40, organic_matter_pct=2,
                      nitrogen_ppm=0, phosphorus_ppm=40, potassium_ppm=200)
    assert aggregators.nutrient_balance(soil) == 0


def test_nutrient_ratios_are_capped():
    soil = SoilSample(ph=7, moisture_pct=40, organic_matter_pct=2,
                      nitrogen_ppm=900, phosphorus_ppm=900, potassium_ppm=900)
    assert aggregators.nutrient_balance(soil) == pytest.approx(1.0)


@pytest.mark.parametrize("value,expected", [(2.5, 3), (0.5, 1), (1.49, 1), (1559.6, 1560)])
def test_round_half_up(value, expected):
    assert aggregators.round_half_up(value) == expected


@pytest.mark.parametrize("days,stage", [
    (0, "initial"), (29, "initial"), (30, "vegetative"),
    (59, "vegetative"), (60, "reproductive"), (90, "maturity"),
])
def test_growth_stage(days, stage):
    assert aggregators.growth_stage(days) == stage


def test_days_between():
    assert aggregators.days_between(date(2024, 1, 1), date(2024, 3, 1)) == 60


def test_band_bounds():
    band = Band(min=15, max=25)
    assert band.contains(15) and band.contains(25)
    assert not band.contains(26)
    assert band.contains_within(29, 5)
    with pytest.raises(ValueError):
        Band(min=10, max=5)


def test_reference_lookups():
    assert base_yield_for(" Wheat ") == 3000
    assert base_yield_for("Quinoa") == 3000
    assert base_water_for("rice") == 1200
    assert base_water_for("Quinoa") == 600
    assert [p.pest_name for p in pest_profiles_for("Quinoa")] == ["General Pests"]
    assert normalize_soil_type("Sand") == "sandy"
    assert normalize_soil_type(None) == ""
    assert len(crop_catalog()) == 12
