from datetime import date, timedelta

import pytest

from krishi_analytics.agents.common.models import SoilSample, WeatherDay


AS_OF = date(2024, 4, 10)


def weather_days(start, days, avg=25.0, rainfall=0.0, humidity=60.0, wind=5.0, spread=5.0):
    return [
        WeatherDay(
            date=start + timedelta(days=i),
            temperature={"min": avg - spread, "max": avg + spread, "avg": avg},
            rainfall_mm=rainfall,
            humidity_pct=humidity,
            wind_kmh=wind,
        )
        for i in range(days)
    ]


@pytest.fixture
def as_of():
    return AS_OF


@pytest.fixture
def make_weather():
    return weather_days


@pytest.fixture
def healthy_soil():
    return SoilSample.model_validate({
        "pH": 6.5, "moisture": 45, "organicMatter": 3.2,
        "nitrogen": 120, "phosphorus": 35, "potassium": 150,
    })


@pytest.fixture
def poor_soil():
    return SoilSample(
        ph=4.5, moisture_pct=10, organic_matter_pct=1.0,
        nitrogen_ppm=0, phosphorus_ppm=10, potassium_ppm=40,
    )
