# krishi_analytics/agents/common/__init__.py
"""
Records, reference tables and aggregators shared by the analytics agents
"""

from .models import (
    AnalyticsResponse, Band, DailyTemperature, Factor, Location, PestHistoryRecord,
    PestProfile, SoilSample, WeatherDay,
)

__all__ = [
    "AnalyticsResponse", "Band", "DailyTemperature", "Factor", "Location", "PestHistoryRecord",
    "PestProfile", "SoilSample", "WeatherDay",
]
