# krishi_analytics/agents/pest_forecast/models.py
"""
Pydantic models for the pest outbreak forecast agent
"""
from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from typing import List, Optional
from datetime import date as dt_date

from krishi_analytics.agents.common.models import (
    AnalyticsResponse, Factor, FrozenModel, Location, PestHistoryRecord,
    Severity, SoilSample, WeatherDay
)

class PestForecastRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    crop: str = Field(..., min_length=1, description="Crop name (e.g., Wheat, Rice)")
    location: Optional[Location] = Field(None, description="Field location")
    planting_date: dt_date = Field(
        ..., validation_alias=AliasChoices("planting_date", "plantingDate")
    )
    weather_forecast: Optional[List[WeatherDay]] = Field(
        None, validation_alias=AliasChoices("weather_forecast", "weatherForecast"),
        description="Daily weather forecast for the coming days"
    )
    pest_history: Optional[List[PestHistoryRecord]] = Field(
        None, validation_alias=AliasChoices("pest_history", "pestHistory"),
        description="Pest occurrences previously recorded on this field"
    )
    soil: Optional[SoilSample] = Field(None, validation_alias=AliasChoices("soil", "soilData"))
    as_of: Optional[dt_date] = Field(None, validation_alias=AliasChoices("as_of", "asOf"))

class PestOutbreakForecast(FrozenModel):
    pest_name: str
    predicted_date: dt_date
    probability_pct: int = Field(..., ge=0, le=100)
    severity: Severity
    factors: List[Factor]

class PestRiskReport(FrozenModel):
    forecasts: List[PestOutbreakForecast]
    risk_level: Severity
    recommendations: List[str]
    monitoring_schedule: List[str]

class PestForecastResponse(AnalyticsResponse):
    data: Optional[PestRiskReport] = None
