# krishi_analytics/agents/irrigation/models.py
"""
Pydantic models for irrigation agent
"""
from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from typing import List, Optional, Literal, NamedTuple
from datetime import date as dt_date

from krishi_analytics.agents.common.models import (
    AnalyticsResponse, FrozenModel, Location, SoilSample, WeatherDay
)

Intensity = Literal["light", "moderate", "heavy"]
IrrigationMethod = Literal["drip", "sprinkler", "flood", "furrow"]
Priority = Literal["high", "medium", "low"]

class IrrigationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    crop: str = Field(..., min_length=1, description="Crop type (e.g., Wheat, Rice, Maize)")
    location: Optional[Location] = Field(None, description="Field location")
    soil_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("soil_type", "soilType"),
        description="Soil texture (clay, sandy, loamy)"
    )
    planting_date: dt_date = Field(
        ..., validation_alias=AliasChoices("planting_date", "plantingDate"),
        description="Date when crop was planted"
    )
    weather_forecast: Optional[List[WeatherDay]] = Field(
        None, validation_alias=AliasChoices("weather_forecast", "weatherForecast")
    )
    soil: Optional[SoilSample] = Field(None, validation_alias=AliasChoices("soil", "soilData"))
    as_of: Optional[dt_date] = Field(
        None, validation_alias=AliasChoices("as_of", "asOf"),
        description="First day of the schedule (defaults to today)"
    )

class IrrigationDecision(NamedTuple):
    needed: bool
    intensity: str
    stress_contribution: int
    weather_factor: float
    growth_stage_factor: float
    interval_days: int

class IrrigationEvent(FrozenModel):
    date: dt_date
    start_time: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="Local start time (HH:MM)")
    duration_minutes: int = Field(..., ge=0)
    water_liters: int = Field(..., ge=0)
    method: IrrigationMethod
    priority: Priority

class IrrigationPlan(FrozenModel):
    events: List[IrrigationEvent] = Field(..., max_length=14)
    water_requirement_liters: int
    efficiency_score: int = Field(..., ge=0, le=100)
    next_irrigation_date: Optional[dt_date] = None
    recommendations: List[str]

class IrrigationResponse(AnalyticsResponse):
    data: Optional[IrrigationPlan] = None
