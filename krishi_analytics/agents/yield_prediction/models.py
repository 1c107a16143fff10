# krishi_analytics/agents/yield_prediction/models.py
"""
Pydantic models for the yield prediction agent
"""
from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from typing import List, Optional
from datetime import date as dt_date

from krishi_analytics.agents.common.models import (
    AnalyticsResponse, Factor, FrozenModel, Location, SoilSample, WeatherDay
)

class YieldPredictionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    crop: str = Field(..., min_length=1, description="Crop name (e.g., Wheat, Rice, Maize)")
    location: Optional[Location] = Field(None, description="Field location")
    area: Optional[float] = Field(None, gt=0, description="Field area in hectares")
    planting_date: dt_date = Field(
        ..., validation_alias=AliasChoices("planting_date", "plantingDate"),
        description="Date the crop was planted"
    )
    soil_type: Optional[str] = Field(None, validation_alias=AliasChoices("soil_type", "soilType"))
    weather_history: Optional[List[WeatherDay]] = Field(
        None, validation_alias=AliasChoices("weather_history", "weatherHistory"),
        description="Daily weather observed since planting"
    )
    soil: Optional[SoilSample] = Field(None, validation_alias=AliasChoices("soil", "soilData"))
    as_of: Optional[dt_date] = Field(
        None, validation_alias=AliasChoices("as_of", "asOf"),
        description="Date the prediction is made for (defaults to today)"
    )

class YieldEstimate(FrozenModel):
    predicted_yield_kg: int
    range_min: int
    range_max: int
    confidence_pct: int = Field(..., ge=60, le=95)
    growth_stage: str
    growth_stage_factor: float
    yield_adjustment: float
    factors: List[Factor]
    recommendations: List[str]

class YieldPredictionResponse(AnalyticsResponse):
    data: Optional[YieldEstimate] = None
