# krishi_analytics/agents/common/models.py
"""
Pydantic records shared by the analytics agents
"""
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, model_validator
from typing import Any, Dict, FrozenSet, Literal, Optional
from datetime import date as dt_date

Impact = Literal["positive", "negative", "neutral"]
Severity = Literal["low", "moderate", "high", "severe"]


class FrozenModel(BaseModel):
    """Immutable snapshot; accepts field names or their aliases on input"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Location(FrozenModel):
    lat: float = Field(..., ge=-90, le=90, description="Latitude of the field")
    lon: float = Field(..., ge=-180, le=180, description="Longitude of the field")


class Band(FrozenModel):
    """Closed numeric range"""
    min: float
    max: float

    @model_validator(mode="after")
    def _ordered(self):
        if self.max < self.min:
            raise ValueError("band max must be greater than or equal to min")
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def contains_within(self, value: float, margin: float) -> bool:
        return self.min - margin <= value <= self.max + margin


class DailyTemperature(FrozenModel):
    min: float = Field(..., ge=-60, le=60, description="Daily minimum temperature (°C)")
    max: float = Field(..., ge=-60, le=60, description="Daily maximum temperature (°C)")
    avg: float = Field(..., ge=-60, le=60, description="Daily mean temperature (°C)")


class WeatherDay(FrozenModel):
    """One day of observed or forecast weather"""
    date: dt_date
    temperature: DailyTemperature
    rainfall_mm: float = Field(
        0.0, ge=0, validation_alias=AliasChoices("rainfall_mm", "rainfall"),
        description="Daily rainfall (mm)"
    )
    humidity_pct: float = Field(
        ..., ge=0, le=100, validation_alias=AliasChoices("humidity_pct", "humidity"),
        description="Relative humidity (%)"
    )
    wind_kmh: float = Field(
        0.0, ge=0, validation_alias=AliasChoices("wind_kmh", "windSpeed", "wind_speed"),
        description="Wind speed (km/h)"
    )


class SoilSample(FrozenModel):
    ph: float = Field(..., ge=0, le=14, validation_alias=AliasChoices("ph", "pH"))
    moisture_pct: float = Field(
        ..., ge=0, le=100, validation_alias=AliasChoices("moisture_pct", "moisture")
    )
    organic_matter_pct: float = Field(
        ..., ge=0, le=100, validation_alias=AliasChoices("organic_matter_pct", "organicMatter")
    )
    nitrogen_ppm: float = Field(..., ge=0, validation_alias=AliasChoices("nitrogen_ppm", "nitrogen"))
    phosphorus_ppm: float = Field(..., ge=0, validation_alias=AliasChoices("phosphorus_ppm", "phosphorus"))
    potassium_ppm: float = Field(..., ge=0, validation_alias=AliasChoices("potassium_ppm", "potassium"))


class PestHistoryRecord(FrozenModel):
    pest_name: str = Field(..., validation_alias=AliasChoices("pest_name", "pest"))
    date: dt_date
    severity: Severity


class Factor(FrozenModel):
    """Explains one adjustment made by a predictor"""
    name: str
    impact: Impact
    weight: float = Field(..., ge=0, le=1)
    description: str
    multiplier: Optional[float] = Field(None, description="Multiplier applied to the yield adjustment")
    points: Optional[float] = Field(None, description="Probability points added to a pest forecast")


class PestProfile(FrozenModel):
    """Environmental envelope in which a pest thrives"""
    pest_name: str
    optimal_temperature: Band
    optimal_humidity: Band
    optimal_rainfall: Band
    crops_susceptible: FrozenSet[str] = frozenset()


class AnalyticsResponse(BaseModel):
    """Envelope shared by every analytics response"""
    success: bool
    message: str
    error: Optional[str] = None
    timestamp: str
    metadata: Optional[Dict[str, Any]] = None
