# krishi_analytics/agents/pest_forecast/service.py
"""
Pest outbreak forecasting - matches forecast conditions against each pest's
optimal environmental envelope, field history and crop susceptibility
"""
import logging
from datetime import date, timedelta
from typing import Any, Dict, List, NamedTuple, Optional, Sequence, Tuple

from krishi_analytics.agents.common import aggregators
from krishi_analytics.agents.common.models import (
    Factor, PestHistoryRecord, PestProfile, SoilSample, WeatherDay
)
from krishi_analytics.agents.common.reference import PEST_TIPS, normalize_crop, pest_profiles_for
from krishi_analytics.agents.pest_forecast.models import PestOutbreakForecast, PestRiskReport

logger = logging.getLogger(__name__)

BASE_PROBABILITY = 20
HIGH_RISK_PROBABILITY = 70

# Outbreak horizon in days once conditions are favourable
EARLIEST_OUTBREAK_DAYS = 5
LATEST_OUTBREAK_DAYS = 10


class ForecastConditions(NamedTuple):
    avg_temperature: float
    avg_humidity: float
    avg_rainfall: float


def severity_for(probability: float) -> str:
    if probability > 85:
        return "severe"
    elif probability > 70:
        return "high"
    elif probability > 50:
        return "moderate"
    return "low"


class PestForecastService:
    """Rule-based pest outbreak forecaster"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    def predict_pest_outbreaks(
        self,
        crop: str,
        planting_date: date,
        weather_forecast: Optional[Sequence[WeatherDay]] = None,
        pest_history: Optional[Sequence[PestHistoryRecord]] = None,
        soil: Optional[SoilSample] = None,
        as_of: Optional[date] = None,
    ) -> PestRiskReport:
        # Soil is accepted for interface parity; no pest rule reads it yet
        as_of = as_of or date.today()
        crop_key = normalize_crop(crop)
        forecast = list(weather_forecast or [])
        conditions = self.summarize_forecast(forecast)
        recorded_pests = {record.pest_name.strip().lower() for record in (pest_history or [])}

        forecasts = []
        for profile in pest_profiles_for(crop):
            probability, factors = self.score_pest(profile, crop_key, conditions, recorded_pests)
            forecasts.append(PestOutbreakForecast(
                pest_name=profile.pest_name,
                predicted_date=self.predict_outbreak_date(profile, forecast, as_of),
                probability_pct=probability,
                severity=severity_for(probability),
                factors=factors,
            ))

        max_probability = max(f.probability_pct for f in forecasts)
        logger.debug(f"Pest forecast for {crop}: {len(forecasts)} pests, max probability {max_probability}%")

        return PestRiskReport(
            forecasts=forecasts,
            risk_level=severity_for(max_probability),
            recommendations=self._recommendations(crop_key, forecast, forecasts),
            monitoring_schedule=self._monitoring_schedule(forecast, forecasts),
        )

    @staticmethod
    def summarize_forecast(forecast: Sequence[WeatherDay]) -> Optional[ForecastConditions]:
        if not forecast:
            return None
        return ForecastConditions(
            avg_temperature=aggregators.mean(day.temperature.avg for day in forecast),
            avg_humidity=aggregators.mean(day.humidity_pct for day in forecast),
            avg_rainfall=aggregators.mean(day.rainfall_mm for day in forecast),
        )

    def score_pest(
        self,
        profile: PestProfile,
        crop_key: str,
        conditions: Optional[ForecastConditions],
        recorded_pests: set,
    ) -> Tuple[int, List[Factor]]:
        """Probability (0-100) of an outbreak and the factors that produced it"""
        pest = profile.pest_name
        probability = BASE_PROBABILITY
        factors: List[Factor] = []

        def add(points: int, name: str, impact: str, weight: float, description: str) -> None:
            nonlocal probability
            probability += points
            factors.append(Factor(name=name, impact=impact, weight=weight,
                                  description=description, points=points))

        if conditions is not None:
            temp = conditions.avg_temperature
            if profile.optimal_temperature.contains(temp):
                add(30, "Optimal Temperature for Pest", "positive", 0.3,
                    f"Temperature ({temp:.1f}°C) within optimal range for {pest}")
            elif profile.optimal_temperature.contains_within(temp, 5):
                add(15, "Near-Optimal Temperature", "positive", 0.15,
                    f"Temperature ({temp:.1f}°C) within 5°C of optimal range for {pest}")
            else:
                add(0, "Suboptimal Temperature", "negative", 0.2,
                    f"Temperature ({temp:.1f}°C) outside optimal range for {pest}")

            humidity = conditions.avg_humidity
            if profile.optimal_humidity.contains(humidity):
                add(25, "Optimal Humidity for Pest", "positive", 0.25,
                    f"Humidity ({humidity:.1f}%) within optimal range for {pest}")
            elif profile.optimal_humidity.contains_within(humidity, 10):
                add(10, "Near-Optimal Humidity", "positive", 0.1,
                    f"Humidity ({humidity:.1f}%) within 10% of optimal range for {pest}")

            rainfall = conditions.avg_rainfall
            if profile.optimal_rainfall.contains(rainfall):
                add(20, "Optimal Rainfall for Pest", "positive", 0.2,
                    f"Rainfall ({rainfall:.1f}mm) within optimal range for {pest}")
            elif profile.optimal_rainfall.contains_within(rainfall, 5):
                add(10, "Near-Optimal Rainfall", "positive", 0.1,
                    f"Rainfall ({rainfall:.1f}mm) within 5mm of optimal range for {pest}")

        if pest.strip().lower() in recorded_pests:
            add(25, "Pest History", "positive", 0.35,
                "Previous pest occurrences increase likelihood of recurrence")

        if crop_key in profile.crops_susceptible:
            add(20, "Crop Susceptibility", "positive", 0.2,
                "Crop variety is susceptible to this pest")

        return min(100, max(0, probability)), factors

    @staticmethod
    def predict_outbreak_date(profile: PestProfile, forecast: Sequence[WeatherDay], as_of: date) -> date:
        """
        Each forecast day with temperature and humidity inside the pest's
        envelope brings the outbreak a day closer, from 10 days out down to 5.
        """
        favourable_days = sum(
            1 for day in forecast
            if profile.optimal_temperature.contains(day.temperature.avg)
            and profile.optimal_humidity.contains(day.humidity_pct)
        )
        offset = LATEST_OUTBREAK_DAYS - min(LATEST_OUTBREAK_DAYS - EARLIEST_OUTBREAK_DAYS, favourable_days)
        return as_of + timedelta(days=offset)

    def _recommendations(self, crop_key: str, forecast: Sequence[WeatherDay],
                         forecasts: Sequence[PestOutbreakForecast]) -> List[str]:
        recommendations = [
            "Implement integrated pest management (IPM) practices",
            "Monitor crops regularly for early pest detection",
            "Maintain field hygiene to reduce pest habitats",
        ]

        high_risk = [f for f in forecasts if f.probability_pct > HIGH_RISK_PROBABILITY]
        if high_risk:
            recommendations.append("Take preventive measures for high-risk pests:")
            for f in high_risk:
                recommendations.append(f"- Monitor for {f.pest_name} and apply appropriate controls if detected")

        if any(day.humidity_pct > 75 for day in forecast):
            recommendations.append("Increase monitoring frequency during high humidity periods")
        if any(day.rainfall_mm > 20 for day in forecast):
            recommendations.append("Prepare for potential pest outbreaks following heavy rainfall")

        recommendations.extend(PEST_TIPS.get(crop_key, ()))
        return recommendations

    def _monitoring_schedule(self, forecast: Sequence[WeatherDay],
                             forecasts: Sequence[PestOutbreakForecast]) -> List[str]:
        schedule = [
            "Daily visual inspection of crops",
            "Weekly pest trapping and identification",
        ]

        high_risk = [f for f in forecasts if f.probability_pct > HIGH_RISK_PROBABILITY]
        if high_risk:
            schedule.append("Enhanced monitoring for high-risk pests:")
            for f in high_risk:
                schedule.append(f"- Check for {f.pest_name} signs twice daily")

        for day in forecast:
            if day.humidity_pct > 80:
                schedule.append(
                    f"- Intensive monitoring required on {day.date.isoformat()} "
                    f"due to high humidity ({day.humidity_pct:g}%)"
                )
        for day in forecast:
            if day.rainfall_mm > 25:
                schedule.append(
                    f"- Post-rainfall inspection recommended on {day.date.isoformat()} for pest activity"
                )

        return schedule
