# krishi_analytics/agents/irrigation/service.py
"""
Irrigation service - 14-day schedule driven by growth stage, weather, soil
and accumulated water stress
"""
import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence

from krishi_analytics.agents.common import aggregators
from krishi_analytics.agents.common.models import SoilSample, WeatherDay
from krishi_analytics.agents.common.reference import (
    IRRIGATION_TIPS, base_water_for, normalize_crop, normalize_soil_type
)
from krishi_analytics.agents.irrigation.models import IrrigationDecision, IrrigationEvent, IrrigationPlan

logger = logging.getLogger(__name__)

SCHEDULE_DAYS = 14
BASE_INTERVAL_DAYS = 4
STRESS_OVERRIDE_THRESHOLD = 10

GROWTH_STAGE_WATER_FACTORS = {
    "initial": 0.7,
    "vegetative": 1.0,
    "reproductive": 1.3,
    "maturity": 1.1,
}

SOIL_WATER_MULTIPLIERS = {"clay": 0.8, "sandy": 1.4, "loamy": 1.0}
SOIL_DURATION_MULTIPLIERS = {"clay": 1.3, "sandy": 0.7, "loamy": 1.0}
INTENSITY_DURATION_MULTIPLIERS = {"light": 0.7, "moderate": 1.0, "heavy": 1.4}
SOIL_DEFAULT_METHODS = {"clay": "furrow", "sandy": "drip", "loamy": "drip"}

METHOD_EFFICIENCIES = {
    "drip": 0.95,
    "sprinkler": 0.85,
    "flood": 0.65,
    "furrow": 0.70,
}

FLOOD_CROPS = frozenset({"rice"})


def seasonal_multiplier(day: date) -> float:
    if 5 <= day.month <= 9:  # hot months
        return 1.3
    elif 10 <= day.month <= 12:  # autumn
        return 1.1
    elif 1 <= day.month <= 3:  # winter
        return 0.8
    return 1.0


class IrrigationService:
    """Day-by-day irrigation scheduler"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    def generate_schedule(
        self,
        crop: str,
        planting_date: date,
        soil_type: Optional[str] = None,
        weather_forecast: Optional[Sequence[WeatherDay]] = None,
        soil: Optional[SoilSample] = None,
        as_of: Optional[date] = None,
    ) -> IrrigationPlan:
        """
        Walk the next 14 days from `as_of`, carrying cumulative water stress.

        Skipped days add their stress contribution; an irrigation resets it.
        At most one event is produced per day.
        """
        as_of = as_of or date.today()
        soil_key = normalize_soil_type(soil_type)
        forecast_by_date = self._index_forecast(weather_forecast)

        events: List[IrrigationEvent] = []
        cumulative_water_stress = 0

        for offset in range(SCHEDULE_DAYS):
            day = as_of + timedelta(days=offset)
            forecast = forecast_by_date.get(day)
            decision = self.should_irrigate(planting_date, day, forecast, soil, cumulative_water_stress)

            if decision.needed:
                water = self.calculate_water_amount(crop, soil_key, soil, day)
                events.append(IrrigationEvent(
                    date=day,
                    start_time=self.optimal_start_time(forecast),
                    duration_minutes=self.calculate_duration(water, soil_key, decision.intensity),
                    water_liters=water,
                    method=self.choose_method(soil_key, crop, water),
                    priority=self.choose_priority(water, decision.intensity),
                ))
                cumulative_water_stress = 0
            else:
                cumulative_water_stress += decision.stress_contribution

        water_requirement = sum(event.water_liters for event in events)
        logger.debug(f"Irrigation plan for {crop}: {len(events)} events, {water_requirement}L")

        return IrrigationPlan(
            events=events,
            water_requirement_liters=water_requirement,
            efficiency_score=self.calculate_efficiency(events, forecast_by_date),
            next_irrigation_date=events[0].date if events else None,
            recommendations=self._recommendations(crop, events),
        )

    @staticmethod
    def _index_forecast(weather_forecast: Optional[Sequence[WeatherDay]]) -> Dict[date, WeatherDay]:
        indexed: Dict[date, WeatherDay] = {}
        for day in weather_forecast or []:
            # first entry for a date wins
            indexed.setdefault(day.date, day)
        return indexed

    def should_irrigate(
        self,
        planting_date: date,
        day: date,
        forecast: Optional[WeatherDay],
        soil: Optional[SoilSample],
        cumulative_water_stress: float,
    ) -> IrrigationDecision:
        days_since_planting = aggregators.days_between(planting_date, day)
        stage_factor = GROWTH_STAGE_WATER_FACTORS[aggregators.growth_stage(days_since_planting)]

        weather_factor = 1.0
        stress = 0

        if forecast is not None:
            if forecast.temperature.avg > 35:
                weather_factor *= 1.4
                stress += 3
            elif forecast.temperature.avg > 30:
                weather_factor *= 1.2
                stress += 2
            elif forecast.temperature.avg < 15:
                weather_factor *= 0.8

            if forecast.rainfall_mm > 15:
                weather_factor *= 0.5
            elif forecast.rainfall_mm > 5:
                weather_factor *= 0.8
            elif forecast.rainfall_mm == 0:
                stress += 1

            if forecast.humidity_pct < 30:
                weather_factor *= 1.3
                stress += 2
            elif forecast.humidity_pct > 70:
                weather_factor *= 0.8

            if forecast.wind_kmh > 20:
                weather_factor *= 1.2
                stress += 1

        if soil is not None:
            if soil.moisture_pct < 20:
                weather_factor *= 1.5
                stress += 3
            elif soil.moisture_pct > 60:
                weather_factor *= 0.7

        if cumulative_water_stress > STRESS_OVERRIDE_THRESHOLD:
            weather_factor *= 1.3

        interval = max(1, aggregators.round_half_up(BASE_INTERVAL_DAYS / (weather_factor * stage_factor)))
        needed = (days_since_planting * stage_factor) % interval == 0

        if weather_factor > 1.3:
            intensity = "heavy"
        elif weather_factor < 0.8:
            intensity = "light"
        else:
            intensity = "moderate"

        return IrrigationDecision(
            needed=needed,
            intensity=intensity,
            stress_contribution=stress,
            weather_factor=weather_factor,
            growth_stage_factor=stage_factor,
            interval_days=interval,
        )

    def calculate_water_amount(self, crop: str, soil_key: str, soil: Optional[SoilSample], day: date) -> int:
        amount = float(base_water_for(crop))
        amount *= SOIL_WATER_MULTIPLIERS.get(soil_key, 1.0)

        if soil is not None:
            # organic matter holds water
            amount *= 1 - (soil.organic_matter_pct / 100) * 0.5
            if soil.ph < 5.5 or soil.ph > 8.0:
                amount *= 1.1

        amount *= seasonal_multiplier(day)
        return aggregators.round_half_up(amount)

    def calculate_duration(self, water_liters: int, soil_key: str, intensity: str) -> int:
        duration = water_liters / 10
        duration *= SOIL_DURATION_MULTIPLIERS.get(soil_key, 1.0)
        duration *= INTENSITY_DURATION_MULTIPLIERS[intensity]
        return aggregators.round_half_up(duration)

    def choose_method(self, soil_key: str, crop: str, water_liters: int) -> str:
        method = SOIL_DEFAULT_METHODS.get(soil_key, "drip")
        if normalize_crop(crop) in FLOOD_CROPS:
            method = "flood"

        if water_liters > 2000:
            method = "flood"
        elif water_liters > 1500:
            method = "furrow"
        return method

    def choose_priority(self, water_liters: int, intensity: str) -> str:
        if intensity == "heavy" or water_liters > 1200:
            return "high"
        elif intensity == "moderate" or water_liters > 800:
            return "medium"
        return "low"

    def optimal_start_time(self, forecast: Optional[WeatherDay]) -> str:
        start_time = "06:00"
        if forecast is None:
            return start_time

        if forecast.temperature.max > 35:
            start_time = "04:00"
        elif forecast.temperature.max > 30:
            start_time = "05:00"
        elif forecast.temperature.max < 20:
            start_time = "07:00"

        # get ahead of the wind
        if forecast.wind_kmh > 15:
            start_time = "05:00"
        return start_time

    def calculate_efficiency(self, events: Sequence[IrrigationEvent],
                             forecast_by_date: Dict[date, WeatherDay]) -> int:
        if not events:
            return 100

        efficiency = aggregators.mean(METHOD_EFFICIENCIES.get(e.method, 0.8) for e in events) * 100

        for event in events:
            if 4 <= _start_hour(event) <= 7:
                efficiency += 2

            forecast = forecast_by_date.get(event.date)
            if forecast is None:
                continue
            if forecast.rainfall_mm > 10:
                efficiency -= 5
            elif forecast.rainfall_mm > 0:
                efficiency -= 2

        return aggregators.round_half_up(min(100.0, max(0.0, efficiency)))

    def _recommendations(self, crop: str, events: Sequence[IrrigationEvent]) -> List[str]:
        recommendations = [
            "Monitor soil moisture regularly to optimize irrigation timing",
            "Apply mulch to reduce evaporation and retain soil moisture",
        ]

        method_advice = {
            "drip": "Maintain drip system regularly to ensure uniform water distribution",
            "sprinkler": "Irrigate during early morning or late evening to reduce evaporation",
            "flood": "Ensure proper field leveling to achieve uniform water distribution",
            "furrow": "Monitor for waterlogging and improve drainage if necessary",
        }
        for method in dict.fromkeys(event.method for event in events):
            recommendations.append(method_advice[method])

        if events:
            total_water = sum(event.water_liters for event in events)
            recommendations.append(f"Total bi-weekly water requirement: {total_water} liters")

            if any(event.priority == "high" for event in events):
                recommendations.append("Pay special attention to high-priority irrigation events")

            early = sum(1 for event in events if 4 <= _start_hour(event) <= 7)
            if early > len(events) * 0.7:
                recommendations.append("Good timing: Most irrigation events scheduled during optimal hours")
            else:
                recommendations.append(
                    "Consider adjusting irrigation timing to early morning hours for better efficiency"
                )

        recommendations.extend(IRRIGATION_TIPS.get(normalize_crop(crop), ()))
        return recommendations


def _start_hour(event: IrrigationEvent) -> int:
    return int(event.start_time.split(":")[0])
