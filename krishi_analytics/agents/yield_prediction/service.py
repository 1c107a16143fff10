# krishi_analytics/agents/yield_prediction/service.py
"""
Yield prediction service - weighted weather and soil scoring on top of a crop base yield
"""
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from krishi_analytics.agents.common import aggregators
from krishi_analytics.agents.common.models import Factor, SoilSample, WeatherDay
from krishi_analytics.agents.common.reference import YIELD_TIPS, base_yield_for, normalize_crop
from krishi_analytics.agents.yield_prediction.models import YieldEstimate

logger = logging.getLogger(__name__)

GROWTH_STAGE_FACTORS = {
    "initial": 0.3,
    "vegetative": 0.6,
    "reproductive": 0.9,
    "maturity": 1.0,
}

BASE_CONFIDENCE = 75
MIN_CONFIDENCE = 60
MAX_CONFIDENCE = 95


class _Adjustment:
    """Running yield multiplier; every change is recorded as a Factor"""

    def __init__(self):
        self.value = 1.0
        self.factors: List[Factor] = []

    def apply(self, multiplier: float, name: str, impact: str, weight: float, description: str) -> None:
        self.value *= multiplier
        self.factors.append(Factor(
            name=name,
            impact=impact,
            weight=weight,
            description=description,
            multiplier=multiplier,
        ))


class YieldPredictionService:
    """Rule-based crop yield estimator"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    def predict_yield(
        self,
        crop: str,
        area: float,
        planting_date: date,
        weather_history: Optional[Sequence[WeatherDay]] = None,
        soil: Optional[SoilSample] = None,
        as_of: Optional[date] = None,
    ) -> YieldEstimate:
        as_of = as_of or date.today()
        base_yield = base_yield_for(crop)

        days_since_planting = aggregators.days_between(planting_date, as_of)
        stage = aggregators.growth_stage(days_since_planting)
        stage_factor = GROWTH_STAGE_FACTORS[stage]

        adjustment = _Adjustment()
        if weather_history:
            self._score_weather(weather_history, adjustment)
        if soil is not None:
            self._score_soil(soil, adjustment)

        predicted = aggregators.round_half_up(base_yield * area * adjustment.value * stage_factor)
        confidence = self._confidence(weather_history, soil, adjustment.factors)

        logger.debug(
            f"Yield for {crop}: base={base_yield} area={area} adjustment={adjustment.value:.4f} "
            f"stage={stage} -> {predicted}kg"
        )

        return YieldEstimate(
            predicted_yield_kg=predicted,
            range_min=aggregators.round_half_up(predicted * 0.8),
            range_max=aggregators.round_half_up(predicted * 1.2),
            confidence_pct=confidence,
            growth_stage=stage,
            growth_stage_factor=stage_factor,
            yield_adjustment=adjustment.value,
            factors=adjustment.factors,
            recommendations=self._recommendations(crop, adjustment.factors),
        )

    # ---------- Weather ----------

    def _score_weather(self, history: Sequence[WeatherDay], adjustment: _Adjustment) -> None:
        temperatures = [day.temperature.avg for day in history]
        avg_temp = aggregators.mean(temperatures)
        temp_variance = aggregators.variance(temperatures)

        if 20 <= avg_temp <= 35:
            adjustment.apply(1.15, "Optimal Temperature", "positive", 0.25,
                             "Temperature within optimal range for crop growth")
        elif avg_temp < 15 or avg_temp > 40:
            adjustment.apply(0.7, "Extreme Temperature", "negative", 0.3,
                             "Temperature outside optimal range may reduce yield")

        if temp_variance < 5:
            adjustment.apply(1.08, "Stable Temperature", "positive", 0.15,
                             "Consistent temperatures promote healthy growth")

        total_rainfall = sum(day.rainfall_mm for day in history)
        distribution = aggregators.rain_distribution(history)

        if 500 <= total_rainfall <= 1500:
            adjustment.apply(1.12, "Adequate Rainfall", "positive", 0.25,
                             "Rainfall within optimal range for crop growth")
            if distribution.even:
                adjustment.apply(1.05, "Even Rainfall Distribution", "positive", 0.1,
                                 "Well-distributed rainfall throughout the season")
        elif total_rainfall < 300:
            adjustment.apply(0.65, "Insufficient Rainfall", "negative", 0.3,
                             "Insufficient rainfall may reduce yield")
        elif total_rainfall > 2000:
            adjustment.apply(0.75, "Excessive Rainfall", "negative", 0.25,
                             "Excessive rainfall may cause waterlogging")
            if distribution.heavy_periods > 3:
                adjustment.apply(0.9, "Flooding Risk", "negative", 0.15,
                                 "Multiple heavy rainfall periods increase flooding risk")

        avg_humidity = aggregators.mean(day.humidity_pct for day in history)
        if 40 <= avg_humidity <= 70:
            adjustment.apply(1.05, "Optimal Humidity", "positive", 0.1,
                             "Humidity levels support healthy plant transpiration")
        elif avg_humidity > 80:
            adjustment.apply(0.95, "High Humidity", "negative", 0.1,
                             "High humidity may increase disease pressure")

    # ---------- Soil ----------

    def _score_soil(self, soil: SoilSample, adjustment: _Adjustment) -> None:
        if 6.0 <= soil.ph <= 7.5:
            adjustment.apply(1.1, "Optimal Soil pH", "positive", 0.2,
                             "Soil pH within optimal range for nutrient uptake")
        elif soil.ph < 5.5 or soil.ph > 8.0:
            adjustment.apply(0.8, "Extreme Soil pH", "negative", 0.2,
                             "Extreme pH levels limit nutrient availability")

        if soil.organic_matter_pct >= 3.0:
            adjustment.apply(1.08, "High Organic Matter", "positive", 0.15,
                             "High organic matter improves soil fertility and water retention")
        elif soil.organic_matter_pct >= 2.0:
            adjustment.apply(1.04, "Adequate Organic Matter", "positive", 0.1,
                             "Adequate organic matter supports soil health")
        else:
            adjustment.apply(0.92, "Low Organic Matter", "negative", 0.1,
                             "Low organic matter reduces soil fertility")

        if 30 <= soil.moisture_pct <= 70:
            adjustment.apply(1.08, "Optimal Soil Moisture", "positive", 0.15,
                             "Soil moisture within optimal range")
        elif soil.moisture_pct < 20:
            adjustment.apply(0.85, "Dry Soil Conditions", "negative", 0.15,
                             "Insufficient soil moisture limits plant growth")
        elif soil.moisture_pct > 80:
            adjustment.apply(0.9, "Waterlogged Soil", "negative", 0.1,
                             "Excessive soil moisture may cause root problems")

        balance = aggregators.nutrient_balance(soil)
        if balance >= 0.8:
            adjustment.apply(1.12, "Balanced Nutrition", "positive", 0.2,
                             "Optimal nutrient levels support maximum yield")
        elif balance >= 0.6:
            adjustment.apply(1.05, "Adequate Nutrition", "positive", 0.1,
                             "Sufficient nutrients for good yield")
        else:
            adjustment.apply(0.8, "Nutrient Deficiency", "negative", 0.2,
                             "Nutrient limitations may reduce yield potential")

    # ---------- Confidence & advice ----------

    def _confidence(self, history: Optional[Sequence[WeatherDay]], soil: Optional[SoilSample],
                    factors: List[Factor]) -> int:
        confidence = BASE_CONFIDENCE
        days = len(history) if history else 0
        if days >= 30:
            confidence += 10
        elif days >= 15:
            confidence += 5

        if soil is not None:
            confidence += 10

        positives = sum(1 for f in factors if f.impact == "positive")
        negatives = sum(1 for f in factors if f.impact == "negative")
        confidence += positives * 3 - negatives * 4
        return min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, confidence))

    def _recommendations(self, crop: str, factors: List[Factor]) -> List[str]:
        recommendations = [
            "Monitor crop growth regularly and adjust practices as needed",
            "Maintain proper soil nutrition through balanced fertilization",
        ]

        negatives = [f for f in factors if f.impact == "negative"]
        if negatives:
            recommendations.append("Address limiting factors to improve yield potential")
            for factor in negatives:
                recommendations.append(f"Improve {factor.name.lower()} conditions: {factor.description}")

        positive_names = {f.name for f in factors if f.impact == "positive"}
        if positive_names:
            recommendations.append("Continue practices that contribute to positive outcomes")
            if "Optimal Temperature" in positive_names:
                recommendations.append("Maintain current temperature management practices")
            if "Adequate Rainfall" in positive_names:
                recommendations.append("Continue monitoring rainfall patterns for irrigation planning")
            if "Optimal Soil pH" in positive_names:
                recommendations.append("Maintain current soil pH management through appropriate amendments")

        recommendations.extend(YIELD_TIPS.get(normalize_crop(crop), ()))
        return recommendations
