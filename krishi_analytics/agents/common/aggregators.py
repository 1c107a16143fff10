# krishi_analytics/agents/common/aggregators.py
"""
Derived statistics over weather series and soil samples
"""
import math
from datetime import date
from typing import Iterable, NamedTuple, Sequence

import numpy as np

from krishi_analytics.agents.common.models import SoilSample, WeatherDay
from krishi_analytics.core.exceptions import InsufficientDataError

HEAVY_RAIN_MM = 15.0
EVEN_RAIN_STDEV_RATIO = 0.5

# Optimal NPK levels (ppm)
OPTIMAL_NITROGEN_PPM = 150.0
OPTIMAL_PHOSPHORUS_PPM = 35.0
OPTIMAL_POTASSIUM_PPM = 150.0


class RainDistribution(NamedTuple):
    even: bool
    heavy_periods: int


def _as_array(series: Iterable[float]) -> np.ndarray:
    values = np.asarray(list(series), dtype=float)
    if values.size == 0:
        raise InsufficientDataError("Cannot aggregate an empty series")
    return values


def mean(series: Iterable[float]) -> float:
    return float(np.mean(_as_array(series)))


def variance(series: Iterable[float]) -> float:
    """Population variance (ddof=0). Stability thresholds are calibrated to it."""
    return float(np.var(_as_array(series), ddof=0))


def rain_distribution(days: Sequence[WeatherDay]) -> RainDistribution:
    """
    Rainfall is 'even' when its standard deviation is below half the mean daily
    rainfall. Heavy periods are days above 15 mm.
    """
    rainfall = _as_array(day.rainfall_mm for day in days)
    stdev = float(np.std(rainfall, ddof=0))
    average = float(np.mean(rainfall))
    heavy_periods = int(np.count_nonzero(rainfall > HEAVY_RAIN_MM))
    return RainDistribution(even=stdev < average * EVEN_RAIN_STDEV_RATIO, heavy_periods=heavy_periods)


def nutrient_balance(soil: SoilSample) -> float:
    """Geometric mean of the capped N, P and K ratios. Any zero nutrient zeroes the balance."""
    n_ratio = min(1.0, soil.nitrogen_ppm / OPTIMAL_NITROGEN_PPM)
    p_ratio = min(1.0, soil.phosphorus_ppm / OPTIMAL_PHOSPHORUS_PPM)
    k_ratio = min(1.0, soil.potassium_ppm / OPTIMAL_POTASSIUM_PPM)
    product = n_ratio * p_ratio * k_ratio
    if product <= 0:
        return 0.0
    return product ** (1.0 / 3.0)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives, the way dashboard figures are rounded"""
    return int(math.floor(value + 0.5))


def days_between(start: date, end: date) -> int:
    return (end - start).days


def growth_stage(days_since_planting: int) -> str:
    if days_since_planting < 30:
        return "initial"
    elif days_since_planting < 60:
        return "vegetative"
    elif days_since_planting < 90:
        return "reproductive"
    return "maturity"
