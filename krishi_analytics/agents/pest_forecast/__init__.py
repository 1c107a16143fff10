# krishi_analytics/agents/pest_forecast/__init__.py
"""
Pest outbreak forecast agent package
"""

from .agent import PestForecastAgent
from .models import PestForecastRequest, PestForecastResponse, PestOutbreakForecast, PestRiskReport
from .service import PestForecastService

__all__ = [
    "PestForecastAgent", "PestForecastRequest", "PestForecastResponse",
    "PestOutbreakForecast", "PestRiskReport", "PestForecastService",
]
