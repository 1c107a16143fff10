# krishi_analytics/agents/yield_prediction/__init__.py
"""
Yield prediction agent package
"""

from .agent import YieldPredictionAgent
from .models import YieldPredictionRequest, YieldPredictionResponse, YieldEstimate
from .service import YieldPredictionService

__all__ = [
    "YieldPredictionAgent", "YieldPredictionRequest", "YieldPredictionResponse",
    "YieldEstimate", "YieldPredictionService",
]
