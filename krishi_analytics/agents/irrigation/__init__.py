# krishi_analytics/agents/irrigation/__init__.py
"""
Irrigation agent package
"""

from .agent import IrrigationAgent
from .models import IrrigationRequest, IrrigationResponse, IrrigationPlan, IrrigationEvent
from .service import IrrigationService

__all__ = [
    "IrrigationAgent", "IrrigationRequest", "IrrigationResponse",
    "IrrigationPlan", "IrrigationEvent", "IrrigationService",
]
