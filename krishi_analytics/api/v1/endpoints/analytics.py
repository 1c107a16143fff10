# krishi_analytics/api/v1/endpoints/analytics.py
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, ValidationError
from typing import Any, Dict
from datetime import datetime

from krishi_analytics.agents.base import agent_registry
from krishi_analytics.agents.irrigation.models import IrrigationRequest
from krishi_analytics.agents.pest_forecast.models import PestForecastRequest
from krishi_analytics.agents.yield_prediction.models import YieldPredictionRequest

router = APIRouter()

# action name -> (agent name, request model)
ACTIONS = {
    "predictYield": ("yield", YieldPredictionRequest),
    "predictPests": ("pests", PestForecastRequest),
    "generateIrrigation": ("irrigation", IrrigationRequest),
}

class AnalyticsAction(BaseModel):
    action: str = Field(..., description=f"One of: {', '.join(ACTIONS)}")
    data: Dict[str, Any] = Field(default_factory=dict)

def _get_agent(agent_name: str):
    agent = agent_registry.get(agent_name)
    if not agent:
        raise HTTPException(status_code=500, detail=f"{agent_name.capitalize()} agent not available")
    return agent

@router.get("")
async def list_actions():
    """Describe the predictive analytics service"""
    return {
        "message": "Predictive Analytics API service",
        "actions": list(ACTIONS),
        "timestamp": datetime.now().isoformat()
    }

@router.post("")
async def run_action(body: AnalyticsAction):
    """
    Dispatch a prediction by action name.

    Accepts the dashboard payload shape `{"action": ..., "data": {...}}`.
    """
    if body.action not in ACTIONS:
        raise HTTPException(status_code=400, detail="Invalid action specified")

    agent_name, request_model = ACTIONS[body.action]
    try:
        request = request_model.model_validate(body.data)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    agent = _get_agent(agent_name)
    try:
        return await agent.execute(request)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to process request: {str(e)}")

@router.post("/yield")
async def predict_yield(request: YieldPredictionRequest):
    """
    Predict crop yield from crop, area, planting date, weather history and soil.

    Missing weather or soil data lowers confidence but never fails the prediction.
    """
    agent = _get_agent("yield")
    try:
        return await agent.execute(request)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error predicting yield: {str(e)}")

@router.post("/pests")
async def predict_pests(request: PestForecastRequest):
    """Forecast pest outbreaks for a crop from the weather forecast and field history"""
    agent = _get_agent("pests")
    try:
        return await agent.execute(request)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error forecasting pests: {str(e)}")

@router.post("/irrigation")
async def generate_irrigation(request: IrrigationRequest):
    """Generate a 14-day irrigation schedule"""
    agent = _get_agent("irrigation")
    try:
        return await agent.execute(request)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error generating irrigation schedule: {str(e)}")

@router.get("/crops")
async def get_crops():
    """Get supported crops with base yields, water needs and common pests"""
    irrigation_agent = _get_agent("irrigation")
    crops = await irrigation_agent.get_crop_recommendations()
    return {
        "success": True,
        "crops": crops,
        "note": "Unlisted crops fall back to default base yield and water figures"
    }

@router.get("/soils")
async def get_soil_types():
    """Get supported soil texture types"""
    irrigation_agent = _get_agent("irrigation")
    soils = await irrigation_agent.get_soil_types()
    return {
        "success": True,
        "soil_types": soils,
        "note": "Soil texture affects water volume, duration and irrigation method"
    }
