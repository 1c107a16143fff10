# krishi_analytics/api/v1/endpoints/health.py
from fastapi import APIRouter
from datetime import datetime

from krishi_analytics.agents.base import agent_registry
from krishi_analytics.core.config import get_settings

router = APIRouter()

@router.get("/")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "service": get_settings().api_title
    }

@router.get("/agents")
async def agents_health():
    """Health of every registered analytics agent"""
    results = await agent_registry.health_check_all()
    overall = "healthy" if results and all(r["status"] == "healthy" for r in results.values()) else "degraded"
    return {
        "status": overall,
        "timestamp": datetime.now().isoformat(),
        "agents": results
    }
