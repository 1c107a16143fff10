# krishi_analytics/api/v1/router.py
from fastapi import APIRouter
from .endpoints import health, analytics

api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
