# krishi_analytics/run.py
"""
Main entry point for the predictive analytics backend
"""

import uvicorn
import logging
from contextlib import asynccontextmanager

from krishi_analytics.api.app import create_app
from krishi_analytics.core.config import get_settings
from krishi_analytics.core.logging import setup_logging
from krishi_analytics.agents.base import agent_registry
from krishi_analytics.agents.irrigation.agent import IrrigationAgent
from krishi_analytics.agents.pest_forecast.agent import PestForecastAgent
from krishi_analytics.agents.yield_prediction.agent import YieldPredictionAgent

logger = logging.getLogger(__name__)

def register_agents() -> None:
    """Initialize and register every analytics agent"""
    for agent_class in (YieldPredictionAgent, PestForecastAgent, IrrigationAgent):
        agent = agent_class()
        agent_registry.register(agent)
        logger.info(f"✅ {agent.agent_name} agent registered")

@asynccontextmanager
async def lifespan(app):
    """Application lifespan management"""

    # Startup
    logger.info("🚀 Starting predictive analytics backend")

    try:
        register_agents()

        health_results = await agent_registry.health_check_all()
        for agent_name, health in health_results.items():
            status = "✅" if health["status"] == "healthy" else "❌"
            logger.info(f"{status} {agent_name}: {health['status']}")

        logger.info("🎯 All agents initialized successfully")

    except Exception as e:
        logger.error(f"❌ Failed to initialize agents: {e}")
        raise

    yield

    # Shutdown
    agent_registry.clear()
    logger.info("🛑 Shutting down predictive analytics backend")

def create_application():
    """Create FastAPI application with all configurations"""
    setup_logging()
    return create_app(lifespan=lifespan)

def main():
    """Main entry point"""
    setup_logging()
    settings = get_settings()

    logger.info(f"Starting server on {settings.api_host}:{settings.api_port}")
    logger.info(f"Environment: {settings.environment.value}")
    logger.info(f"Debug mode: {settings.debug}")

    if settings.debug:
        # Import string so reload can re-import the app
        uvicorn.run(
            "krishi_analytics.run:create_application",
            factory=True,
            host=settings.api_host,
            port=settings.api_port,
            reload=True,
            log_level=settings.log_level.value.lower(),
            access_log=True
        )
    else:
        app = create_application()
        uvicorn.run(
            app,
            host=settings.api_host,
            port=settings.api_port,
            reload=False,
            log_level=settings.log_level.value.lower(),
            access_log=True
        )

if __name__ == "__main__":
    main()
