# krishi_analytics/agents/irrigation/agent.py
"""
Irrigation planning agent - stress-aware 14-day irrigation scheduling
"""

from typing import Dict, Any, List, Type
from datetime import date, datetime

from krishi_analytics.agents.base import BaseAgent
from krishi_analytics.agents.common import aggregators
from krishi_analytics.agents.common.reference import SOIL_TYPES, crop_catalog, normalize_soil_type
from krishi_analytics.agents.irrigation.models import IrrigationRequest, IrrigationResponse
from krishi_analytics.agents.irrigation.service import IrrigationService, SOIL_WATER_MULTIPLIERS
from krishi_analytics.core.exceptions import PredictionError

class IrrigationAgent(BaseAgent[IrrigationRequest, IrrigationResponse]):
    """
    Irrigation planning agent

    Features:
    - Growth-stage aware irrigation interval
    - Forecast temperature, rainfall, humidity and wind adjustments
    - Cumulative water stress tracking across skipped days
    - Water volume, duration, method, priority and start time per event
    - Schedule efficiency scoring
    """

    def __init__(self):
        super().__init__("irrigation")
        self.service = IrrigationService(config=self.config)
        self.logger.info("Irrigation agent initialized")

    def _validate_config(self) -> None:
        """Validate irrigation agent configuration"""
        ttl = self.config.get("cache_ttl_seconds")
        if ttl is not None and ttl <= 0:
            self.logger.warning(f"Non-positive irrigation cache TTL ({ttl}); using default")

    def _get_response_class(self) -> Type[IrrigationResponse]:
        return IrrigationResponse

    async def process_request(self, request: IrrigationRequest) -> IrrigationResponse:
        """Process irrigation planning request"""

        as_of = request.as_of or date.today()
        self.logger.info(f"Processing irrigation request for {request.crop} starting {as_of}")

        soil_key = normalize_soil_type(request.soil_type)
        if request.soil_type and soil_key not in SOIL_WATER_MULTIPLIERS:
            self.logger.warning(f"Unknown soil type '{request.soil_type}', skipping soil adjustments")

        try:
            plan = self.service.generate_schedule(
                crop=request.crop,
                planting_date=request.planting_date,
                soil_type=request.soil_type,
                weather_forecast=request.weather_forecast,
                soil=request.soil,
                as_of=as_of,
            )
        except Exception as e:
            self.logger.error(f"Error processing irrigation request: {e}")
            raise PredictionError(f"Failed to schedule irrigation for {request.crop}: {e}") from e

        num_irrigations = len(plan.events)
        if num_irrigations == 0:
            message = "No irrigation needed for the next 14 days"
        else:
            message = f"{num_irrigations} irrigation(s) recommended. Next: {plan.next_irrigation_date}"

        self.logger.info(f"Irrigation plan generated: {num_irrigations} events, {plan.water_requirement_liters}L")
        return IrrigationResponse(
            success=True,
            data=plan,
            message=message,
            timestamp=datetime.now().isoformat(),
            metadata={
                "crop": request.crop,
                "soil_type": soil_key or None,
                "as_of": as_of.isoformat(),
                "weather_days": len(request.weather_forecast or []),
                "crop_stage": self._get_crop_stage(request, as_of),
            }
        )

    def _get_crop_stage(self, request: IrrigationRequest, as_of: date) -> str:
        """Determine current crop growth stage"""
        return aggregators.growth_stage(aggregators.days_between(request.planting_date, as_of))

    def get_fallback_response(self, request: IrrigationRequest, error: Exception) -> IrrigationResponse:
        """Report the failure without partial data"""
        return IrrigationResponse(
            success=False,
            data=None,
            message="Irrigation schedule unavailable",
            error=f"Failed to generate irrigation schedule: {error}",
            timestamp=datetime.now().isoformat(),
            metadata={"fallback": True, "crop": request.crop}
        )

    async def get_crop_recommendations(self) -> List[Dict[str, Any]]:
        """Get supported crops with their reference figures"""
        return crop_catalog()

    async def get_soil_types(self) -> List[Dict[str, Any]]:
        """Get supported soil texture types"""
        return [dict(soil) for soil in SOIL_TYPES]
