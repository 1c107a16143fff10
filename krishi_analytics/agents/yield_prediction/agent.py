# krishi_analytics/agents/yield_prediction/agent.py
"""
Crop yield prediction agent
"""

from typing import Type
from datetime import date, datetime

from krishi_analytics.agents.base import BaseAgent
from krishi_analytics.agents.yield_prediction.models import YieldPredictionRequest, YieldPredictionResponse
from krishi_analytics.agents.yield_prediction.service import YieldPredictionService
from krishi_analytics.core.exceptions import AgentConfigError, PredictionError

class YieldPredictionAgent(BaseAgent[YieldPredictionRequest, YieldPredictionResponse]):
    """
    Crop yield prediction agent

    Features:
    - Crop base yield table with growth-stage scaling
    - Weighted temperature, rainfall and humidity scoring
    - Soil pH, organic matter, moisture and NPK balance scoring
    - Confidence from data completeness and factor balance
    """

    def __init__(self):
        super().__init__("yield")
        self.service = YieldPredictionService(config=self.config)
        self.logger.info("Yield prediction agent initialized")

    def _validate_config(self) -> None:
        """Validate yield agent configuration"""
        default_area = self.config.get("default_area_hectares", 1.0)
        if not isinstance(default_area, (int, float)) or default_area <= 0:
            raise AgentConfigError(f"default_area_hectares must be positive, got {default_area!r}")

    def _get_response_class(self) -> Type[YieldPredictionResponse]:
        return YieldPredictionResponse

    async def process_request(self, request: YieldPredictionRequest) -> YieldPredictionResponse:
        """Process yield prediction request"""

        as_of = request.as_of or date.today()
        area = request.area or self.config.get("default_area_hectares", 1.0)
        self.logger.info(f"Predicting yield for {request.crop} on {area} ha (as of {as_of})")

        try:
            estimate = self.service.predict_yield(
                crop=request.crop,
                area=area,
                planting_date=request.planting_date,
                weather_history=request.weather_history,
                soil=request.soil,
                as_of=as_of,
            )
        except Exception as e:
            self.logger.error(f"Error predicting yield: {e}")
            raise PredictionError(f"Failed to predict yield for {request.crop}: {e}") from e

        return YieldPredictionResponse(
            success=True,
            data=estimate,
            message=(
                f"Predicted yield is {estimate.predicted_yield_kg} kg "
                f"with {estimate.confidence_pct}% confidence"
            ),
            timestamp=datetime.now().isoformat(),
            metadata={
                "crop": request.crop,
                "area_hectares": area,
                "as_of": as_of.isoformat(),
                "weather_days": len(request.weather_history or []),
                "soil_data": request.soil is not None,
                "location": (
                    f"({request.location.lat:.3f}, {request.location.lon:.3f})"
                    if request.location else None
                ),
            }
        )

    def get_fallback_response(self, request: YieldPredictionRequest, error: Exception) -> YieldPredictionResponse:
        """Report the failure without partial data; callers keep their cached figures"""
        return YieldPredictionResponse(
            success=False,
            data=None,
            message="Yield prediction unavailable",
            error=f"Failed to predict crop yield: {error}",
            timestamp=datetime.now().isoformat(),
            metadata={"fallback": True, "crop": request.crop}
        )
