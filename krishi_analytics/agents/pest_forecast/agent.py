# krishi_analytics/agents/pest_forecast/agent.py
"""
Pest outbreak forecasting agent
"""

from typing import Type
from datetime import date, datetime

from krishi_analytics.agents.base import BaseAgent
from krishi_analytics.agents.pest_forecast.models import PestForecastRequest, PestForecastResponse
from krishi_analytics.agents.pest_forecast.service import HIGH_RISK_PROBABILITY, PestForecastService
from krishi_analytics.core.exceptions import PredictionError

class PestForecastAgent(BaseAgent[PestForecastRequest, PestForecastResponse]):
    """
    Pest outbreak forecasting agent

    Features:
    - Per-pest environmental envelopes for each crop
    - Forecast temperature, humidity and rainfall matching
    - Field pest history and crop susceptibility
    - Field risk level, recommendations and monitoring schedule
    """

    def __init__(self):
        super().__init__("pests")
        self.service = PestForecastService(config=self.config)
        self.logger.info("Pest forecast agent initialized")

    def _validate_config(self) -> None:
        """Pest agent has no required configuration"""
        unknown = set(self.config) - {"cache_ttl_seconds"}
        if unknown:
            self.logger.warning(f"Ignoring unknown pest config keys: {sorted(unknown)}")

    def _get_response_class(self) -> Type[PestForecastResponse]:
        return PestForecastResponse

    async def process_request(self, request: PestForecastRequest) -> PestForecastResponse:
        """Process pest outbreak forecast request"""

        as_of = request.as_of or date.today()
        self.logger.info(f"Forecasting pest outbreaks for {request.crop} (as of {as_of})")

        try:
            report = self.service.predict_pest_outbreaks(
                crop=request.crop,
                planting_date=request.planting_date,
                weather_forecast=request.weather_forecast,
                pest_history=request.pest_history,
                soil=request.soil,
                as_of=as_of,
            )
        except Exception as e:
            self.logger.error(f"Error forecasting pests: {e}")
            raise PredictionError(f"Failed to forecast pests for {request.crop}: {e}") from e

        high_risk = [f for f in report.forecasts if f.probability_pct > HIGH_RISK_PROBABILITY]
        return PestForecastResponse(
            success=True,
            data=report,
            message=(
                f"There are {len(report.forecasts)} pest alerts, "
                f"with {len(high_risk)} high-risk pests"
            ),
            timestamp=datetime.now().isoformat(),
            metadata={
                "crop": request.crop,
                "as_of": as_of.isoformat(),
                "forecast_days": len(request.weather_forecast or []),
                "history_records": len(request.pest_history or []),
                "risk_level": report.risk_level,
            }
        )

    def get_fallback_response(self, request: PestForecastRequest, error: Exception) -> PestForecastResponse:
        """Report the failure without partial data"""
        return PestForecastResponse(
            success=False,
            data=None,
            message="Pest outbreak forecast unavailable",
            error=f"Failed to predict pest outbreaks: {error}",
            timestamp=datetime.now().isoformat(),
            metadata={"fallback": True, "crop": request.crop}
        )
