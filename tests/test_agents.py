import asyncio
from datetime import timedelta

import pytest

from krishi_analytics.agents.base import AgentRegistry
from krishi_analytics.agents.irrigation import IrrigationAgent, IrrigationRequest
from krishi_analytics.agents.pest_forecast import PestForecastAgent, PestForecastRequest
from krishi_analytics.agents.yield_prediction import YieldPredictionAgent, YieldPredictionRequest


@pytest.fixture
def yield_request(as_of):
    return YieldPredictionRequest(crop="Wheat", area=2.0, planting_date=as_of - timedelta(days=95), as_of=as_of)


def test_yield_agent_success(yield_request):
    agent = YieldPredictionAgent()
    response = asyncio.run(agent.execute(yield_request, use_cache=False))

    assert response.success
    assert response.error is None
    assert response.data.predicted_yield_kg == 6000
    assert response.metadata["area_hectares"] == 2.0
    assert "6000 kg" in response.message


def test_yield_agent_default_area(as_of):
    agent = YieldPredictionAgent()
    request = YieldPredictionRequest(crop="Rice", planting_date=as_of - timedelta(days=120), as_of=as_of)
    response = asyncio.run(agent.execute(request, use_cache=False))
    assert response.data.predicted_yield_kg == 4000


def test_failed_prediction_returns_fallback(yield_request, monkeypatch):
    agent = YieldPredictionAgent()

    def explode(**kwargs):
        raise ZeroDivisionError("division by zero")

    monkeypatch.setattr(agent.service, "predict_yield", explode)
    response = asyncio.run(agent.execute(yield_request))

    assert not response.success
    assert response.data is None
    assert response.error.startswith("Failed to predict crop yield:")
    assert response.metadata["fallback"] is True
    if agent.cache is not None:
        assert len(agent.cache) == 0


def test_successful_responses_are_cached(yield_request):
    agent = YieldPredictionAgent()
    if agent.cache is None:
        pytest.skip("cache disabled")

    first = asyncio.run(agent.execute(yield_request))
    second = asyncio.run(agent.execute(yield_request))

    assert len(agent.cache) == 1
    assert second.data == first.data


def test_pest_agent_message(as_of, make_weather):
    agent = PestForecastAgent()
    request = PestForecastRequest(
        crop="Wheat",
        planting_date=as_of - timedelta(days=30),
        weather_forecast=make_weather(as_of, 7, avg=22, rainfall=5, humidity=75),
        as_of=as_of,
    )
    response = asyncio.run(agent.execute(request, use_cache=False))

    assert response.success
    assert response.message.startswith("There are 4 pest alerts")
    assert response.metadata["forecast_days"] == 7


def test_pest_agent_fallback(as_of, monkeypatch):
    agent = PestForecastAgent()

    def explode(**kwargs):
        raise ValueError("bad forecast")

    monkeypatch.setattr(agent.service, "predict_pest_outbreaks", explode)
    request = PestForecastRequest(crop="Wheat", planting_date=as_of, as_of=as_of)
    response = asyncio.run(agent.execute(request))

    assert not response.success
    assert response.error.startswith("Failed to predict pest outbreaks:")


def test_irrigation_agent(as_of):
    agent = IrrigationAgent()
    request = IrrigationRequest.model_validate({
        "crop": "Wheat",
        "soilType": "Loam",
        "plantingDate": (as_of - timedelta(days=40)).isoformat(),
        "asOf": as_of.isoformat(),
    })
    response = asyncio.run(agent.execute(request, use_cache=False))

    assert response.success
    assert response.metadata["soil_type"] == "loamy"
    assert response.metadata["crop_stage"] == "vegetative"
    assert response.message == f"4 irrigation(s) recommended. Next: {as_of}"


def test_irrigation_agent_no_events_message(as_of):
    agent = IrrigationAgent()
    request = IrrigationRequest(crop="Rice", planting_date=as_of - timedelta(days=14), as_of=as_of)
    response = asyncio.run(agent.execute(request, use_cache=False))
    assert response.message == "No irrigation needed for the next 14 days"


def test_registry_health():
    registry = AgentRegistry()
    for agent in (YieldPredictionAgent(), PestForecastAgent(), IrrigationAgent()):
        registry.register(agent)

    results = asyncio.run(registry.health_check_all())
    assert set(results) == {"yield", "pests", "irrigation"}
    assert all(r["status"] == "healthy" for r in results.values())
    assert registry.get_agents_info()["yield"]["name"] == "yield"

    registry.clear()
    assert registry.list_agents() == []


def test_cached_response_served_without_recomputing(yield_request, monkeypatch):
    agent = YieldPredictionAgent()
    assert agent.cache is not None
    first = asyncio.run(agent.execute(yield_request))

    def explode(**kwargs):
        raise AssertionError("prediction recomputed despite cached response")

    monkeypatch.setattr(agent.service, "predict_yield", explode)
    second = asyncio.run(agent.execute(yield_request))

    assert second.success
    assert second.data == first.data


def test_pest_agent_counts_high_risk_above_seventy(as_of):
    agent = PestForecastAgent()
    history = [{"pest": "Aphids", "date": (as_of - timedelta(days=300)).isoformat(), "severity": "moderate"}]
    request = PestForecastRequest.model_validate({
        "crop": "Wheat",
        "plantingDate": (as_of - timedelta(days=30)).isoformat(),
        "pestHistory": history,
        "asOf": as_of.isoformat(),
    })
    response = asyncio.run(agent.execute(request, use_cache=False))

    aphids = next(f for f in response.data.forecasts if f.pest_name == "Aphids")
    assert aphids.probability_pct == 65
    assert response.message == "There are 4 pest alerts, with 0 high-risk pests"
