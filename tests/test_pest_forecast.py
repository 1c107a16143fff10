from datetime import timedelta

import pytest

from krishi_analytics.agents.common.models import PestHistoryRecord
from krishi_analytics.agents.pest_forecast.service import PestForecastService, severity_for


@pytest.fixture
def service():
    return PestForecastService()


def by_name(report):
    return {f.pest_name: f for f in report.forecasts}


def test_aphids_in_ideal_conditions(service, as_of, make_weather):
    forecast = make_weather(as_of, 7, avg=22, rainfall=5, humidity=75)
    history = [PestHistoryRecord(pest_name="Aphids", date=as_of - timedelta(days=365), severity="high")]

    report = service.predict_pest_outbreaks(
        "Wheat", as_of - timedelta(days=45), weather_forecast=forecast, pest_history=history, as_of=as_of
    )
    aphids = by_name(report)["Aphids"]

    assert aphids.probability_pct == 100
    assert aphids.severity == "severe"
    assert aphids.predicted_date == as_of + timedelta(days=5)
    assert {f.name for f in aphids.factors} >= {"Pest History", "Crop Susceptibility"}
    assert report.risk_level == "severe"
    assert "- Monitor for Aphids and apply appropriate controls if detected" in report.recommendations


def test_empty_forecast_uses_history_and_susceptibility_only(service, as_of):
    report = service.predict_pest_outbreaks("Wheat", as_of - timedelta(days=30), as_of=as_of)
    pests = by_name(report)

    assert pests["Aphids"].probability_pct == 40
    assert pests["Rust"].probability_pct == 20
    assert all(f.predicted_date == as_of + timedelta(days=10) for f in report.forecasts)
    assert report.risk_level == "low"


def test_history_matching_ignores_case(service, as_of):
    history = [PestHistoryRecord(pest_name=" aphids", date=as_of - timedelta(days=200), severity="low")]
    report = service.predict_pest_outbreaks(
        "wheat", as_of - timedelta(days=30), pest_history=history, as_of=as_of
    )
    assert by_name(report)["Aphids"].probability_pct == 65


def test_suboptimal_temperature_adds_nothing(service, as_of, make_weather):
    forecast = make_weather(as_of, 5, avg=40, rainfall=50, humidity=20)
    report = service.predict_pest_outbreaks("Wheat", as_of - timedelta(days=30), forecast, as_of=as_of)
    rust = by_name(report)["Rust"]

    assert rust.probability_pct == 20
    [factor] = rust.factors
    assert factor.name == "Suboptimal Temperature"
    assert factor.impact == "negative"
    assert factor.points == 0


def test_unknown_crop_uses_general_profile(service, as_of, make_weather):
    forecast = make_weather(as_of, 3, avg=25, rainfall=10, humidity=65)
    report = service.predict_pest_outbreaks("Quinoa", as_of - timedelta(days=30), forecast, as_of=as_of)

    [general] = report.forecasts
    assert general.pest_name == "General Pests"
    assert general.probability_pct == 95


def test_probabilities_are_bounded(service, as_of, make_weather):
    forecast = make_weather(as_of, 7, avg=25, rainfall=20, humidity=80)
    history = [PestHistoryRecord(pest_name=name, date=as_of, severity="severe")
               for name in ("Brown Planthopper", "Stem Borer", "Rice Blast")]
    report = service.predict_pest_outbreaks("Rice", as_of - timedelta(days=60), forecast, history, as_of=as_of)

    for forecast_item in report.forecasts:
        assert 0 <= forecast_item.probability_pct <= 100
        assert forecast_item.severity == severity_for(forecast_item.probability_pct)
        assert as_of + timedelta(days=5) <= forecast_item.predicted_date <= as_of + timedelta(days=10)


def test_monitoring_schedule_flags_wet_days(service, as_of, make_weather):
    forecast = make_weather(as_of, 2, avg=20, rainfall=30, humidity=85)
    report = service.predict_pest_outbreaks("Wheat", as_of - timedelta(days=30), forecast, as_of=as_of)

    day = as_of.isoformat()
    assert f"- Intensive monitoring required on {day} due to high humidity (85%)" in report.monitoring_schedule
    assert f"- Post-rainfall inspection recommended on {day} for pest activity" in report.monitoring_schedule
    assert "Prepare for potential pest outbreaks following heavy rainfall" in report.recommendations


def test_outbreak_date_is_deterministic(service, as_of, make_weather):
    forecast = make_weather(as_of, 3, avg=20, rainfall=5, humidity=70)
    first = service.predict_pest_outbreaks("Wheat", as_of - timedelta(days=30), forecast, as_of=as_of)
    second = service.predict_pest_outbreaks("Wheat", as_of - timedelta(days=30), forecast, as_of=as_of)

    assert first == second
    assert by_name(first)["Aphids"].predicted_date == as_of + timedelta(days=7)


@pytest.mark.parametrize("probability,severity", [(86, "severe"), (85, "high"), (71, "high"),
                                                  (70, "moderate"), (51, "moderate"), (50, "low")])
def test_severity_thresholds(probability, severity):
    assert severity_for(probability) == severity
