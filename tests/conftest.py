"""Shared fixtures for the rental pricing agent tests."""

import pytest

from rental_pricing_agent.config import reset_settings
from rental_pricing_agent.observability import reset_tracer
from rental_pricing_agent.schemas.property_analysis import PropertyInput


@pytest.fixture
def sample_property() -> PropertyInput:
    return PropertyInput(
        location="Zamalek, Cairo",
        size_sqm=100,
        bedrooms=2,
        bathrooms=1,
        floor=3,
        has_elevator=True,
        has_parking=False,
        finishing_quality="medium",
        near_beach=False,
    )


@pytest.fixture
def sample_recommendation() -> dict:
    """A reply that satisfies AgentRecommendation."""
    return {
        "recommended_price_egp": 18000,
        "price_range_min": 16000,
        "price_range_max": 20000,
        "strategy": "competitive",
        "confidence": "medium",
        "reasoning": "Zamalek commands a premium; medium finishing keeps it mid-range.",
        "readiness_score": 65,
        "status": "needs_work",
        "checklist_completed": ["Ownership verification"],
        "checklist_pending": ["Professional photography", "Insurance coverage"],
        "estimated_days_to_launch": 30,
        "risk_level": "medium",
        "key_risks": ["Overpricing", "Currency fluctuation"],
        "mitigation_strategies": ["Start 10% below market"],
        "next_steps": ["Book photographer", "List on local platforms"],
    }


@pytest.fixture(autouse=True)
def tracing_disabled(monkeypatch):
    """Tests run with tracing off and no cached tracer or settings."""
    monkeypatch.setenv("PHOENIX_ENABLED", "false")
    reset_tracer()
    reset_settings()
    yield
    reset_tracer()
    reset_settings()
