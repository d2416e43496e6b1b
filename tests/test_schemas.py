"""
Unit Tests for Property Analysis Schemas

The schemas are the contract between callers, the model and the
response. These tests pin what they accept and reject.
"""

import pytest
from pydantic import ValidationError

from rental_pricing_agent.schemas.property_analysis import (
    AgentRecommendation,
    PropertyAnalysis,
    PropertyInput,
    RetrievedContext,
)


# ---------------------------------------------------------------------------
# PROPERTY INPUT
# ---------------------------------------------------------------------------


class TestPropertyInput:
    """Validation of caller-supplied property attributes."""

    def test_valid_property(self, sample_property):
        assert sample_property.property_value_egp is None
        assert sample_property.finishing_quality == "medium"

    @pytest.mark.parametrize(
        "field_name, value",
        [
            ("location", ""),
            ("size_sqm", 0),
            ("size_sqm", -10),
            ("bedrooms", -1),
            ("bathrooms", -1),
            ("floor", -2),
            ("finishing_quality", "shabby"),
            ("property_value_egp", 0),
        ],
    )
    def test_rejects_invalid_fields(self, sample_property, field_name, value):
        data = sample_property.model_dump()
        data[field_name] = value

        with pytest.raises(ValidationError):
            PropertyInput(**data)

    def test_zero_bedrooms_allowed(self, sample_property):
        data = sample_property.model_dump()
        data["bedrooms"] = 0

        assert PropertyInput(**data).bedrooms == 0

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            PropertyInput(location="Giza", size_sqm=80)


# ---------------------------------------------------------------------------
# MODEL OUTPUT
# ---------------------------------------------------------------------------


class TestAgentRecommendation:
    """Validation of the model's flat JSON reply."""

    def test_valid_recommendation(self, sample_recommendation):
        rec = AgentRecommendation.model_validate(sample_recommendation)

        assert rec.recommended_price_egp == 18000
        assert rec.status == "needs_work"

    @pytest.mark.parametrize(
        "field_name, value",
        [
            ("confidence", "very high"),
            ("status", "almost"),
            ("risk_level", "extreme"),
            ("readiness_score", 101),
            ("readiness_score", -1),
        ],
    )
    def test_rejects_out_of_contract_values(self, sample_recommendation, field_name, value):
        sample_recommendation[field_name] = value

        with pytest.raises(ValidationError):
            AgentRecommendation.model_validate(sample_recommendation)

    def test_missing_field(self, sample_recommendation):
        del sample_recommendation["next_steps"]

        with pytest.raises(ValidationError):
            AgentRecommendation.model_validate(sample_recommendation)


# ---------------------------------------------------------------------------
# ASSEMBLED RESPONSE
# ---------------------------------------------------------------------------


class TestPropertyAnalysis:
    """Regrouping the flat reply into the response shape."""

    def test_from_recommendation(self, sample_recommendation):
        rec = AgentRecommendation.model_validate(sample_recommendation)
        context = [
            RetrievedContext(title="T", category="Technology", content="c", relevance_score=1.0)
        ]

        analysis = PropertyAnalysis.from_recommendation("2BR in Zamalek", context, rec)

        assert analysis.property_summary == "2BR in Zamalek"
        assert analysis.retrieved_context == context
        assert analysis.pricing_recommendation.price_range_max == 20000
        assert analysis.launch_readiness.readiness_score == 65
        assert analysis.risk_assessment.key_risks == ["Overpricing", "Currency fluctuation"]
        assert analysis.next_steps == ["Book photographer", "List on local platforms"]

    def test_retrieved_context_score_bounds(self):
        with pytest.raises(ValidationError):
            RetrievedContext(title="T", category="Technology", content="c", relevance_score=1.3)
