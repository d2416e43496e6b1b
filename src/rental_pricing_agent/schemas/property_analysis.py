"""
Structured schemas for property analysis.

These Pydantic models are the INPUT and OUTPUT CONTRACT of the pricing
agent:

- PropertyInput: what the caller describes about the unit
- AgentRecommendation: the flat JSON object the model must return
- PropertyAnalysis: the assembled response handed back to callers

Anything the model returns is validated against these before it leaves
the agent. A prompt change that breaks the structure fails here, not in
a downstream consumer.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

FinishingQuality = Literal["basic", "standard", "medium", "premium", "luxury"]
Confidence = Literal["high", "medium", "low"]
ReadinessStatus = Literal["ready", "needs_work", "not_ready"]
RiskLevel = Literal["low", "medium", "high"]


class PropertyInput(BaseModel):
    """
    A rental unit to analyze.

    The retrieval query is synthesized from location, size, bedrooms,
    finishing and (when known) the property value.
    """

    location: str = Field(min_length=1, description="Area or city, e.g. 'Zamalek, Cairo'")
    size_sqm: int = Field(gt=0, description="Floor area in square meters")
    bedrooms: int = Field(ge=0)
    bathrooms: int = Field(ge=0)
    floor: int = Field(ge=0)
    has_elevator: bool
    has_parking: bool
    finishing_quality: FinishingQuality
    near_beach: bool
    property_value_egp: Optional[int] = Field(
        default=None,
        gt=0,
        description="Estimated market value in EGP, if known",
    )


class RetrievedContext(BaseModel):
    """A knowledge-base document as shown alongside the analysis."""

    title: str
    category: str
    content: str
    relevance_score: float = Field(ge=0.0, le=1.0)


class PricingRecommendation(BaseModel):
    recommended_price_egp: int = Field(description="Monthly rent in EGP")
    price_range_min: int
    price_range_max: int
    strategy: str = Field(description="Penetration, competitive or premium pricing")
    confidence: Confidence
    reasoning: str


class LaunchReadiness(BaseModel):
    readiness_score: int = Field(ge=0, le=100)
    status: ReadinessStatus
    checklist_completed: list[str]
    checklist_pending: list[str]
    estimated_days_to_launch: int


class RiskAssessment(BaseModel):
    risk_level: RiskLevel
    key_risks: list[str]
    mitigation_strategies: list[str]


class AgentRecommendation(BaseModel):
    """
    The flat JSON object requested from the model.

    Kept flat because models follow a single-level field list more
    reliably; PropertyAnalysis regroups it.
    """

    recommended_price_egp: int
    price_range_min: int
    price_range_max: int
    strategy: str
    confidence: Confidence
    reasoning: str
    readiness_score: int = Field(ge=0, le=100)
    status: ReadinessStatus
    checklist_completed: list[str]
    checklist_pending: list[str]
    estimated_days_to_launch: int
    risk_level: RiskLevel
    key_risks: list[str]
    mitigation_strategies: list[str]
    next_steps: list[str]


class PropertyAnalysis(BaseModel):
    """
    The complete response for one analyzed property.

    retrieved_context carries the published relevance scores exactly as
    the retriever returned them.
    """

    property_summary: str
    retrieved_context: list[RetrievedContext]
    pricing_recommendation: PricingRecommendation
    launch_readiness: LaunchReadiness
    risk_assessment: RiskAssessment
    next_steps: list[str]

    @classmethod
    def from_recommendation(
        cls,
        summary: str,
        context: list[RetrievedContext],
        rec: AgentRecommendation,
    ) -> "PropertyAnalysis":
        """Regroup the model's flat recommendation into the response shape."""
        return cls(
            property_summary=summary,
            retrieved_context=context,
            pricing_recommendation=PricingRecommendation(
                recommended_price_egp=rec.recommended_price_egp,
                price_range_min=rec.price_range_min,
                price_range_max=rec.price_range_max,
                strategy=rec.strategy,
                confidence=rec.confidence,
                reasoning=rec.reasoning,
            ),
            launch_readiness=LaunchReadiness(
                readiness_score=rec.readiness_score,
                status=rec.status,
                checklist_completed=rec.checklist_completed,
                checklist_pending=rec.checklist_pending,
                estimated_days_to_launch=rec.estimated_days_to_launch,
            ),
            risk_assessment=RiskAssessment(
                risk_level=rec.risk_level,
                key_risks=rec.key_risks,
                mitigation_strategies=rec.mitigation_strategies,
            ),
            next_steps=rec.next_steps,
        )
