"""
Prompt construction for the pricing agent.

Everything here is a pure string function so it can be tested without a
model: the retrieval query, the knowledge-base context block, and the
full user prompt.
"""

from __future__ import annotations

from typing import Sequence

from rental_pricing_agent.core import ScoredResult
from rental_pricing_agent.schemas.property_analysis import PropertyInput, RetrievedContext


SYSTEM_PROMPT = """You are a Real Estate Rental Pricing Launch Assistant for the Egyptian market.

ROLE:
- Recommend a monthly rent in EGP for the described unit
- Judge how ready the unit is to be listed
- Identify the main pricing and operational risks

CONSTRAINTS:
1. Ground every number in the property details and the retrieved knowledge base
2. Prices are whole EGP per month
3. Respond with a single JSON object and nothing else"""


# Field list the model must fill, in the order it is asked for.
RESPONSE_FORMAT_INSTRUCTIONS = """{
  "recommended_price_egp": <integer monthly rent in EGP>,
  "price_range_min": <integer minimum monthly rent>,
  "price_range_max": <integer maximum monthly rent>,
  "strategy": "<penetration/competitive/premium pricing strategy>",
  "confidence": "<high/medium/low>",
  "reasoning": "<2-3 sentences explaining the price>",
  "readiness_score": <0-100 integer>,
  "status": "<ready/needs_work/not_ready>",
  "checklist_completed": ["item1", "item2"],
  "checklist_pending": ["item1", "item2"],
  "estimated_days_to_launch": <integer>,
  "risk_level": "<low/medium/high>",
  "key_risks": ["risk1", "risk2", "risk3"],
  "mitigation_strategies": ["strategy1", "strategy2"],
  "next_steps": ["step1", "step2", "step3"]
}"""


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def build_retrieval_query(prop: PropertyInput) -> str:
    """Synthesize the free-text retrieval query from property attributes."""
    value = prop.property_value_egp if prop.property_value_egp else "unknown"
    return (
        f"Rental pricing for {prop.location}, {prop.size_sqm}sqm, "
        f"{prop.bedrooms}BR, {prop.finishing_quality} finishing, "
        f"property value {value} EGP"
    )


def summarize_property(prop: PropertyInput) -> str:
    return f"{prop.bedrooms}BR in {prop.location}, {prop.size_sqm}sqm, {prop.finishing_quality}"


def format_context(results: Sequence[ScoredResult | RetrievedContext]) -> str:
    """Format retrieved documents as the knowledge-base block of the prompt."""
    return "\n\n".join(
        f"Document: {doc.title}\nCategory: {doc.category}\nContent: {doc.content}"
        for doc in results
    )


def format_property_details(prop: PropertyInput) -> str:
    lines = [
        "PROPERTY DETAILS:",
        f"- Location: {prop.location}",
        f"- Size: {prop.size_sqm} square meters",
        f"- Bedrooms: {prop.bedrooms}",
        f"- Bathrooms: {prop.bathrooms}",
        f"- Floor: {prop.floor}",
        f"- Elevator: {_yes_no(prop.has_elevator)}",
        f"- Parking: {_yes_no(prop.has_parking)}",
        f"- Finishing: {prop.finishing_quality}",
        f"- Near Beach: {_yes_no(prop.near_beach)}",
    ]
    if prop.property_value_egp:
        lines.append(f"- Property Value: {prop.property_value_egp} EGP")
    return "\n".join(lines)


def build_prompt(prop: PropertyInput, results: Sequence[ScoredResult | RetrievedContext]) -> str:
    """Build the user message: property, retrieved knowledge, output format."""
    return f"""{format_property_details(prop)}

RETRIEVED KNOWLEDGE BASE:
{format_context(results)}

Based on the property details and the retrieved market knowledge, provide a comprehensive launch analysis in JSON format with these exact fields:

{RESPONSE_FORMAT_INSTRUCTIONS}

Provide ONLY valid JSON, no markdown or extra text."""
