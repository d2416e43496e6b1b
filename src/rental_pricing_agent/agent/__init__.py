"""
Agent module - retrieval-augmented rental pricing analysis.

- prompts: pure prompt and retrieval-query builders
- pricing_agent: PricingAgent (retriever + OpenAI client, both injectable)
"""

from rental_pricing_agent.config import DEFAULT_MODEL
from rental_pricing_agent.agent.prompts import (
    SYSTEM_PROMPT,
    build_prompt,
    build_retrieval_query,
    format_context,
    format_property_details,
    summarize_property,
)
from rental_pricing_agent.agent.pricing_agent import (
    CONTEXT_DOCUMENTS,
    PricingAgent,
    run_analysis,
)

__all__ = [
    # Prompts
    "SYSTEM_PROMPT",
    "build_prompt",
    "build_retrieval_query",
    "format_context",
    "format_property_details",
    "summarize_property",
    # Agent
    "CONTEXT_DOCUMENTS",
    "DEFAULT_MODEL",
    "PricingAgent",
    "run_analysis",
]
