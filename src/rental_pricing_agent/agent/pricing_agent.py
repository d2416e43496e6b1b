"""
The PricingAgent

Combines deterministic retrieval with one LLM call:

    PropertyInput -> retrieval query -> top-3 documents
    -> prompt -> OpenAI structured output (response_format=AgentRecommendation)
    -> AgentRecommendation -> PropertyAnalysis

The model only fills the flat recommendation; the summary and the
retrieved context are assembled here, so the published relevance scores
reach the caller untouched by the model.

Failures come back as AgentError values rather than exceptions, so a
batch of analyses can report per-property errors.
"""

from __future__ import annotations

import logging
import time

from openai import OpenAI, OpenAIError
from pydantic import ValidationError

from rental_pricing_agent.agent.prompts import (
    SYSTEM_PROMPT,
    build_prompt,
    build_retrieval_query,
    summarize_property,
)
from rental_pricing_agent.config import get_settings
from rental_pricing_agent.core import AgentError, AgentResult, DocumentRetriever
from rental_pricing_agent.observability import (
    agent_run_attributes,
    get_tracer,
    retrieval_attributes,
)
from rental_pricing_agent.observability.attributes import (
    AGENT_ERROR_TYPE,
    AGENT_LOCATION,
    AGENT_NAME,
    GEN_AI_COMPLETION,
    GEN_AI_PROMPT,
)
from rental_pricing_agent.schemas.property_analysis import (
    AgentRecommendation,
    PropertyAnalysis,
    PropertyInput,
    RetrievedContext,
)

logger = logging.getLogger(__name__)

CONTEXT_DOCUMENTS = 3


class PricingAgent:
    """
    Rental pricing agent with injected retriever and (optional) client.

    If no client is given, one is created from the configured OPENAI_API_KEY
    on first use. The model defaults to the configured AGENT_MODEL.
    """

    def __init__(
        self,
        retriever: DocumentRetriever,
        client: OpenAI | None = None,
        model: str | None = None,
    ):
        self._retriever = retriever
        self._client = client
        self.model = model or get_settings().agent.model

    def _get_client(self) -> OpenAI | None:
        if self._client is None:
            settings = get_settings().agent
            if not settings.has_api_key:
                return None
            self._client = OpenAI(api_key=settings.openai_api_key)
        return self._client

    def retrieve_context(self, prop: PropertyInput) -> list[RetrievedContext]:
        """Run retrieval for a property and convert to response models."""
        tracer = get_tracer()
        query = build_retrieval_query(prop)

        with tracer.start_span("pricing_agent.retrieve") as span:
            start = time.time()
            results = self._retriever.retrieve(query, k=CONTEXT_DOCUMENTS)
            latency_ms = (time.time() - start) * 1000
            span.set_attributes(retrieval_attributes(
                top_k=CONTEXT_DOCUMENTS,
                result_count=len(results),
                categories=[r.category for r in results],
                top_score=results[0].relevance_score if results else None,
                latency_ms=latency_ms,
            ))

        return [RetrievedContext(**r.to_dict()) for r in results]

    @staticmethod
    def _fail(
        span,
        prop: PropertyInput,
        error_type: str,
        error_message: str,
        raw_response: str | None,
    ) -> AgentError:
        logger.error(f"Pricing analysis failed for {prop.location!r}: {error_type}: {error_message}")
        span.set_attribute(AGENT_ERROR_TYPE, error_type)
        span.set_status("error", error_message)
        return AgentError(
            error_type=error_type,
            error_message=error_message,
            raw_response=raw_response,
        )

    def analyze(self, prop: PropertyInput) -> AgentResult | AgentError:
        """
        Analyze one property.

        Returns:
            AgentResult (output is a PropertyAnalysis) on success,
            AgentError on configuration, API, refusal, parse or validation failure
        """
        tracer = get_tracer()
        capture_content = get_settings().phoenix.capture_llm_content

        with tracer.start_span(
            "pricing_agent.analyze",
            attributes={AGENT_NAME: "pricing_agent", AGENT_LOCATION: prop.location},
        ) as span:
            client = self._get_client()
            if client is None:
                span.set_status("error", "missing OPENAI_API_KEY")
                return AgentError(
                    error_type="ConfigurationError",
                    error_message="OPENAI_API_KEY environment variable not set",
                )

            context = self.retrieve_context(prop)
            user_message = build_prompt(prop, context)
            if capture_content:
                span.set_attribute(GEN_AI_PROMPT, user_message)

            raw_content: str | None = None
            start_time = time.time()
            try:
                response = client.beta.chat.completions.parse(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": SYSTEM_PROMPT},
                        {"role": "user", "content": user_message},
                    ],
                    response_format=AgentRecommendation,
                )
                latency_ms = (time.time() - start_time) * 1000

                message = response.choices[0].message
                raw_content = message.content
                if capture_content and raw_content:
                    span.set_attribute(GEN_AI_COMPLETION, raw_content)

                if message.refusal:
                    return self._fail(
                        span, prop, "RefusalError", message.refusal, raw_content
                    )

                recommendation = message.parsed
                if recommendation is None:
                    return self._fail(
                        span, prop, "ParseError",
                        "Model returned None for parsed output", raw_content,
                    )

                analysis = PropertyAnalysis.from_recommendation(
                    summarize_property(prop), context, recommendation
                )
            except (OpenAIError, ValidationError) as e:
                span.record_exception(e)
                return self._fail(span, prop, type(e).__name__, str(e), raw_content)

            usage = response.usage
            input_tokens = usage.prompt_tokens if usage else 0
            output_tokens = usage.completion_tokens if usage else 0
            span.set_attributes(agent_run_attributes(
                model=self.model,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
                latency_ms=latency_ms,
            ))
            span.set_status("ok")

            return AgentResult(
                output=analysis,
                latency_ms=latency_ms,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
                total_tokens=input_tokens + output_tokens,
                model=self.model,
            )


def run_analysis(
    prop: PropertyInput | dict,
    model: str | None = None,
) -> AgentResult | AgentError:
    """
    Analyze a property with the default retriever and an env-configured client.

    Accepts a PropertyInput or a plain dict (validated here).
    """
    from rental_pricing_agent.retrieval import get_retriever

    if isinstance(prop, dict):
        try:
            prop = PropertyInput.model_validate(prop)
        except ValidationError as e:
            return AgentError(error_type="ValidationError", error_message=str(e))

    return PricingAgent(get_retriever(), model=model).analyze(prop)
