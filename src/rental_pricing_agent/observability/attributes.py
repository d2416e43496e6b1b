"""
Semantic Conventions for Span Attributes

Defines attribute keys following OpenTelemetry GenAI conventions
plus custom namespaces for retrieval, agent and eval spans.

Reference: https://opentelemetry.io/docs/specs/semconv/gen-ai/
"""

# ---------------------------------------------------------------------------
# GENAI NAMESPACE (OTel standard)
# ---------------------------------------------------------------------------

GEN_AI_SYSTEM = "gen_ai.system"  # "openai"
GEN_AI_REQUEST_MODEL = "gen_ai.request.model"  # "gpt-4o-mini"

GEN_AI_USAGE_INPUT_TOKENS = "gen_ai.usage.input_tokens"
GEN_AI_USAGE_OUTPUT_TOKENS = "gen_ai.usage.output_tokens"
GEN_AI_USAGE_TOTAL_TOKENS = "gen_ai.usage.total_tokens"

# Only set when PHOENIX_CAPTURE_LLM_CONTENT is on
GEN_AI_PROMPT = "gen_ai.prompt"
GEN_AI_COMPLETION = "gen_ai.completion"


# ---------------------------------------------------------------------------
# RETRIEVAL NAMESPACE (custom)
# ---------------------------------------------------------------------------

RETRIEVAL_TOP_K = "retrieval.top_k"
RETRIEVAL_RESULT_COUNT = "retrieval.result_count"
RETRIEVAL_CATEGORIES = "retrieval.categories"  # list of category labels
RETRIEVAL_TOP_SCORE = "retrieval.top_score"
RETRIEVAL_LATENCY_MS = "retrieval.latency_ms"


# ---------------------------------------------------------------------------
# AGENT NAMESPACE (custom)
# ---------------------------------------------------------------------------

AGENT_NAME = "agent.name"  # "pricing_agent"
AGENT_LOCATION = "agent.property.location"
AGENT_LATENCY_MS = "agent.latency_ms"
AGENT_ERROR_TYPE = "agent.error_type"


# ---------------------------------------------------------------------------
# EVAL NAMESPACE (custom)
# ---------------------------------------------------------------------------

EVAL_GATE_NAME = "eval.gate.name"  # "retrieval_contract"
EVAL_GATE_STATUS = "eval.gate.status"  # "passed", "failed"
EVAL_GATE_SCORE = "eval.gate.score"

EVAL_CASE_ID = "eval.case.id"  # "query-001"
EVAL_CASE_PASSED = "eval.case.passed"  # bool
EVAL_CASE_ERROR = "eval.case.error"


# ---------------------------------------------------------------------------
# HELPER FUNCTIONS
# ---------------------------------------------------------------------------


def retrieval_attributes(
    top_k: int,
    result_count: int,
    categories: list[str],
    top_score: float | None = None,
    latency_ms: float | None = None,
) -> dict:
    """Create attributes dict for a retrieval span."""
    attrs = {
        RETRIEVAL_TOP_K: top_k,
        RETRIEVAL_RESULT_COUNT: result_count,
        RETRIEVAL_CATEGORIES: list(categories),
    }
    if top_score is not None:
        attrs[RETRIEVAL_TOP_SCORE] = top_score
    if latency_ms is not None:
        attrs[RETRIEVAL_LATENCY_MS] = latency_ms
    return attrs


def agent_run_attributes(
    model: str,
    input_tokens: int,
    output_tokens: int,
    latency_ms: float,
) -> dict:
    """Create attributes dict for a completed agent run."""
    return {
        GEN_AI_SYSTEM: "openai",
        GEN_AI_REQUEST_MODEL: model,
        GEN_AI_USAGE_INPUT_TOKENS: input_tokens,
        GEN_AI_USAGE_OUTPUT_TOKENS: output_tokens,
        GEN_AI_USAGE_TOTAL_TOKENS: input_tokens + output_tokens,
        AGENT_LATENCY_MS: latency_ms,
    }


def eval_gate_attributes(
    gate_name: str,
    status: str,
    score: float | None = None,
) -> dict:
    """Create attributes dict for an eval gate span."""
    attrs = {
        EVAL_GATE_NAME: gate_name,
        EVAL_GATE_STATUS: status,
    }
    if score is not None:
        attrs[EVAL_GATE_SCORE] = score
    return attrs


def eval_case_attributes(
    case_id: str,
    passed: bool,
    error: str | None = None,
) -> dict:
    """Create attributes dict for an eval case span."""
    attrs = {
        EVAL_CASE_ID: case_id,
        EVAL_CASE_PASSED: passed,
    }
    if error:
        attrs[EVAL_CASE_ERROR] = error
    return attrs
