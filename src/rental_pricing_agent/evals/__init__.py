"""
Evaluation gates module.

- retrieval_eval: Retrieval contract (count, bounds, ordering, determinism)
"""

from rental_pricing_agent.evals.retrieval_eval import (
    GATE_NAME,
    RetrievalCaseResult,
    RetrievalEvalReport,
    check_results,
    resolve_query,
    run_retrieval_eval,
)

__all__ = [
    "GATE_NAME",
    "RetrievalCaseResult",
    "RetrievalEvalReport",
    "check_results",
    "resolve_query",
    "run_retrieval_eval",
]
