"""
Retrieval Contract Eval

Runs every golden retrieval case through the Retriever and checks the
properties callers depend on. No LLM calls; runs in milliseconds.

CHECKS PER CASE:
----------------
COUNT:        len(results) == min(k, corpus size)
BOUNDS:       every relevance_score in [0, 1]
ORDERING:     relevance_score is non-increasing
DETERMINISM:  a second identical call returns identical results
CATEGORIES:   expected category labels all present (when specified)

A failure here means the published scores or ranking changed, which
breaks every consumer that stored or compared them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rental_pricing_agent.agent.prompts import build_retrieval_query
from rental_pricing_agent.core import DocumentRetriever, ScoredResult
from rental_pricing_agent.golden_sets import RetrievalCase, get_all_retrieval_cases
from rental_pricing_agent.observability import (
    eval_case_attributes,
    eval_gate_attributes,
    get_tracer,
)

logger = logging.getLogger(__name__)

GATE_NAME = "retrieval_contract"


# ---------------------------------------------------------------------------
# RESULTS
# ---------------------------------------------------------------------------

@dataclass
class RetrievalCaseResult:
    """Result of the retrieval contract checks for a single case."""
    case_id: str
    query: str
    k: int
    passed: bool
    results: list[ScoredResult]
    failures: list[str] = field(default_factory=list)


@dataclass
class RetrievalEvalReport:
    """Aggregate retrieval eval results."""
    total_cases: int
    passed_cases: int
    failed_cases: int
    results: list[RetrievalCaseResult]

    @property
    def all_passed(self) -> bool:
        return self.failed_cases == 0

    @property
    def pass_rate(self) -> float:
        if self.total_cases == 0:
            return 0.0
        return self.passed_cases / self.total_cases


# ---------------------------------------------------------------------------
# CHECKS
# ---------------------------------------------------------------------------

def resolve_query(case: RetrievalCase) -> str:
    """Free-text query of a case, synthesizing it from the property if needed."""
    if case.query is not None:
        return case.query
    if case.property_input is not None:
        return build_retrieval_query(case.property_input)
    raise ValueError(f"Case {case.id!r} has neither a query nor a property")


def check_results(
    results: list[ScoredResult],
    repeat: list[ScoredResult],
    k: int,
    corpus_size: int,
    expected_categories: list[str] | None = None,
) -> list[str]:
    """
    Check one retrieval against the contract.

    Returns:
        Human-readable failure descriptions (empty if all checks pass)
    """
    failures = []

    expected_count = min(k, corpus_size)
    if len(results) != expected_count:
        failures.append(f"expected {expected_count} results, got {len(results)}")

    out_of_bounds = [r.relevance_score for r in results if not 0.0 <= r.relevance_score <= 1.0]
    if out_of_bounds:
        failures.append(f"scores outside [0, 1]: {out_of_bounds}")

    scores = [r.relevance_score for r in results]
    if any(a < b for a, b in zip(scores, scores[1:])):
        failures.append(f"scores not non-increasing: {scores}")

    if results != repeat:
        failures.append("repeated call returned different results")

    if expected_categories:
        returned = {r.category for r in results}
        missing = [c for c in expected_categories if c not in returned]
        if missing:
            failures.append(f"missing categories: {missing}")

    return failures


# ---------------------------------------------------------------------------
# RUNNER
# ---------------------------------------------------------------------------

def run_retrieval_eval(
    retriever: DocumentRetriever | None = None,
    cases: list[RetrievalCase] | None = None,
    verbose: bool = False,
) -> RetrievalEvalReport:
    """
    Run the retrieval contract eval.

    Args:
        retriever: Retriever under test. Defaults to the process-wide one.
        cases: Cases to evaluate. Defaults to all golden cases.
        verbose: Print progress.
    """
    if retriever is None:
        from rental_pricing_agent.retrieval import get_retriever

        retriever = get_retriever()

    cases = cases if cases is not None else get_all_retrieval_cases()
    corpus_size = len(retriever.corpus) if hasattr(retriever, "corpus") else None
    tracer = get_tracer()
    results: list[RetrievalCaseResult] = []

    with tracer.start_span("eval.retrieval_contract") as gate_span:
        for case in cases:
            if verbose:
                print(f"Running retrieval eval: {case.id}...")

            with tracer.start_span("eval.retrieval_case") as case_span:
                query = resolve_query(case)
                first = retriever.retrieve(query, k=case.k)
                second = retriever.retrieve(query, k=case.k)

                # Without a known corpus size only the k cap can be checked
                size = corpus_size if corpus_size is not None else len(first)
                failures = check_results(
                    first,
                    second,
                    k=case.k,
                    corpus_size=size,
                    expected_categories=case.expected_categories,
                )
                passed = not failures

                case_span.set_attributes(eval_case_attributes(
                    case.id, passed, "; ".join(failures) or None
                ))

            if not passed:
                logger.warning(f"Retrieval case {case.id} failed: {'; '.join(failures)}")

            results.append(RetrievalCaseResult(
                case_id=case.id,
                query=query,
                k=case.k,
                passed=passed,
                results=first,
                failures=failures,
            ))

        passed_count = sum(1 for r in results if r.passed)
        report = RetrievalEvalReport(
            total_cases=len(results),
            passed_cases=passed_count,
            failed_cases=len(results) - passed_count,
            results=results,
        )

        gate_span.set_attributes(eval_gate_attributes(
            GATE_NAME,
            "passed" if report.all_passed else "failed",
            score=report.pass_rate,
        ))

    return report
