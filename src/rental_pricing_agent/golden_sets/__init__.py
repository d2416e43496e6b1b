"""
Golden Sets Package

Retrieval cases used by the retrieval contract eval and the tests.

Example:
    from rental_pricing_agent.golden_sets import (
        RetrievalCase,
        get_all_retrieval_cases,
        get_case_by_id,
    )
"""

from rental_pricing_agent.golden_sets.property_cases import (
    ALL_CATEGORIES,
    RETRIEVAL_CASES,
    RetrievalCase,
    get_all_retrieval_cases,
    get_case_by_id,
)

__all__ = [
    "ALL_CATEGORIES",
    "RETRIEVAL_CASES",
    "RetrievalCase",
    "get_all_retrieval_cases",
    "get_case_by_id",
]
