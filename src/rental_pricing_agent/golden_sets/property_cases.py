"""
Golden retrieval cases.

Each case is a query plus the k it is run with. Cases either carry a
free-text query or a PropertyInput from which the query is synthesized
exactly as the agent does.

The hash fingerprint has no semantic notion of relevance, so cases do not
assert WHICH documents come back. They pin the retrieval contract: result
count, score bounds, ordering, determinism, and (for whole-corpus cases)
category coverage.
"""

from dataclasses import dataclass, field

from rental_pricing_agent.schemas.property_analysis import PropertyInput


@dataclass
class RetrievalCase:
    """A single golden retrieval case."""

    id: str
    description: str
    k: int
    query: str | None = None
    property_input: PropertyInput | None = None

    # Categories that must all appear in the results
    expected_categories: list[str] = field(default_factory=list)


ZAMALEK_APARTMENT = PropertyInput(
    location="Zamalek, Cairo",
    size_sqm=100,
    bedrooms=2,
    bathrooms=1,
    floor=4,
    has_elevator=True,
    has_parking=False,
    finishing_quality="medium",
    near_beach=False,
)

ALEXANDRIA_BEACH_FLAT = PropertyInput(
    location="Alexandria Beach",
    size_sqm=150,
    bedrooms=3,
    bathrooms=2,
    floor=7,
    has_elevator=True,
    has_parking=True,
    finishing_quality="luxury",
    near_beach=True,
    property_value_egp=6_000_000,
)

HELWAN_STUDIO = PropertyInput(
    location="Helwan",
    size_sqm=45,
    bedrooms=0,
    bathrooms=1,
    floor=0,
    has_elevator=False,
    has_parking=False,
    finishing_quality="basic",
    near_beach=False,
)


ALL_CATEGORIES = [
    "Market Analysis",
    "Pricing Strategy",
    "Launch Readiness",
    "Risk Assessment",
    "Technology",
]


RETRIEVAL_CASES: list[RetrievalCase] = [
    RetrievalCase(
        id="query-001",
        description="Short location query, default k",
        query="rental pricing Cairo",
        k=3,
    ),
    RetrievalCase(
        id="query-002",
        description="Whole corpus requested",
        query="pricing strategy",
        k=5,
        expected_categories=ALL_CATEGORIES,
    ),
    RetrievalCase(
        id="query-003",
        description="Empty query still returns k results",
        query="",
        k=3,
    ),
    RetrievalCase(
        id="query-004",
        description="k larger than the corpus returns the whole corpus",
        query="Egyptian market",
        k=50,
        expected_categories=ALL_CATEGORIES,
    ),
    RetrievalCase(
        id="query-005",
        description="Single best document",
        query="market analysis",
        k=1,
    ),
    RetrievalCase(
        id="property-001",
        description="Synthesized query, value unknown",
        property_input=ZAMALEK_APARTMENT,
        k=3,
    ),
    RetrievalCase(
        id="property-002",
        description="Synthesized query with property value",
        property_input=ALEXANDRIA_BEACH_FLAT,
        k=3,
    ),
    RetrievalCase(
        id="property-003",
        description="Studio, zero bedrooms",
        property_input=HELWAN_STUDIO,
        k=3,
    ),
]


def get_all_retrieval_cases() -> list[RetrievalCase]:
    return list(RETRIEVAL_CASES)


def get_case_by_id(case_id: str) -> RetrievalCase | None:
    for case in RETRIEVAL_CASES:
        if case.id == case_id:
            return case
    return None
