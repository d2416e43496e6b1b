"""
Core protocols defining contracts for the entire system.

All infrastructure components implement these protocols,
enabling dependency injection and easy testing.

PATTERN: This follows the same structure as fingerprint/hash_fingerprint.py
- Protocol defines the contract
- Concrete implementations satisfy it structurally
- Factory functions for instantiation
- Test doubles (MagicMock or fakes) for fast unit tests
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np


# ---------------------------------------------------------------------------
# FINGERPRINT PROVIDER PROTOCOL
# ---------------------------------------------------------------------------

@runtime_checkable
class FingerprintProvider(Protocol):
    """
    Contract for turning text into fixed-length vectors.

    Implementations:
    - HashFingerprinter (content-hash projection, the only one shipped)
    """

    @property
    def dimensions(self) -> int:
        """Length of every vector this provider returns."""
        ...

    def embed(self, text: str) -> np.ndarray:
        """Generate a fingerprint for a single text."""
        ...

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        """Generate fingerprints for multiple texts."""
        ...


# ---------------------------------------------------------------------------
# RETRIEVER PROTOCOL
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScoredResult:
    """
    A retrieved document as published to callers.

    Only the bias-adjusted relevance score is exposed. Raw cosine
    similarity and vectors stay inside the retriever.
    """
    title: str
    category: str
    content: str
    relevance_score: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)


@runtime_checkable
class DocumentRetriever(Protocol):
    """
    Contract for top-k document retrieval.

    Implementations:
    - Retriever (fingerprint + cosine over the static corpus)
    """

    def retrieve(self, query: str, k: int = 3) -> list[ScoredResult]:
        """Return at most k results, best first."""
        ...


# ---------------------------------------------------------------------------
# AGENT RESULTS
# ---------------------------------------------------------------------------

@dataclass
class AgentResult:
    """
    Successful result from running the pricing agent.

    Contains both the validated analysis and call metrics.
    """
    output: Any  # PropertyAnalysis, kept loose to avoid an import cycle
    latency_ms: float
    input_tokens: int
    output_tokens: int
    total_tokens: int
    model: str


@dataclass
class AgentError:
    """Error result when agent execution fails."""
    error_type: str
    error_message: str
    raw_response: str | None = None
