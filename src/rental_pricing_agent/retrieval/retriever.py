"""
Top-k retriever over the static corpus index.

Pipeline for every call:
    corpus.fingerprinter.embed(query) -> cosine vs. each cached document fingerprint
    -> stable sort descending -> first k -> bias + clamp -> ScoredResult

PUBLISHED SCORES:
-----------------
relevance_score = clamp(raw_cosine + RELEVANCE_BIAS, 0, 1)

The +0.3 bias is a display heuristic kept for score compatibility, not a
calibrated confidence. Any two SHA-256 hex digests already have a cosine
of roughly 0.77 or more, so published scores saturate at 1.0; ranking is
done on the raw cosine before the bias.
"""

from __future__ import annotations

import logging

from rental_pricing_agent.core import ScoredResult
from rental_pricing_agent.errors import InvalidArgumentError
from rental_pricing_agent.retrieval.corpus import CorpusIndex, get_corpus_index
from rental_pricing_agent.retrieval.similarity import cosine_similarity

logger = logging.getLogger(__name__)

RELEVANCE_BIAS = 0.3
SCORE_MIN = 0.0
SCORE_MAX = 1.0
DEFAULT_TOP_K = 3


def publish_score(raw_similarity: float) -> float:
    """Apply the fixed bias and clamp to [SCORE_MIN, SCORE_MAX]."""
    return max(SCORE_MIN, min(SCORE_MAX, raw_similarity + RELEVANCE_BIAS))


class Retriever:
    """
    Stateless retriever; all state lives in the injected CorpusIndex.

    Safe to call from multiple threads: nothing is written after the
    index is built, and query fingerprints are local to each call.
    """

    def __init__(self, corpus: CorpusIndex):
        """
        Args:
            corpus: Corpus index (injected, not looked up globally). Queries
                are fingerprinted with the provider the index was built with.
        """
        self._corpus = corpus

    @property
    def corpus(self) -> CorpusIndex:
        return self._corpus

    def retrieve(self, query: str, k: int = DEFAULT_TOP_K) -> list[ScoredResult]:
        """
        Return the top-k documents for a query, best first.

        Args:
            query: Free-text query; the empty string is valid
            k: Maximum number of results; must be a positive integer

        Returns:
            min(k, len(corpus)) results, non-increasing by relevance_score.
            Ties in raw similarity keep corpus order.

        Raises:
            InvalidArgumentError: if query is not a string or k is not a
                positive integer
        """
        if not isinstance(query, str):
            raise InvalidArgumentError(
                f"query must be a string, got {type(query).__name__}"
            )
        if isinstance(k, bool) or not isinstance(k, int):
            raise InvalidArgumentError(f"k must be an integer, got {type(k).__name__}")
        if k <= 0:
            raise InvalidArgumentError(f"k must be positive, got {k}")

        query_vector = self._corpus.fingerprinter.embed(query)

        scored = [
            (doc, cosine_similarity(query_vector, self._corpus.fingerprint_for(doc.id)))
            for doc in self._corpus
        ]
        # list.sort is stable, including with reverse=True
        scored.sort(key=lambda item: item[1], reverse=True)

        results = [
            ScoredResult(
                title=doc.title,
                category=doc.category,
                content=doc.content,
                relevance_score=publish_score(similarity),
            )
            for doc, similarity in scored[:k]
        ]

        logger.debug(
            "Retrieved %d/%d documents (k=%d, query_chars=%d)",
            len(results),
            len(self._corpus),
            k,
            len(query),
        )
        return results

    # Name used by the request-handling layer
    retrieve_relevant_docs = retrieve


def get_retriever(corpus: CorpusIndex | None = None) -> Retriever:
    """
    Factory function to get a Retriever.

    Args:
        corpus: Corpus index (defaults to the process-wide instance)
    """
    if corpus is None:
        corpus = get_corpus_index()
    return Retriever(corpus)
