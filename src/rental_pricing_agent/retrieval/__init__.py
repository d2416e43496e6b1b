"""
Retrieval module - deterministic top-k search over the reference corpus.

This module provides:
- Document: The document model
- CorpusIndex: Documents plus cached fingerprints
- Retriever: Top-k ranking with published relevance scores
- get_corpus_index() / get_retriever(): Factory functions

ARCHITECTURE:
-------------
1. Protocol defines the contract (DocumentRetriever in core.protocols)
2. CorpusIndex owns the data; Retriever borrows it read-only
3. Factory functions for instantiation
4. Injected corpora for fast, isolated tests
"""

# Document model
from rental_pricing_agent.retrieval.document import CATEGORIES, Document

# Scoring
from rental_pricing_agent.retrieval.similarity import cosine_similarity

# Index and retriever
from rental_pricing_agent.retrieval.corpus import (
    CorpusIndex,
    get_corpus_index,
    reset_corpus_index,
)
from rental_pricing_agent.retrieval.retriever import (
    DEFAULT_TOP_K,
    RELEVANCE_BIAS,
    Retriever,
    get_retriever,
    publish_score,
)

# Seed data
from rental_pricing_agent.retrieval.seeds import get_rental_pricing_documents

__all__ = [
    # Document
    "CATEGORIES",
    "Document",
    # Scoring
    "cosine_similarity",
    "publish_score",
    "RELEVANCE_BIAS",
    "DEFAULT_TOP_K",
    # Index
    "CorpusIndex",
    "get_corpus_index",
    "reset_corpus_index",
    # Retriever
    "Retriever",
    "get_retriever",
    # Seeds
    "get_rental_pricing_documents",
]
