"""
Corpus index - the static document set and its cached fingerprints.

The index is built once per process from the compiled-in seed documents.
Construction validates every entry and fails fast, so a malformed corpus
is a startup error, never a query-time one.

THREAD SAFETY:
--------------
After construction the index is read-only: documents are frozen
dataclasses held in a tuple, fingerprint arrays are flagged non-writeable,
and the id -> fingerprint mapping is held in a MappingProxyType.
get_corpus_index() guards the one-time build with a lock (double-checked),
so concurrent first callers still get a single instance.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

import numpy as np

from rental_pricing_agent.core import FingerprintProvider
from rental_pricing_agent.errors import CorpusInitializationError
from rental_pricing_agent.fingerprint import get_fingerprint_provider
from rental_pricing_agent.retrieval.document import CATEGORIES, Document

logger = logging.getLogger(__name__)


class CorpusIndex:
    """
    Owns the reference documents and their precomputed fingerprints.

    Fingerprints are computed from each document's content exactly once,
    at construction. Queries must be fingerprinted with the same provider,
    exposed as the fingerprinter property.
    """

    def __init__(
        self,
        documents: Iterable[Document],
        fingerprinter: FingerprintProvider | None = None,
        categories: Iterable[str] = CATEGORIES,
    ):
        """
        Build the index.

        Args:
            documents: Reference documents, in tie-break order
            fingerprinter: Fingerprint provider (defaults to get_fingerprint_provider())
            categories: Allowed category labels

        Raises:
            CorpusInitializationError: if the corpus is empty or any entry
                is malformed, or a fingerprint does not match the
                provider's dimensions
        """
        docs = tuple(documents)
        _validate(docs, frozenset(categories))

        if fingerprinter is None:
            fingerprinter = get_fingerprint_provider()
        expected_shape = (fingerprinter.dimensions,)

        vectors: dict[str, np.ndarray] = {}
        raw_vectors = fingerprinter.embed_batch([doc.content for doc in docs])
        if len(raw_vectors) != len(docs):
            raise CorpusInitializationError(
                f"Fingerprint provider returned {len(raw_vectors)} vectors for {len(docs)} documents"
            )
        for doc, raw in zip(docs, raw_vectors):
            vector = np.asarray(raw, dtype=np.float64)
            if vector.shape != expected_shape:
                raise CorpusInitializationError(
                    f"Fingerprint for {doc.id!r} has shape {vector.shape}, "
                    f"expected {expected_shape}"
                )
            vector.setflags(write=False)
            vectors[doc.id] = vector

        self._documents = docs
        self._fingerprinter = fingerprinter
        self._fingerprints: Mapping[str, np.ndarray] = MappingProxyType(vectors)
        logger.debug("Built corpus index with %d documents", len(docs))

    @property
    def fingerprinter(self) -> FingerprintProvider:
        """The provider the document fingerprints were computed with."""
        return self._fingerprinter

    def fingerprint_for(self, doc_id: str) -> np.ndarray:
        """Return the cached fingerprint for a document id."""
        try:
            return self._fingerprints[doc_id]
        except KeyError:
            raise KeyError(f"Unknown document id: {doc_id!r}") from None

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)


def _validate(docs: tuple[Document, ...], categories: frozenset[str]) -> None:
    """Fail fast on an empty or malformed corpus."""
    if not docs:
        raise CorpusInitializationError("Corpus must contain at least one document")

    seen: set[str] = set()
    for position, doc in enumerate(docs):
        if not isinstance(doc, Document):
            raise CorpusInitializationError(
                f"Entry {position} is {type(doc).__name__}, expected Document"
            )
        for field_name in ("id", "title", "category", "content"):
            value = getattr(doc, field_name)
            if not isinstance(value, str) or not value.strip():
                raise CorpusInitializationError(
                    f"Document at position {position} has empty or invalid {field_name!r}"
                )
        if doc.id in seen:
            raise CorpusInitializationError(f"Duplicate document id: {doc.id!r}")
        if doc.category not in categories:
            raise CorpusInitializationError(
                f"Document {doc.id!r} has unknown category {doc.category!r}"
            )
        seen.add(doc.id)


# ---------------------------------------------------------------------------
# PROCESS-WIDE INSTANCE
# ---------------------------------------------------------------------------

_corpus_index: CorpusIndex | None = None
_corpus_lock = threading.Lock()


def get_corpus_index() -> CorpusIndex:
    """
    Get the process-wide corpus index (lazy, built at most once).

    Repeated calls return the same instance; fingerprints are never
    recomputed.
    """
    global _corpus_index
    if _corpus_index is None:
        with _corpus_lock:
            if _corpus_index is None:
                from rental_pricing_agent.retrieval.seeds import get_rental_pricing_documents

                _corpus_index = CorpusIndex(get_rental_pricing_documents())
    return _corpus_index


def reset_corpus_index() -> None:
    """Reset the process-wide index (useful for testing)."""
    global _corpus_index
    with _corpus_lock:
        _corpus_index = None
