"""
Unit Tests for the Corpus Index

Tests the static reference corpus, fail-fast validation, fingerprint
caching and the init-once process-wide instance.
"""

import threading
from dataclasses import FrozenInstanceError, replace
from unittest.mock import patch

import numpy as np
import pytest

from rental_pricing_agent.errors import CorpusInitializationError
from rental_pricing_agent.fingerprint import FINGERPRINT_LENGTH, HashFingerprinter, fingerprint
from rental_pricing_agent.retrieval import (
    CATEGORIES,
    CorpusIndex,
    Document,
    get_corpus_index,
    get_rental_pricing_documents,
    reset_corpus_index,
)
from rental_pricing_agent.retrieval import corpus as corpus_module


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def fresh_singleton():
    """Each test starts and ends without a cached process-wide index."""
    reset_corpus_index()
    yield
    reset_corpus_index()


@pytest.fixture
def small_docs():
    return [
        Document(id="a", title="A", category="Market Analysis", content="alpha"),
        Document(id="b", title="B", category="Technology", content="beta"),
    ]


class CountingFingerprinter(HashFingerprinter):
    """Records every text it fingerprints."""

    def __init__(self, dimensions: int = FINGERPRINT_LENGTH):
        super().__init__(dimensions)
        self.calls: list[str] = []

    def embed(self, text: str) -> np.ndarray:
        self.calls.append(text)
        return super().embed(text)


class UnevenFingerprinter:
    """Claims 3 dimensions but returns a longer vector for one text."""

    dimensions = 3

    def embed(self, text: str) -> np.ndarray:
        return np.ones(3 if text == "alpha" else 4)

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        return [self.embed(text) for text in texts]


# ---------------------------------------------------------------------------
# REFERENCE CORPUS
# ---------------------------------------------------------------------------


class TestReferenceCorpus:
    """The compiled-in seed documents."""

    def test_has_five_documents(self):
        assert len(get_rental_pricing_documents()) == 5

    def test_ids_are_unique(self):
        ids = [doc.id for doc in get_rental_pricing_documents()]

        assert len(ids) == len(set(ids))

    def test_required_fields_are_non_empty_strings(self):
        for doc in get_rental_pricing_documents():
            for value in (doc.id, doc.title, doc.category, doc.content):
                assert isinstance(value, str)
                assert value.strip()

    def test_category_coverage(self):
        """Mapping documents to categories reproduces the fixed label set."""
        categories = {doc.category for doc in get_rental_pricing_documents()}

        assert categories == {
            "Market Analysis",
            "Pricing Strategy",
            "Launch Readiness",
            "Risk Assessment",
            "Technology",
        }
        assert categories == set(CATEGORIES)

    def test_content_keeps_block_whitespace(self):
        """Fingerprints hash the exact bytes, so surrounding whitespace is content."""
        for doc in get_rental_pricing_documents():
            assert doc.content.startswith("\n")
            assert doc.content.endswith("\n    ")
            assert not doc.content.startswith("\n\n")

    def test_content_keeps_non_ascii_text(self):
        docs = {doc.id: doc for doc in get_rental_pricing_documents()}

        assert docs["doc_001"].content.startswith(
            "\nReal estate rental pricing in Egypt requires comprehensive market analysis"
        )
        assert "Legal docs → Photography → Listing → Marketing → Launch\n    " in docs["doc_003"].content
        assert "(Property Value × 1%) / 12" in docs["doc_005"].content

    def test_documents_are_immutable(self):
        doc = get_rental_pricing_documents()[0]

        with pytest.raises(FrozenInstanceError):
            doc.title = "changed"

    def test_to_dict(self):
        doc = get_rental_pricing_documents()[0]

        assert doc.to_dict() == {
            "id": "doc_001",
            "title": doc.title,
            "category": "Market Analysis",
            "content": doc.content,
        }


# ---------------------------------------------------------------------------
# INDEX CONSTRUCTION
# ---------------------------------------------------------------------------


class TestCorpusIndex:
    """Test fingerprint caching and read-only access."""

    def test_fingerprints_every_document_content(self, small_docs):
        index = CorpusIndex(small_docs)

        for doc in small_docs:
            np.testing.assert_array_equal(index.fingerprint_for(doc.id), fingerprint(doc.content))

    def test_fingerprint_length_is_constant(self):
        index = CorpusIndex(get_rental_pricing_documents())

        for doc in index:
            assert index.fingerprint_for(doc.id).shape == (FINGERPRINT_LENGTH,)

    def test_preserves_document_order(self, small_docs):
        index = CorpusIndex(small_docs)

        assert [doc.id for doc in index] == ["a", "b"]
        assert list(index) == small_docs
        assert len(index) == 2

    def test_fingerprints_computed_once_at_construction(self, small_docs):
        provider = CountingFingerprinter()

        index = CorpusIndex(small_docs, fingerprinter=provider)
        index.fingerprint_for("a")
        index.fingerprint_for("a")

        assert provider.calls == ["alpha", "beta"]

    def test_default_provider(self, small_docs):
        index = CorpusIndex(small_docs)

        assert isinstance(index.fingerprinter, HashFingerprinter)
        assert index.fingerprinter.dimensions == FINGERPRINT_LENGTH

    def test_exposes_injected_provider(self, small_docs):
        provider = HashFingerprinter(dimensions=32)

        index = CorpusIndex(small_docs, fingerprinter=provider)

        assert index.fingerprinter is provider
        assert index.fingerprint_for("a").shape == (32,)

    def test_fingerprints_are_read_only(self, small_docs):
        index = CorpusIndex(small_docs)

        with pytest.raises(ValueError):
            index.fingerprint_for("a")[0] = 0.0

    def test_unknown_id_raises_key_error(self, small_docs):
        index = CorpusIndex(small_docs)

        with pytest.raises(KeyError):
            index.fingerprint_for("missing")


# ---------------------------------------------------------------------------
# FAIL-FAST VALIDATION
# ---------------------------------------------------------------------------


class TestCorpusValidation:
    """Malformed corpora fail at construction, never at query time."""

    def test_empty_corpus(self):
        with pytest.raises(CorpusInitializationError):
            CorpusIndex([])

    def test_duplicate_ids(self, small_docs):
        duplicate = replace(small_docs[1], id="a")

        with pytest.raises(CorpusInitializationError, match="Duplicate"):
            CorpusIndex([small_docs[0], duplicate])

    @pytest.mark.parametrize("field_name", ["id", "title", "category", "content"])
    def test_empty_field(self, small_docs, field_name):
        broken = replace(small_docs[0], **{field_name: "   "})

        with pytest.raises(CorpusInitializationError):
            CorpusIndex([broken])

    def test_unknown_category(self, small_docs):
        broken = replace(small_docs[0], category="Gossip")

        with pytest.raises(CorpusInitializationError, match="unknown category"):
            CorpusIndex([broken])

    def test_custom_category_set(self, small_docs):
        custom = replace(small_docs[0], category="Gossip")

        index = CorpusIndex([custom], categories=["Gossip"])

        assert len(index) == 1

    def test_non_document_entry(self):
        with pytest.raises(CorpusInitializationError):
            CorpusIndex([{"id": "a", "title": "A", "category": "Technology", "content": "x"}])

    def test_fingerprint_shape_must_match_provider(self, small_docs):
        with pytest.raises(CorpusInitializationError, match="'b'"):
            CorpusIndex(small_docs, fingerprinter=UnevenFingerprinter())


# ---------------------------------------------------------------------------
# PROCESS-WIDE INSTANCE
# ---------------------------------------------------------------------------


class TestGetCorpusIndex:
    """Lazy, init-once construction of the shared index."""

    def test_returns_reference_corpus(self):
        index = get_corpus_index()

        assert [doc.id for doc in index] == ["doc_001", "doc_002", "doc_003", "doc_004", "doc_005"]

    def test_same_instance_on_repeated_calls(self):
        assert get_corpus_index() is get_corpus_index()

    def test_reset_builds_new_instance(self):
        first = get_corpus_index()
        reset_corpus_index()

        assert get_corpus_index() is not first

    def test_concurrent_first_access_builds_once(self):
        """Many threads racing on first access still construct one index."""
        with patch.object(corpus_module, "CorpusIndex", wraps=CorpusIndex) as spy:
            barrier = threading.Barrier(8)
            seen = []

            def worker():
                barrier.wait()
                seen.append(get_corpus_index())

            threads = [threading.Thread(target=worker) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        assert spy.call_count == 1
        assert len(seen) == 8
        assert all(index is seen[0] for index in seen)
