"""
Document model for the retrieval system.

Single responsibility: Define the structure of reference documents
held by the corpus index.
"""

from dataclasses import dataclass


# Fixed category label set for the reference corpus.
CATEGORIES = (
    "Market Analysis",
    "Pricing Strategy",
    "Launch Readiness",
    "Risk Assessment",
    "Technology",
)


@dataclass(frozen=True)
class Document:
    """
    A reference document in the knowledge base.

    Created once from static seed data and never mutated. Fingerprints
    are owned by the CorpusIndex, not stored on the document.
    """
    id: str
    title: str
    category: str
    content: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "content": self.content,
        }
