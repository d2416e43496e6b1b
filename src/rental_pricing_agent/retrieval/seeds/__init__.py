"""
Seed data for the retrieval system.

This package contains the compiled-in knowledge base content,
kept apart from the index and retriever code.
"""

from rental_pricing_agent.retrieval.seeds.rental_pricing_knowledge import (
    get_rental_pricing_documents,
)

__all__ = ["get_rental_pricing_documents"]
