"""
Core module - shared protocols and types for the entire system.

USAGE:
------
from rental_pricing_agent.core import DocumentRetriever, ScoredResult

class MyRetriever:
    '''Implements DocumentRetriever protocol.'''
    ...
"""

from rental_pricing_agent.core.protocols import (
    # Protocols
    FingerprintProvider,
    DocumentRetriever,
    # Data classes
    ScoredResult,
    AgentResult,
    AgentError,
)

__all__ = [
    # Protocols
    "FingerprintProvider",
    "DocumentRetriever",
    # Data classes
    "ScoredResult",
    "AgentResult",
    "AgentError",
]
