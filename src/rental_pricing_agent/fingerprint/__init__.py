"""
Fingerprint module - deterministic text-to-vector projection.

1. Protocol (FingerprintProvider, in core.protocols) defines the interface
2. Implementation (HashFingerprinter) wraps the pure fingerprint() function
3. Factory function (get_fingerprint_provider)
"""

from rental_pricing_agent.fingerprint.hash_fingerprint import (
    FINGERPRINT_LENGTH,
    HashFingerprinter,
    fingerprint,
    get_fingerprint_provider,
)

__all__ = [
    "FINGERPRINT_LENGTH",
    "HashFingerprinter",
    "fingerprint",
    "get_fingerprint_provider",
]
