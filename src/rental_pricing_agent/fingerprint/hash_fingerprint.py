"""
Fingerprint Module - Single Responsibility: Turn text into fixed-length vectors.

It has ONE job: map a string to a deterministic vector of length
FINGERPRINT_LENGTH with every element in [0, 1].

HOW IT WORKS:
-------------
1. SHA-256 over the UTF-8 bytes of the text
2. Take the hex digest (64 characters)
3. Map each character to ord(c) / 255
4. Zero-pad up to FINGERPRINT_LENGTH

This is a content-hash projection, NOT a semantic embedding. Two texts that
differ by one character produce unrelated vectors. Retrieval scores built on
top of it are pinned by tests, so swapping in a learned embedding model is a
breaking change to the published scores.
"""

from __future__ import annotations

import hashlib

import numpy as np

FINGERPRINT_LENGTH = 128


def fingerprint(text: str, length: int = FINGERPRINT_LENGTH) -> np.ndarray:
    """
    Compute the fingerprint of a text.

    Args:
        text: Any string, including the empty string
        length: Vector length (padding/truncation is applied to the digest)

    Returns:
        float64 array of shape (length,), values in [0, 1]
    """
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    usable = digest[:length]

    vector = np.zeros(length, dtype=np.float64)
    if usable:
        codes = np.frombuffer(usable.encode("ascii"), dtype=np.uint8)
        vector[: len(codes)] = codes / 255.0
    return vector


class HashFingerprinter:
    """
    FingerprintProvider backed by fingerprint().

    Stateless; safe to share across threads.
    """

    def __init__(self, dimensions: int = FINGERPRINT_LENGTH):
        if dimensions <= 0:
            raise ValueError(f"dimensions must be positive, got {dimensions}")
        self._dimensions = dimensions

    @property
    def dimensions(self) -> int:
        return self._dimensions

    def embed(self, text: str) -> np.ndarray:
        """Generate the fingerprint for a single text."""
        return fingerprint(text, self._dimensions)

    def embed_batch(self, texts: list[str]) -> list[np.ndarray]:
        return [self.embed(text) for text in texts]


def get_fingerprint_provider(dimensions: int = FINGERPRINT_LENGTH) -> HashFingerprinter:
    """
    Factory function to get the fingerprint provider.

    Only the hash projection exists today; the factory keeps callers
    independent of the concrete class.
    """
    return HashFingerprinter(dimensions=dimensions)
