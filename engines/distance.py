"""Hamming distance between fingerprints."""

from typing import Optional

from utils.constants import HASH_MASK, SIMILARITY_THRESHOLD
from utils.errors import MissingFingerprintError


def distance(a: Optional[int], b: Optional[int]) -> int:
    """Number of differing bits among the 64; signed or unsigned input."""
    if a is None or b is None:
        raise MissingFingerprintError("Cannot compare an absent fingerprint")
    return ((a ^ b) & HASH_MASK).bit_count()


def is_similar(a: Optional[int], b: Optional[int], threshold: int = SIMILARITY_THRESHOLD) -> bool:
    return distance(a, b) < threshold
