"""Low-frequency thresholding and bit packing."""

from typing import Tuple

import numpy as np

from utils.constants import SMALLER_SIZE, HASH_BITS, HASH_MASK

_SIGN_BIT = 1 << (HASH_BITS - 1)


def low_frequency_block(freq: np.ndarray, smaller_size: int = SMALLER_SIZE) -> np.ndarray:
    """Top-left smaller_size x smaller_size coefficients."""
    return freq[:smaller_size, :smaller_size]


def dc_excluded_mean(block: np.ndarray) -> float:
    """Mean of the block without the DC term at (0, 0)."""
    n = block.shape[0]
    total = 0.0
    for x in range(n):
        for y in range(n):
            total += block[x, y]
    total -= block[0, 0]
    return total / float(n * n - 1)


def pack_bits(block: np.ndarray, avg: float) -> int:
    """Row-major scan, one bit per cell, first cell most significant."""
    bits = 0
    n = block.shape[0]
    for x in range(n):
        for y in range(n):
            bits = (bits << 1) | (1 if block[x, y] > avg else 0)
    return bits


def extract_fingerprint(freq: np.ndarray, smaller_size: int = SMALLER_SIZE) -> Tuple[int, float]:
    """Return (fingerprint, threshold) for a frequency grid."""
    block = low_frequency_block(freq, smaller_size)
    avg = dc_excluded_mean(block)
    return pack_bits(block, avg), avg


def to_signed64(value: int) -> int:
    """Two's-complement signed view of a 64-bit value."""
    value &= HASH_MASK
    return value - (1 << HASH_BITS) if value & _SIGN_BIT else value


def to_unsigned64(value: int) -> int:
    return value & HASH_MASK


def to_hex(value: int) -> str:
    return f"{to_unsigned64(value):016x}"
