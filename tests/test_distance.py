"""Tests for Hamming distance."""

import numpy as np
import pytest
from engines.distance import distance, is_similar
from engines.fingerprint import to_signed64
from utils.errors import MissingFingerprintError


def test_identity():
    for value in [0, 1, 0xDEADBEEF, (1 << 64) - 1]:
        assert distance(value, value) == 0


def test_symmetry():
    rng = np.random.default_rng(5)
    for _ in range(50):
        a, b = (int(x) for x in rng.integers(-(1 << 62), 1 << 62, 2, dtype=np.int64))
        assert distance(a, b) == distance(b, a)


def test_bounds():
    assert distance(0, (1 << 64) - 1) == 64
    assert distance(0, 0b1011) == 3


def test_signed_and_unsigned_agree():
    value = 0xF0F0F0F0F0F0F0F0
    assert distance(to_signed64(value), value) == 0
    assert distance(-1, 0) == 64


def test_missing_fingerprint_raises():
    with pytest.raises(MissingFingerprintError):
        distance(None, 0)
    with pytest.raises(MissingFingerprintError):
        distance(0, None)
    with pytest.raises(ValueError):
        is_similar(None, None)


def test_is_similar():
    assert is_similar(0, 0b1111)
    assert not is_similar(0, 0b11111)
    assert is_similar(0, 0b11111, threshold=6)
