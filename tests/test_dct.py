"""Tests for the direct and fast DCT."""

import math

import numpy as np
import pytest
from engines.dct_engine import init_coefficients, cosine_table, apply_dct, dct2_fast
from engines.fingerprint import extract_fingerprint


def literal_dct(f, block=None):
    """Four nested loops, straight from the definition."""
    n = f.shape[0]
    block = block or n
    c = [1 / math.sqrt(2.0)] + [1.0] * (n - 1)
    F = np.zeros((block, block))
    for u in range(block):
        for v in range(block):
            total = 0.0
            for i in range(n):
                for j in range(n):
                    total += (math.cos(((2 * i + 1) / (2.0 * n)) * u * math.pi)
                              * math.cos(((2 * j + 1) / (2.0 * n)) * v * math.pi)
                              * f[i, j])
            F[u, v] = total * ((c[u] * c[v]) / 4.0)
    return F


def test_coefficients():
    c = init_coefficients(32)
    assert c.shape == (32,)
    assert c[0] == pytest.approx(1 / math.sqrt(2.0))
    assert np.all(c[1:] == 1.0)


def test_tables_are_read_only():
    with pytest.raises(ValueError):
        init_coefficients(32)[3] = 2.0
    with pytest.raises(ValueError):
        cosine_table(32)[0, 0] = 0.0


def test_matches_definition():
    """Direct DCT equals the textbook double sum."""
    rng = np.random.default_rng(0)
    f = rng.random((8, 8)) * 255
    assert np.allclose(apply_dct(f), literal_dct(f), atol=1e-9)


def test_constant_grid_dct():
    """Constant grid has only a DC coefficient."""
    f = np.full((32, 32), 128.0)
    F = apply_dct(f)
    # c[0]^2 / 4 * 128 * 32 * 32
    assert F[0, 0] == pytest.approx(16384.0)
    assert np.allclose(F[0, 1:], 0, atol=1e-9)
    assert np.allclose(F[1:, :], 0, atol=1e-9)


def test_fast_matches_direct():
    rng = np.random.default_rng(1)
    f = rng.random((32, 32)) * 255
    assert np.allclose(dct2_fast(f), apply_dct(f), rtol=1e-9, atol=1e-8)


def test_energy_scaling():
    """Scaled Parseval: sum(f^2) == sum((F * 8 / N)^2)."""
    rng = np.random.default_rng(2)
    f = rng.random((32, 32)) * 255
    F = apply_dct(f)
    assert np.isclose(np.sum(f ** 2), np.sum((F * 8 / 32) ** 2), rtol=1e-10)


def test_deterministic():
    rng = np.random.default_rng(3)
    f = rng.random((32, 32)) * 255
    assert np.array_equal(apply_dct(f), apply_dct(f.copy()))


def test_non_square_rejected():
    with pytest.raises(ValueError):
        apply_dct(np.zeros((32, 16)))


@pytest.mark.parametrize("value", [255.0, 128.0, 37.0])
def test_flat_grid_low_block_exact(value):
    """Flat grids: non-DC terms are rounding residue, summation order must match exactly."""
    f = np.full((32, 32), value)
    expected = literal_dct(f, block=8)
    F = apply_dct(f)
    assert np.array_equal(F[:8, :8], expected)
    assert extract_fingerprint(F) == extract_fingerprint(expected)


def test_random_grid_low_block_exact():
    rng = np.random.default_rng(11)
    f = rng.random((32, 32)) * 255
    assert np.array_equal(apply_dct(f)[:8, :8], literal_dct(f, block=8))
