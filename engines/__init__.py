"""Hashing engines - pure computation, no I/O besides decoding."""

from .preprocess import to_rgb, upscale, smooth, resize_to_working, grayscale, blue_channel, preprocess
from .dct_engine import init_coefficients, cosine_table, apply_dct, dct2_fast
from .fingerprint import (
    low_frequency_block,
    dc_excluded_mean,
    pack_bits,
    extract_fingerprint,
    to_signed64,
    to_unsigned64,
    to_hex,
)
from .distance import distance, is_similar
from .pipeline import PHashCalculator, calculate_hash, get_calculator

__all__ = [
    'to_rgb',
    'upscale',
    'smooth',
    'resize_to_working',
    'grayscale',
    'blue_channel',
    'preprocess',
    'init_coefficients',
    'cosine_table',
    'apply_dct',
    'dct2_fast',
    'low_frequency_block',
    'dc_excluded_mean',
    'pack_bits',
    'extract_fingerprint',
    'to_signed64',
    'to_unsigned64',
    'to_hex',
    'distance',
    'is_similar',
    'PHashCalculator',
    'calculate_hash',
    'get_calculator',
]
