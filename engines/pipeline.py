"""Fingerprint pipeline: decode, preprocess, DCT, extract."""

import logging
from dataclasses import replace
from typing import Optional, Tuple

import numpy as np

from models.hash_params import HashParams
from models.hash_result import HashResult
from models.intermediate_data import IntermediateData
from engines.preprocess import preprocess
from engines.dct_engine import init_coefficients, cosine_table, apply_dct, dct2_fast
from engines.fingerprint import extract_fingerprint, low_frequency_block, to_signed64, to_hex
from utils.errors import DecodeError
from utils.image_io import ImageSource, load_image, describe_source
from utils.metrics import Timer

logger = logging.getLogger(__name__)


class PHashCalculator:
    """
    pHash-like 64-bit image hash.

    Built once, called many times. The coefficient and cosine tables are
    read-only after construction and every call allocates its own grids,
    so one instance can serve several threads at once.
    """

    def __init__(self, params: Optional[HashParams] = None):
        self.params = params or HashParams()
        self.coefficients = init_coefficients(self.params.working_size)
        self.cosines = cosine_table(self.params.working_size)

    def transform(self, working: np.ndarray) -> np.ndarray:
        if self.params.transform == 'fast':
            return dct2_fast(working)
        return apply_dct(working, self.coefficients, self.cosines)

    def hash_pixels(
        self,
        pixels: np.ndarray,
        min_width: Optional[int] = None
    ) -> Tuple[HashResult, IntermediateData]:
        """Run the pipeline on an already decoded pixel grid."""
        params = self.params
        if min_width is None:
            min_width = params.min_width
        timer = Timer()

        # 1. Reduce size and color
        working = timer.measure(
            'preprocess', preprocess, pixels,
            params.working_size, min_width, params.interpolation
        )

        # 2. DCT over the whole working grid
        freq = timer.measure('transform', self.transform, working)

        # 3. Keep the low frequencies, threshold against their mean
        fingerprint, avg = timer.measure(
            'extract', extract_fingerprint, freq, params.smaller_size
        )

        result = HashResult(
            fingerprint=fingerprint,
            signed_value=to_signed64(fingerprint),
            hex_digest=to_hex(fingerprint),
            average=float(avg),
            source_shape=tuple(np.shape(pixels)),
            stage_times_ms=dict(timer.stage_times_ms),
        )
        intermediate = IntermediateData(
            working_grid=working,
            frequency_grid=freq,
            low_frequency_block=low_frequency_block(freq, params.smaller_size),
            average=float(avg),
        )
        return result, intermediate

    def calculate_hash_result(self, source: ImageSource, min_width: Optional[int] = None) -> Optional[HashResult]:
        """Hash an image file or stream; None if it cannot be decoded."""
        timer = Timer()
        try:
            pixels = timer.measure('decode', load_image, source)
        except DecodeError as e:
            logger.error("Hash calculation failed for %s: %s", e.source, e.reason)
            return None

        result, _ = self.hash_pixels(pixels, min_width)
        result = replace(
            result, stage_times_ms={**timer.stage_times_ms, **result.stage_times_ms}
        )
        logger.debug(
            "Hash calculated for %s: %s (%.2f ms)",
            describe_source(source), result.hex_digest, result.total_time_ms
        )
        return result

    def calculate_hash(self, source: ImageSource, min_width: Optional[int] = None) -> Optional[int]:
        """Fingerprint of an image file or stream, or None if undecodable."""
        result = self.calculate_hash_result(source, min_width)
        return result.fingerprint if result is not None else None


_default_calculator = None


def get_calculator() -> PHashCalculator:
    """Shared calculator with default parameters."""
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = PHashCalculator()
    return _default_calculator


def calculate_hash(source: ImageSource) -> Optional[int]:
    return get_calculator().calculate_hash(source)
