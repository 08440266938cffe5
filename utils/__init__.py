"""Shared utilities."""

from .constants import WORKING_SIZE, SMALLER_SIZE, SMOOTHING_KERNEL, SIMILARITY_THRESHOLD
from .errors import PHashError, DecodeError, PreconditionError, MissingFingerprintError
from .metrics import Timer
from .image_io import load_image, save_image
from .logging_config import configure_logging

__all__ = [
    'WORKING_SIZE',
    'SMALLER_SIZE',
    'SMOOTHING_KERNEL',
    'SIMILARITY_THRESHOLD',
    'PHashError',
    'DecodeError',
    'PreconditionError',
    'MissingFingerprintError',
    'Timer',
    'load_image',
    'save_image',
    'configure_logging',
]
