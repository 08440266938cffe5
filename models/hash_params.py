"""Hashing parameters."""

from dataclasses import dataclass
from typing import Literal

from utils.constants import (
    WORKING_SIZE,
    SMALLER_SIZE,
    HASH_BITS,
    INTERPOLATION_MODES,
    TRANSFORM_MODES,
)


@dataclass(frozen=True)
class HashParams:
    """pHash pipeline parameters. Immutable once built."""

    working_size: int = WORKING_SIZE
    smaller_size: int = SMALLER_SIZE
    min_width: int = 0
    interpolation: Literal['nearest', 'area', 'bilinear'] = 'nearest'
    transform: Literal['direct', 'fast'] = 'direct'

    def __post_init__(self):
        if self.working_size < 1:
            raise ValueError(f"Working size must be positive, got {self.working_size}")
        if not (1 <= self.smaller_size <= self.working_size):
            raise ValueError(
                f"Smaller size must be 1-{self.working_size}, got {self.smaller_size}"
            )
        if self.smaller_size * self.smaller_size > HASH_BITS:
            raise ValueError(
                f"Smaller size {self.smaller_size} yields more than {HASH_BITS} bits"
            )
        if self.min_width < 0:
            raise ValueError(f"Min width must be >= 0, got {self.min_width}")
        if self.interpolation not in INTERPOLATION_MODES:
            raise ValueError(f"Unknown interpolation: {self.interpolation}")
        if self.transform not in TRANSFORM_MODES:
            raise ValueError(f"Unknown transform: {self.transform}")
