"""Intermediate data for inspection."""

from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass
class IntermediateData:
    """Intermediate grids produced on the way to a fingerprint."""

    working_grid: Optional[np.ndarray] = None
    frequency_grid: Optional[np.ndarray] = None
    low_frequency_block: Optional[np.ndarray] = None
    average: Optional[float] = None
