"""Per-stage runtime measurement."""

import time
from typing import Dict


class Timer:
    """Simple timer collecting milliseconds per named stage."""

    def __init__(self):
        self.stage_times_ms: Dict[str, float] = {}

    def measure(self, stage: str, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.stage_times_ms[stage] = (time.perf_counter() - start) * 1000.0
        return result
