"""Hash result with timings."""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class HashResult:
    """Outcome of one fingerprint computation."""

    fingerprint: int
    signed_value: int
    hex_digest: str
    average: float

    source_shape: Tuple[int, ...] = ()

    # Runtime per stage
    stage_times_ms: Dict[str, float] = field(default_factory=dict)

    @property
    def total_time_ms(self) -> float:
        return sum(self.stage_times_ms.values())
