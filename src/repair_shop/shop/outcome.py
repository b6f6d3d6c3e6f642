from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

import numpy as np

from .vehicle import VehicleStatus

DRAW_RANGE = 100      # uniform integer draw in [0, DRAW_RANGE)
FIX_THRESHOLD = 75    # draw < FIX_THRESHOLD -> Fixed  (p = 0.75)


class OutcomeResolver(Protocol):
    def resolve(self) -> VehicleStatus:
        ...


@dataclass
class RandomOutcomeResolver:
    """
    Verdict of one repair attempt.

        draw ~ U{0, ..., 99}
        Fixed      if draw < 75
        CannotFix  otherwise

    The generator is injectable so runs can be replayed from a seed.
    """
    rng: Optional[np.random.Generator] = None
    seed: Optional[int] = None
    _rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.rng is not None and self.seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self._rng = self.rng if self.rng is not None else np.random.default_rng(self.seed)

    def draw(self) -> int:
        return int(self._rng.integers(0, DRAW_RANGE))

    def resolve(self) -> VehicleStatus:
        if self.draw() < FIX_THRESHOLD:
            return VehicleStatus.FIXED
        return VehicleStatus.CANNOT_FIX


@dataclass(frozen=True)
class FixedOutcomeResolver:
    """Always returns the same verdict."""
    verdict: VehicleStatus

    def __post_init__(self) -> None:
        if not isinstance(self.verdict, VehicleStatus) or not self.verdict.is_terminal:
            raise ValueError(f"verdict must be Fixed or CannotFix, got {self.verdict!r}")

    def resolve(self) -> VehicleStatus:
        return self.verdict
