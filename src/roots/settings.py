"""Tuning constants for the growth engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class GrowthSettings:
    # Hard ceiling on simulated steps per pass; caps the tree's age.
    max_steps: int = 60
    # Ceiling on lateral limbs spawned from the trunk in one pass.
    max_branches: int = 100
    # The trunk turns into a stem once it climbs above ``height - stem_margin``.
    stem_margin: int = 5
    # Below this row leaf budgets come from ``low_leaf_range``; above it they scale with height.
    low_leaf_rows: int = 10
    low_leaf_range: tuple[int, int] = (1, 2)
    # Limb lengths are drawn from half-open ranges: long near the ground, short higher up.
    low_limb_range: tuple[int, int] = (50, 100)
    high_limb_range: tuple[int, int] = (10, 25)
    # Wall-clock time per simulated step.
    growth_rate: timedelta = timedelta(hours=1)

    def __post_init__(self) -> None:
        if self.max_steps < 0:
            raise ValueError("max_steps must be non-negative")
        if self.max_branches < 0:
            raise ValueError("max_branches must be non-negative")
        if self.growth_rate <= timedelta(0):
            raise ValueError("growth_rate must be positive")


DEFAULT_SETTINGS = GrowthSettings()
