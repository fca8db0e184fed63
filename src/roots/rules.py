"""Branching rules: how each branch type turns, and how child budgets are drawn.

Every function here consumes draws from the shared generator in a fixed
order. Changing the order, or the number of draws, changes every tree.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

from .geometry import Direction, TurnDirection
from .models import Branch, BranchType
from .settings import GrowthSettings

_TURNS = (TurnDirection.LEFT, TurnDirection.RIGHT)
_LIMB_TYPES = (BranchType.GROWING_WEST, BranchType.GROWING_EAST)


@dataclass(frozen=True)
class TurnPolicy:
    """Turn when the draw is at or under the threshold for the current alignment."""

    is_aligned: Callable[[Direction], bool]
    aligned_threshold: int
    unaligned_threshold: int

    def threshold(self, direction: Direction) -> int:
        return self.aligned_threshold if self.is_aligned(direction) else self.unaligned_threshold


TURN_POLICIES: dict[BranchType, TurnPolicy] = {
    BranchType.GROWING_NORTH: TurnPolicy(lambda d: d.is_moving_north, 2, 7),
    BranchType.GROWING_WEST: TurnPolicy(lambda d: d.is_moving_west, 2, 8),
    BranchType.GROWING_EAST: TurnPolicy(lambda d: d.is_moving_east, 2, 8),
    BranchType.STEM: TurnPolicy(lambda d: d.is_moving_horizontally, 4, 6),
    BranchType.LEAF: TurnPolicy(lambda d: d.is_moving_horizontally, 2, 8),
}


def calc_direction(branch: Branch, rng: random.Random) -> Direction:
    """Draw a possible 45 degree turn for ``branch`` and apply it in place."""

    r = rng.randint(0, 9)
    turn = _TURNS[rng.randint(0, 1)]
    if r <= TURN_POLICIES[branch.branch_type].threshold(branch.direction):
        branch.direction = branch.direction.turn(turn)
    return branch.direction


def draw_leaf_budget(rng: random.Random, row: int, settings: GrowthSettings) -> int:
    """Step budget for a stem or leaf spawned at ``row``; taller rows grow bushier foliage."""

    if row < settings.low_leaf_rows:
        low, high = settings.low_leaf_range
        return rng.randint(low, high)
    return rng.randint(row // 2, row * 5)


def draw_limb_type(rng: random.Random) -> Optional[BranchType]:
    r = rng.randint(0, 10)
    rr = rng.randint(0, 100)
    if r <= 3 and rr % 4 == 0:
        return _LIMB_TYPES[r % 2]
    return None


def draw_limb_length(
    rng: random.Random,
    row: int,
    height: int,
    max_step: int,
    settings: GrowthSettings,
) -> int:
    if row < height // 2:
        low, high = settings.low_limb_range
    else:
        low, high = settings.high_limb_range
    return min(rng.randrange(low, high), max_step)
