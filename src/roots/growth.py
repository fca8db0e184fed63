"""Deterministic recursive growth of a tree into a grid."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .geometry import Direction, step_position
from .models import Branch, BranchType, Tree
from .rules import calc_direction, draw_leaf_budget, draw_limb_length, draw_limb_type
from .settings import DEFAULT_SETTINGS, GrowthSettings

logger = logging.getLogger(__name__)

LEAF_THRESHOLD = 0.90
STEM_THRESHOLD = 0.85


@dataclass(frozen=True)
class GrowthResult:
    steps: int
    limbs: int
    branches: int


class _GrowthPass:
    """State shared by every branch walked during a single pass."""

    def __init__(self, tree: Tree, rng: random.Random, settings: GrowthSettings) -> None:
        self.tree = tree
        self.rng = rng
        self.settings = settings
        self.limbs = 0
        self.branches = 0

    def grow_rec(self, max_step: int, branch: Branch) -> None:
        tree = self.tree
        rng = self.rng
        settings = self.settings
        self.branches += 1

        step = 0
        while step <= max_step:
            tree[branch.position] = branch.to_tree_cell()

            pct_done = step / max_step if max_step else 0.0
            row = branch.position.y
            leaf_count = draw_leaf_budget(rng, row, settings)
            branch_type = branch.branch_type

            if branch_type is BranchType.GROWING_NORTH and row > tree.height - settings.stem_margin:
                branch.branch_type = BranchType.STEM
                self.grow_rec(leaf_count, branch.spawn(BranchType.STEM))
            elif branch_type.is_growing and pct_done > LEAF_THRESHOLD:
                self.grow_rec(leaf_count, branch.spawn(BranchType.LEAF))
            elif branch_type.is_growing and pct_done > STEM_THRESHOLD:
                self.grow_rec(leaf_count, branch.spawn(BranchType.STEM))
            elif branch_type is BranchType.GROWING_NORTH and self.limbs < settings.max_branches:
                limb_type = draw_limb_type(rng)
                if limb_type is not None:
                    self.limbs += 1
                    length = draw_limb_length(rng, row, tree.height, max_step, settings)
                    self.grow_rec(length, branch.spawn(limb_type))

            step += 1

            # A move that would leave the grid keeps the branch in place for this step.
            calc_direction(branch, rng)
            moved = step_position(branch.position, branch.direction, tree.width, tree.height)
            if moved is not None:
                branch.position = moved


def grow(tree: Tree, seed: int, steps: int, settings: GrowthSettings = DEFAULT_SETTINGS) -> GrowthResult:
    """Grow a trunk from the centre of the ground row for ``min(steps, max_steps)`` steps.

    The generator is seeded once from ``seed`` and shared by every branch, so the
    result depends only on ``seed``, the capped step count, and the grid size.
    """

    step_limit = min(max(steps, 0), settings.max_steps)
    growth_pass = _GrowthPass(tree, random.Random(seed), settings)
    trunk = Branch(position=tree.trunk_base, direction=Direction.NORTH, branch_type=BranchType.GROWING_NORTH)
    growth_pass.grow_rec(step_limit, trunk)

    result = GrowthResult(steps=step_limit, limbs=growth_pass.limbs, branches=growth_pass.branches)
    logger.debug(
        "grew seed=%s steps=%s/%s on %sx%s: %s limbs, %s branches",
        seed,
        step_limit,
        steps,
        tree.width,
        tree.height,
        result.limbs,
        result.branches,
    )
    return result
