"""The planted root: a name, a seed and the clock readings that drive growth."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from .growth import GrowthResult, grow
from .models import Tree
from .settings import DEFAULT_SETTINGS, GrowthSettings

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Max"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_seed() -> int:
    """Sample a fresh seed from the current Unix time in seconds."""

    return int(time.time())


@dataclass
class Root:
    name: str
    seed: int
    planted_time: datetime
    last_watered_time: datetime
    tree: Optional[Tree] = field(default=None, repr=False, compare=False)
    last_growth: Optional[GrowthResult] = field(default=None, repr=False, compare=False)

    @classmethod
    def new(cls, name: str = DEFAULT_NAME, seed: Optional[int] = None, now: Optional[datetime] = None) -> "Root":
        planted = now or utcnow()
        return cls(
            name=name,
            seed=new_seed() if seed is None else seed,
            planted_time=planted,
            last_watered_time=planted,
        )

    def elapsed(self, now: Optional[datetime] = None) -> timedelta:
        # Clocks can step backwards; a root never grows younger than zero.
        return max((now or utcnow()) - self.planted_time, timedelta(0))

    def elapsed_steps(self, now: Optional[datetime] = None, settings: GrowthSettings = DEFAULT_SETTINGS) -> int:
        return self.elapsed(now) // settings.growth_rate

    def randomize_seed(self) -> int:
        self.seed = new_seed()
        return self.seed

    def water(self, now: Optional[datetime] = None) -> None:
        self.last_watered_time = now or utcnow()

    def generate(
        self,
        width: int,
        height: int,
        now: Optional[datetime] = None,
        settings: GrowthSettings = DEFAULT_SETTINGS,
    ) -> Tree:
        """Regrow the tree from scratch for the time elapsed since planting."""

        steps = self.elapsed_steps(now, settings)
        self.tree = Tree(width=width, height=height)
        self.last_growth = grow(self.tree, self.seed, steps, settings)
        logger.info("generated %r (seed %s) at %s elapsed steps", self.name, self.seed, steps)
        return self.tree
