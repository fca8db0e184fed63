"""Deterministic ASCII tree growth from a seed and elapsed time."""

from .geometry import Direction, Position, TurnDirection, step_position
from .growth import GrowthResult, grow
from .models import Branch, BranchType, CellKind, Tree, TreeCell
from .root import Root, new_seed
from .serialization import growth_to_dict, root_to_dict, tree_to_dict
from .settings import DEFAULT_SETTINGS, GrowthSettings
from .storage import NotPlantedError, RootRecord, RootStore, StorageError

__all__ = [
    "Branch",
    "BranchType",
    "CellKind",
    "DEFAULT_SETTINGS",
    "Direction",
    "GrowthResult",
    "GrowthSettings",
    "NotPlantedError",
    "Position",
    "Root",
    "RootRecord",
    "RootStore",
    "StorageError",
    "Tree",
    "TreeCell",
    "TurnDirection",
    "grow",
    "growth_to_dict",
    "new_seed",
    "root_to_dict",
    "step_position",
    "tree_to_dict",
]
