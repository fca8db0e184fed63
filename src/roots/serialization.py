"""Serialization helpers for API clients."""

from __future__ import annotations

from .growth import GrowthResult
from .models import Tree
from .root import Root


def tree_to_dict(tree: Tree) -> dict[str, object]:
    """Row-major grid, row 0 (the ground) first."""

    return {
        "width": tree.width,
        "height": tree.height,
        "rows": [[{"glyph": cell.glyph, "kind": cell.kind.value} for cell in row] for row in tree.cells],
        "text": [tree.row_text(y) for y in range(tree.height)],
    }


def growth_to_dict(result: GrowthResult) -> dict[str, object]:
    return {
        "steps": result.steps,
        "limbs": result.limbs,
        "branches": result.branches,
    }


def root_to_dict(root: Root) -> dict[str, object]:
    return {
        "name": root.name,
        "seed": root.seed,
        "planted_time": root.planted_time.isoformat(),
        "last_watered_time": root.last_watered_time.isoformat(),
    }
