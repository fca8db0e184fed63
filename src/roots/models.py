"""Core structural primitives: branch walkers, cells, and the tree grid."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable

from .geometry import Direction, Position


class BranchType(str, Enum):
    GROWING_NORTH = "GrowingNorth"
    GROWING_WEST = "GrowingWest"
    GROWING_EAST = "GrowingEast"
    STEM = "Stem"
    LEAF = "Leaf"

    @property
    def is_growing(self) -> bool:
        return self in {BranchType.GROWING_NORTH, BranchType.GROWING_WEST, BranchType.GROWING_EAST}


class CellKind(str, Enum):
    """Semantic category of a cell; colours are applied at render time."""

    BLANK = "blank"
    TRUNK = "trunk"
    LIMB = "limb"
    STEM = "stem"
    LEAF = "leaf"


@dataclass(frozen=True)
class TreeCell:
    glyph: str
    kind: CellKind

    @property
    def is_blank(self) -> bool:
        return self.kind == CellKind.BLANK


BLANK_CELL = TreeCell(glyph=" ", kind=CellKind.BLANK)


@dataclass
class Branch:
    """A single walker tracing a path through the grid during one growth pass."""

    position: Position
    direction: Direction
    branch_type: BranchType

    def spawn(self, branch_type: BranchType) -> "Branch":
        return replace(self, branch_type=branch_type)

    def to_tree_cell(self) -> TreeCell:
        kind = _CELL_KINDS[self.branch_type]
        glyphs = _GLYPHS.get(self.branch_type)
        if glyphs is None:
            return TreeCell(glyph=_SINGLE_GLYPHS[self.branch_type], kind=kind)
        return TreeCell(glyph=glyphs[self.direction], kind=kind)


_CELL_KINDS: dict[BranchType, CellKind] = {
    BranchType.GROWING_NORTH: CellKind.TRUNK,
    BranchType.GROWING_WEST: CellKind.LIMB,
    BranchType.GROWING_EAST: CellKind.LIMB,
    BranchType.STEM: CellKind.STEM,
    BranchType.LEAF: CellKind.LEAF,
}

_SINGLE_GLYPHS: dict[BranchType, str] = {
    BranchType.STEM: "&",
    BranchType.LEAF: "*",
}

# Bark strokes lean with the direction of travel; limbs differ only on their favoured side.
_GLYPHS: dict[BranchType, dict[Direction, str]] = {
    BranchType.GROWING_NORTH: {
        Direction.NORTH: "/|\\",
        Direction.NORTH_EAST: "|/",
        Direction.EAST: "/~",
        Direction.SOUTH_EAST: "|\\",
        Direction.SOUTH: "\\|/",
        Direction.SOUTH_WEST: "//|",
        Direction.WEST: "~/",
        Direction.NORTH_WEST: "\\|",
    },
    BranchType.GROWING_WEST: {
        Direction.NORTH: "/|",
        Direction.NORTH_EAST: "|/",
        Direction.EAST: "~",
        Direction.SOUTH_EAST: "\\\\",
        Direction.SOUTH: "|\\",
        Direction.SOUTH_WEST: "//",
        Direction.WEST: "=",
        Direction.NORTH_WEST: "\\\\",
    },
    BranchType.GROWING_EAST: {
        Direction.NORTH: "|\\",
        Direction.NORTH_EAST: "|/",
        Direction.EAST: "=",
        Direction.SOUTH_EAST: "\\\\",
        Direction.SOUTH: "|\\",
        Direction.SOUTH_WEST: "//",
        Direction.WEST: "~",
        Direction.NORTH_WEST: "\\\\",
    },
}


@dataclass
class Tree:
    """Fixed-size grid of cells, ``height`` rows by ``width`` columns, row 0 at ground level."""

    width: int
    height: int
    cells: list[list[TreeCell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"tree grid must be at least 1x1, got {self.width}x{self.height}")
        if not self.cells:
            self.cells = [[BLANK_CELL] * self.width for _ in range(self.height)]

    def _check(self, position: Position) -> None:
        if not position.in_bounds(self.width, self.height):
            raise IndexError(f"{position} is outside the {self.width}x{self.height} grid")

    def __getitem__(self, position: Position) -> TreeCell:
        self._check(position)
        return self.cells[position.y][position.x]

    def __setitem__(self, position: Position, cell: TreeCell) -> None:
        self._check(position)
        self.cells[position.y][position.x] = cell

    def iter_filled(self) -> Iterable[tuple[Position, TreeCell]]:
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if not cell.is_blank:
                    yield Position(x, y), cell

    def row_text(self, y: int) -> str:
        return "".join(cell.glyph for cell in self.cells[y])

    @property
    def trunk_base(self) -> Position:
        return Position(self.width // 2, 0)
