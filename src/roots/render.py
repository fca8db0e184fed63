"""Turn a grown tree into terminal lines."""

from __future__ import annotations

from typing import Union

import click

from .models import CellKind, Tree

Colour = Union[str, tuple[int, int, int]]

CELL_COLOURS: dict[CellKind, Colour] = {
    CellKind.TRUNK: (150, 75, 0),
    CellKind.LIMB: (150, 96, 77),
    CellKind.STEM: "green",
    CellKind.LEAF: "bright_green",
}

GROUND_GLYPH = "~"


def _paint(text: str, fg: Colour, colour: bool) -> str:
    return click.style(text, fg=fg) if colour else text


def render_rows(tree: Tree, colour: bool = True) -> list[str]:
    """Rows top first, so the ground row prints last."""

    lines = []
    for row in reversed(tree.cells):
        parts = []
        for cell in row:
            fg = CELL_COLOURS.get(cell.kind)
            parts.append(cell.glyph if fg is None else _paint(cell.glyph, fg, colour))
        lines.append("".join(parts))
    return lines


def render_caption(width: int, name: str, seed: int, colour: bool = True) -> list[str]:
    title = f'"{name}"'
    seed_text = str(seed)
    lines = []
    for plain, styled in (
        (title, '"' + _paint(name, "cyan", colour) + '"'),
        (f"Seed: {seed_text}", "Seed: " + _paint(seed_text, "red", colour)),
    ):
        pad = max((width - len(plain)) // 2, 0)
        lines.append(" " * pad + styled)
    return lines


def render_tree(tree: Tree, name: str, seed: int, colour: bool = True) -> str:
    lines = render_rows(tree, colour)
    lines.append(_paint(GROUND_GLYPH * tree.width, "bright_green", colour))
    lines.extend(render_caption(tree.width, name, seed, colour))
    return "\n".join(lines)
