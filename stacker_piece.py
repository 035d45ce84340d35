
"""Piece model, spawn shapes, rotation about pivots"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

from stacker_coords import Coords, from_flat

COLS, VISIBLE_ROWS = 10, 20
SPAWN_ROW = 20  # bottom row of the two-row spawn band

PIECE_TYPES = ("I", "O", "T", "L", "J", "S", "Z")

# (row offset above SPAWN_ROW, col)
SPAWN_SHAPES: Dict[str, List[Tuple[int, int]]] = {
    "I": [(1, 3), (1, 4), (1, 5), (1, 6)],
    "O": [(0, 4), (0, 5), (1, 4), (1, 5)],
    "T": [(0, 3), (0, 4), (0, 5), (1, 4)],
    "L": [(0, 3), (0, 4), (0, 5), (1, 5)],
    "J": [(0, 3), (0, 4), (0, 5), (1, 3)],
    "S": [(0, 3), (0, 4), (1, 4), (1, 5)],
    "Z": [(0, 4), (0, 5), (1, 3), (1, 4)],
}


class UnknownPieceType(ValueError):
    """Raised for a piece tag outside I, O, T, L, J, S, Z."""


def check_type(t: str) -> str:
    if t not in SPAWN_SHAPES:
        raise UnknownPieceType(f"unknown piece type {t!r}")
    return t


@dataclass
class Piece:
    t: str
    coords: Coords
    delta: int = 0  # rotation state 0..3

    @staticmethod
    def spawn(t: str) -> "Piece":
        check_type(t)
        return Piece(t, from_flat((SPAWN_ROW + dr, c) for dr, c in SPAWN_SHAPES[t]), 0)


def next_delta(delta: int, cw: bool) -> int:
    return (delta + (1 if cw else -1)) % 4


# rotation

def _first_repeat(cols: List[int], gap: int) -> int:
    """First value in sorted `cols` that repeats `gap` places later."""
    for i in range(len(cols) - gap):
        if cols[i] == cols[i + gap]:
            return cols[i]
    raise ValueError(f"no repeated column in {cols}")


def find_pivot(t: str, coords: Coords, delta: int) -> Tuple[int, int]:
    """Return the (row, col) cell that T, L, J, S and Z pieces rotate about."""
    rows = coords.rows
    cols = coords.all_cols()
    horizontal = delta % 2 == 0
    if t in ("T", "L", "J"):
        if horizontal:
            row = next(r for r in rows if len(coords.by_row[r]) == 3)
            return row, coords.by_row[row][1]
        return rows[1], _first_repeat(cols, 2)
    if t in ("S", "Z"):
        if horizontal:
            return rows[0 if delta == 0 else 1], _first_repeat(cols, 1)
        row = next(r for r in rows if len(coords.by_row[r]) == 2)
        return row, coords.by_row[row][0 if delta == 1 else 1]
    check_type(t)
    raise ValueError(f"{t}-piece has no pivot cell")


def _rotate_i(coords: Coords, delta: int, cw: bool) -> Coords:
    if delta % 2 == 0:
        row = coords.rows[0]
        cols = sorted(coords.by_row[row])
        pick = 2 if (delta == 0 and cw) or (delta == 2 and not cw) else 1
        col = cols[pick]
        last = row - 2 if delta == 0 else row + 2
        return from_flat((r, col) for r in (row + 1, row, row - 1, last))
    col = coords.all_cols()[0]
    rows = sorted(coords.rows)
    pick = 1 if (delta == 1 and cw) or (delta == 3 and not cw) else 2
    row = rows[pick]
    last = col - 2 if delta == 1 else col + 2
    return from_flat((row, c) for c in (col - 1, col, col + 1, last))


def rotate(t: str, coords: Coords, delta: int, cw: bool = True) -> Coords:
    """Return the coordinates of the piece after one quarter turn.

    O never moves, I follows a fixed four-state table because its true centre lies
    between cells, and the rest turn 90 degrees about the cell from find_pivot().
    """
    check_type(t)
    if t == "O":
        return coords.copy()
    if t == "I":
        return _rotate_i(coords, delta, cw)
    prow, pcol = find_pivot(t, coords, delta)
    out = []
    for r in coords.rows:
        for c in coords.by_row[r]:
            dc, dr = c - pcol, r - prow
            dc, dr = (dr, -dc) if cw else (-dr, dc)
            out.append((prow + dr, pcol + dc))
    return from_flat(out)


def is_valid(coords: Coords, occupied: Coords) -> bool:
    """Cells must sit above the floor row, inside the walls and off the stack."""
    for r in coords.rows:
        if r <= 0:
            return False
        taken = occupied.by_row.get(r, ())
        for c in coords.by_row[r]:
            if c < 0 or c >= COLS or c in taken:
                return False
    return True
