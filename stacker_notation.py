
"""Compact board notation for fixtures and debugging.

A position is written as six space-separated fields, in the spirit of chess FEN:

  1) The board: 21 rows, top (row 21) first, separated by "/".
     "X" is an empty row; inside a row "A" is an active-piece cell, "O" an
     occupied cell and a digit 0-9 skips that many empty cells. Each row covers
     exactly 10 cells.
  2) Active piece type, or "-".
  3) Rotation delta of the active piece, 0-3.
  4) Held piece type, or "-".
  5) Lines cleared so far.
  6) Upcoming piece types in order, or "-".

Example, an I-piece waiting at the top of a bare field:

  3AAAA3/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X I 0 - 0 OTSLJZ
"""
import re

from stacker_coords import from_flat
from stacker_piece import COLS, Piece
from stacker_board import Board

TOP_ROW = 21

NOTATION_RE = re.compile(
    r"^(?P<board>(?:[0-9OAX]{1,10}/){20}[0-9OAX]{1,10}) (?P<atype>[IOTLJSZ-]) (?P<delta>[0-3]) "
    r"(?P<htype>[IOTLJSZ-]) (?P<lines>\d+) (?P<next>-|[IOTLJSZ]+)$"
)


class NotationError(ValueError):
    """Raised when a notation string does not describe a board."""


def _parse_row(text: str, row: int, active: list, occupied: list):
    if text == "X":
        return
    col = 0
    for ch in text:
        if ch == "X":
            raise NotationError(f"row {row}: X must stand alone")
        if ch.isdigit():
            col += int(ch)
            continue
        if col >= COLS:
            raise NotationError(f"row {row}: more than {COLS} cells")
        (active if ch == "A" else occupied).append((row, col))
        col += 1
    if col != COLS:
        raise NotationError(f"row {row}: covers {col} cells, expected {COLS}")


def parse_notation(text: str) -> Board:
    m = NOTATION_RE.match(text.strip())
    if not m:
        raise NotationError(f"malformed notation: {text!r}")
    active, occupied = [], []
    for i, row_text in enumerate(m["board"].split("/")):
        _parse_row(row_text, TOP_ROW - i, active, occupied)

    atype = m["atype"]
    if atype == "-":
        if active:
            raise NotationError("active cells given without an active piece type")
        piece = None
    else:
        if not active:
            raise NotationError(f"{atype}-piece has no active cells")
        piece = Piece(atype, from_flat(active), int(m["delta"]))

    return Board(
        occupied=from_flat(occupied),
        next_pieces=[] if m["next"] == "-" else list(m["next"]),
        active=piece,
        line_clears=int(m["lines"]),
        held=None if m["htype"] == "-" else m["htype"],
    )


def _format_row(row: int, active: set, occupied: set) -> str:
    out, gap = [], 0
    for col in range(COLS):
        cell = (row, col)
        mark = "A" if cell in active else "O" if cell in occupied else None
        if mark is None:
            gap += 1
            continue
        if gap:
            out.append(str(gap)); gap = 0
        out.append(mark)
    if gap == COLS:
        return "X"
    if gap:
        out.append(str(gap))
    return "".join(out)


def format_notation(board: Board) -> str:
    """Inverse of parse_notation. Raises NotationError for cells outside rows 1-21."""
    active, occupied = set(board.active_cells()), set(board.occupied_cells())
    stray = sorted(r for r, _ in active | occupied if not 1 <= r <= TOP_ROW)
    if stray:
        raise NotationError(f"rows {stray} lie outside the 1-{TOP_ROW} notation window")
    rows = "/".join(_format_row(r, active, occupied) for r in range(TOP_ROW, 0, -1))
    p = board.active
    return " ".join([
        rows,
        p.t if p else "-",
        str(p.delta if p else 0),
        board.held or "-",
        str(board.line_clears),
        "".join(board.next_pieces) or "-",
    ])
