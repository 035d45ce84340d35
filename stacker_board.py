
"""Board state machine: active piece, locked stack, upcoming queue, line counter"""
import logging
import threading
from functools import wraps
from typing import Iterable, List, Optional, Tuple

from stacker_coords import Cell, Coords, merge, to_flat, translate
from stacker_piece import COLS, Piece, check_type, is_valid, next_delta, rotate

log = logging.getLogger(__name__)


def _serialized(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class Board:
    """Owns the single active piece and the occupied field.

    Mutations and cell queries share one re-entrant lock, so a gravity tick, a
    keyed command and a redraw never interleave halfway through.
    """

    def __init__(self, occupied: Optional[Coords] = None, next_pieces: Iterable[str] = (),
                 active: Optional[Piece] = None, line_clears: int = 0, held: Optional[str] = None):
        self.active = active
        self.occupied = occupied if occupied is not None else Coords()
        self.next_pieces: List[str] = list(next_pieces)
        self.line_clears = line_clears
        self.held = held  # reserved, never read by the board itself
        self.spawn_blocked = False
        self.version = 0
        self.stack_version = 0  # moves only when the locked cells change
        self._lock = threading.RLock()

    def _touch(self):
        self.version += 1

    def _touch_stack(self):
        self.stack_version += 1
        self._touch()

    # ---------- queue / spawn ----------
    @_serialized
    def fill_bag(self, types: Iterable[str]):
        batch = [check_type(t) for t in types]
        self.next_pieces.extend(batch)
        self._touch()

    @_serialized
    def spawn(self) -> bool:
        if not self.next_pieces:
            return False
        t = self.next_pieces.pop(0)
        self.active = Piece.spawn(t)
        self.spawn_blocked = not is_valid(self.active.coords, self.occupied)
        if self.spawn_blocked:
            log.warning("spawned %s-piece overlaps the stack", t)
        else:
            log.debug("spawned %s-piece", t)
        self._touch()
        return True

    # ---------- movement ----------
    @_serialized
    def try_translate(self, d_col: int, d_row: int) -> bool:
        if self.active is None:
            return False
        cand = translate(self.active.coords, d_col, d_row)
        if not is_valid(cand, self.occupied):
            return False
        self.active.coords = cand
        self._touch()
        return True

    @_serialized
    def try_rotate(self, cw: bool = True) -> bool:
        p = self.active
        if p is None:
            return False
        cand = rotate(p.t, p.coords, p.delta, cw)
        if not is_valid(cand, self.occupied):
            return False
        p.coords = cand
        p.delta = next_delta(p.delta, cw)
        self._touch()
        return True

    def _drop_distance(self) -> int:
        d_row = 0
        while True:
            d_row -= 1
            if not is_valid(translate(self.active.coords, 0, d_row), self.occupied):
                return d_row + 1

    @_serialized
    def hard_drop(self) -> bool:
        if self.active is None:
            return False
        self.active.coords = translate(self.active.coords, 0, self._drop_distance())
        self.lock_active_piece()
        return True

    @_serialized
    def lock_active_piece(self):
        if self.active is None:
            return
        self.occupied = merge(self.occupied, self.active.coords)
        log.debug("locked %s-piece at %s", self.active.t, to_flat(self.active.coords))
        self.active = None
        self._touch_stack()

    @_serialized
    def move_down_or_lock(self) -> bool:
        """Gravity step. True if the piece fell a row, False if it locked."""
        if self.active is None:
            return False
        if self.try_translate(0, -1):
            return True
        self.lock_active_piece()
        return False

    tick = move_down_or_lock

    # ---------- line clears ----------
    @_serialized
    def detect_filled_rows(self) -> List[int]:
        return [r for r in self.occupied.rows if len(self.occupied.by_row[r]) == COLS]

    @_serialized
    def clear_line(self, row: int) -> bool:
        """Remove a filled row and drop everything above it by one. False if `row` is not full."""
        occ = self.occupied
        if len(occ.by_row.get(row, ())) != COLS:
            return False
        rows, by_row = [], {}
        for r in occ.rows:
            if r < row:
                rows.append(r); by_row[r] = occ.by_row[r]
            elif r > row:
                rows.append(r - 1); by_row[r - 1] = occ.by_row[r]
        self.occupied = Coords(rows, by_row)
        self.line_clears += 1
        log.debug("cleared row %d (total %d)", row, self.line_clears)
        self._touch_stack()
        return True

    @_serialized
    def clear_filled_lines(self) -> int:
        cleared = 0
        while True:
            filled = self.detect_filled_rows()
            if not filled:
                return cleared
            self.clear_line(filled[0])
            cleared += 1

    # ---------- queries ----------
    @property
    def active_type(self) -> Optional[str]:
        p = self.active
        return p.t if p else None

    @_serialized
    def active_cells(self) -> List[Cell]:
        return to_flat(self.active.coords) if self.active else []

    @_serialized
    def occupied_cells(self) -> List[Cell]:
        return to_flat(self.occupied)

    @_serialized
    def ghost_cells(self) -> List[Cell]:
        """Where the active piece would come to rest on a hard drop."""
        if self.active is None:
            return []
        return to_flat(translate(self.active.coords, 0, self._drop_distance()))

    @_serialized
    def snapshot(self) -> Tuple[Optional[str], List[Cell], List[Cell]]:
        """Active type, active cells and occupied cells read in one step."""
        return self.active_type, self.active_cells(), self.occupied_cells()
