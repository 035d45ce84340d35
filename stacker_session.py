
"""Game session: frame-driven gravity, refills, spawning and line clears around a Board"""
import logging
from typing import Optional

from stacker_board import Board
from stacker_config import CONFIG
from stacker_rng import BagRandomizer

log = logging.getLogger(__name__)

COMMANDS = ("left", "right", "down", "rotate_cw", "rotate_ccw", "hard_drop")


class Session:
    def __init__(self, rng: Optional[BagRandomizer] = None, board: Optional[Board] = None):
        self.rng = rng or BagRandomizer()
        self.board = board or Board()
        self.frame_no = 0
        self.game_over = False

    def restart(self):
        self.board = Board()
        self.frame_no = 0
        self.game_over = False
        log.info("session restarted")

    def _refill(self):
        while len(self.board.next_pieces) < CONFIG["NEXT_PREVIEW"]:
            self.board.fill_bag(self.rng.next_bag())

    def ensure_active(self):
        """Spawn the next piece if none is in play."""
        if self.game_over or self.board.active is not None:
            return
        self._refill()
        self.board.spawn()
        self._refill()
        if self.board.spawn_blocked:
            self.game_over = True
            log.info("game over after %d lines", self.board.line_clears)

    def _after_lock(self):
        cleared = self.board.clear_filled_lines()
        if cleared:
            log.debug("%d line(s) cleared", cleared)
        self.ensure_active()

    def gravity(self):
        self.ensure_active()
        if self.game_over:
            return
        if not self.board.move_down_or_lock():
            self._after_lock()

    def frame(self):
        """Advance one display frame; gravity runs on every GRAVITY_FRAMES-th one."""
        n = CONFIG["GRAVITY_FRAMES"]
        if self.frame_no % n == n - 1:
            self.gravity()
        self.frame_no += 1

    def command(self, name: str) -> bool:
        if name not in COMMANDS:
            raise ValueError(f"unknown command {name!r}")
        self.ensure_active()
        if self.game_over:
            return False
        b = self.board
        if name == "left":
            return b.try_translate(-1, 0)
        if name == "right":
            return b.try_translate(1, 0)
        if name == "down":
            return b.try_translate(0, -1)
        if name == "rotate_cw":
            return b.try_rotate(True)
        if name == "rotate_ccw":
            return b.try_rotate(False)
        b.hard_drop()
        self._after_lock()
        return True
