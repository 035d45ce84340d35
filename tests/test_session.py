import pytest

from stacker_config import CONFIG
from stacker_coords import from_flat
from stacker_board import Board
from stacker_notation import parse_notation
from stacker_session import Session


class FixedBags:
    def __init__(self, bag="IOTLJSZ"):
        self.bag = list(bag)
        self.calls = 0

    def next_bag(self):
        self.calls += 1
        return list(self.bag)


def test_first_piece_spawns_and_queue_is_topped_up():
    s = Session(FixedBags())
    s.ensure_active()
    assert s.board.active_type == "I"
    assert s.board.next_pieces == list("OTLJSZ")
    assert len(s.board.next_pieces) >= CONFIG["NEXT_PREVIEW"]


def test_queue_refills_below_preview_length():
    s = Session(FixedBags(), Board(next_pieces=list("OTL")))
    s.ensure_active()
    assert s.board.active_type == "O"
    assert s.board.next_pieces == list("TL") + list("IOTLJSZ")


def test_gravity_every_twentieth_frame():
    s = Session(FixedBags())
    s.ensure_active()
    for _ in range(CONFIG["GRAVITY_FRAMES"] - 1):
        s.frame()
    assert s.board.active_cells() == [(21, 3), (21, 4), (21, 5), (21, 6)]
    s.frame()
    assert s.board.active_cells() == [(20, 3), (20, 4), (20, 5), (20, 6)]
    for _ in range(CONFIG["GRAVITY_FRAMES"]):
        s.frame()
    assert s.board.active_cells() == [(19, 3), (19, 4), (19, 5), (19, 6)]


def test_gravity_locks_then_spawns_next():
    board = Board(active=None, next_pieces=list("OT"))
    s = Session(FixedBags(), board)
    s.ensure_active()
    for _ in range(19):
        s.gravity()
    assert s.board.active_cells() == [(1, 4), (1, 5), (2, 4), (2, 5)]
    s.gravity()
    assert s.board.occupied_cells() == [(1, 4), (1, 5), (2, 4), (2, 5)]
    assert s.board.active_type == "T"


def test_commands():
    s = Session(FixedBags())
    assert s.command("left")
    assert s.board.active_cells() == [(21, 2), (21, 3), (21, 4), (21, 5)]
    assert s.command("right")
    assert s.command("down")
    assert s.command("rotate_cw")
    assert s.board.active.delta == 1
    assert s.command("rotate_ccw")
    assert s.board.active.delta == 0
    with pytest.raises(ValueError):
        s.command("jump")


def test_hard_drop_clears_line_and_spawns():
    text = "X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/X/OOO4OOO - 0 - 0 -"
    s = Session(FixedBags(), parse_notation(text))
    assert s.command("hard_drop")
    assert s.board.line_clears == 1
    assert s.board.occupied_cells() == []
    assert s.board.active_type == "O"


def test_double_clear_through_gravity():
    cells = [(r, c) for r in (1, 2) for c in range(10) if c not in (4, 5)]
    board = Board(occupied=from_flat(cells), next_pieces=["O"])
    s = Session(FixedBags("ZZZZZZZ"), board)
    s.command("hard_drop")
    assert s.board.line_clears == 2
    assert s.board.occupied_cells() == []
    assert s.board.active_type == "Z"


def test_blocked_spawn_ends_the_game():
    board = Board(occupied=from_flat([(20, 4)]))
    s = Session(FixedBags("OOOOOOO"), board)
    s.ensure_active()
    assert s.game_over
    assert not s.command("left")
    cells = s.board.active_cells()
    for _ in range(CONFIG["GRAVITY_FRAMES"]):
        s.frame()
    assert s.board.active_cells() == cells


def test_restart():
    s = Session(FixedBags(), Board(occupied=from_flat([(20, 4)]), next_pieces=["O"]))
    s.ensure_active()
    assert s.game_over
    s.restart()
    assert not s.game_over
    assert s.board.occupied_cells() == []
    s.ensure_active()
    assert s.board.active_type == "I"


def test_blocked_spawn_is_never_moved_or_locked():
    board = Board(occupied=from_flat([(20, 4)]), next_pieces=["O"])
    s = Session(FixedBags(), board)
    s.gravity()
    assert s.game_over
    assert s.board.occupied_cells() == [(20, 4)]
    assert s.board.active_cells() == [(20, 4), (20, 5), (21, 4), (21, 5)]


def test_hard_drop_after_blocked_spawn_does_nothing():
    board = Board(occupied=from_flat([(20, 4)]), next_pieces=["O"])
    s = Session(FixedBags(), board)
    assert not s.command("hard_drop")
    assert s.game_over
    assert s.board.occupied_cells() == [(20, 4)]
    assert s.board.line_clears == 0
