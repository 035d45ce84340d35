# stacker_layout.py
from dataclasses import dataclass
from stacker_config import CONFIG
from stacker_piece import COLS, VISIBLE_ROWS


@dataclass
class Dims:
    cell: int
    margin: int
    side_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    hold_x: int
    board_x: int
    board_y: int
    next_x: int

    def cell_xy(self, row: int, col: int):
        """Pixel top-left of a field cell; row 1 is the bottom visible row."""
        return self.board_x + col * self.cell, self.board_y + (VISIBLE_ROWS - row) * self.cell


def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    side_w = cell * 6

    board_w = COLS * cell
    board_h = VISIBLE_ROWS * cell

    total_w = margin + side_w + margin + board_w + margin + side_w + margin
    total_h = margin + board_h + margin

    hold_x = margin
    board_x = hold_x + side_w + margin
    board_y = margin
    next_x = board_x + board_w + margin

    return Dims(
        cell=cell, margin=margin, side_w=side_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        hold_x=hold_x, board_x=board_x, board_y=board_y, next_x=next_x
    )
