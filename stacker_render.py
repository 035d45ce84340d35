
"""
Rendering helpers for the stacker game.

- Pre-render one cell Surface per piece type (solid + ghost outline) and blit them.
- Pre-render the static background (frames + grid) once per Dims.
- Cache the locked-stack Surface and rebuild it only when Board.stack_version moves.
- Cache HUD text; re-render only when the line count changes.
"""
from __future__ import annotations
import pygame
from typing import Dict, Iterable, Optional, Tuple
from stacker_config import CONFIG
from stacker_layout import Dims
from stacker_board import Board
from stacker_coords import Cell, to_flat
from stacker_piece import COLS, SPAWN_ROW, VISIBLE_ROWS, Piece

COLORS: Dict[str, Tuple[int, int, int]] = {
    "I": (0, 255, 255),
    "O": (255, 255, 0),
    "T": (160, 0, 160),
    "L": (255, 165, 0),
    "J": (0, 0, 255),
    "S": (0, 255, 0),
    "Z": (255, 0, 0),
}
STACK_COLOR = (128, 128, 128)
TEXT_COLOR = (230, 230, 230)


class RenderAssets:
    """Holds the pre-rendered surfaces for one layout."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.stack_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._stack_key = None
        self._lines = -1
        self._lines_s: Optional[pygame.Surface] = None

    # ---------- Static background ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((0, 0, 0))
        pygame.draw.rect(self.bg, (12, 12, 20), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (40, 40, 60)
        for x in range(COLS + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(VISIBLE_ROWS + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        f = self.font
        self.bg.blit(f.render("Hold", True, TEXT_COLOR), (d.hold_x, d.board_y))
        self.bg.blit(f.render("Next", True, TEXT_COLOR), (d.next_x, d.board_y))
        pygame.draw.rect(self.bg, (60, 60, 90), (d.hold_x, d.board_y + 24, d.side_w, d.cell * 4), 1)

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, col in COLORS.items():
            s = pygame.Surface((c - 2, c - 2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c - 8, c - 8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0, 0, c - 8, c - 8), 2)
            self.ghost_surf[t] = g
        self.stack_cell = pygame.Surface((c - 2, c - 2))
        self.stack_cell.fill(STACK_COLOR)

    # ---------- Locked stack cache ----------
    def refresh_stack(self, board: Board):
        key = (id(board), board.stack_version)
        if key == self._stack_key:
            return
        self.stack_surface.fill((0, 0, 0, 0))
        c = self.dims.cell
        for row, col in board.occupied_cells():
            if 1 <= row <= VISIBLE_ROWS:
                self.stack_surface.blit(self.stack_cell, (col * c + 1, (VISIBLE_ROWS - row) * c + 1))
        self._stack_key = key

    def _blit_cells(self, screen: pygame.Surface, surf: pygame.Surface, cells: Iterable[Cell], inset: int):
        for row, col in cells:
            if 1 <= row <= VISIBLE_ROWS:
                x, y = self.dims.cell_xy(row, col)
                screen.blit(surf, (x + inset, y + inset))

    def _draw_preview(self, screen: pygame.Surface, t: str, x: int, y: int):
        """Draw a spawn-shape preview with its bottom-left near (x, y)."""
        pc = max(8, self.dims.cell // 2)
        block = pygame.Surface((pc - 1, pc - 1))
        block.fill(COLORS[t])
        for row, col in to_flat(Piece.spawn(t).coords):
            screen.blit(block, (x + (col - 3) * pc, y + (SPAWN_ROW + 1 - row) * pc))

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, board: Board, game_over: bool, big_font: pygame.font.Font):
        d = self.dims
        screen.blit(self.bg, (0, 0))
        self.refresh_stack(board)
        screen.blit(self.stack_surface, (d.board_x, d.board_y))

        t, active, _ = board.snapshot()
        if t:
            self._blit_cells(screen, self.ghost_surf[t], board.ghost_cells(), 4)
            self._blit_cells(screen, self.cell_surf[t], active, 1)

        if board.held:
            self._draw_preview(screen, board.held, d.hold_x + 8, d.board_y + 32)
        y = d.board_y + 32
        for nt in board.next_pieces[:CONFIG["NEXT_PREVIEW"]]:
            self._draw_preview(screen, nt, d.next_x + 8, y)
            y += d.cell * 2

        if board.line_clears != self._lines:
            self._lines = board.line_clears
            self._lines_s = self.font.render(f"Lines: {board.line_clears}", True, TEXT_COLOR)
        screen.blit(self._lines_s, (d.hold_x, d.board_y + d.cell * 6))

        if game_over:
            msg = big_font.render("GAME OVER (R to Restart)", True, (255, 220, 220))
            screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2)))
