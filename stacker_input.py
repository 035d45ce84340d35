
"""Key bindings and single-shot key gating"""
from typing import Dict, Optional, Set
import pygame

KEYMAP: Dict[int, str] = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_UP: "rotate_cw",
    pygame.K_x: "rotate_cw",
    pygame.K_z: "rotate_ccw",
    pygame.K_SPACE: "hard_drop",
}

# these fire once per press; holding the key does nothing more
NO_HOLD = {"rotate_cw", "rotate_ccw", "hard_drop"}


class KeyGate:
    def __init__(self, keymap: Optional[Dict[int, str]] = None):
        self.keymap = keymap or KEYMAP
        self.held: Set[int] = set()

    def press(self, key: int) -> Optional[str]:
        cmd = self.keymap.get(key)
        if cmd is None:
            return None
        if cmd in NO_HOLD:
            if key in self.held:
                return None
            self.held.add(key)
        return cmd

    def release(self, key: int):
        self.held.discard(key)
