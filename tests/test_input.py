import pygame

from stacker_input import KeyGate


def test_moves_repeat_while_held():
    g = KeyGate()
    assert g.press(pygame.K_LEFT) == "left"
    assert g.press(pygame.K_LEFT) == "left"
    assert g.press(pygame.K_DOWN) == "down"


def test_rotation_and_drop_fire_once_per_press():
    g = KeyGate()
    assert g.press(pygame.K_UP) == "rotate_cw"
    assert g.press(pygame.K_UP) is None
    assert g.press(pygame.K_SPACE) == "hard_drop"
    assert g.press(pygame.K_SPACE) is None
    g.release(pygame.K_UP)
    assert g.press(pygame.K_UP) == "rotate_cw"
    assert g.press(pygame.K_z) == "rotate_ccw"


def test_unbound_key():
    g = KeyGate()
    assert g.press(pygame.K_q) is None
    g.release(pygame.K_q)
