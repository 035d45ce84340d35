
import logging
import sys
import pygame
from stacker_config import CONFIG
from stacker_input import KeyGate
from stacker_layout import compute_dims
from stacker_render import RenderAssets
from stacker_session import Session


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])
    pygame.key.set_repeat(CONFIG["KEY_DELAY_MS"], CONFIG["KEY_REPEAT_MS"])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Stacker")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 36)

    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    session = Session()
    session.ensure_active()
    keys = KeyGate()

    while True:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_r and session.game_over:
                    session.restart(); session.ensure_active(); continue
                cmd = keys.press(e.key)
                if cmd:
                    session.command(cmd)
            if e.type == pygame.KEYUP:
                keys.release(e.key)

        session.frame()

        render.draw(screen, session.board, session.game_over, big_font)
        pygame.display.flip()


if __name__ == '__main__':
    main()
