import logging
import os
import sys
import time

import pygame

from pong_logic import new_game, update

logger = logging.getLogger(__name__)

WIDTH, HEIGHT = 800, 600
FONT_PATH = "./IBMPlexMono-Regular.otf"
FONT_SIZE = 30
CAPTION = "window"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class ScoreLabel:
    # score glyphs, re-rendered only when the text changes
    def __init__(self, font, color=WHITE):
        self.font = font
        self.color = color
        self._text = None
        self._surface = None

    def render(self, text):
        if text != self._text:
            # solid glyphs, no antialiasing
            self._surface = self.font.render(text, False, self.color)
            self._text = text
        return self._surface


def draw(state, surface, label):
    for rect in state.rects():
        surface.fill(WHITE, rect)

    score = label.render(state.score_text())
    surface.blit(score, (state.screen.w // 2 - score.get_width() // 2, 0))


def should_quit(event):
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key in QUIT_KEYS


def run(state, screen, label):
    # first frame is plain black
    screen.fill(BLACK)
    pygame.display.flip()

    last = time.perf_counter()
    while True:
        screen.fill(BLACK)
        draw(state, screen, label)
        pygame.display.flip()

        dt = (time.perf_counter() - last) * 1000.0
        update(state, dt, pygame.key.get_pressed())
        last = time.perf_counter()

        for event in pygame.event.get():
            if should_quit(event):
                logger.info("quit requested")
                return


def game():
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(CAPTION)
        label = ScoreLabel(pygame.font.Font(FONT_PATH, FONT_SIZE))

        logger.info("starting %dx%d", WIDTH, HEIGHT)
        run(new_game(WIDTH, HEIGHT), screen, label)
    finally:
        pygame.quit()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        game()
    except (pygame.error, OSError):
        logger.exception("fatal error, shutting down")
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
