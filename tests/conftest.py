import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from collections import defaultdict

import pygame
import pytest

from pong_logic import new_game


@pytest.fixture
def state():
    return new_game(800, 600)


@pytest.fixture
def no_keys():
    return defaultdict(bool)


@pytest.fixture
def display():
    pygame.display.init()
    screen = pygame.display.set_mode((800, 600))
    yield screen
    pygame.display.quit()
