"""Shared pytest fixtures.

UI tests run pygame headless through the SDL ``dummy`` video and audio
drivers, so no window is ever opened.
"""

import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from arcball.game_state import GameController  # noqa: E402


@pytest.fixture
def controller():
    return GameController()


@pytest.fixture(scope="session")
def pygame_module():
    pygame.display.init()
    pygame.font.init()
    try:
        yield pygame
    finally:
        pygame.quit()


@pytest.fixture
def screen(pygame_module):
    from arcball.constants import WINDOW_WIDTH, WINDOW_HEIGHT
    return pygame_module.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
