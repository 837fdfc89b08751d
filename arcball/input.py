"""Translate pygame events into game commands."""

from enum import Enum, auto
from typing import Optional, Tuple

import pygame

from arcball.constants import FIRE_KEY, RESET_KEY, PAUSE_KEY, QUIT_KEY


class Command(Enum):
    LAUNCH = auto()
    RESET = auto()
    TOGGLE_PAUSE = auto()
    QUIT = auto()


_KEY_COMMANDS = {
    FIRE_KEY: Command.LAUNCH,
    RESET_KEY: Command.RESET,
    PAUSE_KEY: Command.TOGGLE_PAUSE,
    QUIT_KEY: Command.QUIT,
}


def map_event(
    event: pygame.event.Event,
    field_rect: pygame.Rect,
    window_size: Tuple[int, int]
) -> Optional[Command]:
    """
    Map a single event to a command, or None if the game ignores it.
    Key press, left click on the field and touch on the field all launch.
    """
    if event.type == pygame.QUIT:
        return Command.QUIT

    if event.type == pygame.KEYDOWN:
        return _KEY_COMMANDS.get(event.key)

    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if field_rect.collidepoint(event.pos):
            return Command.LAUNCH
        return None

    if event.type == pygame.FINGERDOWN:
        # Touch coordinates are normalised to the window
        pos = (int(event.x * window_size[0]), int(event.y * window_size[1]))
        if field_rect.collidepoint(pos):
            return Command.LAUNCH

    return None
