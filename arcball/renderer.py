"""Main rendering logic for the game."""

import logging
from pathlib import Path
from typing import Optional, Tuple

import pygame

from arcball.constants import (
    COLOR_BACKGROUND, COLOR_FIELD, COLOR_GOAL, COLOR_ARROW, COLOR_BALL, COLOR_TEXT,
    COLOR_BUTTON, COLOR_BUTTON_HOVER, COLOR_BUTTON_TEXT,
    BALL_SIZE, ARROW_LENGTH, GOAL_X, GOAL_Y, GOAL_WIDTH, GOAL_HEIGHT, SCORE_POS
)
from arcball.utils import polar_offset

logger = logging.getLogger(__name__)


def load_ball_image(path: Optional[str], size: int = BALL_SIZE) -> Optional[pygame.Surface]:
    """
    Load and scale the ball sprite.
    Returns None when the file is missing or unreadable.
    """
    if not path or not Path(path).is_file():
        logger.warning("Ball image %r not found, drawing a plain disc", path)
        return None
    try:
        image = pygame.image.load(path)
    except pygame.error as e:
        logger.warning("Could not load ball image %r: %s", path, e)
        return None
    return pygame.transform.scale(image, (size, size))


class Renderer:
    """Handles all rendering for the game."""

    def __init__(
        self,
        screen: pygame.Surface,
        field_rect: pygame.Rect,
        ball_image: Optional[pygame.Surface] = None
    ):
        self.screen = screen
        self.field_rect = field_rect
        # Field drawing uses field coordinates (origin at its top-left corner)
        self.field = screen.subsurface(field_rect)
        self.ball_image = ball_image
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 28)
        self.font_small = pygame.font.Font(None, 22)

    def clear(self):
        """Clear the screen with background color."""
        self.screen.fill(COLOR_BACKGROUND)
        self.field.fill(COLOR_FIELD)

    def draw_goal(self):
        pygame.draw.rect(self.field, COLOR_GOAL, (GOAL_X, GOAL_Y, GOAL_WIDTH, GOAL_HEIGHT))

    def draw_ball(self, x: float, y: float):
        """Draw the ball centred on (x, y)."""
        half = BALL_SIZE / 2
        if self.ball_image is not None:
            self.field.blit(self.ball_image, (x - half, y - half))
        else:
            pygame.draw.circle(self.field, COLOR_BALL, (x, y), half)

    def draw_arrow(self, x: float, y: float, angle: float):
        """Draw the aim indicator from the ball centre."""
        tip = polar_offset((x, y), ARROW_LENGTH, angle)
        pygame.draw.line(self.field, COLOR_ARROW, (x, y), tip, 2)

    def draw_score(self, score: int):
        self.draw_text(f"Player: {score}", SCORE_POS, COLOR_TEXT, surface=self.field)

    def draw_state(self, state):
        """Draw one frame of the play field from a game state."""
        self.clear()
        self.draw_goal()
        self.draw_ball(state.ball_x, state.ball_y)
        if state.ball_dx == 0 and state.ball_dy == 0:
            self.draw_arrow(state.ball_x, state.ball_y, state.arrow_angle)
        self.draw_score(state.score)

    def draw_text(
        self,
        text: str,
        position: Tuple[float, float],
        color: Tuple[int, int, int] = COLOR_TEXT,
        font_size: str = "medium",
        center: bool = False,
        surface: Optional[pygame.Surface] = None
    ):
        """Draw text on the screen (or on the given surface)."""
        if surface is None:
            surface = self.screen

        if font_size == "large":
            font = self.font_large
        elif font_size == "small":
            font = self.font_small
        else:
            font = self.font_medium

        text_surface = font.render(text, True, color)

        if center:
            rect = text_surface.get_rect(center=position)
            surface.blit(text_surface, rect)
        else:
            surface.blit(text_surface, position)

    def draw_button(
        self,
        rect: pygame.Rect,
        text: str,
        hovered: bool = False,
        color: Tuple[int, int, int] = None,
        hover_color: Tuple[int, int, int] = None
    ):
        """Draw a button."""
        if color is None:
            color = COLOR_BUTTON
        if hover_color is None:
            hover_color = COLOR_BUTTON_HOVER

        current_color = hover_color if hovered else color

        pygame.draw.rect(self.screen, current_color, rect, border_radius=8)

        border_color = tuple(min(255, c + 30) for c in current_color)
        pygame.draw.rect(self.screen, border_color, rect, 2, border_radius=8)

        text_surface = self.font_small.render(text, True, COLOR_BUTTON_TEXT)
        text_rect = text_surface.get_rect(center=rect.center)
        self.screen.blit(text_surface, text_rect)
