"""In-game HUD (Heads-Up Display)."""

from typing import Optional

import pygame

from arcball.constants import (
    WINDOW_WIDTH, FIELD_HEIGHT, HUD_HEIGHT, HUD_PADDING,
    HUD_BUTTON_WIDTH, HUD_BUTTON_HEIGHT, COLOR_HUD, COLOR_TEXT_HIGHLIGHT
)
from arcball.input import Command


class HUD:
    """Control strip under the play field with Reset and Pause buttons."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.is_paused = False

        self.rect = pygame.Rect(0, FIELD_HEIGHT, WINDOW_WIDTH, HUD_HEIGHT)
        button_y = self.rect.y + (HUD_HEIGHT - HUD_BUTTON_HEIGHT) // 2
        self.reset_button = pygame.Rect(
            HUD_PADDING, button_y,
            HUD_BUTTON_WIDTH, HUD_BUTTON_HEIGHT
        )
        self.pause_button = pygame.Rect(
            WINDOW_WIDTH - HUD_PADDING - HUD_BUTTON_WIDTH, button_y,
            HUD_BUTTON_WIDTH, HUD_BUTTON_HEIGHT
        )

    def set_paused(self, is_paused: bool):
        self.is_paused = is_paused

    def handle_event(self, event: pygame.event.Event) -> Optional[Command]:
        """Handle input events. Returns RESET or TOGGLE_PAUSE for button clicks."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.reset_button.collidepoint(event.pos):
                return Command.RESET
            if self.pause_button.collidepoint(event.pos):
                return Command.TOGGLE_PAUSE
        return None

    def draw(self):
        """Draw the HUD."""
        screen = self.renderer.screen
        pygame.draw.rect(screen, COLOR_HUD, self.rect)

        mouse_pos = pygame.mouse.get_pos()
        self.renderer.draw_button(
            self.reset_button, "Reset",
            self.reset_button.collidepoint(mouse_pos)
        )
        self.renderer.draw_button(
            self.pause_button, "Resume" if self.is_paused else "Pause",
            self.pause_button.collidepoint(mouse_pos)
        )

        if self.is_paused:
            hint, color = "Paused", COLOR_TEXT_HIGHLIGHT
        else:
            hint, color = "Up / click / tap to shoot", (150, 150, 160)
        self.renderer.draw_text(hint, self.rect.center, color, font_size="small", center=True)
