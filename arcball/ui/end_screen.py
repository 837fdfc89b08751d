"""Game over overlay with the final score."""

from typing import Optional

import pygame

from arcball.constants import FIELD_WIDTH, FIELD_HEIGHT, COLOR_TEXT, COLOR_TEXT_HIGHLIGHT
from arcball.input import Command


class EndScreen:
    """Terminal summary shown over the field once the game is won."""

    def __init__(self, renderer):
        self.renderer = renderer
        self.visible = False
        self.final_score = 0

        panel_width = int(FIELD_WIDTH * 0.7)
        panel_height = 220
        self.panel_rect = pygame.Rect(
            (FIELD_WIDTH - panel_width) // 2,
            (FIELD_HEIGHT - panel_height) // 2,
            panel_width,
            panel_height
        )
        self.play_again_button = pygame.Rect(0, 0, 160, 45)
        self.play_again_button.midbottom = (self.panel_rect.centerx, self.panel_rect.bottom - 20)

    def show(self, score: int):
        self.final_score = score
        self.visible = True

    def hide(self):
        self.visible = False

    def handle_event(self, event: pygame.event.Event) -> Optional[Command]:
        """Handle input events. Returns RESET when Play Again is clicked."""
        if not self.visible:
            return None
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.play_again_button.collidepoint(event.pos):
                return Command.RESET
        return None

    def draw(self):
        """Draw the summary panel if it is showing."""
        if not self.visible:
            return

        screen = self.renderer.screen
        panel_surface = pygame.Surface(self.panel_rect.size, pygame.SRCALPHA)
        panel_surface.fill((30, 30, 45, 230))
        screen.blit(panel_surface, self.panel_rect.topleft)
        pygame.draw.rect(screen, (80, 80, 100), self.panel_rect, 2, border_radius=8)

        cx = self.panel_rect.centerx
        self.renderer.draw_text(
            "Game Over",
            (cx, self.panel_rect.y + 45),
            COLOR_TEXT_HIGHLIGHT,
            font_size="large",
            center=True
        )
        self.renderer.draw_text(
            f"Final score: {self.final_score}",
            (cx, self.panel_rect.y + 105),
            COLOR_TEXT,
            center=True
        )

        hovered = self.play_again_button.collidepoint(pygame.mouse.get_pos())
        self.renderer.draw_button(
            self.play_again_button, "Play Again", hovered,
            color=(60, 120, 80),
            hover_color=(80, 150, 100)
        )
