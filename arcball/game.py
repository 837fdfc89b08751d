"""pygame window and frame loop driving the game controller."""

import logging
from typing import Optional

import pygame

from arcball.constants import FPS, WINDOW_WIDTH, WINDOW_HEIGHT, FIELD_WIDTH, FIELD_HEIGHT, BALL_IMAGE
from arcball.game_state import GameController
from arcball.input import Command, map_event
from arcball.renderer import Renderer, load_ball_image
from arcball.ui.hud import HUD
from arcball.ui.end_screen import EndScreen

logger = logging.getLogger(__name__)


class Game:
    """Main game class owning the window, the clock and the UI."""

    def __init__(self, fps: int = FPS, ball_image: Optional[str] = BALL_IMAGE):
        pygame.init()
        pygame.display.set_caption("ArcBall")

        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = True

        self.field_rect = pygame.Rect(0, 0, FIELD_WIDTH, FIELD_HEIGHT)
        self.renderer = Renderer(self.screen, self.field_rect, load_ball_image(ball_image))
        self.hud = HUD(self.renderer)
        self.end_screen = EndScreen(self.renderer)

        self.controller = GameController(
            on_game_over=self.end_screen.show,
            on_summary_hidden=self.end_screen.hide
        )
        logger.info("Game started (%dx%d field at %d FPS)", FIELD_WIDTH, FIELD_HEIGHT, fps)

    def dispatch(self, command: Command):
        """Apply a command to the controller."""
        if command is Command.LAUNCH:
            self.controller.launch()
        elif command is Command.RESET:
            self.controller.reset()
        elif command is Command.TOGGLE_PAUSE:
            self.controller.toggle_pause()
        elif command is Command.QUIT:
            self.running = False

    def handle_events(self):
        """Handle pygame events."""
        window_size = self.screen.get_size()
        for event in pygame.event.get():
            # Overlay and HUD buttons take precedence over field clicks
            command = (
                self.end_screen.handle_event(event)
                or self.hud.handle_event(event)
                or map_event(event, self.field_rect, window_size)
            )
            if command is not None:
                self.dispatch(command)
            if not self.running:
                return

    def update(self):
        """Advance the simulation by one frame if a frame was requested."""
        if self.controller.frame_requested:
            self.controller.tick()
        self.hud.set_paused(self.controller.state.is_paused)

    def draw(self):
        """Draw the current game state."""
        self.renderer.draw_state(self.controller.state)
        self.hud.draw()
        self.end_screen.draw()
        pygame.display.flip()

    def run(self):
        """Main game loop."""
        while self.running:
            self.handle_events()
            self.update()
            self.draw()
            self.clock.tick(self.fps)

        pygame.quit()
