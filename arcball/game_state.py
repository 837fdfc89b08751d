"""Game state record and the controller that owns it."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from arcball.constants import ARROW_START_ANGLE, BALL_SIZE, FIELD_WIDTH, FIELD_HEIGHT, WIN_SCORE
from arcball.physics import ArcPhysics, ShotEvent, is_idle, launch_velocity

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """Loop driver state. The phase is derived from the ball velocity."""
    STOPPED = auto()
    AIMING = auto()
    IN_FLIGHT = auto()


@dataclass
class GameState:
    arrow_angle: float
    arrow_direction: int
    ball_x: float
    ball_y: float
    ball_dx: float = 0.0
    ball_dy: float = 0.0
    score: int = 0
    is_paused: bool = False
    is_game_over: bool = False
    loop_active: bool = True

    @classmethod
    def initial(
        cls,
        width: float = FIELD_WIDTH,
        height: float = FIELD_HEIGHT,
        ball_size: float = BALL_SIZE
    ) -> "GameState":
        """Fresh state with the ball resting at the launch origin."""
        return cls(
            arrow_angle=ARROW_START_ANGLE,
            arrow_direction=1,
            ball_x=width / 2,
            ball_y=height - ball_size,
        )


class GameController:
    """
    Single owner of the game state.

    The host calls tick() once per frame while frame_requested is set. When
    the loop is not running, tick() clears the request and returns False;
    only launch, resume and reset request frames again.
    """

    def __init__(
        self,
        physics: Optional[ArcPhysics] = None,
        on_game_over: Optional[Callable[[int], None]] = None,
        on_summary_hidden: Optional[Callable[[], None]] = None,
        win_score: int = WIN_SCORE
    ):
        self.physics = physics or ArcPhysics()
        self.on_game_over = on_game_over
        self.on_summary_hidden = on_summary_hidden
        self.win_score = win_score
        self.state = GameState.initial(self.physics.width, self.physics.height, self.physics.ball_size)
        self.frame_requested = True

    @property
    def is_running(self) -> bool:
        s = self.state
        return s.loop_active and not s.is_paused and not s.is_game_over

    @property
    def loop_state(self) -> LoopState:
        if not self.is_running:
            return LoopState.STOPPED
        return LoopState.AIMING if is_idle(self.state) else LoopState.IN_FLIGHT

    def request_frame(self):
        self.frame_requested = True

    def launch(self) -> bool:
        """
        Fire the ball along the current arrow angle.
        Ignored while a shot is in flight, while paused and after game over.
        """
        s = self.state
        if not is_idle(s):
            logger.debug("Launch ignored: ball already in flight")
            return False
        if s.is_paused or s.is_game_over:
            logger.debug("Launch ignored: paused=%s game_over=%s", s.is_paused, s.is_game_over)
            return False

        s.ball_dx, s.ball_dy = launch_velocity(s.arrow_angle)
        logger.debug("Launched at %.3f rad (dx=%.3f, dy=%.3f)", s.arrow_angle, s.ball_dx, s.ball_dy)
        self.request_frame()
        return True

    def reset_turn(self):
        """Put the ball back at the launch origin and restore the arrow."""
        s = self.state
        s.ball_x = self.physics.width / 2
        s.ball_y = self.physics.height - self.physics.ball_size
        s.ball_dx = 0.0
        s.ball_dy = 0.0
        s.arrow_angle = ARROW_START_ANGLE
        s.arrow_direction = 1

    def score_goal(self):
        self.state.score += 1
        logger.info("Goal! Score is now %d", self.state.score)

    def check_game_over(self) -> bool:
        """Enter game over the first time the win score is reached."""
        s = self.state
        if s.is_game_over or s.score < self.win_score:
            return False

        s.is_game_over = True
        s.loop_active = False
        logger.info("Game over with score %d", s.score)
        if self.on_game_over is not None:
            self.on_game_over(s.score)
        return True

    def tick(self) -> bool:
        """Advance one frame. Returns True if another frame should follow."""
        if not self.is_running:
            self.frame_requested = False
            return False

        s = self.state
        if is_idle(s):
            self.physics.update_arrow(s)
            return True

        event = self.physics.step_ball(s)
        if event is ShotEvent.GOAL:
            self.score_goal()
        elif event is ShotEvent.MISS:
            logger.debug("Shot crossed the top edge outside the goal at x=%.1f", s.ball_x)
        elif event is ShotEvent.FLOOR:
            logger.debug("Shot left through the floor")

        if event is not ShotEvent.NONE:
            self.reset_turn()
        if self.check_game_over():
            self.frame_requested = False
            return False
        return True

    def toggle_pause(self) -> bool:
        """Flip the pause flag. Returns the new value."""
        s = self.state
        s.is_paused = not s.is_paused
        if s.is_paused:
            logger.info("Paused")
        else:
            logger.info("Resumed")
            self.request_frame()
        return s.is_paused

    def reset(self):
        """Start a fresh game. Physics settings are left untouched."""
        s = self.state
        s.loop_active = False
        s.score = 0
        s.is_game_over = False
        s.is_paused = False
        self.reset_turn()
        if self.on_summary_hidden is not None:
            self.on_summary_hidden()
        s.loop_active = True
        self.request_frame()
        logger.info("Game reset")
