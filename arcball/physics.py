"""Physics for the aiming game - arrow sweep, launch velocity, ball flight."""

import math
from enum import Enum, auto
from typing import Tuple

from arcball.utils import reflect_into_range, within_span
from arcball.constants import (
    ARROW_SPEED, ARROW_MIN_ANGLE, ARROW_MAX_ANGLE, BALL_SPEED, BALL_SIZE,
    FIELD_WIDTH, FIELD_HEIGHT, GOAL_X, GOAL_WIDTH
)


class ShotEvent(Enum):
    """Outcome of a single flight step."""
    NONE = auto()
    GOAL = auto()   # crossed the top edge inside the goal span
    MISS = auto()   # crossed the top edge outside the goal span
    FLOOR = auto()  # left through the bottom edge


def is_idle(state) -> bool:
    """A ball with zero velocity is waiting to be launched."""
    return state.ball_dx == 0 and state.ball_dy == 0


def launch_velocity(angle: float, speed: float = BALL_SPEED) -> Tuple[float, float]:
    """Velocity for a shot fired along `angle` (screen y grows downward)."""
    return (speed * math.cos(angle), -speed * math.sin(angle))


class ArcPhysics:
    """Handles arrow oscillation and ball motion on a fixed play surface."""

    def __init__(
        self,
        width: float = FIELD_WIDTH,
        height: float = FIELD_HEIGHT,
        ball_size: float = BALL_SIZE,
        goal_x: float = GOAL_X,
        goal_width: float = GOAL_WIDTH,
        arrow_speed: float = ARROW_SPEED
    ):
        self.width = width
        self.height = height
        self.ball_size = ball_size
        self.ball_radius = ball_size / 2
        self.goal_x = goal_x
        self.goal_width = goal_width
        self.arrow_speed = arrow_speed

    def update_arrow(self, state):
        """
        Advance the aim angle by one tick and bounce it off the sweep limits.
        An overshoot is mirrored back inside the range and the sweep reverses.
        """
        angle = state.arrow_angle + state.arrow_direction * self.arrow_speed
        angle, bounced = reflect_into_range(angle, ARROW_MIN_ANGLE, ARROW_MAX_ANGLE)
        state.arrow_angle = angle
        if bounced:
            state.arrow_direction = -state.arrow_direction

    def in_goal(self, x: float) -> bool:
        """Whether a horizontal centre lies inside the goal span."""
        return within_span(x, self.goal_x, self.goal_width)

    def step_ball(self, state) -> ShotEvent:
        """
        Move an in-flight ball one tick and report what it ran into.

        Side walls flip the horizontal velocity without pushing the ball back
        inside; the reversed velocity pulls it in on the following ticks.
        Only the top and bottom edges end a flight.
        """
        state.ball_x += state.ball_dx
        state.ball_y += state.ball_dy

        r = self.ball_radius
        if state.ball_x + r > self.width or state.ball_x - r < 0:
            state.ball_dx = -state.ball_dx

        if state.ball_y - r < 0:
            return ShotEvent.GOAL if self.in_goal(state.ball_x) else ShotEvent.MISS
        if state.ball_y + r > self.height:
            return ShotEvent.FLOOR
        return ShotEvent.NONE
