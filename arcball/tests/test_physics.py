import math

import pytest

from arcball.constants import (
    ARROW_MIN_ANGLE, ARROW_MAX_ANGLE, ARROW_SPEED, FIELD_WIDTH, GOAL_X, GOAL_WIDTH
)
from arcball.game_state import GameState
from arcball.physics import ArcPhysics, ShotEvent, is_idle, launch_velocity


@pytest.fixture
def physics():
    return ArcPhysics()


def flying(x, y, dx, dy):
    state = GameState.initial()
    state.ball_x, state.ball_y = x, y
    state.ball_dx, state.ball_dy = dx, dy
    return state


def test_launch_velocity_at_start_angle():
    dx, dy = launch_velocity(math.pi / 6)
    assert dx == pytest.approx(2.598, abs=1e-3)
    assert dy == pytest.approx(-1.5)


def test_idle_means_zero_velocity():
    state = GameState.initial()
    assert is_idle(state)
    state.ball_dy = -1.5
    assert not is_idle(state)


def test_arrow_sweeps_within_limits(physics):
    state = GameState.initial()
    for _ in range(5000):
        raw = state.arrow_angle + state.arrow_direction * ARROW_SPEED
        direction = state.arrow_direction
        physics.update_arrow(state)

        assert ARROW_MIN_ANGLE - 1e-9 <= state.arrow_angle <= ARROW_MAX_ANGLE + 1e-9
        overshot = raw > ARROW_MAX_ANGLE or raw < ARROW_MIN_ANGLE
        assert (state.arrow_direction == -direction) == overshot


def test_arrow_reverses_at_upper_limit(physics):
    state = GameState.initial()
    state.arrow_angle = ARROW_MAX_ANGLE - ARROW_SPEED / 2
    state.arrow_direction = 1

    physics.update_arrow(state)

    assert state.arrow_direction == -1
    assert state.arrow_angle == pytest.approx(ARROW_MAX_ANGLE - ARROW_SPEED / 2)


def test_arrow_reverses_at_lower_limit(physics):
    state = GameState.initial()
    state.arrow_angle = ARROW_MIN_ANGLE + ARROW_SPEED / 2
    state.arrow_direction = -1

    physics.update_arrow(state)

    assert state.arrow_direction == 1
    assert state.arrow_angle >= ARROW_MIN_ANGLE


def test_right_wall_flips_horizontal_velocity_without_clamping(physics):
    state = flying(FIELD_WIDTH - 8, 300, 3, -1.5)

    event = physics.step_ball(state)

    assert event is ShotEvent.NONE
    assert state.ball_dx == -3
    assert state.ball_x == FIELD_WIDTH - 5
    assert state.ball_y == 298.5


def test_left_wall_flips_horizontal_velocity(physics):
    state = flying(9, 300, -3, -1.5)

    physics.step_ball(state)

    assert state.ball_dx == 3
    assert state.ball_x == 6


def test_ball_in_open_field_keeps_velocity(physics):
    state = flying(240, 300, 2, -2)

    assert physics.step_ball(state) is ShotEvent.NONE
    assert (state.ball_x, state.ball_y) == (242, 298)
    assert (state.ball_dx, state.ball_dy) == (2, -2)


def test_top_crossing_inside_goal_span(physics):
    state = flying(240, 8, 0.5, -1.5)
    assert physics.step_ball(state) is ShotEvent.GOAL


def test_top_crossing_outside_goal_span(physics):
    state = flying(100, 8, 0.5, -1.5)
    assert physics.step_ball(state) is ShotEvent.MISS


def test_bottom_crossing(physics):
    state = flying(240, 630, 0, 3)
    assert physics.step_ball(state) is ShotEvent.FLOOR


@pytest.mark.parametrize(
    "x, expected",
    [
        (GOAL_X, True),
        (GOAL_X + GOAL_WIDTH, True),
        (GOAL_X + GOAL_WIDTH / 2, True),
        (GOAL_X - 0.1, False),
        (GOAL_X + GOAL_WIDTH + 0.1, False),
    ],
)
def test_goal_span_is_closed_interval(physics, x, expected):
    assert physics.in_goal(x) is expected
