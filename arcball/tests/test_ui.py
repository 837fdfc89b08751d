import pygame

from arcball.constants import FIELD_WIDTH, FIELD_HEIGHT, GOAL_X
from arcball.game import Game
from arcball.game_state import GameState
from arcball.input import Command
from arcball.renderer import Renderer, load_ball_image
from arcball.ui.end_screen import EndScreen
from arcball.ui.hud import HUD

FIELD = pygame.Rect(0, 0, FIELD_WIDTH, FIELD_HEIGHT)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def has_color(surface, center, color, radius=3):
    cx, cy = center
    return any(
        rgb(surface, (x, y)) == color
        for x in range(cx - radius, cx + radius + 1)
        for y in range(cy - radius, cy + radius + 1)
    )


def test_missing_ball_image_falls_back(pygame_module, tmp_path, caplog):
    assert load_ball_image(str(tmp_path / "nope.png")) is None
    assert "not found" in caplog.text


def test_draw_state_paints_goal_ball_and_arrow(screen):
    renderer = Renderer(screen, FIELD)
    state = GameState.initial()

    renderer.draw_state(state)

    assert rgb(screen, (int(GOAL_X) + 5, 2)) == (0, 255, 0)
    assert rgb(screen, (int(state.ball_x), int(state.ball_y))) != (20, 24, 32)
    # Arrow tip at pi/6 lies up and to the right of the ball
    assert has_color(screen, (int(state.ball_x) + 20, int(state.ball_y) - 12), (255, 0, 0))


def test_arrow_hidden_in_flight(screen):
    renderer = Renderer(screen, FIELD)
    state = GameState.initial()
    state.ball_dx, state.ball_dy = 2.6, -1.5

    renderer.draw_state(state)

    assert not has_color(screen, (int(state.ball_x) + 20, int(state.ball_y) - 12), (255, 0, 0))


def test_hud_buttons_issue_commands(screen):
    hud = HUD(Renderer(screen, FIELD))

    assert hud.handle_event(click(hud.reset_button.center)) is Command.RESET
    assert hud.handle_event(click(hud.pause_button.center)) is Command.TOGGLE_PAUSE
    assert hud.handle_event(click((240, 320))) is None


def test_end_screen_show_and_hide(screen):
    end_screen = EndScreen(Renderer(screen, FIELD))
    play_again = click(end_screen.play_again_button.center)

    assert end_screen.handle_event(play_again) is None
    end_screen.show(5)
    end_screen.draw()
    assert end_screen.final_score == 5
    assert end_screen.handle_event(play_again) is Command.RESET
    end_screen.hide()
    assert not end_screen.visible


def test_game_routes_events_to_controller(pygame_module):
    game = Game(ball_image=None)
    pygame.event.clear()

    pygame.event.post(click((240, 320)))
    game.handle_events()
    assert game.controller.state.ball_dy < 0

    pygame.event.post(click(game.hud.pause_button.center))
    game.handle_events()
    game.update()
    assert game.controller.state.is_paused
    assert game.hud.is_paused

    game.dispatch(Command.QUIT)
    assert not game.running


def test_game_over_shows_and_reset_hides_summary(pygame_module):
    game = Game(ball_image=None)
    s = game.controller.state
    s.score = 4
    s.ball_x, s.ball_y, s.ball_dx, s.ball_dy = FIELD_WIDTH / 2, 8, 0.5, -1.5

    game.update()
    game.draw()
    assert game.end_screen.visible
    assert game.end_screen.final_score == 5

    game.dispatch(Command.RESET)
    assert not game.end_screen.visible
    assert game.controller.state.score == 0
