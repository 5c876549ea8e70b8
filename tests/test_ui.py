"""
Tests for the pygame adapters.
These never open a window.
"""
import pygame
import pytest

from cannon_coins.gameplay.constants import HIGHSCORE_BANNER_MS
from cannon_coins.gameplay.game import Game
from cannon_coins.ui.input_handler import InputHandler
from cannon_coins.ui.renderer import Renderer, hue_color


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def renderer(clock):
    return Renderer(800, 600, clock=clock)


@pytest.fixture
def handler(renderer):
    handler = InputHandler(renderer)
    handler.received = []
    handler.on_pointer_move(lambda x: handler.received.append(("move", x)))
    handler.on_fire_click(lambda: handler.received.append(("fire",)))
    handler.on_pause_toggle(lambda: handler.received.append(("pause",)))
    return handler


class TestInputHandler:

    def test_pointer_move(self, handler):
        event = pygame.event.Event(pygame.MOUSEMOTION, pos=(123, 50), rel=(0, 0), buttons=(0, 0, 0))
        assert handler.handle_event(event) is False
        assert handler.received == [("move", 123)]

    def test_click_fires(self, handler):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(100, 300), button=1)
        handler.handle_event(event)
        assert handler.received == [("fire",)]

    def test_right_click_ignored(self, handler):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(100, 300), button=3)
        handler.handle_event(event)
        assert handler.received == []

    def test_click_on_pause_button_toggles(self, handler, renderer):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=renderer.pause_button.center, button=1)
        handler.handle_event(event)
        assert handler.received == [("pause",)]

    def test_p_key_toggles(self, handler):
        handler.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_p))
        assert handler.received == [("pause",)]

    def test_quit(self, handler):
        assert handler.handle_event(pygame.event.Event(pygame.QUIT))
        assert handler.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))


class TestRenderer:

    def test_visual_bookkeeping(self, renderer):
        bullet = renderer.render_bullet(10, 20)
        ball = renderer.render_ball(100, 0, 20, 180)
        assert bullet != ball

        renderer.move_visual(ball, 100, 50)
        assert renderer.visuals[ball].y == 50

        renderer.remove_visual(bullet)
        renderer.remove_visual(bullet)
        renderer.remove_visual(None)
        assert list(renderer.visuals) == [ball]

    def test_banner_hides_after_timeout(self, renderer, clock):
        assert not renderer.banner_visible()

        renderer.show_high_score_banner()
        clock.now = HIGHSCORE_BANNER_MS - 1
        assert renderer.banner_visible()

        clock.now = HIGHSCORE_BANNER_MS
        assert not renderer.banner_visible()

    def test_hud_values(self, renderer):
        renderer.update_score(4)
        renderer.update_lives(2)
        renderer.show_paused(True)
        renderer.move_cannon(55)
        assert (renderer.coins, renderer.lives, renderer.paused, renderer.cannon_x) == (4, 2, True, 55)

    def test_headless_draw_and_game_over_return(self, renderer):
        """Without a display, drawing is a no-op and game over does not block."""
        renderer.draw()
        renderer.show_game_over(3)

    def test_hue_color(self):
        r, g, b = hue_color(0)
        assert r > g and r > b

    def test_drives_a_game(self, renderer, highscores):
        """The renderer tracks the engine's visuals."""
        game = Game(renderer, highscores)
        game.start()
        ball = game.spawn_ball(x=100, radius=20)

        game.simulate(160)

        assert renderer.visuals[ball.visual].y == ball.y
        assert renderer.lives == 3
        assert renderer.coins == 0
