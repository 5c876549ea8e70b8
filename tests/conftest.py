"""
Pytest fixtures for Cannon Coins tests.
"""
import random

import pytest

from cannon_coins.gameplay.game import Game
from cannon_coins.gameplay.highscore import HighScoreStore
from cannon_coins.gameplay.scheduler import Scheduler
from cannon_coins.gameplay.view import GameView


class RecordingView(GameView):
    """GameView that records every call instead of drawing."""

    def __init__(self):
        self.calls = []
        self.visuals = {}
        self.cannon_x = None
        self.scores = []
        self.lives = []
        self.banners = 0
        self.paused = []
        self.game_overs = []
        self._next = 0

    def move_cannon(self, x):
        self.cannon_x = x
        self.calls.append(("move_cannon", x))

    def render_bullet(self, x, y):
        self._next += 1
        self.visuals[self._next] = ("bullet", x, y)
        self.calls.append(("render_bullet", self._next))
        return self._next

    def render_ball(self, x, y, radius, hue):
        self._next += 1
        self.visuals[self._next] = ("ball", x, y)
        self.calls.append(("render_ball", self._next))
        return self._next

    def move_visual(self, handle, x, y):
        kind = self.visuals[handle][0]
        self.visuals[handle] = (kind, x, y)

    def remove_visual(self, handle):
        self.visuals.pop(handle, None)
        self.calls.append(("remove_visual", handle))

    def update_score(self, coins):
        self.scores.append(coins)

    def update_lives(self, lives):
        self.lives.append(lives)

    def show_high_score_banner(self):
        self.banners += 1

    def show_paused(self, paused):
        self.paused.append(paused)

    def show_game_over(self, coins):
        self.game_overs.append(coins)


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def highscores(tmp_path):
    return HighScoreStore(tmp_path / "highscore.json")


@pytest.fixture
def game(view, scheduler, highscores):
    """A game that has not been started: no spawn or difficulty timers."""
    return Game(view, highscores, scheduler=scheduler, rng=random.Random(7))


@pytest.fixture
def started_game(game):
    game.start()
    return game
