"""
Main Game class - the simulation engine.
NO UI DEPENDENCIES.

This is the central gameplay module. It owns the recurring tasks that move
bullets and balls, spawn balls and raise difficulty, resolves collisions and
drives score, lives, pause and game over. It can be fully tested without any
UI framework by advancing the scheduler by hand.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from .constants import (
    PLAY_WIDTH, PLAY_HEIGHT, CANNON_WIDTH, CANNON_HEIGHT,
    BULLET_WIDTH, BULLET_PERIOD_MS, BULLET_STEP, BULLET_EXIT_Y,
    BALL_PERIOD_MS, BALL_MIN_RADIUS, BALL_RADIUS_SPREAD, BALL_MARGIN,
    SPAWN_INTERVAL_MS, SPEED_INCREMENT, DIFFICULTY_INTERVAL_MS,
)
from .entities import Ball, Bullet
from .highscore import HighScoreStore
from .scheduler import Scheduler, TaskHandle
from .state import GameState
from .view import GameView

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Current phase of the game."""
    RUNNING = auto()
    PAUSED = auto()


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class CoinScoredEvent(GameEvent):
    """A bullet hit a ball."""
    coins: int


@dataclass
class HighScoreEvent(GameEvent):
    """The persisted high score was beaten."""
    score: int


@dataclass
class LifeLostEvent(GameEvent):
    """A ball escaped through the bottom."""
    lives: int


@dataclass
class GameOverEvent(GameEvent):
    """Lives ran out; the session was reset."""
    final_coins: int


@dataclass
class PauseToggledEvent(GameEvent):
    paused: bool


@dataclass
class DifficultyIncreasedEvent(GameEvent):
    ball_speed: float


class Game:
    """
    The simulation engine.

    The Game exposes state through `state` and accepts commands as method
    calls. All motion happens inside scheduler tasks, so time only passes
    when update() is called.

    Usage:
        game = Game(view, highscores)
        game.start()
        while True:
            game.move_cannon(pointer_x)
            game.fire()
            events = game.update(dt_ms)
    """

    def __init__(
        self,
        view: GameView,
        highscores: HighScoreStore,
        scheduler: Optional[Scheduler] = None,
        play_width: float = PLAY_WIDTH,
        play_height: float = PLAY_HEIGHT,
        rng: Optional[random.Random] = None,
    ):
        self.view = view
        self.highscores = highscores
        self.scheduler = scheduler if scheduler is not None else Scheduler()
        self.play_width = play_width
        self.play_height = play_height
        self.rng = rng if rng is not None else random.Random()

        self.state = GameState(self.scheduler, view)

        self._spawn_task: Optional[TaskHandle] = None
        self._difficulty_task: Optional[TaskHandle] = None
        self._started = False
        self._game_over_in_progress = False

        # Event queue for UI notifications
        self._events: List[GameEvent] = []

    @property
    def phase(self) -> GamePhase:
        return GamePhase.PAUSED if self.state.is_paused else GamePhase.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.state.is_paused

    @property
    def cannon_top(self) -> float:
        return self.play_height - CANNON_HEIGHT

    # =========================================================================
    # SESSION
    # =========================================================================

    def start(self) -> None:
        """Show the initial HUD and start spawning and difficulty timers."""
        self._started = True
        self.view.update_score(self.state.coins)
        self.view.update_lives(self.state.lives)
        self.view.move_cannon(self.state.cannon_x)
        self._stop_timers()
        if not self.state.is_paused:
            self._start_timers()
        logger.info(f"Game started ({self.play_width}x{self.play_height})")

    def reset(self) -> None:
        """
        Reinitialize the whole session: cancel every task, clear all
        entities, restore initial counters and restart the timers.
        """
        self._stop_timers()
        self.state.clear()
        self.scheduler.cancel_all()
        self.state.reset_counters()

        self.view.show_paused(False)
        self.view.update_score(self.state.coins)
        self.view.update_lives(self.state.lives)

        if self._started:
            self._start_timers()

    def _start_timers(self) -> None:
        self._spawn_task = self.scheduler.every(SPAWN_INTERVAL_MS, self.spawn_ball, name="spawn")
        self._difficulty_task = self.scheduler.every(
            DIFFICULTY_INTERVAL_MS, self.increase_difficulty, name="difficulty"
        )

    def _stop_timers(self) -> None:
        self.scheduler.cancel(self._spawn_task)
        self.scheduler.cancel(self._difficulty_task)
        self._spawn_task = None
        self._difficulty_task = None

    # =========================================================================
    # PLAYER COMMANDS
    # =========================================================================

    def move_cannon(self, pointer_x: float) -> float:
        """
        Centre the cannon on pointer_x, clamped to the play area.
        Returns the cannon's new left edge.
        """
        x = pointer_x - CANNON_WIDTH / 2
        x = max(0.0, min(self.play_width - CANNON_WIDTH, x))
        self.state.cannon_x = x
        self.view.move_cannon(x)
        return x

    def fire(self) -> Optional[Bullet]:
        """
        Fire one bullet from the top of the cannon.
        Returns the bullet, or None while paused.
        """
        if self.state.is_paused:
            return None

        x = self.state.cannon_x + CANNON_WIDTH / 2 - BULLET_WIDTH / 2
        y = self.cannon_top
        bullet = Bullet(id=self.state.next_id(), x=x, y=y)
        bullet.visual = self.view.render_bullet(x, y)
        self._start_bullet_task(bullet)
        self.state.add_bullet(bullet)
        return bullet

    def toggle_pause(self) -> bool:
        """Switch between running and paused. Returns the new paused flag."""
        if self.state.is_paused:
            self._resume()
        else:
            self._pause()
        self.view.show_paused(self.state.is_paused)
        self._events.append(PauseToggledEvent(self.state.is_paused))
        return self.state.is_paused

    def _pause(self) -> None:
        self.state.is_paused = True
        self._stop_timers()
        for bullet in self.state.bullets:
            self.scheduler.cancel(bullet.task)
        for ball in self.state.balls:
            self.scheduler.cancel(ball.task)
        logger.info(
            f"Paused with {len(self.state.bullets)} bullets and {len(self.state.balls)} balls"
        )

    def _resume(self) -> None:
        self.state.is_paused = False
        if self._started:
            self._start_timers()
        for bullet in self.state.bullets:
            self._start_bullet_task(bullet)
        for ball in self.state.balls:
            self._start_ball_task(ball)
        logger.info("Resumed")

    # =========================================================================
    # SPAWNING AND MOVEMENT
    # =========================================================================

    def spawn_ball(self, x: Optional[float] = None, radius: Optional[float] = None) -> Ball:
        """
        Drop a new ball from the top edge.

        Radius and horizontal position are random unless given; a random
        position keeps the ball inside the play area with a margin on each side.
        """
        if radius is None:
            radius = BALL_MIN_RADIUS + self.rng.random() * BALL_RADIUS_SPREAD
        if x is None:
            free_width = self.play_width - radius * 2 - BALL_MARGIN * 2
            x = BALL_MARGIN + self.rng.random() * max(0.0, free_width)
        hue = self.rng.randrange(360)

        ball = Ball(id=self.state.next_id(), x=x, y=0.0, radius=radius, hue=hue)
        ball.visual = self.view.render_ball(ball.x, ball.y, radius, hue)
        # Stays frozen until resume arms it
        if not self.state.is_paused:
            self._start_ball_task(ball)
        self.state.add_ball(ball)
        logger.debug(f"Spawned ball {ball.id} at x={x:.1f} r={radius:.1f}")
        return ball

    def _start_bullet_task(self, bullet: Bullet) -> None:
        bullet_id = bullet.id
        bullet.task = self.scheduler.every(
            BULLET_PERIOD_MS, lambda: self._advance_bullet(bullet_id), name=f"bullet-{bullet_id}"
        )

    def _start_ball_task(self, ball: Ball) -> None:
        ball_id = ball.id
        ball.task = self.scheduler.every(
            BALL_PERIOD_MS, lambda: self._advance_ball(ball_id), name=f"ball-{ball_id}"
        )

    def _advance_bullet(self, bullet_id: int) -> None:
        """One bullet tick: leave through the top, or move up and sweep."""
        bullet = self.state.get_bullet(bullet_id)
        if bullet is None:
            return

        if bullet.y <= BULLET_EXIT_Y:
            self.state.remove_bullet(bullet_id)
            return

        bullet = self.state.move_bullet(bullet_id, -BULLET_STEP)
        self.view.move_visual(bullet.visual, bullet.x, bullet.y)
        self.check_collisions()

    def _advance_ball(self, ball_id: int) -> None:
        """One ball tick: fall by the current speed, escape past the bottom."""
        if not self.state.has_ball(ball_id):
            return

        ball = self.state.move_ball(ball_id, self.state.ball_speed)
        self.view.move_visual(ball.visual, ball.x, ball.y)

        if ball.y > self.play_height:
            self.state.remove_ball(ball_id)
            self.lose_life()

    # =========================================================================
    # RULES
    # =========================================================================

    def check_collisions(self) -> int:
        """
        Sweep every bullet against every ball.

        First match wins per bullet: once a bullet hits a ball both are gone
        and neither takes part in the rest of the sweep. Returns the number
        of pairs resolved.
        """
        if self.state.is_paused:
            return 0

        resolved = 0
        for bullet in self.state.bullets:
            if not self.state.has_bullet(bullet.id):
                continue
            bullet_box = bullet.box

            for ball in self.state.balls:
                if not self.state.has_ball(ball.id):
                    continue
                if bullet_box.overlaps(ball.box):
                    self.state.remove_ball(ball.id)
                    self.state.remove_bullet(bullet.id)
                    self._score()
                    resolved += 1
                    break

        return resolved

    def _score(self) -> None:
        self.state.coins += 1
        self.view.update_score(self.state.coins)
        self._events.append(CoinScoredEvent(self.state.coins))

        if self.highscores.submit(self.state.coins):
            self.view.show_high_score_banner()
            self._events.append(HighScoreEvent(self.state.coins))
            logger.info(f"New high score: {self.state.coins}")

    def increase_difficulty(self) -> None:
        """Speed up falling balls. No effect while paused."""
        if self.state.is_paused:
            return
        self.state.ball_speed += SPEED_INCREMENT
        self._events.append(DifficultyIncreasedEvent(self.state.ball_speed))

    def lose_life(self) -> None:
        """Take one life; running out ends the session and resets it."""
        if self._game_over_in_progress:
            return

        self.state.lives -= 1
        self.view.update_lives(self.state.lives)
        self._events.append(LifeLostEvent(self.state.lives))
        logger.info(f"Ball escaped, {self.state.lives} lives left")

        if self.state.lives <= 0:
            self._game_over()

    def _game_over(self) -> None:
        self._game_over_in_progress = True
        final_coins = self.state.coins
        logger.warning(f"Game over with {final_coins} coins")
        try:
            self._stop_timers()
            self.view.show_game_over(final_coins)
            self.reset()
        finally:
            self._game_over_in_progress = False
        self._events.append(GameOverEvent(final_coins))

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, dt_ms: float) -> List[GameEvent]:
        """
        Advance the game by dt_ms milliseconds.
        Returns the events that occurred since the last update.
        """
        self.scheduler.advance(dt_ms)
        events = self._events
        self._events = []
        return events

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, ms: float, step_ms: float = BALL_PERIOD_MS) -> List[GameEvent]:
        """
        Simulate the game for a number of milliseconds.
        Returns all events that occurred.
        """
        all_events = []
        elapsed = 0.0
        while elapsed < ms:
            step = min(step_ms, ms - elapsed)
            all_events.extend(self.update(step))
            elapsed += step
        return all_events
