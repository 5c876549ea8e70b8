"""
State store - the authoritative game state.
NO UI DEPENDENCIES.
"""
import itertools
from typing import Dict, List, Optional

from .constants import INITIAL_BALL_SPEED, INITIAL_LIVES
from .entities import Ball, Bullet
from .scheduler import Scheduler
from .view import GameView


class GameState:
    """
    Holds live bullets and balls plus the session counters.

    Entities are kept by stable id. Removing an entity always cancels its
    advance task, then detaches its visual, then drops it from the store,
    so no task can fire against an entity that is gone.
    """

    def __init__(self, scheduler: Scheduler, view: GameView):
        self.scheduler = scheduler
        self.view = view

        self._bullets: Dict[int, Bullet] = {}
        self._balls: Dict[int, Ball] = {}
        self._ids = itertools.count(1)

        self.coins: int = 0
        self.ball_speed: float = INITIAL_BALL_SPEED
        self.lives: int = INITIAL_LIVES
        self.is_paused: bool = False
        self.cannon_x: float = 0.0

    def next_id(self) -> int:
        return next(self._ids)

    # =========================================================================
    # BULLETS
    # =========================================================================

    def add_bullet(self, bullet: Bullet) -> None:
        self._bullets[bullet.id] = bullet

    def remove_bullet(self, bullet_id: int) -> bool:
        """
        Remove a bullet.
        Returns False if it was not present (removing twice is a no-op).
        """
        bullet = self._bullets.get(bullet_id)
        if bullet is None:
            return False
        self.scheduler.cancel(bullet.task)
        self.view.remove_visual(bullet.visual)
        del self._bullets[bullet_id]
        return True

    def move_bullet(self, bullet_id: int, dy: float) -> Bullet:
        bullet = self._bullets[bullet_id]
        bullet.y += dy
        return bullet

    def get_bullet(self, bullet_id: int) -> Optional[Bullet]:
        return self._bullets.get(bullet_id)

    def has_bullet(self, bullet_id: int) -> bool:
        return bullet_id in self._bullets

    @property
    def bullets(self) -> List[Bullet]:
        """Snapshot of live bullets in creation order."""
        return list(self._bullets.values())

    # =========================================================================
    # BALLS
    # =========================================================================

    def add_ball(self, ball: Ball) -> None:
        self._balls[ball.id] = ball

    def remove_ball(self, ball_id: int) -> bool:
        """
        Remove a ball.
        Returns False if it was not present (removing twice is a no-op).
        """
        ball = self._balls.get(ball_id)
        if ball is None:
            return False
        self.scheduler.cancel(ball.task)
        self.view.remove_visual(ball.visual)
        del self._balls[ball_id]
        return True

    def move_ball(self, ball_id: int, dy: float) -> Ball:
        ball = self._balls[ball_id]
        ball.y += dy
        return ball

    def get_ball(self, ball_id: int) -> Optional[Ball]:
        return self._balls.get(ball_id)

    def has_ball(self, ball_id: int) -> bool:
        return ball_id in self._balls

    @property
    def balls(self) -> List[Ball]:
        """Snapshot of live balls in creation order."""
        return list(self._balls.values())

    # =========================================================================
    # SESSION
    # =========================================================================

    def clear(self) -> None:
        """Remove every entity through the normal removal path."""
        for bullet_id in list(self._bullets):
            self.remove_bullet(bullet_id)
        for ball_id in list(self._balls):
            self.remove_ball(ball_id)

    def reset_counters(self) -> None:
        self.coins = 0
        self.ball_speed = INITIAL_BALL_SPEED
        self.lives = INITIAL_LIVES
        self.is_paused = False
