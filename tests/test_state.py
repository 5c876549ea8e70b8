"""
Tests for the state store.
"""
import pytest

from cannon_coins.gameplay.constants import INITIAL_BALL_SPEED, INITIAL_LIVES
from cannon_coins.gameplay.entities import Ball, Box, Bullet
from cannon_coins.gameplay.state import GameState


@pytest.fixture
def state(scheduler, view):
    return GameState(scheduler, view)


def make_bullet(state, scheduler, view, x=10.0, y=100.0):
    bullet = Bullet(id=state.next_id(), x=x, y=y)
    bullet.visual = view.render_bullet(x, y)
    bullet.task = scheduler.every(20, lambda: None)
    state.add_bullet(bullet)
    return bullet


def make_ball(state, scheduler, view, x=10.0, y=0.0, radius=20.0):
    ball = Ball(id=state.next_id(), x=x, y=y, radius=radius)
    ball.visual = view.render_ball(x, y, radius, 0)
    ball.task = scheduler.every(16, lambda: None)
    state.add_ball(ball)
    return ball


class TestInitialState:

    def test_defaults(self, state):
        assert state.coins == 0
        assert state.lives == INITIAL_LIVES
        assert state.ball_speed == INITIAL_BALL_SPEED
        assert not state.is_paused
        assert state.bullets == []
        assert state.balls == []

    def test_ids_are_unique(self, state):
        ids = {state.next_id() for _ in range(50)}
        assert len(ids) == 50


class TestRemoval:
    """Removal cancels the task, detaches the visual, then drops the entity."""

    def test_remove_bullet(self, state, scheduler, view):
        bullet = make_bullet(state, scheduler, view)

        assert state.remove_bullet(bullet.id)

        assert bullet.task.cancelled
        assert bullet.visual not in view.visuals
        assert not state.has_bullet(bullet.id)

    def test_remove_ball(self, state, scheduler, view):
        ball = make_ball(state, scheduler, view)

        assert state.remove_ball(ball.id)

        assert ball.task.cancelled
        assert ball.visual not in view.visuals
        assert state.balls == []

    def test_remove_twice_is_noop(self, state, scheduler, view):
        """Removing a missing entity never raises."""
        bullet = make_bullet(state, scheduler, view)
        ball = make_ball(state, scheduler, view)

        assert state.remove_bullet(bullet.id)
        assert not state.remove_bullet(bullet.id)
        assert state.remove_ball(ball.id)
        assert not state.remove_ball(ball.id)
        assert not state.remove_ball(9999)

        removals = [c for c in view.calls if c[0] == "remove_visual"]
        assert len(removals) == 2

    def test_remove_ordering(self, scheduler, view):
        """The task is already cancelled when the visual is detached."""
        seen = []

        class OrderView(type(view)):
            def remove_visual(self, handle):
                seen.append(bullet.task.cancelled)
                super().remove_visual(handle)

        order_view = OrderView()
        state = GameState(scheduler, order_view)
        bullet = make_bullet(state, scheduler, order_view)

        state.remove_bullet(bullet.id)

        assert seen == [True]

    def test_clear(self, state, scheduler, view):
        bullets = [make_bullet(state, scheduler, view) for _ in range(3)]
        balls = [make_ball(state, scheduler, view) for _ in range(2)]

        state.clear()

        assert state.bullets == []
        assert state.balls == []
        assert all(e.task.cancelled for e in bullets + balls)
        assert view.visuals == {}


class TestMovement:

    def test_move_bullet(self, state, scheduler, view):
        bullet = make_bullet(state, scheduler, view, y=100)
        state.move_bullet(bullet.id, -10)
        assert state.get_bullet(bullet.id).y == 90

    def test_move_ball(self, state, scheduler, view):
        ball = make_ball(state, scheduler, view, y=0)
        state.move_ball(ball.id, 2.5)
        assert state.get_ball(ball.id).y == 2.5


class TestBox:
    """Bounding box overlap is strict on every edge."""

    def test_overlap(self):
        assert Box(0, 0, 10, 10).overlaps(Box(5, 5, 10, 10))

    def test_touching_edges_do_not_overlap(self):
        assert not Box(0, 0, 10, 10).overlaps(Box(10, 0, 10, 10))
        assert not Box(0, 0, 10, 10).overlaps(Box(0, 10, 10, 10))

    def test_containment(self):
        assert Box(0, 0, 40, 40).overlaps(Box(17.5, 10, 5, 15))

    def test_ball_box_covers_diameter(self):
        ball = Ball(id=1, x=100, y=0, radius=20)
        assert ball.box == Box(100, 0, 40, 40)
