"""
Presentation contract the simulation talks to.
NO UI DEPENDENCIES.

The engine pushes every visible change through a GameView. It never asks the
view for geometry; entity bounding boxes come from gameplay state.
"""
from abc import ABC, abstractmethod
from typing import Any, Hashable


class GameView(ABC):
    """Display surface for one game session."""

    @abstractmethod
    def move_cannon(self, x: float) -> None:
        """Place the cannon's left edge at x."""

    @abstractmethod
    def render_bullet(self, x: float, y: float) -> Hashable:
        """Create a bullet visual and return its handle."""

    @abstractmethod
    def render_ball(self, x: float, y: float, radius: float, hue: int) -> Hashable:
        """Create a ball visual and return its handle."""

    @abstractmethod
    def move_visual(self, handle: Any, x: float, y: float) -> None:
        """Move an existing visual."""

    @abstractmethod
    def remove_visual(self, handle: Any) -> None:
        """Detach a visual. Unknown handles are ignored."""

    @abstractmethod
    def update_score(self, coins: int) -> None:
        ...

    @abstractmethod
    def update_lives(self, lives: int) -> None:
        ...

    @abstractmethod
    def show_high_score_banner(self) -> None:
        """Show the new-high-score notice; the view hides it after a while."""

    @abstractmethod
    def show_paused(self, paused: bool) -> None:
        """Reflect the pause state (pause/play toggle icon)."""

    @abstractmethod
    def show_game_over(self, coins: int) -> None:
        """Blocking game-over notification. Returns once acknowledged."""
