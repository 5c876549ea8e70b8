"""
Entity definitions - bullets, balls and their bounding boxes.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Any, Optional

from .constants import BULLET_WIDTH, BULLET_HEIGHT
from .scheduler import TaskHandle


@dataclass(frozen=True)
class Box:
    """Axis-aligned bounding box in play-area coordinates."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def overlaps(self, other: "Box") -> bool:
        """Strict rectangle intersection; touching edges do not count."""
        return (
            self.left < other.right
            and self.right > other.left
            and self.top < other.bottom
            and self.bottom > other.top
        )


@dataclass
class Bullet:
    """
    A bullet travelling straight up from the cannon.

    The horizontal position is fixed at creation; only y changes.
    """
    id: int
    x: float
    y: float
    visual: Any = None
    task: Optional[TaskHandle] = None

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, BULLET_WIDTH, BULLET_HEIGHT)


@dataclass
class Ball:
    """
    A ball falling from the top of the play area.

    (x, y) is the top-left corner of the ball's bounding square.
    """
    id: int
    x: float
    y: float
    radius: float
    hue: int = 0
    visual: Any = None
    task: Optional[TaskHandle] = None

    @property
    def diameter(self) -> float:
        return self.radius * 2

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.diameter, self.diameter)
