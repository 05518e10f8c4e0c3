"""Rigid bodies holding position, weight and extent."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pacworld.vector import Vec2


class RigidBody(ABC):
    """A body positioned by its centre, with a weight used in collisions."""

    def __init__(self, pos: Vec2, weight: float = 1.0) -> None:
        self.pos = pos
        self.weight = weight

    @abstractmethod
    def center(self) -> Vec2:
        """Return the body's reference point."""


class RectangleRigidBody(RigidBody):
    """An axis-aligned rectangle; ``pos`` is its centre, ``wh`` its size."""

    def __init__(self, wh: Vec2 = Vec2(), pos: Vec2 = Vec2(), weight: float = 1.0) -> None:
        super().__init__(pos, weight)
        self.wh = wh

    @property
    def half(self) -> Vec2:
        return self.wh / 2

    @property
    def top_left(self) -> Vec2:
        return self.pos - self.half

    @property
    def bottom_right(self) -> Vec2:
        return self.pos + self.half

    def center(self) -> Vec2:
        return self.pos - self.wh

    def contains_point(self, point: Vec2) -> bool:
        """True when ``point`` lies strictly inside the rectangle."""
        d1 = point - self.top_left
        d2 = point - self.bottom_right
        return d1.x > 0 and d1.y > 0 and d2.x < 0 and d2.y < 0