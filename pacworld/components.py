"""Components attached to world entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

import pygame

from pacworld.bodies import RectangleRigidBody, RigidBody
from pacworld.vector import Vec2

Color = tuple[int, int, int, int]

RED: Color = (230, 41, 55, 255)
PURPLE: Color = (200, 122, 255, 255)
WHITE: Color = (255, 255, 255, 255)
YELLOW: Color = (253, 249, 0, 255)
LIGHTGRAY: Color = (200, 200, 200, 255)
BLACK: Color = (0, 0, 0, 255)


class Component:
    """Base class of every entity component."""


class Collider(Component, ABC):
    """Owns a body and decides whether it overlaps another collider."""

    def __init__(self, body: RigidBody) -> None:
        self.body = body

    @abstractmethod
    def is_colliding(self, other: Collider) -> Vec2:
        """Return the overlap vector, falsy when there is none."""


class SimpleColliderComponent(Collider):
    """Rectangle-versus-rectangle overlap using corner containment."""

    def is_colliding(self, other: Collider) -> Vec2:
        if not isinstance(other, SimpleColliderComponent):
            return Vec2()
        own = self.body
        target = other.body
        if target is own:
            return Vec2()
        if not isinstance(own, RectangleRigidBody) or not isinstance(target, RectangleRigidBody):
            return Vec2()

        half = own.half
        other_half = target.half
        # Each own corner is paired with the opposite corner of the other
        # rectangle and a bit identifying which corner it is.
        probes = (
            (own.pos - half, target.pos + other_half, 1),
            (own.pos - Vec2(half.x, -half.y), target.pos + Vec2(other_half.x, -other_half.y), 2),
            (own.pos + Vec2(half.x, -half.y), target.pos - Vec2(other_half.x, -other_half.y), 4),
            (own.pos + half, target.pos - other_half, 8),
        )
        mask = 0
        total = Vec2()
        for point, reference, bit in probes:
            if target.contains_point(point):
                mask += bit
                total = point - reference

        if mask in (0b1010, 0b0101):
            return Vec2(0, total.y)
        if mask in (0b0011, 0b1100):
            return Vec2(total.x, 0)
        if abs(total.x) < abs(total.y):
            return Vec2(total.x, 0)
        return Vec2(0, total.y)


class GravityComponent(Component):
    """Constant pull scaled by the body's weight."""

    def __init__(self, body: RigidBody, gravity: Vec2) -> None:
        self.body = body
        self.gravity = gravity

    def get_move(self) -> Vec2:
        return self.gravity * self.body.weight


class InstaKillComponent(Component):
    """Marks an entity whose touch kills the player."""

    def __init__(self) -> None:
        self.is_active = True


class PelletComponent(Component):
    """Marks an entity the player can eat."""


class PlayerComponent(Component):
    """Marks the entity driven by user input."""


class Renderer(Component, ABC):
    """Draws a body onto a surface in a colour."""

    def __init__(self, body: RigidBody, color: Color = RED) -> None:
        self.body = body
        self.color = color

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the body onto ``surface``."""


class RectangleRenderer(Renderer):
    """Fills the body's rectangle."""

    def rect(self) -> pygame.Rect:
        """The integer screen rectangle covered by the body."""
        body = self.body
        if not isinstance(body, RectangleRigidBody):
            raise TypeError("RectangleRenderer needs a RectangleRigidBody")
        left = body.pos.x - body.wh.x / 2
        top = body.pos.y - body.wh.y / 2
        return pygame.Rect(int(left), int(top), int(body.wh.x), int(body.wh.y))

    def render(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, self.color, self.rect())