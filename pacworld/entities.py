"""World entities: a body plus a list of components."""

from __future__ import annotations

import enum
from typing import TypeVar

from pacworld.bodies import RectangleRigidBody, RigidBody
from pacworld.components import (
    PURPLE,
    WHITE,
    Color,
    Component,
    PelletComponent,
    RectangleRenderer,
    SimpleColliderComponent,
)
from pacworld.vector import Vec2

C = TypeVar("C", bound=Component)


class EntityType(enum.Enum):
    NORMAL = 0
    IMMOVABLE_RECT = 1


class WorldEntity:
    """An object in the world, described by its components."""

    entity_type = EntityType.NORMAL

    def __init__(self, body: RigidBody) -> None:
        self.body = body
        self.components: list[Component] = []

    def add_component(self, component: Component) -> None:
        self.components.append(component)

    def get_component(self, kind: type[C]) -> C | None:
        """Return the first component that is an instance of ``kind``."""
        return next((c for c in self.components if isinstance(c, kind)), None)


class ImmovableRect(WorldEntity):
    """A very heavy rectangle that collisions barely move."""

    entity_type = EntityType.IMMOVABLE_RECT

    def __init__(self, wh: Vec2, pos: Vec2, color: Color = PURPLE) -> None:
        super().__init__(RectangleRigidBody(wh, pos, 10000000000))
        self.add_component(SimpleColliderComponent(self.body))
        self.add_component(RectangleRenderer(self.body, color))


class PelletEntity(WorldEntity):
    """A small white pellet for the player to eat."""

    def __init__(self, wh: Vec2, pos: Vec2) -> None:
        super().__init__(RectangleRigidBody(wh, pos, 1))
        self.add_component(SimpleColliderComponent(self.body))
        self.add_component(RectangleRenderer(self.body, WHITE))
        self.add_component(PelletComponent())