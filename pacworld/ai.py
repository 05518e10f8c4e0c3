"""Enemy steering: a noisy chaser and a small feed-forward network."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable, Sequence
from typing import Protocol

from pacworld.bodies import RigidBody
from pacworld.components import Component, PlayerComponent
from pacworld.entities import WorldEntity
from pacworld.vector import Vec2

logger = logging.getLogger(__name__)

# Output directions: up, left, down, right.
_DIRECTIONS = (Vec2(0, -1), Vec2(-1, 0), Vec2(0, 1), Vec2(1, 0))


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _find_player(entities: Iterable[WorldEntity]) -> WorldEntity | None:
    return next((e for e in entities if e.get_component(PlayerComponent)), None)


class SimpleAIComponent(Component):
    """Chases the player, occasionally lunging, faster as anger grows."""

    def __init__(
        self,
        body: RigidBody,
        anger: float = 1.0,
        max_anger: float = 8.0,
        rng: _RandomSource | None = None,
    ) -> None:
        self.body = body
        self.anger = anger
        self.max_anger = max_anger
        self._rng = rng if rng is not None else random.Random()

    def get_move(self, entities: Iterable[WorldEntity]) -> Vec2:
        """Return this frame's displacement towards the first player found."""
        player = _find_player(entities)
        if player is None:
            return Vec2()
        offset = player.body.pos - self.body.pos
        if self._rng.randrange(50) > 48:
            return offset / float(self._rng.randrange(12) + 6)
        total = abs(offset.x) + abs(offset.y)
        if total == 0:
            return Vec2()
        return Vec2(offset.x / total, offset.y / total) / 2.0 * self.anger

    def add_anger(self, factor: float) -> None:
        """Grow anger by ``factor``, with a rare spike and a wrap past the maximum."""
        self.anger += factor
        if self._rng.randrange(100000) > 99995:
            self.anger = self.max_anger - factor / 180
        if self.anger > self.max_anger:
            self.anger = 1.0


def _squash(x: float) -> float:
    return x / (1 + abs(x))


class LearningAIComponent(Component):
    """Steers with a randomly weighted three-layer network.

    The input layer one-hot encodes the player's screen quadrant (first 16
    slots) and this body's quadrant (offset by 15). Outputs 0..3 weight the
    four directions; output 4 above 0.8 makes the body stand still.
    """

    layer_sizes: tuple[int, int, int] = (32, 24, 5)

    def __init__(
        self,
        body: RigidBody,
        screen_width: int,
        screen_height: int,
        rng: _RandomSource | None = None,
    ) -> None:
        self.body = body
        self.screen_width = screen_width
        self.screen_height = screen_height
        rng = rng if rng is not None else random.Random()
        self.layers: list[list[float]] = [[0.0] * size for size in self.layer_sizes]
        self.weights: list[list[list[float]]] = [
            [
                [1.0 - rng.randrange(10_000_000) / 5_000_000 for _ in range(out_size)]
                for _ in range(in_size)
            ]
            for in_size, out_size in zip(self.layer_sizes, self.layer_sizes[1:])
        ]

    @property
    def outputs(self) -> tuple[float, ...]:
        return tuple(self.layers[2])

    def quadrant(self, body: RigidBody) -> int:
        """Index of the grid cell strictly containing the body's position, else 0."""
        count = int(math.sqrt(self.layer_sizes[0] // 2))
        cell = Vec2(self.screen_width / count, self.screen_height / count)
        pos = body.pos
        for i in range(count):
            for j in range(count):
                top_left = Vec2(cell.x * i, cell.y * j)
                d1 = pos - top_left
                d2 = pos - (top_left + cell)
                if d1.x > 0 and d1.y > 0 and d2.x < 0 and d2.y < 0:
                    return i + j * count
        return 0

    def _propagate(self) -> None:
        inputs, hidden, output = self.layers
        first, second = self.weights
        hidden[:] = [0.0] * len(hidden)
        output[:] = [0.0] * len(output)
        # The output layer is fed from the first hidden node's running sum.
        for value, edges in zip(inputs, first):
            for m, weight in enumerate(edges):
                hidden[m] += value * weight
            lead = hidden[0]
            for m, weight in enumerate(second[0]):
                output[m] += lead * weight
        hidden[:] = [_squash(v) for v in hidden]
        output[:] = [_squash(v) for v in output]

    def get_move(self, entities: Sequence[WorldEntity]) -> Vec2:
        """Run the network on the current positions and return a displacement."""
        ai_quadrant = self.quadrant(self.body)
        player_quadrant = 0
        for entity in entities:
            if entity.get_component(PlayerComponent):
                player_quadrant = self.quadrant(entity.body)
        inputs = self.layers[0]
        inputs[:] = [0.0] * len(inputs)
        inputs[player_quadrant] = 1.0
        inputs[15 + ai_quadrant] = 1.0
        self._propagate()

        output = self.layers[2]
        result = Vec2()
        for direction, value in zip(_DIRECTIONS, output):
            if value >= 0:
                result = result + direction * value
        logger.debug("network outputs %s, move %s", output, result)
        if output[4] > 0.8:
            return Vec2()
        return result * 3.0