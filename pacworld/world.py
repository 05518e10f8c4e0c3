"""The game world: entities, the per-frame update and the window loop."""

from __future__ import annotations

import argparse
import enum
import logging
from collections import deque
from collections.abc import Sequence

import pygame

from pacworld.ai import LearningAIComponent, SimpleAIComponent, _RandomSource
from pacworld.bodies import RectangleRigidBody, RigidBody
from pacworld.components import (
    BLACK,
    LIGHTGRAY,
    RED,
    YELLOW,
    Collider,
    GravityComponent,
    InstaKillComponent,
    PelletComponent,
    PlayerComponent,
    RectangleRenderer,
    Renderer,
    SimpleColliderComponent,
)
from pacworld.entities import EntityType, ImmovableRect, PelletEntity, WorldEntity
from pacworld.vector import Vec2

logger = logging.getLogger(__name__)


class UserInput(enum.Enum):
    W_KEY = enum.auto()
    A_KEY = enum.auto()
    S_KEY = enum.auto()
    D_KEY = enum.auto()
    SPACE_KEY = enum.auto()


class World:
    """Holds the entities and advances them one frame at a time."""

    AI_BASELINE_SCORE = 200
    PELLET_PENALTY = 300
    MOVE_FACTOR = 2.5
    ANGER_STEP = 0.025

    _KEY_MOVES = {
        UserInput.W_KEY: Vec2(0, -MOVE_FACTOR),
        UserInput.A_KEY: Vec2(-MOVE_FACTOR, 0),
        UserInput.S_KEY: Vec2(0, MOVE_FACTOR),
        UserInput.D_KEY: Vec2(MOVE_FACTOR, 0),
    }

    def __init__(self, height: int, width: int, rng: _RandomSource | None = None) -> None:
        self.screen_height = height
        self.screen_width = width
        self.score = 0
        self.ai_score = self.AI_BASELINE_SCORE
        self.ai: LearningAIComponent | None = None
        self.entities: list[WorldEntity] = []
        self.inputs: deque[UserInput] = deque()
        self._rng = rng

    def add_entity(self, entity: WorldEntity) -> None:
        self.entities.append(entity)

    def handle_user_input(self, user_input: UserInput) -> None:
        """Queue an input for the player entity to consume on the next step."""
        self.inputs.append(user_input)

    def setup_entities(self) -> None:
        """Populate the world with the standard level."""
        player_body = RectangleRigidBody(Vec2(30, 30), Vec2(1, 2), 5)
        block_body = RectangleRigidBody(Vec2(50, 200), Vec2(100, 200), 5)
        player = WorldEntity(player_body)
        block = WorldEntity(block_body)

        wall_low = ImmovableRect(Vec2(200, 100), Vec2(300, 300))
        wall_high = ImmovableRect(Vec2(200, 100), Vec2(300, 100))

        trap_a = ImmovableRect(Vec2(50, 50), Vec2(300, 150), RED)
        trap_a.add_component(InstaKillComponent())
        trap_c = ImmovableRect(Vec2(30, 30), Vec2(200, 200), RED)
        trap_c.add_component(InstaKillComponent())
        trap_b = ImmovableRect(Vec2(50, 50), Vec2(300, 250), RED)
        trap_b.add_component(InstaKillComponent())

        enemy = ImmovableRect(Vec2(30, 30), Vec2(400, 400), RED)
        enemy.add_component(InstaKillComponent())
        if self.ai is None:
            self.ai = LearningAIComponent(
                enemy.body, self.screen_width, self.screen_height, rng=self._rng
            )
        enemy.add_component(self.ai)

        pellet = PelletEntity(Vec2(20, 20), Vec2(300, 200))

        player.add_component(SimpleColliderComponent(player_body))
        block.add_component(SimpleColliderComponent(block_body))
        block.add_component(RectangleRenderer(block_body))
        player.add_component(PlayerComponent())
        player.add_component(RectangleRenderer(player_body, YELLOW))

        for entity in (player, block, wall_low, wall_high, trap_a, trap_b, trap_c, pellet, enemy):
            self.add_entity(entity)

    def pos_location(self, pos: Vec2) -> Vec2:
        """Per axis: -1 before the screen, 1 past it, 0 on it."""

        def side(value: float, limit: int) -> float:
            if value < 0:
                return -1.0
            if value > limit:
                return 1.0
            return 0.0

        return Vec2(side(pos.x, self.screen_width), side(pos.y, self.screen_height))

    def try_move(self, body: RigidBody, delta: Vec2) -> None:
        """Move ``body`` by ``delta`` and keep it inside the screen."""
        x = body.pos.x + delta.x
        y = body.pos.y + delta.y
        if isinstance(body, RectangleRigidBody):
            half_w = body.wh.x / 2
            half_h = body.wh.y / 2
            if x - half_w < 0:
                x = half_w
            if y - half_h < 0:
                y = half_h
            if x + half_w > self.screen_width:
                x = self.screen_width - half_w
            if y + half_h > self.screen_height:
                y = self.screen_height - half_h
        else:
            x = min(max(x, 0), self.screen_width)
            y = min(max(y, 0), self.screen_height)
        body.pos = Vec2(x, y)

    def _on_player_death(self) -> None:
        self.score = 0
        if self.ai_score < 0:
            self.ai = None
        self.ai_score = self.AI_BASELINE_SCORE
        self.entities.clear()
        self.setup_entities()

    def _eat_pellet(self, pellet: WorldEntity, removed: set[WorldEntity]) -> None:
        self.entities.remove(pellet)
        removed.add(pellet)
        self.score += 1
        self.ai_score -= self.PELLET_PENALTY

    def _reward_learning_ai(self, body: RigidBody) -> None:
        for other in list(self.entities):
            if other.get_component(PlayerComponent) is None:
                continue
            diff = (other.body.pos - body.pos).abs()
            reward = (self.screen_width - diff.x) / self.screen_width + (
                self.screen_height - diff.y
            ) / self.screen_height
            if reward > 0:
                self.ai_score = int(self.ai_score + reward)

    def _resolve_push(self, body: RigidBody, other: RigidBody | None, factor: Vec2) -> None:
        weight = other.weight if other is not None else 1.0
        share = body.weight / weight
        self.try_move(body, -(factor / share) if share > 1 else -factor)
        if other is not None:
            self.try_move(other, factor * share if share < 1 else factor)

    def _collide(
        self,
        entity: WorldEntity,
        collider: SimpleColliderComponent,
        is_player: bool,
        removed: set[WorldEntity],
    ) -> bool:
        """Handle the entity's collisions; return True if the player died."""
        killed = False
        body = entity.body
        for other in list(self.entities):
            if other is entity or other in removed:
                continue
            if (
                entity.entity_type is EntityType.IMMOVABLE_RECT
                and other.entity_type is EntityType.IMMOVABLE_RECT
            ):
                continue
            other_collider = other.get_component(Collider)
            if other_collider is None:
                continue
            factor = collider.is_colliding(other_collider)
            if not factor:
                continue

            if is_player:
                if other.get_component(PelletComponent):
                    self._eat_pellet(other, removed)
                    continue
                if other.get_component(InstaKillComponent):
                    killed = True
                    continue

            other_is_player = other.get_component(PlayerComponent) is not None
            if entity.get_component(PelletComponent) and other_is_player:
                self._eat_pellet(entity, removed)
                break
            if entity.get_component(InstaKillComponent) and other_is_player:
                killed = True
                continue

            self._resolve_push(body, other.body, factor)
        return killed

    def step(self, surface: pygame.Surface | None = None) -> None:
        """Advance every entity one frame, drawing onto ``surface`` if given."""
        player_killed = False
        removed: set[WorldEntity] = set()
        for entity in list(self.entities):
            if entity in removed:
                continue
            body = entity.body
            collider = entity.get_component(SimpleColliderComponent)
            is_player = entity.get_component(PlayerComponent) is not None
            renderer = entity.get_component(Renderer)
            simple_ai = entity.get_component(SimpleAIComponent)
            learning_ai = entity.get_component(LearningAIComponent)

            if simple_ai is not None:
                self.try_move(body, simple_ai.get_move(self.entities))
                simple_ai.add_anger(self.ANGER_STEP)

            if learning_ai is not None:
                self.try_move(body, learning_ai.get_move(self.entities))
                self._reward_learning_ai(body)

            if renderer is not None and surface is not None:
                renderer.render(surface)

            gravity = entity.get_component(GravityComponent)
            if gravity is not None:
                self.try_move(body, gravity.get_move())

            if is_player:
                while self.inputs:
                    move = self._KEY_MOVES.get(self.inputs.popleft())
                    if move is not None:
                        self.try_move(body, move)

            if collider is not None:
                if self._collide(entity, collider, is_player, removed):
                    player_killed = True

        if player_killed:
            logger.debug("player killed; resetting world")
            self._on_player_death()

    def run(self) -> None:
        """Open the window and play until it is closed or Escape is pressed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.screen_width, self.screen_height))
            pygame.display.set_caption("Pac")
            font = pygame.font.Font(None, 20)
            clock = pygame.time.Clock()
            self.setup_entities()
            key_map = (
                (pygame.K_w, UserInput.W_KEY),
                (pygame.K_a, UserInput.A_KEY),
                (pygame.K_s, UserInput.S_KEY),
                (pygame.K_d, UserInput.D_KEY),
                (pygame.K_SPACE, UserInput.SPACE_KEY),
            )
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT or (
                        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                    ):
                        running = False
                if not running:
                    break
                pressed = pygame.key.get_pressed()
                for key, user_input in key_map:
                    if pressed[key]:
                        self.handle_user_input(user_input)

                screen.fill(BLACK)
                self.step(screen)
                screen.blit(font.render(f"Score: {self.score}", True, LIGHTGRAY), (190, 200))
                screen.blit(font.render(f"AI Score: {self.ai_score}", True, LIGHTGRAY), (0, 0))
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pacworld", description="Play the Pac world.")
    parser.add_argument("--width", type=int, default=500, help="window width in pixels")
    parser.add_argument("--height", type=int, default=500, help="window height in pixels")
    parser.add_argument("--debug", action="store_true", help="log debug output")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    World(args.height, args.width).run()
    return 0