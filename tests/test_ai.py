import random

import pytest

from pacworld.ai import LearningAIComponent, SimpleAIComponent
from pacworld.bodies import RectangleRigidBody
from pacworld.components import PlayerComponent
from pacworld.entities import WorldEntity
from pacworld.vector import Vec2


class FixedRandom:
    """Returns queued values from randrange, then repeats the last one."""

    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0) if len(self.values) > 1 else self.values[0]
        assert 0 <= value < stop
        return value


def make_player(pos):
    entity = WorldEntity(RectangleRigidBody(Vec2(10, 10), pos))
    entity.add_component(PlayerComponent())
    return entity


def make_plain(pos):
    return WorldEntity(RectangleRigidBody(Vec2(10, 10), pos))


def test_simple_ai_without_player_stays():
    ai = SimpleAIComponent(RectangleRigidBody(Vec2(10, 10), Vec2(0, 0)), rng=FixedRandom(0))
    assert ai.get_move([make_plain(Vec2(5, 5))]) == Vec2()


def test_simple_ai_heads_towards_player_with_anger_scaled_step():
    ai = SimpleAIComponent(
        RectangleRigidBody(Vec2(10, 10), Vec2(100, 100)), anger=3.0, rng=FixedRandom(0)
    )
    move = ai.get_move([make_plain(Vec2(0, 0)), make_player(Vec2(160, 70))])
    assert move.x > 0 and move.y < 0
    assert abs(move.x) + abs(move.y) == pytest.approx(3.0 / 2)
    assert move.x / -move.y == pytest.approx(2.0)


def test_simple_ai_lunge_divides_offset():
    ai = SimpleAIComponent(RectangleRigidBody(Vec2(10, 10), Vec2(0, 0)), rng=FixedRandom(49, 0))
    move = ai.get_move([make_player(Vec2(60, 30))])
    assert move == Vec2(60 / 6, 30 / 6)


def test_simple_ai_on_player_does_not_move():
    ai = SimpleAIComponent(RectangleRigidBody(Vec2(10, 10), Vec2(5, 5)), rng=FixedRandom(0))
    assert ai.get_move([make_player(Vec2(5, 5))]) == Vec2()


def test_add_anger_accumulates():
    ai = SimpleAIComponent(RectangleRigidBody(), rng=FixedRandom(0))
    ai.add_anger(0.5)
    ai.add_anger(0.25)
    assert ai.anger == pytest.approx(1.75)


def test_add_anger_wraps_past_maximum():
    ai = SimpleAIComponent(RectangleRigidBody(), anger=7.9, max_anger=8.0, rng=FixedRandom(0))
    ai.add_anger(0.5)
    assert ai.anger == 1.0


def test_add_anger_rare_spike():
    ai = SimpleAIComponent(RectangleRigidBody(), max_anger=8.0, rng=FixedRandom(99996))
    ai.add_anger(0.9)
    assert ai.anger == pytest.approx(8.0 - 0.9 / 180)


@pytest.mark.parametrize(
    "pos, expected",
    [
        (Vec2(50, 50), 0),
        (Vec2(150, 50), 1),
        (Vec2(50, 150), 4),
        (Vec2(350, 350), 15),
        (Vec2(100, 50), 0),
    ],
)
def test_quadrant(pos, expected):
    ai = LearningAIComponent(RectangleRigidBody(), 400, 400, rng=random.Random(1))
    assert ai.quadrant(RectangleRigidBody(Vec2(10, 10), pos)) == expected


def test_weights_shape_and_range():
    ai = LearningAIComponent(RectangleRigidBody(), 400, 400, rng=random.Random(7))
    first, second = ai.weights
    assert len(first) == 32 and all(len(row) == 24 for row in first)
    assert len(second) == 24 and all(len(row) == 5 for row in second)
    for layer in ai.weights:
        for row in layer:
            assert all(-1.0 < w <= 1.0 for w in row)


def test_zero_weights_give_no_move():
    ai = LearningAIComponent(RectangleRigidBody(Vec2(10, 10), Vec2(50, 50)), 400, 400)
    ai.weights = [[[0.0] * 24 for _ in range(32)], [[0.0] * 5 for _ in range(24)]]
    assert ai.get_move([make_player(Vec2(350, 350))]) == Vec2()
    assert ai.outputs == (0.0,) * 5


def test_positive_up_weight_moves_up():
    ai = LearningAIComponent(RectangleRigidBody(Vec2(10, 10), Vec2(50, 50)), 400, 400)
    second = [[0.0] * 5 for _ in range(24)]
    second[0][0] = 1.0
    ai.weights = [[[1.0] * 24 for _ in range(32)], second]
    move = ai.get_move([make_player(Vec2(350, 350))])
    assert move.x == 0
    assert move.y < 0
    assert move.y == pytest.approx(-3.0 * ai.outputs[0])


def test_stop_output_freezes_body():
    ai = LearningAIComponent(RectangleRigidBody(Vec2(10, 10), Vec2(50, 50)), 400, 400)
    second = [[0.0] * 5 for _ in range(24)]
    second[0][0] = 1.0
    second[0][4] = 1.0
    ai.weights = [[[1.0] * 24 for _ in range(32)], second]
    assert ai.get_move([make_player(Vec2(350, 350))]) == Vec2()
    assert ai.outputs[4] > 0.8


def test_get_move_is_deterministic_and_bounded():
    def build():
        return LearningAIComponent(
            RectangleRigidBody(Vec2(10, 10), Vec2(250, 120)), 400, 400, rng=random.Random(42)
        )

    entities = [make_player(Vec2(60, 330))]
    first = build().get_move(entities)
    ai = build()
    second = ai.get_move(entities)
    assert first == second
    assert all(-1.0 < v < 1.0 for v in ai.layers[1] + ai.layers[2])
    assert abs(second.x) <= 6.0 and abs(second.y) <= 6.0
    assert ai.layers[0][ai.quadrant(entities[0].body)] == 1.0