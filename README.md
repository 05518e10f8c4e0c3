# pacworld

A small top-down arcade game built on a simple entity–component design.
You steer a yellow square around the field. Pick up the white pellet and
stay away from the red squares. One red square moves on its own. A small
neural network with random weights steers it. The network's input is the
part of the screen that you are in and the part that it is in.

## Installing

```
pip install .
```

The game needs `pygame`, and pip installs it along with the package.

## Playing

```
pacworld
```

Options:

- `--width N`, `--height N`: window size in pixels (default 500 × 500)
- `--debug`: turn on debug logging

Controls:

- `W` / `A` / `S` / `D`: move up, left, down and right
- `Esc` or closing the window: quit

Each pellet you collect adds one to your score. The moving red square has
its own score, shown in the top-left corner. It starts at 200 and goes up
every frame that square stays near you. It drops by 300 whenever you take
a pellet. If you touch a red square, the level is rebuilt and both scores
are reset. If the chaser's score was below zero at that moment, the
chaser gets a freshly randomised network. Otherwise it keeps the one it had.

## Using it as a library

- `pacworld.vector.Vec2` is an immutable 2-D vector with `+`, `-`, `*`,
  `/`, `abs()` and truthiness (false only for the zero vector).
- `pacworld.bodies.RectangleRigidBody` is an axis-aligned box given by its
  centre (`pos`), size (`wh`) and `weight`. It provides
  `contains_point(point)`.
- `pacworld.components` holds the parts an entity can carry:
  `SimpleColliderComponent`, `GravityComponent`, `RectangleRenderer`,
  `PlayerComponent`, `PelletComponent` and `InstaKillComponent`.
- `pacworld.entities` provides `WorldEntity` (`add_component`,
  `get_component`), plus the ready-made `ImmovableRect` and `PelletEntity`.
- `pacworld.ai` provides `SimpleAIComponent`, which chases the player and
  moves faster as its anger grows, and `LearningAIComponent`, the
  network-driven chaser.
- `pacworld.world.World` owns the entities. `World.setup_entities()` builds
  the standard level. `World.step(surface)` advances one frame and draws
  onto `surface` when one is given. `World.run()` opens a window and plays
  until the window is closed.

```python
from pacworld.world import World, UserInput

world = World(500, 500)
world.setup_entities()
world.handle_user_input(UserInput.D_KEY)
world.step()  # advance one frame without drawing
```

## Limitations

- The chaser's network is never trained. Its weights are random. When a
  round ends with a negative chaser score, the network is replaced with a
  new random one, and nothing else happens.
- The Space key is read and queued, but it has no effect.
- The standard level uses neither `SimpleAIComponent` nor
  `GravityComponent`. To use them, add them to entities yourself.

## Running the tests

```
pip install .[test]
pytest
```