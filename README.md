# rpgutils

Small building blocks for the game loop of a 2D role-playing game.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

- `rpgutils.clock.Clock`: in-game time of day held in `seconds`. Advance it
  with `+=` a number of seconds; `str(clock)` gives `HH:MM:SS`, wrapping at
  24 hours.
- `rpgutils.daynight.compute_sun_brightness(seconds)`: sun brightness
  between 0 and 1 for a time of day in seconds, switching smoothly between
  day and night.
- `rpgutils.event.Event`: a multicast event. Subscribe callables with
  `subscribe` or `+=`, remove them with `unsubscribe` or `-=`, and fire the
  event by calling it with the arguments for the handlers. Handlers are
  compared with `==`, so an equal handler is only subscribed once; they are
  called in subscription order. `len(event)` and `handler in event` work as
  expected.
- `rpgutils.timer.GameTimer(prev_frame_time=0.0, clock=time.monotonic)`:
  each call to `delta_time()` reads `clock`, measures the time since the
  previous frame and returns it capped at `MAX_DELTA_TIME` (0.4 seconds),
  so that a stalled frame does not make the world jump. The uncapped value
  is kept in `raw_delta`.
- `rpgutils.text.normalize_text(text, line_length)`: wraps text at the last
  space that fits into lines no longer than `line_length`, cutting words
  that are longer than a line and dropping leading spaces of each line.
  A `line_length` below 1 raises `ValueError`. `ltrim(text)` strips leading
  space characters.
- `rpgutils.noise.OpenSimplexNoise(seed=None, octaves=2, lacunarity=2.0,
  persistence=0.5, period=32.0)`: seeded, fractal 2D OpenSimplex noise.
  Without a seed the current Unix time is used. `get_noise(x, y)` returns
  the noise value at a point. `seed` and `octaves` are properties: setting
  `seed` rebuilds the permutation tables, and `octaves` is clamped to
  `0..MAX_OCTAVES` (9). `lacunarity`, `persistence` and `period` are plain
  attributes.
- `rpgutils.animation`: sprite animators as state machines.
  - `SpriteAnimator` holds declared `parameters`, a frameless `entry` node
    and the other `nodes`; build it with `add_parameter`, `add_node`,
    `add_transition`, and look nodes up with `node(name)`.
  - `AnimationFrame(rect, duration)` is a texture rectangle
    `(x, y, width, height)` shown for `duration` seconds.
  - `AnimatorState(animator)` plays an animator. Its `parameters` start at
    `(0.0, 0.0)` for every `vec2` parameter; `update(delta_time)` takes every
    transition whose condition holds, advances frames and returns the
    current rectangle (also kept in `rect`). Updating while in a node with
    no frames, such as the entry node with no transition out of it, raises
    `ValueError`.
  - `load_animator(path)` reads a YAML file, `load_animator_from_mapping(data)`
    takes an already parsed mapping; `parse_condition` and `parse_expression`
    build conditions from their parsed form.

## Examples

```python
from rpgutils.clock import Clock
from rpgutils.daynight import compute_sun_brightness
from rpgutils.event import Event

clock = Clock(8 * 3600)
clock += 90
print(clock)                                  # 08:01:30
print(compute_sun_brightness(clock.seconds))  # close to 1.0 in daylight

on_hit = Event()
on_hit += lambda damage: print("took", damage)
on_hit(10)
```

```python
from rpgutils.noise import OpenSimplexNoise

noise = OpenSimplexNoise(seed=42)
height = noise.get_noise(10.0, 20.0)
```

### Animator description

An animator file declares parameters and nodes. Frame durations are in
milliseconds, a rect is either `[x, y, width, height]` or a mapping with
`x`, `y`, `width` and `height`, and the node marked `entry: true` is where
playback starts. Conditions compare numbers with `lt`, `le`, `gt` or `ge`;
an operand is a number, a parameter name, or a nested expression such as
`attr`, which reads `x` or `y` of a `vec2` parameter.

```yaml
parameters:
  velocity:
    type: vec2

nodes:
  idle:
    entry: true
    frames:
      - rect: [0, 0, 32, 32]
        duration: 200
    transitions:
      - to: walk
        condition:
          gt:
            l:
              attr:
                l: velocity
                r: x
            r: 0
  walk:
    frames:
      - rect: [32, 0, 32, 32]
        duration: 100
      - rect: [64, 0, 32, 32]
        duration: 100
    transitions:
      - to: idle
        condition:
          le:
            l:
              attr:
                l: velocity
                r: x
            r: 0
```

```python
from rpgutils.animation import AnimatorState, load_animator

animator = load_animator("player.yml")
state = AnimatorState(animator)
print(state.update(0.016))         # (0, 0, 32, 32)
state.parameters["velocity"] = (1.0, 0.0)
print(state.update(0.016))         # (32, 0, 32, 32)
```

## What it does not do

The package has no window, renderer, audio or entity system, and no game
to run: it offers no command. `GameTimer` reads whatever clock function it
is given, animators only report which texture rectangle to show, and the
day-night brightness is a number for the caller to apply.