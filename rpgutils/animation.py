"""Sprite animation state machines: definitions, YAML loading and playback."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import yaml

Vec2 = Tuple[float, float]
Value = Union[bool, float, Vec2]
Storage = Mapping[str, Any]
Condition = Callable[[Storage], bool]
Rect = Tuple[int, int, int, int]


class ParameterType(enum.Enum):
    """Kinds of parameters an animator can be driven by."""

    VEC2 = "vec2"


_DEFAULT_VALUES: Dict[ParameterType, Callable[[], Any]] = {
    ParameterType.VEC2: lambda: (0.0, 0.0),
}


@dataclass(frozen=True)
class AnimationFrame:
    """One frame: a texture rectangle shown for ``duration`` seconds."""

    rect: Rect
    duration: float = 0.0


@dataclass
class Transition:
    """An edge to ``destination`` taken when ``condition`` holds."""

    destination: "AnimatorNode"
    condition: Condition


@dataclass(eq=False)
class AnimatorNode:
    """A state of the animator with its frames and outgoing transitions."""

    name: str
    frames: List[AnimationFrame] = field(default_factory=list)
    transitions: List[Transition] = field(default_factory=list)


class SpriteAnimator:
    """A graph of animation nodes starting from a frameless entry node."""

    def __init__(self) -> None:
        self.parameters: Dict[str, ParameterType] = {}
        self.entry = AnimatorNode("entry")
        self.nodes: List[AnimatorNode] = [self.entry]

    def add_parameter(self, name: str, kind: ParameterType) -> None:
        """Declare a parameter that conditions may read."""
        self.parameters[name] = kind

    def add_node(self, name: str, frames) -> AnimatorNode:
        """Add a node playing ``frames`` and return it."""
        node = AnimatorNode(name, list(frames))
        self.nodes.append(node)
        return node

    def add_transition(
        self, source: AnimatorNode, destination: AnimatorNode, condition: Condition
    ) -> Transition:
        """Add a transition from ``source`` to ``destination``."""
        transition = Transition(destination, condition)
        source.transitions.append(transition)
        return transition

    def node(self, name: str) -> AnimatorNode:
        """Return the node called ``name``."""
        for candidate in self.nodes:
            if candidate.name == name:
                return candidate
        raise KeyError(name)


class AnimatorState:
    """Playback state of one animated sprite."""

    def __init__(self, animator: SpriteAnimator) -> None:
        self.animator = animator
        self.parameters: Dict[str, Any] = {
            name: _DEFAULT_VALUES[kind]() for name, kind in animator.parameters.items()
        }
        self.node: AnimatorNode = animator.entry
        self.frame_index = 0
        self.frame_time = 0.0
        self.rect: Optional[Rect] = None

    def _follow_transitions(self) -> None:
        while True:
            taken = next(
                (t for t in self.node.transitions if t.condition(self.parameters)), None
            )
            if taken is None:
                return
            self.node = taken.destination
            self.frame_index = 0
            self.frame_time = 0.0

    def update(self, delta_time: float) -> Rect:
        """Take due transitions, advance frames and return the current rectangle."""
        self._follow_transitions()

        frames = self.node.frames
        if not frames:
            raise ValueError(f"animation node {self.node.name!r} has no frames")

        frame = frames[self.frame_index]
        self.frame_time += delta_time
        while frame.duration < self.frame_time:
            left = frame.duration - self.frame_time
            self.frame_index = (self.frame_index + 1) % len(frames)
            self.frame_time = left
            frame = frames[self.frame_index]

        self.rect = frame.rect
        return frame.rect


def _require_float(value: Value) -> float:
    if isinstance(value, bool) or not isinstance(value, float):
        raise TypeError(f"expected a number, got {value!r}")
    return value


@dataclass
class _Constant:
    value: float = 0.0

    def evaluate(self, storage: Storage) -> Value:
        return self.value


@dataclass
class _Parameter:
    name: str

    def evaluate(self, storage: Storage) -> Value:
        return storage[self.name]


@dataclass
class _Attribute:
    left: Any
    attribute: str

    def evaluate(self, storage: Storage) -> Value:
        value = self.left.evaluate(storage)
        if isinstance(value, tuple) and len(value) == 2:
            if self.attribute == "x":
                return float(value[0])
            if self.attribute == "y":
                return float(value[1])
        return 0.0


@dataclass
class _Comparison:
    compare: Callable[[float, float], bool]
    left: Any
    right: Any

    def evaluate(self, storage: Storage) -> Value:
        left = _require_float(self.left.evaluate(storage))
        right = _require_float(self.right.evaluate(storage))
        return self.compare(left, right)


_COMPARISONS = {
    "lt": operator.lt,
    "le": operator.le,
    "gt": operator.gt,
    "ge": operator.ge,
}


def _first_item(node: Any) -> Tuple[str, Any]:
    if not isinstance(node, Mapping) or not node:
        raise ValueError(f"expected a non-empty mapping, got {node!r}")
    key, value = next(iter(node.items()))
    return str(key), value


def _operand(node: Any, key: str) -> Any:
    if not isinstance(node, Mapping) or key not in node:
        raise ValueError(f"expression is missing operand {key!r}")
    return node[key]


def parse_expression(parameters, kind: str, node: Any):
    """Build an expression of type ``kind`` from a parsed YAML ``node``.

    The returned object has an ``evaluate(storage)`` method. Unknown kinds
    evaluate to ``0.0``.
    """
    compare = _COMPARISONS.get(kind)
    if compare is not None:
        return _Comparison(
            compare,
            parse_expression(parameters, "l", _operand(node, "l")),
            parse_expression(parameters, "r", _operand(node, "r")),
        )

    if kind == "attr":
        return _Attribute(
            parse_expression(parameters, "l", _operand(node, "l")),
            str(_operand(node, "r")),
        )

    if kind in ("l", "r"):
        if node is None:
            raise ValueError("expression operand is empty")
        if isinstance(node, (Mapping, list)):
            inner_kind, inner_node = _first_item(node)
            return parse_expression(parameters, inner_kind, inner_node)
        text = node if isinstance(node, str) else str(node)
        if text in parameters:
            return _Parameter(text)
        if isinstance(node, bool):
            raise ValueError(f"not a number: {node!r}")
        try:
            return _Constant(float(node))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"not a number or parameter: {node!r}") from exc

    return _Constant()


def parse_condition(parameters, condition_node: Any) -> Condition:
    """Build a predicate over parameter storage from a condition mapping."""
    kind, node = _first_item(condition_node)
    expression = parse_expression(parameters, kind, node)

    def condition(storage: Storage) -> bool:
        result = expression.evaluate(storage)
        if not isinstance(result, bool):
            raise TypeError(f"condition did not yield a boolean: {result!r}")
        return result

    return condition


def _parse_rect(node: Any) -> Rect:
    if isinstance(node, Mapping):
        try:
            return (int(node["x"]), int(node["y"]), int(node["width"]), int(node["height"]))
        except KeyError as exc:
            raise ValueError(f"rect is missing {exc.args[0]!r}") from exc
    if isinstance(node, (list, tuple)) and len(node) == 4:
        x, y, width, height = node
        return (int(x), int(y), int(width), int(height))
    raise ValueError(f"invalid rect: {node!r}")


def _parse_frame(node: Mapping[str, Any]) -> AnimationFrame:
    if "rect" not in node:
        raise ValueError("frame is missing 'rect'")
    duration = node.get("duration")
    seconds = 0.0 if duration is None else int(duration) * 1e-3
    return AnimationFrame(_parse_rect(node["rect"]), seconds)


def load_animator_from_mapping(data: Mapping[str, Any]) -> SpriteAnimator:
    """Build an animator from a parsed description with parameters and nodes."""
    animator = SpriteAnimator()
    parameters = data.get("parameters") or {}
    nodes = data.get("nodes") or {}

    for name, spec in parameters.items():
        if not isinstance(spec, Mapping) or "type" not in spec:
            raise ValueError(f"parameter {name!r} has no type")
        # Every parameter type currently maps to a 2D vector.
        animator.add_parameter(str(name), ParameterType.VEC2)

    names = set(animator.parameters)
    by_name: Dict[str, AnimatorNode] = {}
    for name, spec in nodes.items():
        spec = spec or {}
        frames = [_parse_frame(frame) for frame in spec.get("frames") or []]
        by_name[str(name)] = animator.add_node(str(name), frames)

    for name, spec in nodes.items():
        spec = spec or {}
        source = by_name[str(name)]
        if spec.get("entry"):
            animator.add_transition(animator.entry, source, lambda storage: True)
        for transition in spec.get("transitions") or []:
            destination = by_name[str(transition["to"])]
            condition = parse_condition(names, transition.get("condition"))
            animator.add_transition(source, destination, condition)

    return animator


def load_animator(path) -> SpriteAnimator:
    """Load an animator from a YAML file."""
    with Path(path).open("r", encoding="utf-8") as stream:
        data = yaml.safe_load(stream) or {}
    return load_animator_from_mapping(data)