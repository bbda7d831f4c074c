"""Value kinds that render to DOT literals.

Every value validates itself on construction and renders through
``render()``; ``str(value)`` gives the same text. List-like values are
append-only builders whose rendering can be repeated.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from dotgen.enums import CompassPoint, Style

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def format_double(value: float) -> str:
    """Fixed-point text with two decimals and a '.' separator."""
    return f"{value:.2f}"


def _is_latin_letter(c: str) -> bool:
    return (
        "a" <= c <= "z"
        or "A" <= c <= "Z"
        or "\u00c0" <= c <= "\u00d6"
        or "\u00d8" <= c <= "\u00f6"
        or "\u00f8" <= c <= "\u00ff"
    )


def _as_number(value: object, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{what} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{what} must be finite, got {value!r}")
    return float(value)


def escape_html(text: str) -> str:
    """Escape text for an HTML-like label or one of its attribute values.

    Control characters are dropped. ``&``, ``<``, ``>``, ``"`` and everything
    above U+009F are written as hexadecimal character references.
    """
    out = []
    for c in text:
        code = ord(c)
        if code <= 0x1F or 0x7F <= code <= 0x9F:
            continue
        if c in '&<>"' or code > 0x9F:
            out.append(f"&#x{code:04X};")
        else:
            out.append(c)
    return "".join(out)


class Value:
    """Anything that renders to a DOT literal."""

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class HtmlValue(Value):
    """Base of HTML-like labels, written between '<' and '>' and never quoted."""


@dataclass(frozen=True)
class Id(Value):
    """A bare DOT identifier: Latin letters, digits and '_', no leading digit."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("IDs must not be empty")
        first = self.name[0]
        if not (_is_latin_letter(first) or first == "_"):
            raise ValueError(f"IDs must start with a latin letter or underscore: {self.name!r}")
        for c in self.name[1:]:
            if not (_is_latin_letter(c) or "0" <= c <= "9" or c == "_"):
                raise ValueError(
                    f"IDs must only contain latin letters, decimal digits or underscore: {self.name!r}"
                )

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class Bool(Value):
    value: bool

    def render(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, order=True)
class Int(Value):
    """A 64-bit signed integer."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Int expects an integer, got {self.value!r}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"Int out of 64-bit range: {self.value}")

    def render(self) -> str:
        return str(self.value)

    def __pos__(self) -> Int:
        return self

    def __neg__(self) -> Int:
        return Int(-self.value)

    def __add__(self, other: Int) -> Int:
        return Int(self.value + other.value)

    def __sub__(self, other: Int) -> Int:
        return Int(self.value - other.value)

    def __mul__(self, other: Int) -> Int:
        return Int(self.value * other.value)

    def __truediv__(self, other: Int) -> Int:
        if other.value == 0:
            raise ZeroDivisionError("Int division by zero")
        # Truncate toward zero like fixed-width integer division.
        quotient = abs(self.value) // abs(other.value)
        if (self.value < 0) != (other.value < 0):
            quotient = -quotient
        return Int(quotient)


@dataclass(frozen=True, order=True)
class Double(Value):
    """A 64-bit float, compared by exact IEEE equality."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _as_number(self.value, "Double"))

    def render(self) -> str:
        return format_double(self.value)

    def __pos__(self) -> Double:
        return self

    def __neg__(self) -> Double:
        return Double(-self.value)

    def __add__(self, other: Double) -> Double:
        return Double(self.value + other.value)

    def __sub__(self, other: Double) -> Double:
        return Double(self.value - other.value)

    def __mul__(self, other: Double) -> Double:
        return Double(self.value * other.value)

    def __truediv__(self, other: Double) -> Double:
        if other.value == 0.0:
            raise ZeroDivisionError("Double division by zero")
        return Double(self.value / other.value)


@dataclass(frozen=True)
class String(Value):
    """A double-quoted DOT string."""

    text: str

    def render(self) -> str:
        escaped = self.text.replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'


@dataclass(frozen=True)
class EscString(String):
    """A string that may carry GraphViz escape sequences.

    The sequences are resolved by the renderer, so they are written as-is.
    """

    BACKSLASH = "\\\\"
    HEAD_NODE_NAME = "\\H"
    NODE_NAME = "\\N"
    TAIL_NODE_NAME = "\\T"
    GRAPH_NAME = "\\G"
    EDGE_NAME = "\\E"
    LABEL = "\\L"
    LEFT_JUSTIFIED = "\\l"
    CENTERED = "\\n"
    RIGHT_JUSTIFIED = "\\r"


@dataclass(frozen=True)
class Point(Value):
    """A 2D or 3D position; marked points render with a trailing '!'."""

    x: float
    y: float
    z: float | None = None
    marked: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _as_number(self.x, "Point x"))
        object.__setattr__(self, "y", _as_number(self.y, "Point y"))
        if self.z is not None:
            object.__setattr__(self, "z", _as_number(self.z, "Point z"))

    @property
    def is_3d(self) -> bool:
        return self.z is not None

    @property
    def is_marked(self) -> bool:
        return self.marked

    def render(self) -> str:
        coords = [self.x, self.y] if self.z is None else [self.x, self.y, self.z]
        text = ",".join(format_double(c) for c in coords)
        return text + "!" if self.marked else text


@dataclass
class PointList(Value):
    points: list[Point] = field(default_factory=list)

    def add(self, point: Point) -> None:
        self.points.append(point)

    def render(self) -> str:
        return " ".join(p.render() for p in self.points)


@dataclass(frozen=True)
class Rect(Value):
    """An axis-aligned rectangle from two plain 2D points."""

    lower_left: Point
    upper_right: Point

    def __post_init__(self) -> None:
        if self.lower_left.is_3d or self.upper_right.is_3d:
            raise ValueError("Rect expects 2D points")
        if self.lower_left.marked or self.upper_right.marked:
            raise ValueError("Rect expects unmarked points")

    def render(self) -> str:
        return f"{self.lower_left.render()},{self.upper_right.render()}"


@dataclass
class DoubleList(Value):
    values: list[Double] = field(default_factory=list)

    def add(self, value: Double) -> None:
        self.values.append(value)

    def render(self) -> str:
        return ":".join(v.render() for v in self.values)


@dataclass(frozen=True)
class AddDouble(Value):
    """A double that may be marked additive with a leading '+'."""

    value: float
    additive: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _as_number(self.value, "AddDouble"))

    def render(self) -> str:
        return ("+" if self.additive else "") + format_double(self.value)


@dataclass(frozen=True)
class AddPoint(Value):
    x: float
    y: float
    additive: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _as_number(self.x, "AddPoint x"))
        object.__setattr__(self, "y", _as_number(self.y, "AddPoint y"))

    def render(self) -> str:
        prefix = "+" if self.additive else ""
        return f"{prefix}{format_double(self.x)},{format_double(self.y)}"


@dataclass(frozen=True)
class PortPos(Value):
    """A node port, a compass point, or both."""

    port: str | None = None
    compass: CompassPoint | None = None

    def __post_init__(self) -> None:
        if not self.port and self.compass is None:
            raise ValueError("PortPos needs a port name or a compass point")

    def render(self) -> str:
        if not self.port:
            return self.compass.render()  # type: ignore[union-attr]
        if self.compass is None:
            return self.port
        return f"{self.port}:{self.compass.render()}"


_LAYER_SEPARATORS = frozenset(" :\t,")


def _check_layer_name(name: str) -> None:
    if not name or any(c in _LAYER_SEPARATORS for c in name):
        raise ValueError(f"Invalid layer name: {name!r}")


@dataclass(frozen=True)
class LayerList(Value):
    names: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))
        if not self.names:
            raise ValueError("LayerList needs at least one layer")
        for name in self.names:
            _check_layer_name(name)

    def render(self) -> str:
        return ":".join(self.names)


@dataclass(frozen=True)
class LayerRange(Value):
    """Layer names or (first, last) ranges selecting layers."""

    items: tuple[str | tuple[str, str], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        if not self.items:
            raise ValueError("LayerRange needs at least one layer")
        for item in self.items:
            for name in (item,) if isinstance(item, str) else item:
                _check_layer_name(name)

    def render(self) -> str:
        return ",".join(
            item if isinstance(item, str) else f"{item[0]}:{item[1]}"
            for item in self.items
        )


@dataclass(frozen=True)
class ViewPort(Value):
    width: float
    height: float
    zoom: float = 1.0
    center: Point | str | None = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "zoom"):
            object.__setattr__(self, name, _as_number(getattr(self, name), f"ViewPort {name}"))
        if isinstance(self.center, Point) and (self.center.is_3d or self.center.marked):
            raise ValueError("ViewPort center must be a plain 2D point")

    def render(self) -> str:
        text = ",".join(format_double(v) for v in (self.width, self.height, self.zoom))
        if isinstance(self.center, Point):
            return f"{text},{self.center.render()}"
        if self.center:
            return f"{text},'{self.center}'"
        return text


@dataclass(frozen=True)
class StyleList(Value):
    styles: tuple[Style, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "styles", tuple(self.styles))
        if not self.styles:
            raise ValueError("StyleList needs at least one style")

    def render(self) -> str:
        return ",".join(s.render() for s in self.styles)
