"""Color values: RGB, RGBA, HSV, X11 names and weighted color lists."""

from __future__ import annotations

from dataclasses import dataclass, field

from dotgen.values import Value, format_double
from dotgen.x11 import X11_COLORS


class Color(Value):
    """Base of every value accepted where DOT expects a color."""


def _check_channel(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} channel must be an integer between 0 and 255, got {value!r}")


@dataclass(frozen=True)
class RGB(Color):
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_channel("red", self.red)
        _check_channel("green", self.green)
        _check_channel("blue", self.blue)

    def render(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


@dataclass(frozen=True)
class RGBA(RGB):
    """An RGB color with an alpha channel."""

    alpha: int

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_channel("alpha", self.alpha)

    @classmethod
    def from_rgb(cls, color: RGB, alpha: int) -> RGBA:
        return cls(color.red, color.green, color.blue, alpha)

    def render(self) -> str:
        return super().render() + f"{self.alpha:02X}"


def hsv_to_rgb(hue: float, saturation: float, value: float) -> tuple[int, int, int]:
    """Convert HSV components in [0.0, 1.0] to 8-bit RGB channels.

    Uses the six-sector conversion: the hue selects a 60 degree sector that
    decides which channel gets the chroma ``c``, which the intermediate
    ``x`` and which zero; ``m`` lifts all three to the requested value.
    Channels are truncated toward zero after scaling by 255.
    """
    for name, component in (("Hue", hue), ("Saturation", saturation), ("Value", value)):
        if not 0.0 <= component <= 1.0:
            raise ValueError(f"HSV color: {name} out of range (0.0 - 1.0): {component}")
    if hue == 1.0:
        hue = 0.0

    h = hue * 360.0
    c = value * saturation
    x = c * (1.0 - abs(((h / 60.0) % 2.0) - 1.0))
    m = value - c

    if h < 60.0:
        r, g, b = c, x, 0.0
    elif h < 120.0:
        r, g, b = x, c, 0.0
    elif h < 180.0:
        r, g, b = 0.0, c, x
    elif h < 240.0:
        r, g, b = 0.0, x, c
    elif h < 300.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return int((r + m) * 255.0), int((g + m) * 255.0), int((b + m) * 255.0)


@dataclass(frozen=True)
class HSV(Color):
    """A color given as hue, saturation and value, rendered as RGB."""

    hue: float
    saturation: float
    value: float

    def __post_init__(self) -> None:
        # Validates the components before anything is stored.
        hsv_to_rgb(self.hue, self.saturation, self.value)
        if self.hue == 1.0:
            object.__setattr__(self, "hue", 0.0)

    @property
    def rgb(self) -> RGB:
        return RGB(*hsv_to_rgb(self.hue, self.saturation, self.value))

    def render(self) -> str:
        return self.rgb.render()


def x11_color(name: str) -> RGB:
    """Look up an X11 color name."""
    try:
        return RGB(*X11_COLORS[name.lower()])
    except KeyError:
        raise ValueError(f"Unknown X11 color: {name!r}") from None


@dataclass(frozen=True)
class NamedColor(Color):
    """An X11 color referenced by name."""

    name: str

    def __post_init__(self) -> None:
        key = self.name.lower()
        if key not in X11_COLORS:
            raise ValueError(f"Unknown X11 color: {self.name!r}")
        object.__setattr__(self, "name", key)

    @property
    def rgb(self) -> RGB:
        return x11_color(self.name)

    def render(self) -> str:
        return self.name


@dataclass
class ColorList(Color):
    """Colors joined by ':', each optionally weighted with ';weight'.

    Weights lie in [0.0, 1.0] and their running sum may not exceed 1.0.
    Unweighted entries carry ``None`` as their weight.
    """

    entries: list[tuple[Color, float | None]] = field(default_factory=list, init=False)
    weight_sum: float = field(default=0.0, init=False)

    def add(self, color: Color, weight: float | None = None) -> None:
        if isinstance(color, ColorList):
            raise ValueError("Color lists cannot be nested")
        if not isinstance(color, Color):
            raise ValueError(f"ColorList expects a color, got {color!r}")
        if weight is not None:
            if isinstance(weight, bool) or not isinstance(weight, (int, float)):
                raise ValueError(f"Color weight must be a number, got {weight!r}")
            weight = float(weight)
            if not 0.0 <= weight <= 1.0:
                raise ValueError(f"Color weight must be between 0.0 and 1.0, got {weight}")
            if self.weight_sum + weight > 1.0:
                raise ValueError("Summed color weights exceed 1.0")
            self.weight_sum += weight
        self.entries.append((color, weight))

    def render(self) -> str:
        parts = []
        for color, weight in self.entries:
            if weight is None:
                parts.append(color.render())
            else:
                parts.append(f"{color.render()};{format_double(weight)}")
        return ":".join(parts)
