"""Colours and multi-stop colour gradients for entropy visualisation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

__all__ = [
    "MAX_ENTROPY_VALUE",
    "Color",
    "Stop",
    "ColorGradient",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
    "LOW_ENTROPY",
    "MED_LOW_ENTROPY",
    "MED_ENTROPY",
    "MED_HIGH_ENTROPY",
    "HIGH_ENTROPY",
    "MAX_ENTROPY",
    "BACKGROUND",
    "CURSOR_LINE",
    "REGION_BORDER",
    "REGION_TEXT",
    "REGION_TEXT_BG",
    "HOVER_HIGHLIGHT",
]

#: Maximum entropy value (8 bits per byte).
MAX_ENTROPY_VALUE = 8.0


def _clamp_unit(t: float) -> float:
    if t < 0.0:
        return 0.0
    if t > 1.0:
        return 1.0
    return t


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {value!r}")

    @classmethod
    def from_argb(cls, argb: int) -> "Color":
        """Build a colour from a 32-bit ARGB value."""
        return cls(
            (argb >> 16) & 0xFF,
            (argb >> 8) & 0xFF,
            argb & 0xFF,
            (argb >> 24) & 0xFF,
        )

    def to_argb(self) -> int:
        """Return the colour packed as a 32-bit ARGB value."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def to_rgba(self) -> int:
        """Return the colour packed as a 32-bit RGBA value."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a


@dataclass(frozen=True)
class Stop:
    """A colour at a position (0.0 to 1.0) along a gradient."""

    position: float
    color: Color


# Basic colours
BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
CYAN = Color(0, 255, 255)
MAGENTA = Color(255, 0, 255)

# Entropy gradient colours
LOW_ENTROPY = Color(16, 32, 128)
MED_LOW_ENTROPY = Color(32, 128, 192)
MED_ENTROPY = Color(32, 192, 64)
MED_HIGH_ENTROPY = Color(224, 192, 32)
HIGH_ENTROPY = Color(224, 96, 16)
MAX_ENTROPY = Color(192, 16, 16)

# UI colours
BACKGROUND = Color(32, 32, 32)
CURSOR_LINE = Color(255, 255, 255, 200)
REGION_BORDER = Color(0, 0, 0, 255)
REGION_TEXT = Color(220, 220, 220, 255)
REGION_TEXT_BG = Color(0, 0, 0, 180)
HOVER_HIGHLIGHT = Color(255, 255, 255, 64)


def _lerp(a: Color, b: Color, t: float) -> Color:
    t = _clamp_unit(t)
    return Color(
        int(a.r + (b.r - a.r) * t),
        int(a.g + (b.g - a.g) * t),
        int(a.b + (b.b - a.b) * t),
        int(a.a + (b.a - a.a) * t),
    )


class ColorGradient:
    """A multi-stop colour gradient; stops are kept sorted by position."""

    def __init__(self, stops: Optional[Iterable[Stop]] = None) -> None:
        if stops is None:
            stops = self._default_stops()
        self._stops = tuple(sorted(stops, key=lambda stop: stop.position))

    @property
    def stops(self) -> tuple[Stop, ...]:
        """The gradient's stops, ordered by position."""
        return self._stops

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._stops)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorGradient):
            return NotImplemented
        return self._stops == other._stops

    def __hash__(self) -> int:
        return hash(self._stops)

    def sample(self, t: float) -> Color:
        """Return the colour at position ``t``, clamped to [0, 1]."""
        if not self._stops:
            return Color()

        t = _clamp_unit(t)
        prev, nxt = self._stops[0], self._stops[-1]
        for left, right in zip(self._stops, self._stops[1:]):
            if left.position <= t <= right.position:
                prev, nxt = left, right
                break

        if t <= prev.position:
            return prev.color
        if t >= nxt.position:
            return nxt.color

        span = nxt.position - prev.position
        local_t = (t - prev.position) / span if span > 0.0 else 0.0
        return _lerp(prev.color, nxt.color, local_t)

    def sample_entropy(self, entropy: float) -> Color:
        """Return the colour for an entropy value in the 0 to 8 range."""
        return self.sample(entropy / MAX_ENTROPY_VALUE)

    @staticmethod
    def _default_stops() -> list[Stop]:
        return [
            Stop(0.00, LOW_ENTROPY),
            Stop(0.25, MED_LOW_ENTROPY),
            Stop(0.50, MED_ENTROPY),
            Stop(0.70, MED_HIGH_ENTROPY),
            Stop(0.85, HIGH_ENTROPY),
            Stop(1.00, MAX_ENTROPY),
        ]

    @classmethod
    def create_default(cls) -> "ColorGradient":
        """The standard entropy gradient: dark blue through green to red."""
        return cls(cls._default_stops())

    @classmethod
    def create_simple(cls, low: Color, high: Color) -> "ColorGradient":
        """A two-stop gradient from ``low`` at 0 to ``high`` at 1."""
        return cls([Stop(0.0, low), Stop(1.0, high)])

    @classmethod
    def create_grayscale(cls) -> "ColorGradient":
        """A gradient from black to white."""
        return cls([Stop(0.0, BLACK), Stop(1.0, WHITE)])

    @classmethod
    def create_fire(cls) -> "ColorGradient":
        """A fire gradient: black, dark red, orange, yellow, pale yellow."""
        return cls(
            [
                Stop(0.00, Color(0, 0, 0)),
                Stop(0.25, Color(128, 0, 0)),
                Stop(0.50, Color(255, 64, 0)),
                Stop(0.75, Color(255, 192, 0)),
                Stop(1.00, Color(255, 255, 224)),
            ]
        )