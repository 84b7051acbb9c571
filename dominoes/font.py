"""A small seven-segment style vector font for lower-case text and digits.

Coordinates follow the drawing convention of the game screens: the origin
is at the bottom left and ``y`` grows upwards.  A glyph of ``size`` is one
``size`` wide and two ``size`` tall.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

Point = tuple[float, float]


@dataclass(frozen=True)
class Stroke:
    """A polyline, or a closed outline when ``closed`` is set."""

    points: tuple[Point, ...]
    width: float
    closed: bool = False


@dataclass(frozen=True)
class Dot:
    """A filled circle; a knockout dot is painted in the panel colour."""

    x: float
    y: float
    radius: float
    knockout: bool = False


Shape = Union[Stroke, Dot]

# Each segment lists the characters that use it and its two end points,
# given in units of the glyph size.
_SEGMENTS: tuple[tuple[str, tuple[Point, Point]], ...] = (
    ("abcdefghjklmnopqruw0268", ((0, 0), (0, 1))),
    ("abcdefghklmnopqrsuvwy0456789", ((0, 1), (0, 2))),
    ("acefgijopqrstz02356789", ((0, 2), (1, 2))),
    ("ahjmnopqruvwy01234789", ((1, 2), (1, 1))),
    ("aghjmnoqsuwy013456789", ((1, 1), (1, 0))),
    ("cegijloqsuyz0235689", ((1, 0), (0, 0))),
    ("aefhprsyz2345689", ((0, 1), (1, 1))),
)

_B_OUTLINE: tuple[Point, ...] = (
    (0, 2), (7 / 8, 2), (1, 15 / 8), (1, 9 / 8), (7 / 8, 1), (0, 1),
    (7 / 8, 1), (1, 7 / 8), (1, 1 / 8), (7 / 8, 0), (0, 0),
)
_D_OUTLINE: tuple[Point, ...] = (
    (0, 2), (3 / 4, 2), (1, 7 / 4), (1, 1 / 4), (3 / 4, 0), (0, 0),
)

# Extra open paths drawn on top of the segments.
_EXTRA_PATHS: dict[str, tuple[tuple[Point, ...], ...]] = {
    "g": (((0.5, 1), (1, 1)),),
    "i": (((0.5, 0), (0.5, 2)),),
    "t": (((0.5, 0), (0.5, 2)),),
    "k": (((1, 2), (0, 1)), ((0, 1), (1, 0))),
    "m": (((0, 2), (0.5, 1)), ((0.5, 1), (1, 2))),
    "n": (((0, 2), (1, 1)),),
    "0": (((0, 2), (1, 1)),),
    "q": (((0.5, 1), (1, 0)),),
    "r": (((0.5, 1), (1, 0)),),
    "v": (((0, 1), (0.5, 0)), ((0.5, 0), (1, 1))),
    "x": (((0, 0), (1, 2)), ((1, 0), (0, 2))),
    "z": (((0, 0), (1, 2)),),
    "w": (((0, 0), (0.5, 1)), ((0.5, 1), (1, 0))),
    ",": (((0, 0), (0, -0.5)),),
}

_CLOSED_PATHS: dict[str, tuple[Point, ...]] = {"b": _B_OUTLINE, "d": _D_OUTLINE}

# Relative advance between characters, in units of the text size.
ADVANCE = 5 / 8


def _stroke(path: tuple[Point, ...], x: float, y: float, size: float, closed: bool = False) -> Stroke:
    points = tuple((x + ux * size, y + uy * size) for ux, uy in path)
    return Stroke(points=points, width=size / 8, closed=closed)


def _percent(x: float, y: float, size: float) -> Iterator[Shape]:
    yield Dot(x + size / 4, y + size * 3 / 2, size / 4)
    yield Dot(x + size * 3 / 4, y + size / 2, size / 4)
    yield _stroke(((0, 0), (1, 2)), x, y, size)
    yield Dot(x + size / 4, y + size * 3 / 2, size / 8, knockout=True)
    yield Dot(x + size * 3 / 4, y + size / 2, size / 8, knockout=True)


def glyph(char: str, x: float, y: float, size: float) -> list[Shape]:
    """Return the shapes of ``char`` with its bottom left corner at ``(x, y)``.

    Characters outside the font, such as spaces, give no shapes.
    """
    shapes: list[Shape] = [
        _stroke(ends, x, y, size) for chars, ends in _SEGMENTS if char in chars
    ]
    if char in _CLOSED_PATHS:
        shapes.append(_stroke(_CLOSED_PATHS[char], x, y, size, closed=True))
    shapes.extend(_stroke(path, x, y, size) for path in _EXTRA_PATHS.get(char, ()))
    if char == ".":
        shapes.append(Dot(x, y, size / 8))
    elif char == "%":
        shapes.extend(_percent(x, y, size))
    return shapes


def text_glyphs(text: str, x: float, y: float, size: float) -> list[Shape]:
    """Return the shapes of ``text`` laid out left to right from ``(x, y)``."""
    shapes: list[Shape] = []
    for index, char in enumerate(text):
        shapes.extend(glyph(char, x + index * size * ADVANCE, y, size / 2))
    return shapes