"""The 32 points of the compass, derived from the four cardinal directions."""

from __future__ import annotations

from dataclasses import asdict, dataclass

CARDINALS: tuple[str, ...] = ("N", "E", "S", "W")

# Degrees between neighbouring points (360 / 32).
STEP = 11.25


@dataclass(frozen=True)
class CompassPoint:
    abbreviation: str
    azimuth: float

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def _quadrant(first: str, second: str) -> list[str]:
    """Names of the eight points from *first* (inclusive) towards *second*."""
    # Intercardinals always lead with N or S: NE, SE, SW, NW.
    mid = first + second if first in "NS" else second + first
    return [
        first,
        f"{first}b{second}",
        first + mid,
        f"{mid}b{first}",
        mid,
        f"{mid}b{second}",
        second + mid,
        f"{second}b{first}",
    ]


def build_compass_points() -> list[CompassPoint]:
    """Return all 32 points clockwise from North at 0 degrees.

    >>> [p.abbreviation for p in build_compass_points()[:4]]
    ['N', 'NbE', 'NNE', 'NEbN']
    """
    names: list[str] = []
    for i, first in enumerate(CARDINALS):
        names.extend(_quadrant(first, CARDINALS[(i + 1) % len(CARDINALS)]))
    return [CompassPoint(abbreviation=name, azimuth=i * STEP) for i, name in enumerate(names)]
