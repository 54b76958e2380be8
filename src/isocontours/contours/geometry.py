"""Ring geometry helpers: signed area and boundary-inclusive containment."""

from __future__ import annotations

from typing import TYPE_CHECKING

from isocontours.shared.constants import MIN_RING_POINTS, Containment

if TYPE_CHECKING:
    from collections.abc import Sequence

    from isocontours.domain.models import Point, Ring


def area(ring: Sequence[Point]) -> float:
    """
    Signed area term of a closed ring (twice the geometric area).

    Positive for exterior rings around values >= threshold in grid space.
    The closing point (equal to the first) is skipped.
    """
    if len(ring) < MIN_RING_POINTS:
        return 0.0
    n = len(ring) - 1
    total = ring[n - 1][1] * ring[0][0] - ring[n - 1][0] * ring[0][1]
    for i in range(1, n):
        total += ring[i - 1][1] * ring[i][0] - ring[i - 1][0] * ring[i][1]
    return total


def _within(p: float, q: float, r: float) -> bool:
    return p <= q <= r or r <= q <= p


def _segment_contains(a: Point, b: Point, c: Point) -> bool:
    if a[0] == b[0] and a[1] == b[1]:
        return c[0] == a[0] and c[1] == a[1]
    # Точка на отрезке: коллинеарна и лежит между концами
    collinear = (b[0] - a[0]) * (c[1] - a[1]) == (c[0] - a[0]) * (b[1] - a[1])
    if not collinear:
        return False
    if a[0] != b[0]:
        return _within(a[0], c[0], b[0])
    return _within(a[1], c[1], b[1])


def ring_contains(ring: Sequence[Point], point: Point) -> Containment:
    """Ray-casting point-in-ring test with an explicit boundary result."""
    x, y = point
    result = Containment.OUTSIDE
    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if _segment_contains(ring[i], ring[j], point):
            return Containment.ON_BOUNDARY
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            result = (
                Containment.INSIDE
                if result is Containment.OUTSIDE
                else Containment.OUTSIDE
            )
        j = i
    return result


def contains(ring: Sequence[Point], other: Sequence[Point]) -> Containment:
    """
    Classify ``other`` against ``ring`` by its first off-boundary vertex.

    When every vertex of ``other`` lies on the boundary of ``ring`` the result
    is ``ON_BOUNDARY``; callers treat anything but ``OUTSIDE`` as contained.
    """
    for point in other:
        c = ring_contains(ring, point)
        if c is not Containment.ON_BOUNDARY:
            return c
    return Containment.ON_BOUNDARY


def dedup(ring: Ring) -> Ring:
    """Drop consecutive duplicate points."""
    out: Ring = []
    for point in ring:
        if not out or out[-1] != point:
            out.append(point)
    return out
