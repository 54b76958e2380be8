from __future__ import annotations

from isocontours.shared.constants import (
    MS_BIT_BL,
    MS_BIT_BR,
    MS_BIT_TL,
    MS_BIT_TR,
    MS_CASES,
)

Segment = tuple[tuple[float, float], tuple[float, float]]


def case_code(bl: bool, br: bool, tr: bool, tl: bool) -> int:  # noqa: FBT001
    """Build the 4-bit marching-squares code from corner flags (corner >= threshold)."""
    return (
        (int(bl) << MS_BIT_BL)
        | (int(br) << MS_BIT_BR)
        | (int(tr) << MS_BIT_TR)
        | (int(tl) << MS_BIT_TL)
    )


def segments_for(code: int) -> tuple[Segment, ...]:
    """
    Return the segments of one case in normalized 2×2 window space.

    Saddle codes (5, 10) always give two disjoint segments.
    """
    return MS_CASES[code]
