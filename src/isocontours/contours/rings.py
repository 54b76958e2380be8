"""
Marching-squares scanner with segment stitching into closed rings.

Segments of neighbouring windows share endpoints exactly (all crossings lie
on a half-cell lattice), so endpoints are quantized into integer keys and
open fragments are indexed by their start and end keys. Each segment either
opens a fragment, extends one at either end, splices two fragments together
or closes a fragment into a ring.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from isocontours.contours.cases import segments_for
from isocontours.shared.constants import (
    MS_BIT_BL,
    MS_BIT_BR,
    MS_BIT_TL,
    MS_BIT_TR,
    RING_KEY_QUANT_FACTOR,
    RING_KEY_ROW_PADDING,
)
from isocontours.shared.errors import UnexpectedError

if TYPE_CHECKING:
    from isocontours.domain.models import Point, Ring
    from isocontours.grid.base import Grid

logger = logging.getLogger(__name__)


@dataclass
class Fragment:
    start: int
    end: int
    points: deque[Point]


def contour_rings(grid: Grid, threshold: Any) -> list[Ring]:
    """
    Compute raw isorings of ``grid`` for ``threshold``.

    The inside of a ring is where samples are >= threshold. Rings are in grid
    space, neither smoothed nor transformed.
    """
    return IsoRingBuilder().compute(grid, threshold)


class IsoRingBuilder:
    """
    Reusable ring generator.

    State (fragment arena and key indices) lives for one ``compute`` call and
    is reset at the start of the next one. Do not share an instance between
    threads.
    """

    def __init__(self) -> None:
        self.fragment_by_start: dict[int, int] = {}
        self.fragment_by_end: dict[int, int] = {}
        self._slots: list[Fragment | None] = []
        self._free: list[int] = []
        self._row_stride = 0
        self._is_empty = True

    def clear(self) -> None:
        self.fragment_by_start.clear()
        self.fragment_by_end.clear()
        self._slots.clear()
        self._free.clear()
        self._is_empty = True

    @property
    def open_fragments(self) -> int:
        return len(self._slots) - len(self._free)

    def compute(self, grid: Grid, threshold: Any) -> list[Ring]:
        """
        Scan every extent of ``grid`` and return the closed rings.

        Windows with an absent corner are skipped. Fragments still open at
        the end of the scan (domain edges) are dropped.
        """
        if not self._is_empty:
            self.clear()
        self._is_empty = False

        width, _ = grid.size()
        self._row_stride = RING_KEY_QUANT_FACTOR * (width + RING_KEY_ROW_PADDING)
        result: list[Ring] = []

        def above(coord: tuple[int, int]) -> int | None:
            v = grid.get_point(coord)
            if v is None:
                return None
            return 1 if v >= threshold else 0

        for extent in grid.extents():
            x_from, y_from = extent.top_left
            x_to, y_to = extent.bottom_right
            for y in range(y_from, y_to + 1):
                # tl tr
                # bl br
                tl = above((x_from, y))
                bl = above((x_from, y + 1))
                for x in range(x_from, x_to + 1):
                    tr = above((x + 1, y))
                    br = above((x + 1, y + 1))
                    if (
                        tl is not None
                        and tr is not None
                        and bl is not None
                        and br is not None
                    ):
                        code = (
                            (bl << MS_BIT_BL)
                            | (br << MS_BIT_BR)
                            | (tr << MS_BIT_TR)
                            | (tl << MS_BIT_TL)
                        )
                        for (sx, sy), (ex, ey) in segments_for(code):
                            self._stitch((sx + x, sy + y), (ex + x, ey + y), result)
                    tl = tr
                    bl = br

        if self.open_fragments:
            logger.debug(
                'Порог %s: отброшено незамкнутых фрагментов: %d',
                threshold,
                self.open_fragments,
            )
        logger.debug('Порог %s: построено колец: %d', threshold, len(result))
        return result

    def _key(self, point: Point) -> int:
        # +1: окна с припуском начинаются с -1, ключи остаются неотрицательными
        kx = round((point[0] + 1) * RING_KEY_QUANT_FACTOR)
        ky = round((point[1] + 1) * RING_KEY_QUANT_FACTOR)
        return kx + ky * self._row_stride

    def _alloc(self, fragment: Fragment) -> int:
        if self._free:
            ix = self._free.pop()
            self._slots[ix] = fragment
        else:
            ix = len(self._slots)
            self._slots.append(fragment)
        return ix

    def _release(self, ix: int) -> Fragment:
        fragment = self._fragment(ix)
        self._slots[ix] = None
        self._free.append(ix)
        return fragment

    def _fragment(self, ix: int) -> Fragment:
        fragment = self._slots[ix] if 0 <= ix < len(self._slots) else None
        if fragment is None:
            msg = f'Фрагмент {ix} отсутствует в хранилище'
            raise UnexpectedError(msg)
        return fragment

    def _stitch(self, start: Point, end: Point, result: list[Ring]) -> None:
        start_key = self._key(start)
        end_key = self._key(end)
        f_ix = self.fragment_by_end.pop(start_key, None)
        g_ix = self.fragment_by_start.pop(end_key, None)

        if f_ix is not None and g_ix is not None:
            if f_ix == g_ix:
                # Фрагмент замыкается в кольцо
                f = self._release(f_ix)
                f.points.append(end)
                result.append(list(f.points))
                return
            self._splice(f_ix, g_ix)
        elif f_ix is not None:
            f = self._fragment(f_ix)
            f.points.append(end)
            f.end = end_key
            self.fragment_by_end[end_key] = f_ix
        elif g_ix is not None:
            g = self._fragment(g_ix)
            g.points.appendleft(start)
            g.start = start_key
            self.fragment_by_start[start_key] = g_ix
        else:
            ix = self._alloc(Fragment(start_key, end_key, deque((start, end))))
            self.fragment_by_start[start_key] = ix
            self.fragment_by_end[end_key] = ix

    def _splice(self, f_ix: int, g_ix: int) -> None:
        """Join fragment ``f`` (ending at the segment) to ``g`` (starting after it)."""
        f = self._fragment(f_ix)
        g = self._fragment(g_ix)
        # Меньший фрагмент вливается в больший
        if len(f.points) >= len(g.points):
            f.points.extend(g.points)
            f.end = g.end
            self._release(g_ix)
            self.fragment_by_end[f.end] = f_ix
        else:
            g.points.extendleft(reversed(f.points))
            g.start = f.start
            self._release(f_ix)
            self.fragment_by_start[g.start] = g_ix
