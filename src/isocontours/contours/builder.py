"""
Isolines, filled contours and isobands over a scalar grid.

Builds on ``IsoRingBuilder``: rings of each threshold are optionally smoothed,
mapped to output coordinates and then assembled into lines, polygons with
holes (contours) or polygons between two thresholds (isobands).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from isocontours.contours.geometry import area, contains, dedup
from isocontours.contours.rings import IsoRingBuilder
from isocontours.contours.smoothing import apply_affine, smooth_linear
from isocontours.domain.models import (
    Band,
    Contour,
    ContourSettings,
    Line,
    Polygon,
    Ring,
)
from isocontours.shared.constants import ISOBAND_MIN_RING_POINTS, Containment
from isocontours.shared.errors import UnexpectedError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from isocontours.grid.base import Grid

logger = logging.getLogger(__name__)

MIN_ISOBAND_THRESHOLDS = 2


class ContourBuilder:
    """
    Contours generator configured once and reused for any number of grids.

    Usage:
        builder = ContourBuilder(smooth=True).x_origin(100.0).y_step(-30.0)
        lines = builder.lines(grid, [0.5, 1.5])
        bands = builder.isobands(grid, [0.0, 10.0, 20.0])

    The builder only holds immutable settings; every batch call uses its own
    ``IsoRingBuilder``.
    """

    def __init__(
        self,
        smooth: bool = False,  # noqa: FBT001, FBT002
        *,
        x_origin: float = 0.0,
        y_origin: float = 0.0,
        x_step: float = 1.0,
        y_step: float = 1.0,
    ) -> None:
        self.settings = ContourSettings(
            smooth=smooth,
            x_origin=x_origin,
            y_origin=y_origin,
            x_step=x_step,
            y_step=y_step,
        )

    @classmethod
    def from_settings(cls, settings: ContourSettings) -> ContourBuilder:
        return cls(**settings.model_dump())

    def _with(self, **changes: Any) -> ContourBuilder:
        data = self.settings.model_dump()
        data.update(changes)
        return ContourBuilder(**data)

    def x_origin(self, x_origin: float) -> ContourBuilder:
        return self._with(x_origin=x_origin)

    def y_origin(self, y_origin: float) -> ContourBuilder:
        return self._with(y_origin=y_origin)

    def x_step(self, x_step: float) -> ContourBuilder:
        return self._with(x_step=x_step)

    def y_step(self, y_step: float) -> ContourBuilder:
        return self._with(y_step=y_step)

    def _rings(
        self,
        grid: Grid,
        threshold: Any,
        isoring: IsoRingBuilder,
        *,
        drop_duplicates: bool = False,
    ) -> list[Ring]:
        rings: list[Ring] = []
        for raw in isoring.compute(grid, threshold):
            ring = raw
            if self.settings.smooth:
                ring = smooth_linear(ring, grid, threshold)
            if drop_duplicates:
                ring = dedup(ring)
            rings.append(apply_affine(ring, self.settings))
        return rings

    def lines(self, grid: Grid, thresholds: Sequence[Any]) -> list[Line]:
        """
        Compute isolines for each threshold.

        Args:
            grid: Scalar grid
            thresholds: Threshold values, processed in order

        Returns:
            One ``Line`` (multi-line of closed rings) per threshold

        """
        isoring = IsoRingBuilder()
        return [
            Line(geometry=self._rings(grid, threshold, isoring), threshold=threshold)
            for threshold in thresholds
        ]

    def contours(self, grid: Grid, thresholds: Sequence[Any]) -> list[Contour]:
        """
        Compute filled contours (areas >= threshold) for each threshold.

        Rings with positive area in grid space are exteriors, the rest are
        holes attached to the first exterior that contains them.
        """
        isoring = IsoRingBuilder()
        return [self._contour(grid, threshold, isoring) for threshold in thresholds]

    def _contour(self, grid: Grid, threshold: Any, isoring: IsoRingBuilder) -> Contour:
        polygons: list[Polygon] = []
        holes: list[Ring] = []
        orientation = self.settings.orientation
        for ring in self._rings(grid, threshold, isoring):
            if area(ring) * orientation > 0:
                polygons.append(Polygon(exterior=ring))
            else:
                holes.append(ring)

        orphans = 0
        for hole in holes:
            for polygon in polygons:
                if contains(polygon.exterior, hole) is not Containment.OUTSIDE:
                    polygon.interiors.append(hole)
                    break
            else:
                orphans += 1

        logger.debug(
            'Контур %s: полигонов %d, отверстий %d (без внешнего кольца: %d)',
            threshold,
            len(polygons),
            len(holes),
            orphans,
        )
        return Contour(geometry=polygons, threshold=threshold)

    def isobands(self, grid: Grid, thresholds: Sequence[Any]) -> list[Band]:
        """
        Compute isobands between each pair of consecutive thresholds.

        The band of ``(lower, upper)`` is bounded by the rings of both
        thresholds: a ring enclosed by an even number of the other rings is
        an exterior, an odd number makes it a hole.

        Raises:
            UnexpectedError: fewer than two thresholds

        """
        if len(thresholds) < MIN_ISOBAND_THRESHOLDS:
            msg = f'Для изополос нужно не меньше двух порогов, получено {len(thresholds)}'
            raise UnexpectedError(msg)

        isoring = IsoRingBuilder()
        rings_by_threshold = [
            [
                ring
                for ring in self._rings(grid, threshold, isoring, drop_duplicates=True)
                if len(ring) > ISOBAND_MIN_RING_POINTS
            ]
            for threshold in thresholds
        ]

        bands: list[Band] = []
        for i in range(len(thresholds) - 1):
            min_v = thresholds[i]
            max_v = thresholds[i + 1]
            polygons = self._assemble_band(
                rings_by_threshold[i] + rings_by_threshold[i + 1]
            )
            logger.debug(
                'Изополоса [%s, %s): полигонов %d', min_v, max_v, len(polygons)
            )
            bands.append(Band(geometry=polygons, min_v=min_v, max_v=max_v))
        return bands

    @staticmethod
    def _assemble_band(rings: list[Ring]) -> list[Polygon]:
        # Грубый ключ сортировки (целая часть площади); сортировка устойчива
        ordered = sorted(rings, key=lambda ring: int(abs(area(ring))))

        enclosed_by = []
        for i, ring in enumerate(ordered):
            count = 0
            for j, other in enumerate(ordered):
                if i != j and contains(other, ring) is not Containment.OUTSIDE:
                    count += 1
            enclosed_by.append(count)

        polygons: list[Polygon] = []
        interiors: list[Ring] = []
        for ring, count in zip(ordered, enclosed_by, strict=True):
            if count % 2 == 0:
                polygons.append(Polygon(exterior=ring))
            else:
                interiors.append(ring)

        for interior in interiors:
            for polygon in polygons:
                if contains(polygon.exterior, interior) is not Containment.OUTSIDE:
                    polygon.interiors.append(interior)
                    break

        polygons.reverse()
        return polygons
