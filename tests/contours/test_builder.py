"""Tests for contours.builder module."""

import numpy as np
import pytest
from pydantic import ValidationError

from isocontours.contours.builder import ContourBuilder
from isocontours.contours.geometry import area, ring_contains
from isocontours.contours.rings import contour_rings
from isocontours.domain.models import Band, Contour, ContourSettings, Extent, Line
from isocontours.grid.base import Grid
from isocontours.grid.buffer import Buffer
from isocontours.shared.constants import Containment
from isocontours.shared.errors import BadCastError, UnexpectedError


def inside_polygon(polygon, point):
    if ring_contains(polygon.exterior, point) is not Containment.INSIDE:
        return False
    return all(
        ring_contains(hole, point) is Containment.OUTSIDE for hole in polygon.interiors
    )


class TestContourBuilderConfig:
    """Tests for builder configuration."""

    def test_defaults(self):
        """Should default to identity affine without smoothing."""
        builder = ContourBuilder()
        assert builder.settings == ContourSettings()
        assert builder.settings.is_identity

    def test_fluent_setters_return_new_builder(self):
        """Setters should not mutate the original builder."""
        base = ContourBuilder(smooth=True)
        configured = base.x_origin(10).y_origin(-5).x_step(2).y_step(0.5)
        assert base.settings.is_identity
        assert configured.settings.smooth is True
        assert configured.settings.x_origin == 10.0
        assert configured.settings.y_origin == -5.0
        assert configured.settings.x_step == 2.0
        assert configured.settings.y_step == 0.5

    def test_from_settings(self):
        """Should build from a settings model."""
        settings = ContourSettings(smooth=True, x_step=3.0)
        builder = ContourBuilder.from_settings(settings)
        assert builder.settings == settings

    def test_zero_step_rejected(self):
        """Zero step should fail validation."""
        with pytest.raises(ValidationError):
            ContourBuilder().x_step(0)


class TestLines:
    """Tests for ContourBuilder.lines."""

    def test_lines_per_threshold(self, terraced_values):
        """Should return one Line per threshold in order."""
        grid = Buffer.from_array(terraced_values)
        lines = ContourBuilder().lines(grid, [0.5, 1.5, 2.5])
        assert [line.threshold for line in lines] == [0.5, 1.5, 2.5]
        assert all(isinstance(line, Line) for line in lines)
        assert [len(line.geometry) for line in lines] == [1, 1, 0]

    def test_lines_match_raw_rings_without_options(self, block_values):
        """Without smoothing and affine the lines are the raw rings."""
        grid = Buffer.from_array(block_values)
        (line,) = ContourBuilder().lines(grid, [0.5])
        assert line.geometry == contour_rings(grid, 0.5)

    def test_affine_inverse_reproduces_identity(self, hollow_block_values):
        """Inverting origin/step on the output should give the identity rings."""
        grid = Buffer.from_array(hollow_block_values)
        identity = ContourBuilder().lines(grid, [0.5])[0].geometry
        mapped = (
            ContourBuilder()
            .x_origin(10.0)
            .y_origin(-5.0)
            .x_step(2.0)
            .y_step(0.5)
            .lines(grid, [0.5])[0]
            .geometry
        )
        restored = [
            [((x - 10.0) / 2.0, (y + 5.0) / 0.5) for x, y in ring] for ring in mapped
        ]
        assert len(restored) == len(identity)
        for got, expected in zip(restored, identity, strict=True):
            assert got == pytest.approx(expected)

    def test_smoothing_midpoint_is_noop(self, block_values):
        """Thresholds halfway between samples should leave positions unchanged."""
        grid = Buffer.from_array(block_values)
        raw = ContourBuilder().lines(grid, [0.5])[0].geometry
        smoothed = ContourBuilder(smooth=True).lines(grid, [0.5])[0].geometry
        assert smoothed == raw

    def test_smoothing_moves_points(self, block_values):
        """Off-centre thresholds should shift boundary crossings."""
        grid = Buffer.from_array(block_values)
        (ring,) = ContourBuilder(smooth=True).lines(grid, [0.25])[0].geometry
        xs = {x for x, _ in ring}
        assert 2.75 in xs
        assert 6.25 in xs
        assert 3.0 not in xs

    def test_bad_cast_on_smoothing(self):
        """Samples that cannot become floats should fail only when smoothing."""
        values = [0] * 25
        values[12] = 10**400
        grid = Buffer(np.array(values, dtype=object), 5, 5)
        assert len(ContourBuilder().lines(grid, [0.5])[0].geometry) == 1
        with pytest.raises(BadCastError):
            ContourBuilder(smooth=True).lines(grid, [0.5])


class TestContours:
    """Tests for ContourBuilder.contours."""

    def test_block_polygon(self, block_values):
        """Block should give one polygon without holes."""
        (contour,) = ContourBuilder().contours(Buffer.from_array(block_values), [0.5])
        assert isinstance(contour, Contour)
        assert contour.threshold == 0.5
        assert len(contour.geometry) == 1
        assert contour.geometry[0].interiors == []
        assert area(contour.geometry[0].exterior) > 0

    def test_hole_attached(self, hollow_block_values):
        """Inner ring should become a hole of the enclosing polygon."""
        (contour,) = ContourBuilder().contours(
            Buffer.from_array(hollow_block_values), [0.5]
        )
        assert len(contour.geometry) == 1
        polygon = contour.geometry[0]
        assert len(polygon.interiors) == 1
        assert area(polygon.interiors[0]) < 0

    def test_two_islands(self):
        """Separate features should give separate polygons."""
        values = np.zeros((5, 7))
        values[2, 1] = 1.0
        values[2, 5] = 1.0
        (contour,) = ContourBuilder().contours(Buffer.from_array(values), [0.5])
        assert len(contour.geometry) == 2

    def test_flipped_axis_keeps_classification(self, hollow_block_values):
        """A negative step should not turn exteriors into holes."""
        grid = Buffer.from_array(hollow_block_values)
        (contour,) = ContourBuilder().y_origin(100.0).y_step(-1.0).contours(grid, [0.5])
        assert len(contour.geometry) == 1
        assert len(contour.geometry[0].interiors) == 1

    def test_batch_fails_on_first_error(self):
        """An error for any threshold should abort the whole call."""
        values = np.array([0] * 12 + [10**400] + [0] * 12, dtype=object)
        grid = Buffer(values, 5, 5)
        with pytest.raises(BadCastError):
            ContourBuilder(smooth=True).contours(grid, [5.0, 0.5])


class TestIsobands:
    """Tests for ContourBuilder.isobands."""

    @pytest.mark.parametrize('thresholds', [[], [0.5]])
    def test_requires_two_thresholds(self, terraced_values, thresholds):
        """Fewer than two thresholds is an error."""
        with pytest.raises(UnexpectedError):
            ContourBuilder().isobands(Buffer.from_array(terraced_values), thresholds)

    def test_band_with_hole(self, terraced_values):
        """Plateau band should be bounded by the lower ring with the peak as hole."""
        (band,) = ContourBuilder().isobands(Buffer.from_array(terraced_values), [0.5, 1.5])
        assert isinstance(band, Band)
        assert (band.min_v, band.max_v) == (0.5, 1.5)
        assert len(band.geometry) == 1
        assert len(band.geometry[0].interiors) == 1

    @pytest.mark.parametrize('smooth', [False, True])
    def test_samples_between_thresholds_in_one_polygon(self, terraced_values, smooth):
        """Every sample strictly inside the band lies in exactly one polygon."""
        lower, upper = 0.5, 1.5
        (band,) = ContourBuilder(smooth=smooth).isobands(
            Buffer.from_array(terraced_values), [lower, upper]
        )
        height, width = terraced_values.shape
        checked = 0
        for y in range(1, height - 1):
            for x in range(1, width - 1):
                value = terraced_values[y, x]
                center = (x + 0.5, y + 0.5)
                hits = sum(inside_polygon(p, center) for p in band.geometry)
                if lower < value < upper:
                    assert hits == 1
                    checked += 1
                else:
                    assert hits == 0
        assert checked == 24

    def test_consecutive_pairs(self, terraced_values):
        """Should emit one band per consecutive threshold pair."""
        bands = ContourBuilder().isobands(
            Buffer.from_array(terraced_values), [0.5, 1.5, 2.5]
        )
        assert [(b.min_v, b.max_v) for b in bands] == [(0.5, 1.5), (1.5, 2.5)]
        assert len(bands[1].geometry) == 1
        assert bands[1].geometry[0].interiors == []

    def test_nested_exterior_inside_hole(self):
        """A ring enclosed twice should become an exterior again."""
        values = np.zeros((9, 9))
        values[1:8, 1:8] = 1.0
        values[2:7, 2:7] = 2.0
        values[4, 4] = 1.0
        bands = ContourBuilder().isobands(Buffer.from_array(values), [0.5, 1.5])
        (band,) = bands
        assert len(band.geometry) == 2
        # после разворота первым идёт самое большое внешнее кольцо
        outer, inner = band.geometry
        assert abs(area(outer.exterior)) > abs(area(inner.exterior))
        assert len(outer.interiors) == 1
        assert inner.interiors == []


class TestCustomGrid:
    """Builder should accept user-defined grids."""

    def test_function_backed_grid(self):
        """A Grid subclass computing samples on the fly should be contoured."""

        class RadialGrid(Grid):
            def extents(self):
                yield Extent(top_left=(-1, -1), bottom_right=(9, 9))

            def size(self):
                return 10, 10

            def get_point(self, coord):
                x, y = coord
                if not (0 <= x < 10 and 0 <= y < 10):
                    return None
                return 10.0 - ((x - 4.5) ** 2 + (y - 4.5) ** 2) ** 0.5

        contours = ContourBuilder(smooth=True).contours(RadialGrid(), [7.0, 8.0])
        assert [len(c.geometry) for c in contours] == [1, 1]
        assert abs(area(contours[0].geometry[0].exterior)) > abs(
            area(contours[1].geometry[0].exterior)
        )
