from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from isocontours.domain.models import Extent
from isocontours.grid.base import Grid
from isocontours.shared.errors import BadDimensionError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


class TiledBuffer(Grid):
    """
    Сетка из квадратных тайлов tile_size × tile_size.

    Размеры задаются в тайлах, не в отсчётах. Тайлы заполняются
    по одному через ``set_tile``; незаполненные тайлы дают None.

    Each populated tile scans the windows whose top-left sample it holds.
    Windows straddling its left/top border are added only when the tile
    that would otherwise own them is missing, so shared edges are never
    scanned twice.
    """

    def __init__(self, width: int, height: int, tile_size: int) -> None:
        if width < 0 or height < 0 or tile_size <= 0:
            msg = f'Недопустимые размеры: {width}x{height} тайлов по {tile_size}'
            raise BadDimensionError(msg)
        self._width = width
        self._height = height
        self._tile_size = tile_size
        self._tiles: list[np.ndarray | None] = [None] * (width * height)

    @property
    def tile_size(self) -> int:
        return self._tile_size

    def set_tile(
        self,
        x: int,
        y: int,
        data: Sequence[Any] | np.ndarray,
    ) -> None:
        """Assign tile ``(x, y)`` (tile indices) from a flat or square array."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            msg = (
                f'Индекс тайла ({x}, {y}) вне сетки '
                f'{self._width}x{self._height}'
            )
            raise BadDimensionError(msg)
        values = np.asarray(data).ravel()
        expected = self._tile_size * self._tile_size
        if values.size != expected:
            msg = f'Размер тайла {values.size}, ожидалось {expected}'
            raise BadDimensionError(msg)
        self._tiles[y * self._width + x] = values

    def has_tile(self, x: int, y: int) -> bool:
        if not (0 <= x < self._width and 0 <= y < self._height):
            return False
        return self._tiles[y * self._width + x] is not None

    def populated_tiles(self) -> list[tuple[int, int]]:
        return [
            (idx % self._width, idx // self._width)
            for idx, tile in enumerate(self._tiles)
            if tile is not None
        ]

    def extents(self) -> Iterator[Extent]:
        ts = self._tile_size
        for tx, ty in self.populated_tiles():
            x0 = tx * ts
            y0 = ty * ts
            x1 = x0 + ts - 1
            y1 = y0 + ts - 1
            left = self.has_tile(tx - 1, ty)
            top = self.has_tile(tx, ty - 1)
            top_left = self.has_tile(tx - 1, ty - 1)
            top_right = self.has_tile(tx + 1, ty - 1)

            yield Extent(top_left=(x0, y0), bottom_right=(x1, y1))
            if not left:
                yield Extent(top_left=(x0 - 1, y0), bottom_right=(x0 - 1, y1))
            if not top and ts > 1:
                yield Extent(top_left=(x0, y0 - 1), bottom_right=(x1 - 1, y0 - 1))
            if not top and not top_right:
                yield Extent(top_left=(x1, y0 - 1), bottom_right=(x1, y0 - 1))
            if not top_left and not top and not left:
                yield Extent(top_left=(x0 - 1, y0 - 1), bottom_right=(x0 - 1, y0 - 1))

    def size(self) -> tuple[int, int]:
        return self._width * self._tile_size, self._height * self._tile_size

    def get_point(self, coord: tuple[int, int]) -> Any | None:
        x, y = coord
        if x < 0 or y < 0:
            return None
        ts = self._tile_size
        tx, rel_x = divmod(x, ts)
        ty, rel_y = divmod(y, ts)
        if tx >= self._width or ty >= self._height:
            return None
        tile = self._tiles[ty * self._width + tx]
        if tile is None:
            return None
        return tile[rel_y * ts + rel_x]
