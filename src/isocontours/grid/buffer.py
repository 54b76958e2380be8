from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from isocontours.domain.models import Extent
from isocontours.grid.base import Grid
from isocontours.shared.errors import BadDimensionError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

GRID_NDIM = 2


class Buffer(Grid):
    """
    Плоский буфер значений width × height (построчно, data[y * width + x]).

    Один экстент с припуском в одну клетку; за пределами данных
    ``get_point`` возвращает None.
    """

    def __init__(
        self,
        data: Sequence[Any] | np.ndarray,
        width: int,
        height: int,
    ) -> None:
        if width < 0 or height < 0:
            msg = f'Отрицательный размер сетки: {width}x{height}'
            raise BadDimensionError(msg)
        values = np.asarray(data).ravel()
        if values.size != width * height:
            msg = (
                f'Размер данных {values.size} не совпадает с размером сетки '
                f'{width}x{height}'
            )
            raise BadDimensionError(msg)
        self._data = values
        self._width = width
        self._height = height

    @classmethod
    def from_array(cls, array: np.ndarray | Sequence[Sequence[Any]]) -> Buffer:
        """Build a buffer from a 2-D array indexed as ``array[y, x]``."""
        arr = np.asarray(array)
        if arr.ndim != GRID_NDIM:
            msg = f'Ожидался двумерный массив, получено измерений: {arr.ndim}'
            raise BadDimensionError(msg)
        height, width = arr.shape
        return cls(arr, width, height)

    @property
    def data(self) -> np.ndarray:
        return self._data

    def extents(self) -> Iterator[Extent]:
        yield Extent(
            top_left=(-1, -1),
            bottom_right=(self._width - 1, self._height - 1),
        )

    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def get_point(self, coord: tuple[int, int]) -> Any | None:
        x, y = coord
        if x < 0 or y < 0 or x >= self._width or y >= self._height:
            return None
        return self._data[y * self._width + x]
