from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from isocontours.grid.base import Grid

if TYPE_CHECKING:
    from collections.abc import Iterable

    from isocontours.domain.models import Extent


def _is_nan(value: Any) -> bool:
    try:
        return math.isnan(value)
    except (TypeError, ValueError, OverflowError):
        return False


class NoDataMask(Grid):
    """Wraps a grid and hides samples equal to ``no_data`` (NaN matches NaN)."""

    def __init__(self, inner: Grid, no_data: Any) -> None:
        self._inner = inner
        self._no_data = no_data
        self._nan_sentinel = _is_nan(no_data)

    @property
    def no_data(self) -> Any:
        return self._no_data

    def into_inner(self) -> Grid:
        return self._inner

    def extents(self) -> Iterable[Extent]:
        return self._inner.extents()

    def size(self) -> tuple[int, int]:
        return self._inner.size()

    def get_point(self, coord: tuple[int, int]) -> Any | None:
        value = self._inner.get_point(coord)
        if value is None:
            return None
        if self._nan_sentinel:
            return None if _is_nan(value) else value
        if value == self._no_data:
            return None
        return value
