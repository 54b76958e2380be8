from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from isocontours.shared.errors import BadCastError

if TYPE_CHECKING:
    from isocontours.domain.models import ContourSettings, Ring
    from isocontours.grid.base import Grid


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        msg = f'Значение {value!r} не приводится к float'
        raise BadCastError(msg) from exc


def _shift(threshold: float, v0: Any, v1: Any) -> float:
    f0 = _to_float(v0)
    f1 = _to_float(v1)
    if f1 == f0:
        return 0.0
    return (threshold - f0) / (f1 - f0) - 0.5


def smooth_linear(ring: Ring, grid: Grid, threshold: Any) -> Ring:
    """
    Сглаживание кольца линейной интерполяцией между соседними отсчётами.

    Точка, лежащая ровно на внутренней границе пикселей по одной из осей,
    сдвигается вдоль этой оси в положение, где линейная интерполяция
    между двумя соседними отсчётами равна порогу. Если одного из отсчётов
    нет, точка не меняется.

    Raises:
        BadCastError: sample or threshold not representable as float

    """
    width, height = grid.size()
    level = _to_float(threshold)
    smoothed: Ring = []
    for x, y in ring:
        xt = math.trunc(x)
        yt = math.trunc(y)
        new_x, new_y = x, y
        v1 = grid.get_point((xt, yt))
        if v1 is not None:
            if 0.0 < x < width and xt == x:
                v0 = grid.get_point((xt - 1, yt))
                if v0 is not None:
                    new_x = x + _shift(level, v0, v1)
            if 0.0 < y < height and yt == y:
                v0 = grid.get_point((xt, yt - 1))
                if v0 is not None:
                    new_y = y + _shift(level, v0, v1)
        smoothed.append((new_x, new_y))
    return smoothed


def apply_affine(ring: Ring, settings: ContourSettings) -> Ring:
    """Map grid-space points to output coordinates; identity returns the ring as is."""
    if settings.is_identity:
        return ring
    return [
        (
            x * settings.x_step + settings.x_origin,
            y * settings.y_step + settings.y_origin,
        )
        for x, y in ring
    ]
