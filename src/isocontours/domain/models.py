from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, field_validator

Point = tuple[float, float]
Ring = list[Point]


@dataclass(frozen=True)
class Extent:
    """
    Прямоугольник окон 2×2 для сканирования (границы включительно).

    Координаты: начала окон (верхний левый отсчёт окна) в системе сетки.
    Сетки выдают экстенты уже с припуском в одну клетку за область данных.
    """

    top_left: tuple[int, int]
    bottom_right: tuple[int, int]

    @property
    def width(self) -> int:
        return max(0, self.bottom_right[0] - self.top_left[0] + 1)

    @property
    def height(self) -> int:
        return max(0, self.bottom_right[1] - self.top_left[1] + 1)

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass
class Polygon:
    exterior: Ring
    interiors: list[Ring] = field(default_factory=list)


@dataclass
class Line:
    """Isolines of one threshold as a multi-line (list of closed rings)."""

    geometry: list[Ring]
    threshold: Any


@dataclass
class Contour:
    """Filled contour of one threshold as a multi-polygon."""

    geometry: list[Polygon]
    threshold: Any


@dataclass
class Band:
    """Isoband between ``min_v`` (inclusive) and ``max_v`` as a multi-polygon."""

    geometry: list[Polygon]
    min_v: Any
    max_v: Any


class ContourSettings(BaseModel):
    """
    Настройки построения изолиний.

    Аффинное преобразование точек сетки в выходные координаты:
    ``output = point * (x_step, y_step) + (x_origin, y_origin)``.
    """

    model_config = {
        'extra': 'forbid',
        'frozen': True,
    }

    # Сглаживание колец линейной интерполяцией между отсчётами
    smooth: bool = False
    # Начало координат сетки
    x_origin: float = 0.0
    y_origin: float = 0.0
    # Шаг сетки по осям
    x_step: float = 1.0
    y_step: float = 1.0

    @field_validator('x_origin', 'y_origin')
    @classmethod
    def validate_origin(cls, v: float | str) -> float:
        fv = float(v)
        if not math.isfinite(fv):
            msg = 'Начало координат должно быть конечным числом'
            raise ValueError(msg)
        return fv

    @field_validator('x_step', 'y_step')
    @classmethod
    def validate_step(cls, v: float | str) -> float:
        fv = float(v)
        if not math.isfinite(fv) or fv == 0.0:
            msg = 'Шаг сетки должен быть конечным и ненулевым'
            raise ValueError(msg)
        return fv

    @property
    def is_identity(self) -> bool:
        return (self.x_origin, self.y_origin) == (0.0, 0.0) and (
            self.x_step,
            self.y_step,
        ) == (1.0, 1.0)

    @property
    def orientation(self) -> float:
        # Отражение по одной оси меняет знак площади колец
        return 1.0 if self.x_step * self.y_step > 0 else -1.0
