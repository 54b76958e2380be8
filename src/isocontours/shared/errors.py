"""Typed errors raised while building grids, rings and contours."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Категории ошибок построения изолиний."""

    # Размер данных не совпадает с заявленными размерами сетки/тайла
    BAD_DIMENSION = 'bad_dimension'
    # Значение отсчёта не приводится к float при сглаживании
    BAD_CAST = 'bad_cast'
    # Нарушение внутренней согласованности или неверные аргументы вызова
    UNEXPECTED = 'unexpected'


class ContourError(Exception):
    """Base class for every error raised by isocontours."""

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str = '') -> None:
        super().__init__(message or self.kind.value)


class BadDimensionError(ContourError, ValueError):
    """Grid or tile data does not match its declared dimensions."""

    kind = ErrorKind.BAD_DIMENSION


class BadCastError(ContourError, TypeError):
    """A sample value cannot be represented as a float."""

    kind = ErrorKind.BAD_CAST


class UnexpectedError(ContourError, RuntimeError):
    """Internal bookkeeping violation or an invalid call."""

    kind = ErrorKind.UNEXPECTED
