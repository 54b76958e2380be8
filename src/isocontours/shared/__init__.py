"""Shared constants and errors."""
from isocontours.shared.errors import (
    BadCastError,
    BadDimensionError,
    ContourError,
    ErrorKind,
    UnexpectedError,
)

__all__ = [
    'BadCastError',
    'BadDimensionError',
    'ContourError',
    'ErrorKind',
    'UnexpectedError',
]
