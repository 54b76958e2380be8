"""
Isolines, filled contours and isobands from scalar grids.

Converts a 2D scalar field sampled on a regular grid (elevation, density,
weather fields) into closed rings and polygons with holes using marching
squares.
"""
from isocontours.contours import ContourBuilder, IsoRingBuilder, contour_rings
from isocontours.domain import (
    Band,
    Contour,
    ContourSettings,
    Extent,
    Line,
    Point,
    Polygon,
    Ring,
)
from isocontours.grid import Buffer, Grid, NoDataMask, TiledBuffer
from isocontours.shared import (
    BadCastError,
    BadDimensionError,
    ContourError,
    ErrorKind,
    UnexpectedError,
)

__version__ = '0.1.0'

__all__ = [
    'BadCastError',
    'BadDimensionError',
    'Band',
    'Buffer',
    'Contour',
    'ContourBuilder',
    'ContourError',
    'ContourSettings',
    'ErrorKind',
    'Extent',
    'Grid',
    'IsoRingBuilder',
    'Line',
    'NoDataMask',
    'Point',
    'Polygon',
    'Ring',
    'TiledBuffer',
    'UnexpectedError',
    'contour_rings',
]
