"""Scalar grid sources: flat, tiled and no-data masked."""
from isocontours.grid.base import Grid
from isocontours.grid.buffer import Buffer
from isocontours.grid.nodata import NoDataMask
from isocontours.grid.tiled import TiledBuffer

__all__ = [
    'Buffer',
    'Grid',
    'NoDataMask',
    'TiledBuffer',
]
