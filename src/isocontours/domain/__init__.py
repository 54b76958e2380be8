"""Domain layer - output geometry and settings models."""
from isocontours.domain.models import (
    Band,
    Contour,
    ContourSettings,
    Extent,
    Line,
    Point,
    Polygon,
    Ring,
)

__all__ = [
    'Band',
    'Contour',
    'ContourSettings',
    'Extent',
    'Line',
    'Point',
    'Polygon',
    'Ring',
]
