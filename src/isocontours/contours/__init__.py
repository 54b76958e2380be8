"""Marching squares, ring stitching and contour assembly."""
from __future__ import annotations

from .builder import ContourBuilder as ContourBuilder
from .rings import IsoRingBuilder as IsoRingBuilder
from .rings import contour_rings as contour_rings
