"""Base class for scalar grids."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from isocontours.domain.models import Extent


class Grid(ABC):
    """
    Read interface over a 2D scalar field.

    Subclass it to contour a custom source. Implementations must never raise
    from ``get_point``: coordinates outside the populated domain (or masked
    samples) return ``None`` and the scanner treats them as "no crossing".
    """

    @abstractmethod
    def extents(self) -> Iterable[Extent]:
        """
        Yield non-overlapping window-origin rectangles to scan.

        Returns:
            Extents padded one cell beyond the sampled region

        """

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Return ``(width, height)`` in the grid's lookup coordinates."""

    @abstractmethod
    def get_point(self, coord: tuple[int, int]) -> Any | None:
        """Return the sample at integer ``(x, y)`` or ``None`` if absent."""
