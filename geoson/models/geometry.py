"""The four geometry shapes stored in a FeatureCollection.

Every geometry is held in local planar coordinates (metres).  The set
of shapes is closed: code that handles a ``Geometry`` must handle
``Point``, ``Line``, ``Path`` and ``Polygon``.

``Line`` and a two-point ``Path`` carry the same data; they differ only
by type.  The reader produces a ``Line`` for a two-coordinate
LineString and a ``Path`` for every other count.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import shapely.geometry


@dataclass(frozen=True, slots=True)
class Point:
    """A single local position."""

    x: float
    y: float
    z: float = 0.0

    @property
    def points(self) -> tuple[Point, ...]:
        return (self,)

    def as_tuple(self) -> tuple[float, float, float]:
        """Return ``(x, y, z)``."""
        return (self.x, self.y, self.z)

    def to_shapely(self) -> shapely.geometry.Point:
        from shapely.geometry import Point as ShapelyPoint

        return ShapelyPoint(self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class Line:
    """A straight segment between exactly two points."""

    start: Point
    end: Point

    @property
    def points(self) -> tuple[Point, ...]:
        return (self.start, self.end)

    def to_shapely(self) -> shapely.geometry.LineString:
        from shapely.geometry import LineString

        return LineString([self.start.as_tuple(), self.end.as_tuple()])


@dataclass(frozen=True, slots=True)
class Path:
    """An ordered polyline of any number of points.

    Shapely needs at least two points for a LineString, so
    ``to_shapely()`` raises for degenerate paths.
    """

    points: tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def to_shapely(self) -> shapely.geometry.LineString:
        from shapely.geometry import LineString

        return LineString([p.as_tuple() for p in self.points])


@dataclass(frozen=True, slots=True)
class Polygon:
    """The outer ring of a polygon; holes are not modelled."""

    points: tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def to_shapely(self) -> shapely.geometry.Polygon:
        from shapely.geometry import Polygon as ShapelyPolygon

        return ShapelyPolygon([p.as_tuple() for p in self.points])


Geometry = Point | Line | Path | Polygon
"""Closed union of the supported geometry shapes."""
