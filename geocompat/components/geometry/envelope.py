from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from shapely.geometry import LineString, Point, Polygon, box
from shapely.geometry.base import BaseGeometry

from geocompat.components.geometry.point_2d import Point2D


@dataclass(frozen=True)
class Envelope:
    """
    Axis-aligned bounding box

    The default instance is the empty envelope. Its inverted infinite bounds
    make it the identity for merge and keep every containment test false.
    """
    xmin: float = math.inf
    ymin: float = math.inf
    xmax: float = -math.inf
    ymax: float = -math.inf

    def __post_init__(self):
        # NaN bounds mean "no coordinates"; normalise them to the empty sentinel
        if any(math.isnan(v) for v in (self.xmin, self.ymin, self.xmax, self.ymax)):
            object.__setattr__(self, "xmin", math.inf)
            object.__setattr__(self, "ymin", math.inf)
            object.__setattr__(self, "xmax", -math.inf)
            object.__setattr__(self, "ymax", -math.inf)

    @classmethod
    def empty(cls) -> Envelope:
        return cls()

    @classmethod
    def of(cls, geometry: BaseGeometry) -> Envelope:
        """
        Bounding box of a shapely geometry

        Args:
            geometry: Any shapely geometry

        Returns:
            Envelope of the geometry, or the empty envelope when the geometry
            has no coordinates (shapely reports NaN bounds for those)
        """
        if geometry.is_empty:
            return cls()
        xmin, ymin, xmax, ymax = geometry.bounds
        return cls(float(xmin), float(ymin), float(xmax), float(ymax))

    @property
    def is_empty(self) -> bool:
        return self.xmin > self.xmax or self.ymin > self.ymax

    def merge(self, other: Envelope) -> Envelope:
        """Smallest envelope covering both operands"""
        return Envelope(
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def corners(self) -> List[Point2D]:
        return [
            Point2D(self.xmin, self.ymin),
            Point2D(self.xmin, self.ymax),
            Point2D(self.xmax, self.ymin),
            Point2D(self.xmax, self.ymax),
        ]

    def to_geometry(self) -> BaseGeometry:
        """
        Shapely geometry covering exactly this envelope

        Zero-extent boxes collapse to a Point or LineString so that shapely
        predicates see a valid geometry.
        """
        if self.is_empty:
            return Polygon()
        if self.xmin == self.xmax and self.ymin == self.ymax:
            return Point(self.xmin, self.ymin)
        if self.xmin == self.xmax or self.ymin == self.ymax:
            return LineString([(self.xmin, self.ymin), (self.xmax, self.ymax)])
        return box(self.xmin, self.ymin, self.xmax, self.ymax)
