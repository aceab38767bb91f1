from typing import List, Optional
from shapely.geometry.base import BaseGeometry
from geocompat.core import GeometryType


class GeometryCursor:
    """
    Single-pass, forward-only traversal over the atomic parts of a geometry

    Collections are expanded depth-first, in member order, so every leaf
    (empty leaves included) is produced exactly once. `next()` returns None
    once the cursor is exhausted and keeps returning None afterwards.
    """

    def __init__(self, geometry: BaseGeometry):
        self._pending: List[BaseGeometry] = [geometry]

    def next(self) -> Optional[BaseGeometry]:
        """
        Advance to the next atomic geometry

        Returns:
            Next Point, LineString, LinearRing or Polygon, or None at the end
        """
        while self._pending:
            geometry = self._pending.pop()
            if GeometryType.is_atomic(geometry.geom_type):
                return geometry
            self._pending.extend(reversed(list(geometry.geoms)))
        return None

    def __iter__(self) -> "GeometryCursor":
        return self

    def __next__(self) -> BaseGeometry:
        geometry = self.next()
        if geometry is None:
            raise StopIteration
        return geometry
