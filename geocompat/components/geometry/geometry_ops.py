import numpy as np
from shapely.geometry.base import BaseGeometry
from geocompat.core import GeometryType, TypeMismatchError
from geocompat.components.geometry.point_2d import Point2D
from geocompat.components.geometry.geometry_cursor import GeometryCursor


class GeometryOps:
    """
    Type-specific accessors over shapely geometries

    Vertex counts follow the legacy representation: ring vertices are counted
    without the closing duplicate of the first vertex.
    """

    @classmethod
    def get_cursor(cls, geometry: BaseGeometry) -> GeometryCursor:
        return GeometryCursor(geometry)

    @classmethod
    def _require_polygon(cls, geometry: BaseGeometry, operation: str):
        if geometry.geom_type != GeometryType.POLYGON.value:
            raise TypeMismatchError(GeometryType.POLYGON.value, geometry.geom_type, operation)

    @classmethod
    def _ring_coords(cls, ring) -> np.ndarray:
        coords = np.asarray(ring.coords, dtype=np.float64)
        if len(coords) == 0:
            return np.empty((0, 2), dtype=np.float64)
        return coords[:-1, :2]  # Remove duplicate last point

    @classmethod
    def ring_count(cls, polygon: BaseGeometry) -> int:
        """Number of boundary paths (exterior plus holes) of a polygon"""
        cls._require_polygon(polygon, "ring_count")
        if polygon.is_empty:
            return 0
        return 1 + len(polygon.interiors)

    @classmethod
    def polygon_vertices(cls, polygon: BaseGeometry) -> np.ndarray:
        """
        Stored vertices of a polygon, exterior ring first

        Args:
            polygon: Shapely Polygon

        Returns:
            Array of shape (N, 2)

        Raises:
            TypeMismatchError: If the geometry is not a polygon
        """
        cls._require_polygon(polygon, "polygon_vertices")
        if polygon.is_empty:
            return np.empty((0, 2), dtype=np.float64)
        rings = [polygon.exterior, *polygon.interiors]
        return np.concatenate([cls._ring_coords(ring) for ring in rings])

    @classmethod
    def vertex_count(cls, geometry: BaseGeometry) -> int:
        """
        Number of stored vertices of a line string, ring or polygon

        Raises:
            TypeMismatchError: For points and collections
        """
        geom_type = geometry.geom_type
        if not GeometryType.is_multi_vertex(geom_type):
            raise TypeMismatchError("LineString, LinearRing or Polygon", geom_type, "vertex_count")
        if geom_type == GeometryType.POLYGON.value:
            return len(cls.polygon_vertices(geometry))
        if geom_type == GeometryType.LINEAR_RING.value:
            return len(cls._ring_coords(geometry))
        return len(geometry.coords)

    @classmethod
    def vertex_at(cls, polygon: BaseGeometry, index: int) -> Point2D:
        """
        Vertex of a polygon by position

        Raises:
            TypeMismatchError: If the geometry is not a polygon
            IndexError: If index is outside [0, vertex_count)
        """
        vertices = cls.polygon_vertices(polygon)
        if index < 0 or index >= len(vertices):
            raise IndexError(f"Vertex index {index} out of range for polygon with {len(vertices)} vertices")
        x, y = vertices[index]
        return Point2D(float(x), float(y))
