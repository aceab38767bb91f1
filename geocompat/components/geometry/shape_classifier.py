from shapely.geometry.base import BaseGeometry
from geocompat.core import GeometryType, GEOMETRY_CONSTANTS
from geocompat.components.geometry.envelope import Envelope
from geocompat.components.geometry.geometry_ops import GeometryOps


class ShapeClassifier:
    """
    Fast-path shape checks used ahead of exact spatial predicates
    """

    @classmethod
    def is_point_or_same_rectangle(cls, geometry: BaseGeometry, envelope: Envelope) -> bool:
        """
        Check whether a geometry is a point or a rectangle on the envelope corners

        Any Point qualifies regardless of the envelope. A polygon qualifies
        when it has a single ring of exactly four stored vertices and each
        vertex is bit-identical to one of the envelope's corners. Corners
        may repeat; distinct coverage of all four is not checked.

        Args:
            geometry: Shapely geometry to classify
            envelope: Envelope whose corners the polygon must sit on

        Returns:
            True for points and for polygons matching the corner set
        """
        geom_type = geometry.geom_type
        if geom_type == GeometryType.POINT.value:
            return True

        if geom_type != GeometryType.POLYGON.value:
            return False

        if GeometryOps.ring_count(geometry) > 1:
            return False

        if GeometryOps.vertex_count(geometry) != GEOMETRY_CONSTANTS.RECTANGLE_VERTEX_COUNT:
            return False

        corners = set(envelope.corners())
        for i in range(GEOMETRY_CONSTANTS.RECTANGLE_VERTEX_COUNT):
            if GeometryOps.vertex_at(geometry, i) not in corners:
                return False

        return True
