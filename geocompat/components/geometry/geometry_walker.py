"""
Analyses that drain a GeometryCursor over a possibly multi-part geometry.

Each operation makes its own full traversal; callers needing several
properties pay for several passes.
"""
from shapely.geometry.base import BaseGeometry
from geocompat.core import GeometryType
from geocompat.components.geometry.envelope import Envelope
from geocompat.components.geometry.geometry_ops import GeometryOps


class GeometryWalker:

    @classmethod
    def count_points(cls, geometry: BaseGeometry) -> int:
        """
        Count stored vertices over all non-empty atomic parts

        A point contributes 1, anything else its vertex count. Empty parts
        are skipped.
        """
        cursor = GeometryOps.get_cursor(geometry)
        points = 0
        while True:
            component = cursor.next()
            if component is None:
                return points

            if component.is_empty:
                continue

            if component.geom_type == GeometryType.POINT.value:
                points += 1
            else:
                points += GeometryOps.vertex_count(component)

    @classmethod
    def compute_envelope(cls, geometry: BaseGeometry) -> Envelope:
        """
        Bounding box covering every atomic part

        Returns:
            Merged envelope, or the empty envelope if no part has coordinates
        """
        cursor = GeometryOps.get_cursor(geometry)
        overall = Envelope.empty()
        while True:
            component = cursor.next()
            if component is None:
                return overall

            overall = overall.merge(Envelope.of(component))

    @classmethod
    def is_disjoint_from_envelope(cls, envelope: Envelope, geometry: BaseGeometry) -> bool:
        """True if every atomic part is disjoint from the envelope"""
        target = envelope.to_geometry()
        cursor = GeometryOps.get_cursor(geometry)
        while True:
            component = cursor.next()
            if component is None:
                return True

            if not component.disjoint(target):
                return False

    @classmethod
    def envelope_contains(cls, geometry: BaseGeometry, envelope: Envelope) -> bool:
        """True if at least one atomic part contains the envelope"""
        target = envelope.to_geometry()
        cursor = GeometryOps.get_cursor(geometry)
        while True:
            component = cursor.next()
            if component is None:
                return False

            if component.contains(target):
                return True
