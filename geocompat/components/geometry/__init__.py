"""
Geometry module for multi-part traversal and shape analysis.

This module provides the cursor used to walk possibly nested geometry
collections, the analyses built on it (point counts, envelopes, disjoint and
contains tests against a box) and the point-or-rectangle classifier.
"""

from geocompat.components.geometry.point_2d import Point2D
from geocompat.components.geometry.envelope import Envelope
from geocompat.components.geometry.geometry_cursor import GeometryCursor
from geocompat.components.geometry.geometry_ops import GeometryOps
from geocompat.components.geometry.geometry_walker import GeometryWalker
from geocompat.components.geometry.shape_classifier import ShapeClassifier

__all__ = [
    'Point2D',
    'Envelope',
    'GeometryCursor',
    'GeometryOps',
    'GeometryWalker',
    'ShapeClassifier',
]
