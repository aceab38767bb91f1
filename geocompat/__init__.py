"""
Geometry analysis and serialization-compatibility helpers for a query
engine's geospatial types.

The free functions below are the public surface; the classes behind them
live in geocompat.components.
"""

from geocompat.core import (
    GeoCompatException,
    InvalidInputError,
    TypeMismatchError,
)
from geocompat.components.geometry import (
    Point2D,
    Envelope,
    GeometryCursor,
    GeometryWalker,
    ShapeClassifier,
)
from geocompat.components.serialization import GeoJsonAdapter, LegacyNaNCodec
from geocompat.components.temporal import CalendarDateTime, TimestampDecoder

encode_for_legacy_format = LegacyNaNCodec.encode_for_legacy_format
decode_from_legacy_format = LegacyNaNCodec.decode_from_legacy_format
is_legacy_nan = LegacyNaNCodec.is_legacy_nan

count_points = GeometryWalker.count_points
compute_envelope = GeometryWalker.compute_envelope
is_disjoint_from_envelope = GeometryWalker.is_disjoint_from_envelope
envelope_contains = GeometryWalker.envelope_contains

is_point_or_same_rectangle = ShapeClassifier.is_point_or_same_rectangle

geojson_decode = GeoJsonAdapter.decode
geojson_encode = GeoJsonAdapter.encode

decode_timestamp = TimestampDecoder.decode

__all__ = [
    "GeoCompatException",
    "InvalidInputError",
    "TypeMismatchError",
    "Point2D",
    "Envelope",
    "GeometryCursor",
    "CalendarDateTime",
    "encode_for_legacy_format",
    "decode_from_legacy_format",
    "is_legacy_nan",
    "count_points",
    "compute_envelope",
    "is_disjoint_from_envelope",
    "envelope_contains",
    "is_point_or_same_rectangle",
    "geojson_decode",
    "geojson_encode",
    "decode_timestamp",
]
