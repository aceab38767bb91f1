from geocompat.core.enums import GeometryType, GeoJsonKey, ErrorCode
from geocompat.core.exceptions import (
    GeoCompatException,
    InvalidInputError,
    TypeMismatchError,
)
from geocompat.core.geometry_constants import GeometryConstants, GEOMETRY_CONSTANTS

__all__ = [
    "GeometryType",
    "GeoJsonKey",
    "ErrorCode",
    "GeoCompatException",
    "InvalidInputError",
    "TypeMismatchError",
    "GeometryConstants",
    "GEOMETRY_CONSTANTS",
]
