from enum import Enum


class GeometryType(str, Enum):
    """Shapely geometry type enumeration (Enumerator Pattern)"""
    POINT = "Point"
    LINE_STRING = "LineString"
    LINEAR_RING = "LinearRing"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"

    @classmethod
    def is_atomic(cls, geom_type: str) -> bool:
        return geom_type in (
            cls.POINT.value,
            cls.LINE_STRING.value,
            cls.LINEAR_RING.value,
            cls.POLYGON.value,
        )

    @classmethod
    def is_multi_vertex(cls, geom_type: str) -> bool:
        """Atomic types that store a vertex sequence"""
        return geom_type in (
            cls.LINE_STRING.value,
            cls.LINEAR_RING.value,
            cls.POLYGON.value,
        )


class GeoJsonKey(str, Enum):
    """GeoJSON member names"""
    TYPE = "type"
    COORDINATES = "coordinates"
    GEOMETRIES = "geometries"


class ErrorCode(Enum):
    """Error classification attached to raised exceptions"""
    INVALID_FUNCTION_ARGUMENT = "invalid_function_argument"
    TYPE_MISMATCH = "type_mismatch"

    @classmethod
    def is_user_error(cls, code: "ErrorCode") -> bool:
        return code == cls.INVALID_FUNCTION_ARGUMENT
