import json
import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

import shapely
from shapely.errors import GEOSException
from shapely.geometry import Point, Polygon
from shapely.geometry.base import BaseGeometry

from geocompat.core import GeometryType, GeoJsonKey, InvalidInputError

logger = logging.getLogger(__name__)


class GeoJsonAdapter:
    """
    Adapter in front of shapely's GeoJSON codec (Adapter Pattern)

    Shapely's reader and writer disagree with the GeoJSON empty-coordinates
    convention for a few atomic types. Those cases are answered from fixed
    override tables; everything else goes to shapely.

    The tables cover different types on purpose: each lists only the types
    the codec gets wrong in that direction.
    """

    # GeoJSON type -> empty geometry returned for "coordinates": []
    EMPTY_GEOMETRY_OVERRIDES: Mapping[str, BaseGeometry] = MappingProxyType({
        GeometryType.POLYGON.value: Polygon(),
        GeometryType.POINT.value: Point(),
    })

    # Geometry type -> GeoJSON written for the empty geometry
    EMPTY_GEOJSON_OVERRIDES: Mapping[str, str] = MappingProxyType({
        GeometryType.LINE_STRING.value: '{"type":"LineString","coordinates":[]}',
        GeometryType.POINT.value: '{"type":"Point","coordinates":[]}',
    })

    @classmethod
    def _empty_geometry_override(cls, json_text: Any) -> Optional[BaseGeometry]:
        """
        Look for a "coordinates": [] document of an overridden type

        Returns:
            The empty geometry for that type, or None to fall through to the
            codec. Text that does not parse as JSON also returns None so the
            codec reports the error.
        """
        try:
            document = json.loads(json_text)
        except (ValueError, TypeError, RecursionError):
            return None

        if not isinstance(document, dict):
            return None

        geom_type = document.get(GeoJsonKey.TYPE.value)
        if not isinstance(geom_type, str):
            return None

        empty_geometry = cls.EMPTY_GEOMETRY_OVERRIDES.get(geom_type)
        if empty_geometry is None:
            return None

        coordinates = document.get(GeoJsonKey.COORDINATES.value)
        if isinstance(coordinates, list) and not coordinates:
            return empty_geometry
        return None

    @classmethod
    def decode(cls, json_text: str) -> BaseGeometry:
        """
        Parse GeoJSON text into a shapely geometry

        Args:
            json_text: GeoJSON geometry document

        Returns:
            Shapely geometry

        Raises:
            InvalidInputError: If the text is not JSON or does not describe
                a valid geometry
        """
        override = cls._empty_geometry_override(json_text)
        if override is not None:
            logger.debug(f"[GEOJSON ADAPTER]: Using empty {override.geom_type} override")
            return override

        try:
            return shapely.from_geojson(json_text)
        except (GEOSException, ValueError, TypeError, RecursionError) as e:
            raise InvalidInputError("GeoJSON", str(e)) from e

    @classmethod
    def encode(cls, geometry: BaseGeometry) -> str:
        """
        Write a shapely geometry as GeoJSON text

        Empty geometries of overridden types are written as the literal
        empty-coordinates document.
        """
        if geometry.is_empty:
            override = cls.EMPTY_GEOJSON_OVERRIDES.get(geometry.geom_type)
            if override is not None:
                logger.debug(f"[GEOJSON ADAPTER]: Writing empty {geometry.geom_type} override")
                return override

        return shapely.to_geojson(geometry)
