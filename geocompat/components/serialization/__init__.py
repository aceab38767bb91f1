"""
Serialization module for legacy-format and GeoJSON compatibility.
"""

from geocompat.components.serialization.legacy_nan_codec import LegacyNaNCodec
from geocompat.components.serialization.envelope_serde import LegacyEnvelopeSerde
from geocompat.components.serialization.geojson_adapter import GeoJsonAdapter

__all__ = [
    'LegacyNaNCodec',
    'LegacyEnvelopeSerde',
    'GeoJsonAdapter',
]
