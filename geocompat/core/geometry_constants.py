"""
Geometry Constants for Legacy Compatibility

Centralized location for the magic numbers shared by the codec, walker,
classifier and timestamp decoder.
"""
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class GeometryConstants:
    """
    Immutable constants for geometry serialization (Immutable Object Pattern)

    Units:
    - Time ratios are integer counts between adjacent units
    - Sizes are in bytes
    """

    # Legacy binary format NaN handling
    LEGACY_NAN_SENTINEL: float = -sys.float_info.max  # written in place of NaN
    LEGACY_NAN_THRESHOLD: float = -1.0e38  # anything below reads back as NaN

    # Shape classification
    RECTANGLE_VERTEX_COUNT: int = 4

    # Legacy envelope layout: xmin, ymin, xmax, ymax as little-endian float64
    ENVELOPE_VALUE_COUNT: int = 4
    ENVELOPE_BYTE_SIZE: int = 32

    # Fixed-point timestamps
    MICROSECONDS_PER_SECOND: int = 1_000_000
    PICOSECONDS_PER_MICROSECOND: int = 1_000_000
    PICOSECONDS_PER_NANOSECOND: int = 1_000
    MAX_PICOS_OF_MICRO: int = 999

    @classmethod
    def is_below_nan_threshold(cls, value: float) -> bool:
        return value < cls.LEGACY_NAN_THRESHOLD


# Singleton instance for easy access
GEOMETRY_CONSTANTS = GeometryConstants()
