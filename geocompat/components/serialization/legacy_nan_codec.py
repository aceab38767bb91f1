import math
import numpy as np
from geocompat.core import GEOMETRY_CONSTANTS


class LegacyNaNCodec:
    """
    NaN translation for the legacy binary geometry format

    The legacy format cannot store NaN and writes -DBL_MAX instead. Reading
    is deliberately looser than writing: any value below -1.0e38 reads back
    as NaN, which absorbs drift from older encoders.
    """

    @classmethod
    def encode_for_legacy_format(cls, value: float) -> float:
        """NaN becomes the legacy sentinel, everything else passes through"""
        return GEOMETRY_CONSTANTS.LEGACY_NAN_SENTINEL if math.isnan(value) else value

    @classmethod
    def decode_from_legacy_format(cls, value: float) -> float:
        """Values below the legacy threshold read back as NaN"""
        return math.nan if GEOMETRY_CONSTANTS.is_below_nan_threshold(value) else value

    @classmethod
    def is_legacy_nan(cls, value: float) -> bool:
        """
        NaN test for doubles of unknown provenance

        True for a real NaN and for anything the legacy decoder maps to NaN,
        so it works on both encoded and already-decoded values.
        """
        return math.isnan(value) or math.isnan(cls.decode_from_legacy_format(value))

    @classmethod
    def encode_array(cls, values) -> np.ndarray:
        """Element-wise encode_for_legacy_format"""
        arr = np.asarray(values, dtype=np.float64)
        return np.where(np.isnan(arr), GEOMETRY_CONSTANTS.LEGACY_NAN_SENTINEL, arr)

    @classmethod
    def decode_array(cls, values) -> np.ndarray:
        """Element-wise decode_from_legacy_format"""
        arr = np.asarray(values, dtype=np.float64)
        return np.where(arr < GEOMETRY_CONSTANTS.LEGACY_NAN_THRESHOLD, np.nan, arr)
