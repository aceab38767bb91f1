import logging
import numpy as np
from geocompat.core import GEOMETRY_CONSTANTS, InvalidInputError
from geocompat.components.geometry.envelope import Envelope
from geocompat.components.serialization.legacy_nan_codec import LegacyNaNCodec

logger = logging.getLogger(__name__)

_ENVELOPE_DTYPE = np.dtype("<f8")


class LegacyEnvelopeSerde:
    """
    Binary envelope layout shared with the legacy geometry format

    Four little-endian float64 values: xmin, ymin, xmax, ymax. The empty
    envelope is stored as four NaNs, which the legacy format writes as
    -DBL_MAX.
    """

    @classmethod
    def serialize(cls, envelope: Envelope) -> bytes:
        if envelope.is_empty:
            values = np.full(GEOMETRY_CONSTANTS.ENVELOPE_VALUE_COUNT, np.nan)
        else:
            values = np.array([envelope.xmin, envelope.ymin, envelope.xmax, envelope.ymax])
        return LegacyNaNCodec.encode_array(values).astype(_ENVELOPE_DTYPE).tobytes()

    @classmethod
    def deserialize(cls, data: bytes) -> Envelope:
        """
        Read an envelope written by serialize or by a legacy encoder

        Args:
            data: Exactly 32 bytes

        Returns:
            Envelope; the empty envelope if any bound decodes to NaN

        Raises:
            InvalidInputError: If the payload has the wrong size
        """
        if len(data) != GEOMETRY_CONSTANTS.ENVELOPE_BYTE_SIZE:
            raise InvalidInputError(
                "serialized envelope",
                f"expected {GEOMETRY_CONSTANTS.ENVELOPE_BYTE_SIZE} bytes, got {len(data)}"
            )

        values = LegacyNaNCodec.decode_array(np.frombuffer(data, dtype=_ENVELOPE_DTYPE))
        if np.isnan(values).any():
            logger.debug("[ENVELOPE SERDE]: Legacy NaN bounds, returning empty envelope")
            return Envelope.empty()

        xmin, ymin, xmax, ymax = (float(v) for v in values)
        return Envelope(xmin, ymin, xmax, ymax)
