"""
Unit tests for LegacyEnvelopeSerde - binary envelope layout with legacy NaNs.
"""

import sys

import numpy as np
import pytest

from geocompat import Envelope, InvalidInputError
from geocompat.components.serialization import LegacyEnvelopeSerde


class TestLegacyEnvelopeSerde:
    """Test LegacyEnvelopeSerde class."""

    def test_serialize_layout(self):
        """Test that bounds are written as four little-endian doubles."""
        data = LegacyEnvelopeSerde.serialize(Envelope(1.0, 2.0, 3.0, 4.0))

        assert len(data) == 32
        np.testing.assert_array_equal(np.frombuffer(data, dtype="<f8"), [1.0, 2.0, 3.0, 4.0])

    def test_round_trip(self):
        """Test that a regular envelope reads back equal."""
        envelope = Envelope(-10.5, 0.0, 7.25, 99.0)

        assert LegacyEnvelopeSerde.deserialize(LegacyEnvelopeSerde.serialize(envelope)) == envelope

    def test_empty_envelope_written_as_sentinel(self):
        """Test that the empty envelope is stored as -DBL_MAX in every slot."""
        data = LegacyEnvelopeSerde.serialize(Envelope.empty())

        values = np.frombuffer(data, dtype="<f8")
        assert np.all(values == -sys.float_info.max)

    def test_empty_envelope_round_trip(self):
        """Test that the empty envelope reads back empty."""
        restored = LegacyEnvelopeSerde.deserialize(LegacyEnvelopeSerde.serialize(Envelope.empty()))

        assert restored.is_empty
        assert restored == Envelope.empty()

    def test_drifted_sentinel_reads_as_empty(self):
        """Test that values written by older encoders below -1.0e38 mean empty."""
        data = np.array([-1.0e39, -1.0e39, -1.0e39, -1.0e39], dtype="<f8").tobytes()

        assert LegacyEnvelopeSerde.deserialize(data).is_empty

    def test_wrong_size_raises(self):
        """Test that a truncated payload is rejected."""
        with pytest.raises(InvalidInputError) as exc_info:
            LegacyEnvelopeSerde.deserialize(b"\x00" * 31)

        assert "expected 32 bytes, got 31" in str(exc_info.value)
