"""
Unit tests for TimestampDecoder - fixed-point epoch timestamps.
"""

from datetime import datetime

import numpy as np
import pytest

from geocompat import decode_timestamp, InvalidInputError
from geocompat.components.temporal import CalendarDateTime


class TestTimestampDecoder:
    """Test TimestampDecoder.decode."""

    def test_null_value(self):
        """Test that a null source value decodes to None."""
        assert decode_timestamp(None) is None
        assert decode_timestamp(None, 5) is None

    def test_epoch(self):
        """Test the epoch itself."""
        decoded = decode_timestamp(0)

        assert decoded == CalendarDateTime(0, 0)
        assert decoded.isoformat() == "1970-01-01T00:00:00"

    def test_one_microsecond_before_epoch(self):
        """Test that negative values use floor semantics."""
        decoded = decode_timestamp(-1)

        assert decoded.epoch_seconds == -1
        assert decoded.nano_of_second == 999_999_000
        assert decoded.to_datetime() == datetime(1969, 12, 31, 23, 59, 59, 999999)
        assert decoded.isoformat() == "1969-12-31T23:59:59.999999"

    def test_whole_seconds_before_epoch(self):
        """Test a negative value on a second boundary."""
        decoded = decode_timestamp(-2_000_000)

        assert decoded == CalendarDateTime(-2, 0)
        assert decoded.isoformat() == "1969-12-31T23:59:58"

    def test_positive_value(self):
        """Test a regular timestamp with a millisecond fraction."""
        decoded = decode_timestamp(1_600_000_000_123_000)

        assert decoded.to_datetime() == datetime(2020, 9, 13, 12, 26, 40, 123000)
        assert decoded.isoformat() == "2020-09-13T12:26:40.123"

    def test_picoseconds_are_added(self):
        """Test that the long representation adds sub-microsecond picos."""
        decoded = decode_timestamp(1, 999)

        assert decoded.nano_of_second == 1_000
        assert decoded.isoformat() == "1970-01-01T00:00:00.000001"

    def test_picoseconds_truncate_to_nanoseconds(self):
        """Test that picoseconds are truncated, not rounded."""
        assert decode_timestamp(0, 999).nano_of_second == 0
        assert decode_timestamp(0, 500).nano_of_second == 0

    def test_nanosecond_iso_format(self):
        """Test that a nanosecond fraction prints nine digits."""
        decoded = CalendarDateTime(0, 123_456_789)

        assert decoded.isoformat() == "1970-01-01T00:00:00.123456789"

    def test_to_datetime64_keeps_nanoseconds(self):
        """Test that numpy conversion keeps nanosecond resolution."""
        decoded = decode_timestamp(-1)

        assert decoded.to_datetime64() == np.datetime64("1969-12-31T23:59:59.999999000", "ns")

    @pytest.mark.parametrize("picos", [-1, 1000])
    def test_out_of_range_picoseconds(self, picos):
        """Test that the picosecond remainder must be within a microsecond."""
        with pytest.raises(InvalidInputError) as exc_info:
            decode_timestamp(0, picos)

        assert "picos_of_micro" in str(exc_info.value)


class TestCalendarDateTimeRange:
    """Test CalendarDateTime outside the datetime and datetime64[ns] ranges."""

    YEAR_10000_SECONDS = 253_402_300_800

    def test_datetime64_keeps_nanoseconds_at_upper_ns_bound(self):
        """Test that the last datetime64[ns] microsecond stays at nanosecond resolution."""
        decoded = decode_timestamp(9_223_372_036_854_775)

        value = decoded.to_datetime64()

        assert np.datetime_data(value.dtype)[0] == "ns"
        assert value == np.datetime64("2262-04-11T23:47:16.854775", "us")

    def test_datetime64_falls_back_to_microseconds(self):
        """Test that dates past 2262 are returned at microsecond resolution, not wrapped."""
        decoded = decode_timestamp(10 ** 17)

        value = decoded.to_datetime64()

        assert np.datetime_data(value.dtype)[0] == "us"
        assert value == np.datetime64("5138-11-16T09:46:40", "us")
        assert decoded.to_datetime() == datetime(5138, 11, 16, 9, 46, 40)

    def test_datetime64_before_1677_falls_back_to_microseconds(self):
        """Test the lower datetime64[ns] bound."""
        value = decode_timestamp(-(10 ** 16)).to_datetime64()

        assert np.datetime_data(value.dtype)[0] == "us"
        assert value == np.datetime64(-(10 ** 16), "us")

    def test_datetime64_out_of_range_raises(self):
        """Test that values beyond datetime64[us] raise a typed error."""
        with pytest.raises(InvalidInputError):
            CalendarDateTime(10 ** 16, 0).to_datetime64()

    def test_isoformat_expanded_year(self):
        """Test that years past 9999 are written without going through datetime."""
        assert decode_timestamp(self.YEAR_10000_SECONDS * 1_000_000).isoformat() == "+10000-01-01T00:00:00"
        assert decode_timestamp(self.YEAR_10000_SECONDS * 1_000_000 - 1).isoformat() == "9999-12-31T23:59:59.999999"
        assert decode_timestamp(3 * 10 ** 17).isoformat().startswith("+")

    def test_isoformat_negative_year(self):
        """Test proleptic years at and before year zero."""
        assert CalendarDateTime(-62_167_219_200, 0).isoformat() == "0000-01-01T00:00:00"
        assert CalendarDateTime(-62_167_219_200 - 86_400, 0).isoformat() == "-0001-12-31T00:00:00"

    def test_to_datetime_out_of_range_raises(self):
        """Test that datetime conversion past year 9999 raises InvalidInputError."""
        decoded = decode_timestamp(self.YEAR_10000_SECONDS * 1_000_000)

        with pytest.raises(InvalidInputError) as exc_info:
            decoded.to_datetime()

        assert "+10000-01-01T00:00:00" in str(exc_info.value)
