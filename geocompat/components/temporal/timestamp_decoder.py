from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple

import numpy as np

from geocompat.core import GEOMETRY_CONSTANTS, InvalidInputError

_EPOCH = datetime(1970, 1, 1)
_SECONDS_PER_DAY = 86_400

# datetime64 stores an int64 count and reserves the minimum value for NaT
_DATETIME64_MIN = -(2 ** 63) + 1
_DATETIME64_MAX = 2 ** 63 - 1


def _civil_from_days(days: int) -> Tuple[int, int, int]:
    """Proleptic Gregorian (year, month, day) for a day count since 1970-01-01"""
    z = days + 719_468
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1_460 + doe // 36_524 - doe // 146_096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def _format_year(year: int) -> str:
    # ISO-8601 expanded years: sign plus at least four digits outside 0000-9999
    if year > 9999:
        return f"+{year}"
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


@dataclass(frozen=True)
class CalendarDateTime:
    """UTC date-time at nanosecond resolution"""
    epoch_seconds: int
    nano_of_second: int

    def to_datetime(self) -> datetime:
        """
        Naive UTC datetime, truncated to microseconds

        Raises:
            InvalidInputError: If the year is outside 1-9999
        """
        try:
            return _EPOCH + timedelta(seconds=self.epoch_seconds, microseconds=self.nano_of_second // 1_000)
        except OverflowError as e:
            raise InvalidInputError("timestamp", f"{self.isoformat()} is outside the datetime range") from e

    def to_datetime64(self) -> np.datetime64:
        """
        numpy datetime64 at nanosecond resolution, or microsecond resolution
        when the value does not fit in datetime64[ns] (about 1677-2262)

        Raises:
            InvalidInputError: If the value does not fit in datetime64[us] either
        """
        nanos = self.epoch_seconds * 1_000_000_000 + self.nano_of_second
        if _DATETIME64_MIN <= nanos <= _DATETIME64_MAX:
            return np.datetime64(nanos, "ns")

        micros = self.epoch_seconds * GEOMETRY_CONSTANTS.MICROSECONDS_PER_SECOND + self.nano_of_second // 1_000
        if _DATETIME64_MIN <= micros <= _DATETIME64_MAX:
            return np.datetime64(micros, "us")

        raise InvalidInputError("timestamp", f"{self.isoformat()} is outside the datetime64 range")

    def isoformat(self) -> str:
        """
        ISO-8601 text with the shortest exact fraction (0, 3, 6 or 9 digits)

        Years outside 0000-9999 use the expanded form, e.g. +10000-01-01T00:00:00.
        """
        days, second_of_day = divmod(self.epoch_seconds, _SECONDS_PER_DAY)
        year, month, day = _civil_from_days(days)
        hour, remainder = divmod(second_of_day, 3_600)
        minute, second = divmod(remainder, 60)
        base = f"{_format_year(year)}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"

        nanos = self.nano_of_second
        if nanos == 0:
            return base
        if nanos % 1_000_000 == 0:
            return f"{base}.{nanos // 1_000_000:03d}"
        if nanos % 1_000 == 0:
            return f"{base}.{nanos // 1_000:06d}"
        return f"{base}.{nanos:09d}"


class TimestampDecoder:
    """
    Decoder for fixed-point epoch timestamps

    Short timestamps carry whole microseconds since the epoch; long ones add
    a picosecond remainder within the microsecond.
    """

    @classmethod
    def decode(cls, epoch_micros: Optional[int], picos_of_micro: Optional[int] = None) -> Optional[CalendarDateTime]:
        """
        Convert a fixed-point timestamp to a calendar date-time

        Args:
            epoch_micros: Microseconds since 1970-01-01T00:00:00 UTC, or None
            picos_of_micro: Extra picoseconds in [0, 999] for long timestamps

        Returns:
            CalendarDateTime, or None for a null value

        Raises:
            InvalidInputError: If picos_of_micro is out of range
        """
        if epoch_micros is None:
            return None

        if picos_of_micro is not None and not 0 <= picos_of_micro <= GEOMETRY_CONSTANTS.MAX_PICOS_OF_MICRO:
            raise InvalidInputError(
                "timestamp",
                f"picos_of_micro must be between 0 and {GEOMETRY_CONSTANTS.MAX_PICOS_OF_MICRO}, got {picos_of_micro}"
            )

        micros_per_second = GEOMETRY_CONSTANTS.MICROSECONDS_PER_SECOND
        epoch_seconds = epoch_micros // micros_per_second
        picos_of_second = (epoch_micros % micros_per_second) * GEOMETRY_CONSTANTS.PICOSECONDS_PER_MICROSECOND
        if picos_of_micro is not None:
            picos_of_second += picos_of_micro

        # no rounding, the source has at most picosecond precision
        nano_of_second = picos_of_second // GEOMETRY_CONSTANTS.PICOSECONDS_PER_NANOSECOND

        return CalendarDateTime(epoch_seconds, nano_of_second)
