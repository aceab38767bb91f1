from geocompat.components.temporal.timestamp_decoder import CalendarDateTime, TimestampDecoder

__all__ = [
    "CalendarDateTime",
    "TimestampDecoder",
]
