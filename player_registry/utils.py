"""Conversions between wire timestamps (epoch milliseconds) and stored datetimes."""

from datetime import datetime, timedelta

# Stored datetimes are naive and always UTC
EPOCH = datetime(1970, 1, 1)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def millis_to_datetime(millis: int) -> datetime:
    return EPOCH + timedelta(milliseconds=millis)


def datetime_to_millis(value: datetime) -> int:
    return (value - EPOCH) // _ONE_MILLISECOND
