from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import types
from sqlalchemy.types import TypeDecorator

# Sort key for records without a timestamp
UTC_MIN = datetime.min.replace(tzinfo=timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware UTC datetime; naive values are taken to be UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timestamp column that always round-trips as an aware UTC datetime.

    Stored as a naive UTC DATETIME on every dialect; offsets are converted
    on the way in and UTC is re-attached on the way out.
    """

    impl = types.DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        return as_utc(value).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        return value.replace(tzinfo=timezone.utc)
