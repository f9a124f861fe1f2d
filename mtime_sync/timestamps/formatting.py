from datetime import datetime

from .. import config


def format_setfile_timestamp(dt: datetime) -> str:
    """
    Renders `dt` as MM/DD/YYYY HH:MM:SS from its own wall-clock fields.
    No timezone conversion is applied, so aware datetimes keep their offset's local time.
    """
    return config.TIMESTAMP_PATTERN.format(
        month=dt.month,
        day=dt.day,
        year=dt.year,
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
    )
