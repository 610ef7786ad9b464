"""Time-of-day classification for time sensitive greetings."""

import re
from datetime import time
from enum import Enum

from modules.greetings.errors import InvalidParameterError

USERS_TIME_PARAM = "usersTime"

_USERS_TIME_PATTERN = re.compile(r"(?P<hour>[01]\d|2[0-3]):(?P<minute>[0-5]\d)", re.ASCII)


class TimePeriod(str, Enum):
    """Coarse period of the day a greeting is chosen for."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    GENERAL = "general"


# Inclusive on both ends, checked in order.
PERIOD_WINDOWS: tuple[tuple[TimePeriod, time, time], ...] = (
    (TimePeriod.MORNING, time(5, 0), time(11, 59)),
    (TimePeriod.AFTERNOON, time(12, 0), time(16, 59)),
    (TimePeriod.EVENING, time(17, 0), time(21, 59)),
)


def parse_users_time(users_time: str) -> time:
    """Parse a strict ``HH:mm`` 24-hour string.

    Raises:
        InvalidParameterError: On wrong field width, missing colon, non-digits
            or hour/minute out of range.
    """
    match = _USERS_TIME_PATTERN.fullmatch(users_time or "")
    if match is None:
        raise InvalidParameterError(USERS_TIME_PARAM, users_time)
    return time(int(match.group("hour")), int(match.group("minute")))


def classify(users_time: str) -> TimePeriod:
    """Return the period of day for a ``HH:mm`` time.

    00:00-04:59 and 22:00-23:59 fall outside every window and yield GENERAL.

    Example:
        >>> classify("18:36")
        <TimePeriod.EVENING: 'evening'>
    """
    parsed = parse_users_time(users_time)
    for period, start, end in PERIOD_WINDOWS:
        if start <= parsed <= end:
            return period
    return TimePeriod.GENERAL
