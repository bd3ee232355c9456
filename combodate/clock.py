"""
Combodate - Clock Module.

Reads the current instant from the operating system clock.

Functions:
    local_now: The current instant as a timezone-aware local datetime.
"""

from datetime import datetime

from combodate.errors import ClockUnavailableError
from combodate.log import get_logger


logger = get_logger("clock")


def local_now() -> datetime:
    """
    Reads the system clock once and attaches the local UTC offset.

    Returns:
        Timezone-aware datetime in local time.

    Raises:
        ClockUnavailableError: If the platform cannot provide the time
            or the local offset.
    """
    try:
        now = datetime.now().astimezone()
    except (OSError, OverflowError, ValueError) as exc:
        raise ClockUnavailableError(f"Cannot read the system clock: {exc}") from exc

    logger.debug("clock_read", utc_offset=str(now.utcoffset()))
    return now
