"""
Time utilities - ATCF date-time-group decoding and UTC formatting.
"""
import re
import logging
from datetime import datetime
from typing import Optional
import pytz

logger = logging.getLogger(__name__)

DTG_PATTERN = re.compile(r'(\d{4})(\d{2})(\d{2})(\d{2})')

# Millisecond precision with a Z suffix, the form JavaScript consumers expect
JSON_DATETIME_FORMAT = '%Y-%m-%dT%H:%M:%S.000Z'


def parse_dtg(dtg: Optional[str]) -> Optional[datetime]:
    """
    Parse a YYYYMMDDHH date-time group into an hour-truncated UTC datetime.

    Args:
        dtg: Date-time group (e.g., "2024062812")

    Returns:
        Timezone-aware UTC datetime, or None if the text is not a valid DTG
    """
    if not dtg:
        return None

    match = DTG_PATTERN.fullmatch(dtg)
    if not match:
        return None

    year, month, day, hour = (int(g) for g in match.groups())

    try:
        return pytz.utc.localize(datetime(year, month, day, hour))
    except ValueError as e:
        logger.debug(f"Invalid date-time group {dtg}: {e}")
        return None


def format_dtg(dt: datetime) -> str:
    """
    Format a datetime back into a YYYYMMDDHH date-time group.

    Args:
        dt: datetime object (naive values are taken as UTC)

    Returns:
        Date-time group string
    """
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    elif dt.tzinfo != pytz.utc:
        dt = dt.astimezone(pytz.utc)

    return dt.strftime('%Y%m%d%H')
