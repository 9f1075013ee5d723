"""
Strict datetime parse and format utilities for request timestamps.
"""
from datetime import datetime
from pytz import FixedOffset, UTC
from re import compile as re_compile

from .exc import MalformedTimestampError

# Month-name to month-value map
_month_names = {
    "Jan": 1,
    "Feb": 2,
    "Mar": 3,
    "Apr": 4,
    "May": 5,
    "Jun": 6,
    "Jul": 7,
    "Aug": 8,
    "Sep": 9,
    "Oct": 10,
    "Nov": 11,
    "Dec": 12,
}

# strftime layouts used in SigV4
_amz_date_format = "%Y%m%dT%H%M%SZ"
_date_stamp_format = "%Y%m%d"

# ISO 8601 timestamp format regex (includes RFC 3339)
_iso_8601_regex = re_compile(
    r"^(?P<year>[0-9]{4})-?"
    r"(?P<month>0[1-9]|1[0-2])-?"
    r"(?P<day>0[1-9]|[12][0-9]|3[01])"
    r"[Tt ]"
    r"(?P<hour>[01][0-9]|2[0-3]):?"
    r"(?P<minute>[0-5][0-9]):?"
    r"(?P<second>[0-5][0-9])"
    r"(?P<frac_sec>[\.,][0-9]+)?"
    r"(?P<timezone>[-+][01][0-9]:?[0-5][0-9]|[Zz])$")

# RFC 2822 timestamp format regex
_rfc_2822_regex = re_compile(
    r"^(?:(?P<dow>Mon|Tue|Wed|Thu|Fri|Sat|Sun)\s*,)?\s*"
    r"(?P<day>[0-9]|0[1-9]|1[0-9]|2[0-9]|3[01])\s+"
    r"(?P<month>Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\s+"
    r"(?P<year>[0-9]{4})\s+"
    r"(?P<hour>[01][0-9]|2[0-3]):"
    r"(?P<minute>[0-5][0-9]):"
    r"(?P<second>[0-5][0-9])\s+"
    r"(?P<timezone>[-+][01][0-9][0-5][0-9]|GMT|UTC)$"
)

def _zone_offset(zone):
    """
    Convert a +HHMM / -HH:MM zone designator into a tzinfo.
    """
    zone = zone.replace(":", "")
    assert len(zone) == 5
    sign = zone[0]
    offset_hour = int(zone[1:3])
    offset_minutes = offset_hour * 60 + int(zone[3:5])

    if sign == "-":
        offset_minutes = -offset_minutes

    if offset_minutes == 0:
        return UTC

    return FixedOffset(offset_minutes)

def parse_iso8601(s):
    """
    Parse a timestamp formatted in ISO 8601 timestamp format and return a
    datetime object. If the string is not a valid ISO 8601 timestamp, None
    is returned.

    ISO 8601 timestamps include the forms:
        2018-12-25T14:00:00-08:00
        20181225T140000-0800            (Condensed)
        20181225T230000+0100            (Timestamp sign *must* be present)
        2018-12-25T22:00:00Z            (Z == +0000, UTC)
        20181225T220000Z                (Condensed; the SigV4 X-Amz-Date form)
        20181225 220000Z                (Space instead of T)

    Condensing of dates and times/zone offsets may be mixed, and case of
    'T' and 'Z' is insignificant:
        2018-12-25 220000z
        20181225t14:00:00-08:00
    etc.

    If fractional seconds are included, they are ignored.
    """
    m = _iso_8601_regex.match(s)
    if not m:
        return None

    zone = m.group("timezone")
    if zone in ("Z", "z"):
        offset = UTC
    else:
        offset = _zone_offset(zone)

    try:
        result = datetime(
            year=int(m.group("year")),
            month=int(m.group("month")),
            day=int(m.group("day")),
            hour=int(m.group("hour")),
            minute=int(m.group("minute")),
            second=int(m.group("second")))
    except ValueError:
        # e.g. February 30th
        return None

    return offset.localize(result)

def parse_rfc2822(s):
    """
    Parse a timestamp formatted in RFC 2822 timestamp format and return a
    datetime object. If the string is not a valid RFC 2822 timestamp, None
    is returned.

    RFC 2822 timestamps are of the form:
        Tue, 25 Dec 2018 14:00:00 -0800
        25 Dec 2018 14:00:00 -0800
        Tue, 25 Dec 2018 22:00:00 GMT
    """
    m = _rfc_2822_regex.match(s)
    if not m:
        return None

    month = _month_names[m.group("month")]
    zone = m.group("timezone")
    if zone in ("GMT", "UTC"):
        offset = UTC
    else:
        offset = _zone_offset(zone)

    try:
        result = datetime(
            year=int(m.group("year")),
            month=month,
            day=int(m.group("day")),
            hour=int(m.group("hour")),
            minute=int(m.group("minute")),
            second=int(m.group("second")))
    except ValueError:
        return None

    return offset.localize(result)

def utc_now():
    """
    The current instant as a timezone-aware datetime in UTC.
    """
    return datetime.now(UTC)

def to_utc(dt):
    """
    to_utc(dt: datetime) -> datetime

    Convert dt to UTC. Naive datetimes are assumed to already be in UTC.
    """
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)

def parse_timestamp(value):
    """
    parse_timestamp(value: Union[datetime, str]) -> datetime

    Convert a datetime, ISO 8601 string, or RFC 2822 string into an aware
    UTC datetime. A MalformedTimestampError exception is raised if a string
    is in neither format.
    """
    if isinstance(value, datetime):
        return to_utc(value)

    if not isinstance(value, str):
        raise TypeError("Expected timestamp to be a datetime or string.")

    result = parse_iso8601(value)
    if result is None:
        result = parse_rfc2822(value)
    if result is None:
        raise MalformedTimestampError(
            "Timestamp is not a valid ISO 8601 or RFC 2822 string: %r" %
            (value,))

    return result.astimezone(UTC)

def format_amz_date(dt):
    """
    Render dt in the tight ISO 8601 layout used for X-Amz-Date
    (YYYYMMDDTHHMMSSZ).
    """
    return to_utc(dt).strftime(_amz_date_format)

def format_date_stamp(dt):
    """
    Render dt as the YYYYMMDD date stamp used in the credential scope.
    """
    return to_utc(dt).strftime(_date_stamp_format)

# Local variables:
# mode: Python
# tab-width: 8
# indent-tabs-mode: nil
# End:
# vi: set expandtab tabstop=8
