"""
Decoding of the ASP.NET JSON date literal used in Litmos payloads.

Litmos serialises timestamps as strings such as:

    "/Date(1388534400000+0000)/"

i.e. milliseconds since the Unix epoch followed by a signed timezone offset.
The offset is parsed but not applied: every decoded value is UTC.  Existing
consumers of the data already rely on that reading.
"""

import re
from datetime import datetime, timedelta, timezone

from .errors import DateFormatError

ASP_DATE_PATTERN = re.compile(r"/Date\((?P<millis>[0-9]+)[+-](?P<offset>[0-9]+)\)/")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_asp_date(value: object) -> bool:
    """True when *value* is a string consisting of exactly one date literal."""
    return isinstance(value, str) and ASP_DATE_PATTERN.fullmatch(value) is not None


def decode_asp_date(value: str) -> datetime:
    """
    '/Date(1388534400000+0000)/' → datetime(2014, 1, 1, tzinfo=timezone.utc)

    Raises DateFormatError if *value* is not a complete date literal, or if
    its millisecond count lies outside the range datetime can represent.
    """
    match = ASP_DATE_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise DateFormatError(f"Not an ASP.NET date literal: {value!r}")
    try:
        # integer milliseconds, no float round-trip
        return _EPOCH + timedelta(milliseconds=int(match.group("millis")))
    except OverflowError as exc:
        raise DateFormatError(f"ASP.NET date out of range: {value!r}") from exc
