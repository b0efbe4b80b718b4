"""
camelCase → snake_case normalisation of Litmos response bodies.

Litmos answers with PascalCase keys ("UserName", "CourseId") and embeds
timestamps as "/Date(...)/" strings.  Everything downstream of the transport
sees snake_case keys and real datetime objects instead:

    {"UserName": "Bob", "CreatedDate": "/Date(1388534400000+0000)/"}
    → {"user_name": "Bob", "created_date": datetime(2014, 1, 1, tzinfo=utc)}

The walk is a plain recursion over the JSON parse tree (dict / list / scalar),
so it always terminates.
"""

import json
import logging
import re
from typing import Any

from .dates import decode_asp_date, is_asp_date
from .errors import DateFormatError

logger = logging.getLogger(__name__)

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(name: str) -> str:
    """
    'UserName'       → 'user_name'
    'HTTPSEnabled'   → 'https_enabled'
    'Course2Id'      → 'course2_id'
    'Admin::Team'    → 'admin/team'
    'first-name'     → 'first_name'
    """
    s = name.replace("::", "/")
    # Split an acronym from the capitalised word after it: 'HTTPSEnabled' → 'HTTPS_Enabled'
    s = _ACRONYM_BOUNDARY.sub(r"\1_\2", s)
    # Split a lowercase letter or digit from the capital after it
    s = _WORD_BOUNDARY.sub(r"\1_\2", s)
    return s.replace("-", "_").lower()


def normalise_keys(data: Any) -> Any:
    """
    Recursively rewrite every dict key to snake_case and decode date strings.

    Lists keep their order.  Numbers, booleans, None and ordinary strings are
    returned as-is, as are date literals outside the datetime range.  When two
    keys collapse onto the same snake_case name the later one wins and a
    warning is logged.
    """
    if isinstance(data, dict):
        converted: dict[str, Any] = {}
        originals: dict[str, str] = {}
        for key, value in data.items():
            snake = underscore(str(key))
            if snake in converted:
                logger.warning(
                    "Keys %r and %r both normalise to %r; keeping the value of %r",
                    originals[snake],
                    key,
                    snake,
                    key,
                )
            converted[snake] = normalise_keys(value)
            originals[snake] = key
        return converted
    if isinstance(data, list):
        return [normalise_keys(item) for item in data]
    if is_asp_date(data):
        try:
            return decode_asp_date(data)
        except DateFormatError:
            logger.warning("Date literal %r is out of range; keeping the string", data)
    return data


def normalise_response(body: str) -> Any:
    """Parse a JSON response body and normalise it."""
    return normalise_keys(json.loads(body))
