"""Race date parsing."""

import re
from datetime import date, datetime

from chartparser.exceptions import InvalidRaceDate

_LONG_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%B %d %Y", "%b %d %Y")


def parse_race_date(date_str: str) -> date:
    """Convert a race date string into a date.

    Supported formats:
        - "January 1, 2015" (chart format)
        - "Jan 1, 2015"
        - "2015-01-01" (ISO format)

    Args:
        date_str: Date string.

    Returns:
        The parsed date.

    Raises:
        InvalidRaceDate: If the string is not a valid date.
    """
    text = " ".join(date_str.split())

    # ISO形式: "2015-01-01"
    if re.match(r"^\d{4}-\d{1,2}-\d{1,2}$", text):
        try:
            return datetime.strptime(text, "%Y-%m-%d").date()
        except ValueError:
            raise InvalidRaceDate(date_str) from None

    # チャート形式: "January 1, 2015"
    for fmt in _LONG_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise InvalidRaceDate(date_str)
