"""Fractional time conversion.

Chart times are printed as "1:08.20" (minutes, seconds, hundredths),
"48.55" or "1:08".
"""

import re

FRACTION_PATTERN = re.compile(r"^(?:(\d+):)?(\d{1,2})(?:\.(\d{1,3}))?$")


def calculate_millis_for_fraction(time_text: str | None) -> int | None:
    """Convert a fractional time to milliseconds.

    Args:
        time_text: Time as printed on the chart (e.g. "1:08.20").

    Returns:
        Milliseconds (e.g. 68200), or None if the text is not a valid time.
    """
    if not time_text:
        return None

    match = FRACTION_PATTERN.match(time_text.strip())
    if not match:
        return None

    minutes = int(match.group(1)) if match.group(1) else 0
    seconds = int(match.group(2))
    # 秒が60以上の場合は分表記が必要
    if match.group(1) and seconds >= 60:
        return None
    fraction = match.group(3) or ""
    millis = int(fraction.ljust(3, "0")) if fraction else 0

    return (minutes * 60 + seconds) * 1000 + millis
