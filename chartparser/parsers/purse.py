"""Purse line recognizers.

Only used to detect where the distance/surface/track record block ends:
the purse line (or a foreign currency disclaimer) always follows it.
"""

import re

# e.g. "Purse: $25,000"
PURSE_PATTERN = re.compile(r"^Purse:\s*\$?\s*(\d[\d,]*)")

# e.g. "Purse values are displayed in the local currency"
FOREIGN_CURRENCY_DISCLAIMER = re.compile(r"\bcurrency\b", re.IGNORECASE)


def is_purse(text: str) -> bool:
    return PURSE_PATTERN.search(text) is not None


def is_foreign_currency_disclaimer(text: str) -> bool:
    return FOREIGN_CURRENCY_DISCLAIMER.search(text) is not None


def is_block_terminator(text: str) -> bool:
    """Whether a line starts the purse section of a chart."""
    return is_purse(text) or is_foreign_currency_disclaimer(text)
