"""Canonical compact notation for standard race distances.

Maps distances in feet (150 yards through 4 miles) to the abbreviated
label used on charts and past performances.
"""

from types import MappingProxyType

from chartparser.constants import ABOUT_PREFIX, FEET_PER_YARD

COMPACT_NOTATIONS = MappingProxyType({
    450: "150y",
    660: "1f",
    1320: "2f",
    1650: "2 1/2f",
    1980: "3f",
    2145: "3 1/4f",
    2310: "3 1/2f",
    2475: "3 3/4f",
    2640: "4f",
    2970: "4 1/2f",
    3000: "1000y",
    3300: "5f",
    3465: "5 1/4f",
    3630: "5 1/2f",
    3960: "6f",
    4290: "6 1/2f",
    4620: "7f",
    4950: "7 1/2f",
    5280: "1m",
    5370: "1m 30y",
    5400: "1m 40y",
    5490: "1m 70y",
    5610: "1 1/16m",
    5940: "1 1/8m",
    6270: "1 3/16m",
    6600: "1 1/4m",
    6930: "1 5/16m",
    7260: "1 3/8m",
    7590: "1 7/16m",
    7920: "1 1/2m",
    8250: "1 9/16m",
    8580: "1 5/8m",
    8910: "1 11/16m",
    9240: "1 3/4m",
    9570: "1 13/16m",
    9900: "1 7/8m",
    10230: "1 15/16m",
    10560: "2m",
    10680: "2m 40y",
    10770: "2m 70y",
    10890: "2 1/16m",
    11220: "2 1/8m",
    11550: "2 3/16m",
    11880: "2 1/4m",
    12210: "2 5/16m",
    15840: "3m",
    17160: "3 1/4m",
    18480: "3 1/2m",
    21120: "4m",
})


def lookup_compact(feet: int) -> str | None:
    """Return the canonical compact notation for a distance.

    Args:
        feet: Distance in feet.

    Returns:
        The compact notation (e.g. "6f"), or None if feet is not a standard distance.
    """
    return COMPACT_NOTATIONS.get(feet)


def describe_compact(feet: int, exact: bool = True) -> str:
    """Label a distance, falling back to yards for non-standard distances."""
    compact = lookup_compact(feet)
    if compact is None:
        compact = f"{feet // FEET_PER_YARD}y"
    return compact if exact else f"{ABOUT_PREFIX}{compact}"
