"""Distance grammar cascade.

Converts spelled-out chart distances ("About One And One Sixteenth Miles",
"Six Hundred Yards", "One Mile And Seventy Yards") into a RaceDistance.
Six grammars are tried in a fixed priority order against the lower-cased
phrase; the first one that matches structurally decides how the phrase is
converted to feet.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from chartparser.constants import (
    ABOUT_PREFIX,
    FEET_PER_FURLONG,
    FEET_PER_HUNDRED_YARDS,
    FEET_PER_MILE,
    FEET_PER_THOUSAND_YARDS,
    FEET_PER_YARD,
    FURLONG_DENOMINATORS,
    MILE_DENOMINATORS,
)
from chartparser.exceptions import UnknownFractionalDenominator, UnrecognizedDistanceGrammar
from chartparser.models.distance import RaceDistance
from chartparser.parsers.numerals import numerator_value, tens_value

logger = logging.getLogger(__name__)


class DistanceGrammar(Enum):
    """Supported distance grammars, in priority order."""

    MILES = "miles"
    FURLONGS = "furlongs"
    YARDS = "yards"
    MILES_AND_YARDS = "miles_and_yards"
    FURLONGS_AND_YARDS = "furlongs_and_yards"
    MISSING_YARDS = "missing_yards"


# e.g. "one mile", "about one and one sixteenth miles"
MILES_ONLY_PATTERN = re.compile(r"^(about)? ?(\w+)( and ([\w ]+))? miles?$")

# e.g. "six furlongs", "five and one half furlongs"
FURLONGS_ONLY_PATTERN = re.compile(r"^(about)? ?(\w+)( and ([\w ]+))? furlongs?$")

# e.g. "one thousand yards", "three hundred and fifty yards"
YARDS_ONLY_PATTERN = re.compile(
    r"^(about)? ?((\w+) thousand)? ?((\w+) hundred ?( ?and )?([\w ]+)?)? yards?$"
)

# e.g. "one mile and seventy yards"
MILES_YARDS_PATTERN = re.compile(r"(about)? ?(\w+) miles? and ([\w ]+) yards?")

# e.g. "two furlongs and fifty yards"
FURLONGS_YARDS_PATTERN = re.compile(r"(about)? ?(\w+) furlongs? and ([\w ]+) yards?")

# the word "Yards" is sometimes missing from the chart, e.g. "about four hundred"
MISSING_YARDS_PATTERN = re.compile(
    r"^(about)? ?((\w+) thousand)? ?((\w+) hundred ?( ?and )?([\w ]+)?)?$"
)

GRAMMAR_PATTERNS: tuple[tuple[DistanceGrammar, re.Pattern], ...] = (
    (DistanceGrammar.MILES, MILES_ONLY_PATTERN),
    (DistanceGrammar.FURLONGS, FURLONGS_ONLY_PATTERN),
    (DistanceGrammar.YARDS, YARDS_ONLY_PATTERN),
    (DistanceGrammar.MILES_AND_YARDS, MILES_YARDS_PATTERN),
    (DistanceGrammar.FURLONGS_AND_YARDS, FURLONGS_YARDS_PATTERN),
    (DistanceGrammar.MISSING_YARDS, MISSING_YARDS_PATTERN),
)


@dataclass(frozen=True)
class GrammarMatch:
    """The first grammar that structurally matched a distance phrase.

    Attributes:
        grammar: The matching grammar.
        match: The regular expression match on the lower-cased phrase.
    """

    grammar: DistanceGrammar
    match: re.Match


def match_grammar(distance_description: str) -> GrammarMatch | None:
    """Find the highest-priority grammar matching a distance phrase.

    Args:
        distance_description: Distance phrase in any casing.

    Returns:
        The GrammarMatch, or None if no grammar matches.
    """
    lowered = distance_description.lower()
    for grammar, pattern in GRAMMAR_PATTERNS:
        match = pattern.search(lowered)
        if match:
            return GrammarMatch(grammar=grammar, match=match)
    return None


def parse_race_distance(distance_description: str) -> RaceDistance:
    """Parse a spelled-out race distance.

    Args:
        distance_description: e.g. "About One And One Half Miles".

    Returns:
        RaceDistance carrying the original text, compact notation and feet.

    Raises:
        UnrecognizedDistanceGrammar: If no grammar matches the phrase, or a
            number word is not part of the lexicon.
        UnknownFractionalDenominator: If a mile/furlong fraction uses an
            unsupported denominator.

    Example:
        >>> parse_race_distance("Six Furlongs").compact
        '6f'
    """
    grammar_match = match_grammar(distance_description)
    if grammar_match is None:
        raise UnrecognizedDistanceGrammar(distance_description)

    logger.debug(
        "Distance %r matched %s grammar", distance_description, grammar_match.grammar.value
    )
    converter = _CONVERTERS[grammar_match.grammar]
    return converter(distance_description, grammar_match.match)


def _for_miles(text: str, match: re.Match) -> RaceDistance:
    return _for_whole_units(text, match, FEET_PER_MILE, MILE_DENOMINATORS, "mile", "m")


def _for_furlongs(text: str, match: re.Match) -> RaceDistance:
    return _for_whole_units(
        text, match, FEET_PER_FURLONG, FURLONG_DENOMINATORS, "furlong", "f"
    )


def _for_whole_units(
    text: str,
    match: re.Match,
    unit_feet: int,
    denominators: dict[str, tuple[int, str]],
    unit_name: str,
    unit_suffix: str,
) -> RaceDistance:
    """Whole miles/furlongs with an optional "and <numerator> <denominator>" part."""
    is_exact = match.group(1) is None
    compact = unit_suffix
    feet = 0

    fraction = match.group(4)
    if fraction:
        words = fraction.split()
        if len(words) != 2:
            raise UnrecognizedDistanceGrammar(text)
        numerator_word, denominator = words
        if denominator not in denominators:
            raise UnknownFractionalDenominator(denominator, unit_name, text)
        fraction_feet, fraction_suffix = denominators[denominator]
        numerator = _lookup(numerator_value, numerator_word, text)
        feet = numerator * fraction_feet
        compact = f" {numerator}{fraction_suffix}"

    whole = _lookup(numerator_value, match.group(2), text)
    feet += whole * unit_feet
    compact = f"{whole}{compact}"

    return _race_distance(text, compact, is_exact, feet)


def _for_yards(text: str, match: re.Match) -> RaceDistance:
    """Yards expressed as "[<n> thousand] [<n> hundred [and] [<remainder>]]"."""
    is_exact = match.group(1) is None
    thousands = match.group(3)
    hundreds = match.group(5)
    if thousands is None and hundreds is None:
        raise UnrecognizedDistanceGrammar(text)

    feet = 0
    remainder = match.group(7)
    if remainder and remainder.strip():
        feet = _remainder_yards(remainder, text) * FEET_PER_YARD

    if thousands is not None:
        feet += _lookup(numerator_value, thousands, text) * FEET_PER_THOUSAND_YARDS

    if hundreds is not None:
        feet += _lookup(numerator_value, hundreds, text) * FEET_PER_HUNDRED_YARDS

    return _race_distance(text, f"{feet // FEET_PER_YARD}y", is_exact, feet)


def _remainder_yards(remainder: str, text: str) -> int:
    """Yards below one hundred: "forty two", "forty" or "seven"."""
    words = remainder.split()
    if len(words) == 2:
        return _lookup(tens_value, words[0], text) + _lookup(numerator_value, words[1], text)
    if len(words) == 1:
        tens = tens_value(words[0])
        if tens is not None:
            return tens
        return _lookup(numerator_value, words[0], text)
    raise UnrecognizedDistanceGrammar(text)


def _for_miles_and_yards(text: str, match: re.Match) -> RaceDistance:
    return _for_units_and_yards(text, match, FEET_PER_MILE, "m")


def _for_furlongs_and_yards(text: str, match: re.Match) -> RaceDistance:
    return _for_units_and_yards(text, match, FEET_PER_FURLONG, "f")


def _for_units_and_yards(
    text: str, match: re.Match, unit_feet: int, unit_suffix: str
) -> RaceDistance:
    """Whole miles/furlongs plus yards.

    Only a bare tens word ("forty", "seventy") is accepted for the yards.
    """
    is_exact = match.group(1) is None
    yards = _lookup(tens_value, match.group(3).strip(), text)
    whole = _lookup(numerator_value, match.group(2), text)

    feet = whole * unit_feet + yards * FEET_PER_YARD
    compact = f"{whole}{unit_suffix} {yards}y"

    return _race_distance(text, compact, is_exact, feet)


def _lookup(lookup, word: str, text: str) -> int:
    value = lookup(word)
    if value is None:
        raise UnrecognizedDistanceGrammar(text)
    return value


def _race_distance(text: str, compact: str, is_exact: bool, feet: int) -> RaceDistance:
    if not is_exact:
        compact = f"{ABOUT_PREFIX}{compact}"
    return RaceDistance(text=text, compact=compact, exact=is_exact, feet=feet)


_CONVERTERS = {
    DistanceGrammar.MILES: _for_miles,
    DistanceGrammar.FURLONGS: _for_furlongs,
    DistanceGrammar.YARDS: _for_yards,
    DistanceGrammar.MILES_AND_YARDS: _for_miles_and_yards,
    DistanceGrammar.FURLONGS_AND_YARDS: _for_furlongs_and_yards,
    DistanceGrammar.MISSING_YARDS: _for_yards,
}
