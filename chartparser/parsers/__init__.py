"""Parsers for the distance, surface and track record of a race chart."""

from chartparser.parsers.compact import COMPACT_NOTATIONS, describe_compact, lookup_compact
from chartparser.parsers.distance_grammar import (
    DistanceGrammar,
    GrammarMatch,
    match_grammar,
    parse_race_distance,
)
from chartparser.parsers.distance_surface import (
    DistanceSurfaceTrackRecordParser,
    is_valid_distance_text,
    parse,
    parse_distance_surface,
)
from chartparser.parsers.numerals import numerator_value, tens_value

__all__ = [
    "COMPACT_NOTATIONS",
    "DistanceGrammar",
    "DistanceSurfaceTrackRecordParser",
    "GrammarMatch",
    "describe_compact",
    "is_valid_distance_text",
    "lookup_compact",
    "match_grammar",
    "numerator_value",
    "parse",
    "parse_distance_surface",
    "parse_race_distance",
    "tens_value",
]
