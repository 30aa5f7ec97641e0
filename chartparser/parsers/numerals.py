"""Number words used in chart distance descriptions.

Charts spell out every quantity ("One And One Sixteenth Miles", "Six
Hundred Yards"), so distances are assembled from two closed vocabularies:
plain numerators ("zero".."fifteen") and tens ("ten".."ninety").
"""

from types import MappingProxyType

_NUMERATOR_WORDS = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
)

_TENS_WORDS = (
    "zero", "ten", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
    "eighty", "ninety",
)

NUMERATORS = MappingProxyType({word: i for i, word in enumerate(_NUMERATOR_WORDS)})
TENS = MappingProxyType({word: i * 10 for i, word in enumerate(_TENS_WORDS)})


def numerator_value(word: str) -> int | None:
    """Return the value of a numerator word, or None if it is not one.

    Args:
        word: Lower-cased number word (e.g. "six").

    Returns:
        Integer in [0, 15], or None.
    """
    return NUMERATORS.get(word)


def tens_value(word: str) -> int | None:
    """Return the value of a tens word ("forty" -> 40), or None."""
    return TENS.get(word)


def is_numerator(word: str) -> bool:
    return word in NUMERATORS


def is_tens(word: str) -> bool:
    return word in TENS
