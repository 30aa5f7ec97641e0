"""Rendering of positioned chart characters into plain text lines."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ChartCharacter:
    """A character extracted from the text layer of a chart.

    Attributes:
        x: Horizontal position of the character's left edge.
        y: Vertical position of the character's baseline.
        width: Rendered width of the character.
        char: The character itself.
        space_width: Width of a space in the character's font.
    """

    x: float
    y: float
    width: float
    char: str
    space_width: float = 2.5


def convert_to_text(characters: Iterable[ChartCharacter]) -> str:
    """Join a line of characters, inserting spaces at word gaps.

    A space is inserted when the gap between the end of one character and
    the start of the next is at least the font's space width.
    """
    parts: list[str] = []
    previous: ChartCharacter | None = None
    for character in sorted(characters, key=lambda c: c.x):
        if previous is not None and not character.char.isspace():
            gap = character.x - (previous.x + previous.width)
            if gap >= previous.space_width and not previous.char.isspace():
                parts.append(" ")
        parts.append(character.char)
        previous = character
    return "".join(parts)


def to_text(line: str | Sequence[ChartCharacter]) -> str:
    """Return the plain text of a line given as text or as characters."""
    if isinstance(line, str):
        return line
    return convert_to_text(line)
