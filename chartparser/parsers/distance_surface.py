"""Distance, surface and track record parser for race charts.

Locates the sentence describing a race's distance and surface, e.g.

    Six Furlongs On The Dirt|Track Record: (Horse Name - 1:08.20 - January 1, 2015)
    One Mile On The Turf - Originally Scheduled For the Dirt

within the text lines of a chart and decomposes it into a
DistanceSurfaceTrackRecord.
"""

import logging
import re
from collections.abc import Callable, Iterable, Sequence
from datetime import date
from typing import Union

from chartparser.constants import CONDITION_BOOK_PHRASES, TRACK_RECORD_PHRASE
from chartparser.exceptions import NoRaceDistanceFound
from chartparser.models.distance import DistanceSurfaceTrackRecord, TrackRecord
from chartparser.models.horse import Horse
from chartparser.parsers.fractional import calculate_millis_for_fraction
from chartparser.parsers.purse import is_block_terminator
from chartparser.utils.date_parser import parse_race_date
from chartparser.utils.text_lines import ChartCharacter, to_text

logger = logging.getLogger(__name__)

DIST_SURF_RECORD_PATTERN = re.compile(
    r"^((About )?(One|Two|Three|Four|Five|Six|Seven|Eight|Nine)[\w\s]+) "
    r"On The ([A-Za-z\s]+)"
    r"(\s?- Originally Scheduled For the ([A-Za-z0-9\-\s]+))?"
    r"(\|Track Record: \((.+) - ([\d:\.]+) - (.+)\))?"
)

Line = Union[str, Sequence[ChartCharacter]]


def is_valid_distance_text(text: str) -> bool:
    """Reject condition-book text that looks like a distance sentence.

    Race conditions mention claiming prices and allowances; lines that do
    are rejected unless they also carry the track record.

    Args:
        text: A chart text line.

    Returns:
        False if the line is condition-book text.
    """
    lowered = text.lower()
    if TRACK_RECORD_PHRASE in lowered:
        return True
    return not any(phrase in lowered for phrase in CONDITION_BOOK_PHRASES)


class DistanceSurfaceTrackRecordParser:
    """Parser for the distance/surface/track record block of a chart.

    The collaborators used for the track record (time conversion, date
    parsing, horse construction) and the block terminator can be replaced.

    Example:
        >>> parser = DistanceSurfaceTrackRecordParser()
        >>> record = parser.parse(["Six Furlongs On The Dirt", "Purse: $25,000"])
        >>> record.race_distance.compact
        '6f'
    """

    def __init__(
        self,
        millis_converter: Callable[[str], int | None] = calculate_millis_for_fraction,
        date_parser: Callable[[str], date] = parse_race_date,
        horse_factory: Callable[[str], Horse] = Horse,
        block_terminator: Callable[[str], bool] = is_block_terminator,
    ) -> None:
        self.millis_converter = millis_converter
        self.date_parser = date_parser
        self.horse_factory = horse_factory
        self.block_terminator = block_terminator

    def parse(self, lines: Iterable[Line]) -> DistanceSurfaceTrackRecord:
        """Find and parse the distance/surface/track record block.

        Args:
            lines: Chart lines, as text or as positioned characters.

        Returns:
            The parsed DistanceSurfaceTrackRecord.

        Raises:
            NoRaceDistanceFound: If no line holds a distance sentence.
            UnrecognizedDistanceGrammar: If the distance phrase cannot be parsed.
            UnknownFractionalDenominator: If a fraction uses an unknown denominator.
            InvalidRaceDate: If the track record date cannot be parsed.
        """
        block = self.extract_block(lines)
        record = self.parse_distance_surface(block)
        if record is None:
            raise NoRaceDistanceFound(block)
        return record

    def extract_block(self, lines: Iterable[Line]) -> str:
        """Collect the text of the distance/surface/track record block.

        Collection starts at the first valid distance sentence and stops
        before the purse line (or foreign currency disclaimer).

        Returns:
            The space-joined block, or "" if no distance sentence was found.
        """
        collected: list[str] = []
        for line in lines:
            text = to_text(line)
            if collected:
                if self.block_terminator(text):
                    logger.debug("Distance block terminated by %r", text)
                    break
                collected.append(text)
                continue

            if DIST_SURF_RECORD_PATTERN.search(text):
                if is_valid_distance_text(text):
                    collected.append(text)
                else:
                    logger.debug("Skipping condition text %r", text)

        return " ".join(collected)

    def parse_distance_surface(self, text: str) -> DistanceSurfaceTrackRecord | None:
        """Decompose a distance/surface/track record sentence.

        Args:
            text: The collected block.

        Returns:
            The DistanceSurfaceTrackRecord, or None if the text does not match.
        """
        match = DIST_SURF_RECORD_PATTERN.search(text)
        if not match:
            return None

        distance_description = match.group(1)
        surface = match.group(4).strip()

        # 変更前の馬場（芝→ダートなど）
        scheduled_surface = None
        if match.group(5) is not None:
            scheduled_surface = match.group(6).strip()

        track_record = None
        if match.group(7) is not None:
            track_record = self.parse_track_record(
                match.group(8), match.group(9), match.group(10)
            )

        return DistanceSurfaceTrackRecord.create(
            distance_description,
            surface,
            scheduled_surface=scheduled_surface,
            track_record=track_record,
        )

    def parse_track_record(self, holder: str, time: str, date_text: str) -> TrackRecord:
        """Build a TrackRecord from its holder, time and date text.

        A time that cannot be converted leaves millis as None; an invalid
        date raises.
        """
        millis = self.millis_converter(time)
        if millis is None:
            logger.warning("Unable to convert track record time %r", time)

        return TrackRecord(
            holder=self.horse_factory(holder.strip()),
            time=time,
            millis=millis,
            race_date=self.date_parser(date_text),
        )


def parse(lines: Iterable[Line]) -> DistanceSurfaceTrackRecord:
    """Parse the distance/surface/track record block with default collaborators."""
    return DistanceSurfaceTrackRecordParser().parse(lines)


def parse_distance_surface(text: str) -> DistanceSurfaceTrackRecord | None:
    return DistanceSurfaceTrackRecordParser().parse_distance_surface(text)
