"""Race distance, surface and track record DTOs.

The entities produced by the distance parser are immutable. Fields that
later stages of a document parse fill in (track condition, run-up,
temporary rail) are staged on a DistanceSurfaceTrackRecordBuilder and
finalized with build().
"""

from dataclasses import dataclass, field, replace
from datetime import date

from chartparser.constants import FEET_PER_FURLONG
from chartparser.models.horse import Horse


@dataclass(frozen=True)
class RaceDistance:
    """A race distance parsed from its chart description.

    Attributes:
        text: The original description (e.g. "About One Mile").
        compact: Abbreviated notation (e.g. "Abt 1m").
        exact: False when the distance is an estimate ("About").
        feet: The distance in feet.
        furlongs: feet / 660, rounded to 2 decimal places.
        run_up: Run-up distance in feet (optional).
        temp_rail: Temporary rail distance in feet (optional).
    """

    text: str
    compact: str
    exact: bool
    feet: int
    furlongs: float = field(init=False)
    run_up: int | None = None
    temp_rail: int | None = None

    def __post_init__(self) -> None:
        if self.feet < 0:
            raise ValueError(f"feet must be non-negative: {self.feet}")
        object.__setattr__(self, "furlongs", round(self.feet / FEET_PER_FURLONG, 2))

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "compact": self.compact,
            "feet": self.feet,
            "furlongs": self.furlongs,
            "exact": self.exact,
            "runUp": self.run_up,
            "tempRail": self.temp_rail,
        }


@dataclass(frozen=True)
class TrackRecord:
    """The track record for a distance and surface.

    Attributes:
        holder: The horse holding the record.
        time: The record time as printed (e.g. "1:08.20").
        millis: The record time in milliseconds, None if it could not be converted.
        race_date: The date the record was set.
    """

    holder: Horse
    time: str | None
    millis: int | None
    race_date: date

    def to_dict(self) -> dict:
        return {
            "holder": self.holder.to_dict(),
            "time": self.time,
            "millis": self.millis,
            "raceDate": self.race_date.isoformat(),
        }


@dataclass(frozen=True)
class DistanceSurfaceTrackRecord:
    """Distance, surface and track record of a race.

    Attributes:
        race_distance: The parsed distance, None only when no description was given.
        surface: The surface the race was run on (e.g. "Dirt", "Turf").
        scheduled_surface: The surface the race was scheduled for. Defaults
            to surface.
        track_record: The track record for this distance/surface (optional).
        track_condition: The track condition (e.g. "Fast", "Firm").
    """

    race_distance: RaceDistance | None
    surface: str
    scheduled_surface: str | None = None
    track_record: TrackRecord | None = None
    track_condition: str | None = None

    def __post_init__(self) -> None:
        if self.scheduled_surface is None:
            object.__setattr__(self, "scheduled_surface", self.surface)

    @classmethod
    def create(
        cls,
        distance_description: str | None,
        surface: str,
        scheduled_surface: str | None = None,
        track_record: TrackRecord | None = None,
    ) -> "DistanceSurfaceTrackRecord":
        """Create an instance, parsing the distance description.

        Raises:
            UnrecognizedDistanceGrammar: If the description cannot be parsed.
            UnknownFractionalDenominator: If a fraction uses an unknown denominator.
        """
        from chartparser.parsers.distance_grammar import parse_race_distance

        race_distance = (
            parse_race_distance(distance_description)
            if distance_description is not None
            else None
        )
        return cls(
            race_distance=race_distance,
            surface=surface,
            scheduled_surface=scheduled_surface,
            track_record=track_record,
        )

    def is_off_turf(self) -> bool:
        """Whether the race was moved off its scheduled surface."""
        return self.surface != self.scheduled_surface

    def to_dict(self) -> dict:
        return {
            "distance": self.race_distance.to_dict() if self.race_distance else None,
            "surface": self.surface,
            "trackCondition": self.track_condition,
            "scheduledSurface": self.scheduled_surface,
            "offTurf": self.is_off_turf(),
            "trackRecord": self.track_record.to_dict() if self.track_record else None,
        }


@dataclass
class DistanceSurfaceTrackRecordBuilder:
    """Mutable staging record for fields filled in by later parsing stages.

    Example:
        >>> builder = DistanceSurfaceTrackRecordBuilder.from_record(record)
        >>> builder.track_condition = "Fast"
        >>> builder.run_up = 48
        >>> record = builder.build()
    """

    record: DistanceSurfaceTrackRecord
    track_condition: str | None = None
    run_up: int | None = None
    temp_rail: int | None = None

    @classmethod
    def from_record(
        cls, record: DistanceSurfaceTrackRecord
    ) -> "DistanceSurfaceTrackRecordBuilder":
        distance = record.race_distance
        return cls(
            record=record,
            track_condition=record.track_condition,
            run_up=distance.run_up if distance else None,
            temp_rail=distance.temp_rail if distance else None,
        )

    def build(self) -> DistanceSurfaceTrackRecord:
        """Return a new immutable record carrying the staged fields.

        Raises:
            ValueError: If a run-up or temporary rail is staged for a record
                without a race distance.
        """
        race_distance = self.record.race_distance
        if race_distance is None:
            if self.run_up is not None or self.temp_rail is not None:
                raise ValueError("run_up/temp_rail require a race distance")
        else:
            race_distance = replace(
                race_distance, run_up=self.run_up, temp_rail=self.temp_rail
            )
        return replace(
            self.record,
            race_distance=race_distance,
            track_condition=self.track_condition,
        )
