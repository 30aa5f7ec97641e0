"""Table formatting for parsed distances and track records."""

from chartparser.models.distance import DistanceSurfaceTrackRecord, RaceDistance


def pad_to_width(text: str, target_width: int, align_right: bool = False) -> str:
    """Pad text to the given width.

    Args:
        text: The text to pad.
        target_width: Target width.
        align_right: Right-align when True, left-align otherwise.

    Returns:
        str: The padded text (unchanged if already at least target_width).
    """
    padding_needed = target_width - len(text)
    if padding_needed <= 0:
        return text
    padding = " " * padding_needed
    if align_right:
        return padding + text
    return text + padding


def format_rows(rows: list[tuple[str, str]]) -> str:
    """Format label/value pairs as an aligned two-column table."""
    if not rows:
        return ""
    label_width = max(len(label) for label, _ in rows)
    return "\n".join(f"{pad_to_width(label, label_width)} : {value}" for label, value in rows)


def distance_rows(distance: RaceDistance) -> list[tuple[str, str]]:
    rows = [
        ("Distance", distance.text),
        ("Compact", distance.compact),
        ("Feet", str(distance.feet)),
        ("Furlongs", f"{distance.furlongs:.2f}"),
        ("Exact", "yes" if distance.exact else "no (About)"),
    ]
    if distance.run_up is not None:
        rows.append(("Run-up", str(distance.run_up)))
    if distance.temp_rail is not None:
        rows.append(("Temp rail", str(distance.temp_rail)))
    return rows


def format_record_table(record: DistanceSurfaceTrackRecord) -> str:
    """Format a DistanceSurfaceTrackRecord for terminal output."""
    rows: list[tuple[str, str]] = []
    if record.race_distance is not None:
        rows.extend(distance_rows(record.race_distance))

    rows.append(("Surface", record.surface))
    if record.is_off_turf():
        rows.append(("Scheduled surface", f"{record.scheduled_surface} (off turf)"))
    if record.track_condition:
        rows.append(("Track condition", record.track_condition))

    track_record = record.track_record
    if track_record is not None:
        millis = f" ({track_record.millis} ms)" if track_record.millis is not None else ""
        rows.append(("Track record", track_record.holder.name))
        rows.append(("Record time", f"{track_record.time}{millis}"))
        rows.append(("Record date", track_record.race_date.isoformat()))

    return format_rows(rows)
