"""Data models for parsed chart entities."""

from chartparser.models.distance import (
    DistanceSurfaceTrackRecord,
    DistanceSurfaceTrackRecordBuilder,
    RaceDistance,
    TrackRecord,
)
from chartparser.models.horse import Horse

__all__ = [
    "DistanceSurfaceTrackRecord",
    "DistanceSurfaceTrackRecordBuilder",
    "Horse",
    "RaceDistance",
    "TrackRecord",
]
