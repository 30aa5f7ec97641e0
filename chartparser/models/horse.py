"""Horse entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Horse:
    """A horse referenced by a chart (e.g. a track record holder).

    Attributes:
        name: The horse's name as printed on the chart.
    """

    name: str

    def to_dict(self) -> dict:
        return {"name": self.name}
