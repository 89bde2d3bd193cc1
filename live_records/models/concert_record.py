from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

"""ConcertRecord and setlist entry models.

A setlist is an ordered tuple of tagged entries. Medley brackets are their own
entry types, so a consumer can never mistake a marker for a song title.

Wire format (to_dict):
    {"type": "song", "name": "..."} / {"type": "medley_start"} / {"type": "medley_end"}
"""

__all__ = [
    "Song",
    "MedleyStart",
    "MedleyEnd",
    "SetlistEntry",
    "ConcertRecord",
]


@dataclass(frozen=True)
class Song:
    """A single performed song (name is never empty)."""
    name: str

    kind: ClassVar[str] = "song"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "name": self.name}


@dataclass(frozen=True)
class MedleyStart:
    kind: ClassVar[str] = "medley_start"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind}


@dataclass(frozen=True)
class MedleyEnd:
    kind: ClassVar[str] = "medley_end"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind}


SetlistEntry = Song | MedleyStart | MedleyEnd


@dataclass(frozen=True)
class ConcertRecord:
    """Fully normalized representation of one valid event row.

    Invariants:
    - song_count == Song entries whose name does not contain the medley indicator
    - venue と region はオンライン判定時に同時に正規化される (片方だけにはならない)
    """
    tour_name: str
    date: str  # YYYY/MM/DD
    year: int
    day_of_week: str
    region: str
    venue: str
    song_count: int
    setlist: tuple[SetlistEntry, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "tourName": self.tour_name,
            "date": self.date,
            "year": self.year,
            "dayOfWeek": self.day_of_week,
            "region": self.region,
            "venue": self.venue,
            "songCount": self.song_count,
            "setlist": [e.to_dict() for e in self.setlist],
        }
