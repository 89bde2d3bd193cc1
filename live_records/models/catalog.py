from __future__ import annotations

from dataclasses import dataclass
from typing import Any

"""Album catalog models (album sheet listings)."""

__all__ = [
    "AlbumEntry",
    "AlbumSong",
]


@dataclass(frozen=True)
class AlbumEntry:
    album_name: str
    play_count: int

    def to_dict(self) -> dict[str, Any]:
        return {"albumName": self.album_name, "playCount": self.play_count}


@dataclass(frozen=True)
class AlbumSong:
    album: str
    song: str

    def to_dict(self) -> dict[str, Any]:
        return {"album": self.album, "song": self.song}
