"""Domain models for the live record extractor.

This package contains the model classes shared by the extraction core, the
catalog loaders and the CLI orchestration.
"""

from .catalog import AlbumEntry, AlbumSong
from .column_roles import ColumnRoleMap
from .concert_record import ConcertRecord, MedleyEnd, MedleyStart, SetlistEntry, Song
from .config_models import ExtractConfig, RecordLayout
from .extraction_result import ExtractionFailure, ExtractionOutcome, ExtractionSuccess

__all__ = [
    # Configuration models
    "ExtractConfig",
    "RecordLayout",
    # Extraction models
    "ColumnRoleMap",
    "ConcertRecord",
    "SetlistEntry",
    "Song",
    "MedleyStart",
    "MedleyEnd",
    "ExtractionSuccess",
    "ExtractionFailure",
    "ExtractionOutcome",
    # Catalog models
    "AlbumEntry",
    "AlbumSong",
]
