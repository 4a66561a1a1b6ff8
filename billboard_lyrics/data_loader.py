"""
Data loading utilities for the Billboard lyrics pipeline.
Handles reading the song table, assigning song ids and decade buckets.
"""

import math
import pandas as pd
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from dataclasses import dataclass
import logging

from .config import config

logger = logging.getLogger(__name__)

DECADE_2000S = "2000s"
DECADE_2010S = "2010s"
DECADE_2020S = "2020s"
UNKNOWN_DECADE = "unknown"
DECADES = (DECADE_2000S, DECADE_2010S, DECADE_2020S)


@dataclass
class SongRecord:
    """Represents a single chart song and its lyrics."""

    song_id: int
    year: Optional[int]
    decade: str
    raw_lyrics: str
    lyrics: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if self.lyrics is None:
            self.lyrics = self.raw_lyrics
        if self.metadata is None:
            self.metadata = {}


def parse_year(value: Any) -> Optional[int]:
    """Parse a year cell, returning None for missing or unparseable values."""
    if value is None or isinstance(value, bool):
        return None
    number = pd.to_numeric(value, errors="coerce")
    try:
        number = float(number)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(number)


def assign_decade(year: Any) -> str:
    """
    Map a year onto its decade bucket.

    Years before 2000, missing years and unparseable values all land in
    the ``unknown`` bucket.
    """
    year = parse_year(year)
    if year is None:
        return UNKNOWN_DECADE
    if 2000 <= year < 2010:
        return DECADE_2000S
    if 2010 <= year < 2020:
        return DECADE_2010S
    if year >= 2020:
        return DECADE_2020S
    return UNKNOWN_DECADE


def songs_to_frame(songs: List[SongRecord]) -> pd.DataFrame:
    """Tabular view of song records (song_id, year, decade, lyrics)."""
    df = pd.DataFrame(
        {
            "song_id": [song.song_id for song in songs],
            "year": pd.array([song.year for song in songs], dtype="Int64"),
            "decade": [song.decade for song in songs],
            "lyrics": [song.lyrics for song in songs],
        }
    )
    df["song_id"] = df["song_id"].astype("int64")
    return df


class DataLoader:
    """
    Loader for the Billboard Hot 100 lyrics table.
    """

    def __init__(self, config_obj=None):
        self.config = config_obj or config
        self.logger = logging.getLogger(__name__)

    def read_table(self, path: Union[str, Path]) -> pd.DataFrame:
        """
        Read the raw song table from CSV or parquet.

        Args:
            path: Input file path

        Returns:
            Raw DataFrame exactly as stored
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")

        self.logger.info(f"Reading song table from {path}")
        if path.suffix.lower() == ".parquet":
            return pd.read_parquet(path)
        return pd.read_csv(path)

    def load_songs(self, path: Union[str, Path] = None) -> List[SongRecord]:
        """
        Load song records from a tabular file.

        Args:
            path: Input file path (defaults to the configured input path)

        Returns:
            List of SongRecord objects in input order
        """
        if path is None:
            path = self.config.data.input_path
        df = self.read_table(path)
        return self.songs_from_frame(df)

    def songs_from_frame(self, df: pd.DataFrame) -> List[SongRecord]:
        """
        Build song records from a raw DataFrame.

        Song ids are assigned 1..n following row order. Columns other than
        year and lyrics are kept in each record's metadata.
        """
        year_col = self.config.data.year_column
        lyrics_col = self.config.data.lyrics_column

        missing = [col for col in (year_col, lyrics_col) if col not in df.columns]
        if missing:
            raise ValueError(f"Input table is missing required columns: {missing}")

        extra_cols = [col for col in df.columns if col not in (year_col, lyrics_col)]

        songs = []
        for song_id, row in enumerate(df.to_dict("records"), start=1):
            year = parse_year(row[year_col])
            lyrics = row[lyrics_col]
            if not isinstance(lyrics, str):
                lyrics = "" if pd.isna(lyrics) else str(lyrics)

            songs.append(
                SongRecord(
                    song_id=song_id,
                    year=year,
                    decade=assign_decade(year),
                    raw_lyrics=lyrics,
                    metadata={col: row[col] for col in extra_cols},
                )
            )

        unknown = sum(1 for song in songs if song.decade == UNKNOWN_DECADE)
        if unknown:
            self.logger.warning(f"{unknown} songs have no usable year (decade unknown)")

        self.logger.info(f"Loaded {len(songs)} songs")
        return songs

    def get_dataset_statistics(self, songs: List[SongRecord]) -> Dict:
        """Get basic statistics about the loaded songs."""
        years = [song.year for song in songs if song.year is not None]
        stats = {
            "total_songs": len(songs),
            "songs_with_lyrics": sum(1 for song in songs if song.raw_lyrics.strip()),
            "songs_without_lyrics": sum(
                1 for song in songs if not song.raw_lyrics.strip()
            ),
            "year_range": (min(years), max(years)) if years else None,
            "decades": {},
        }

        for song in songs:
            stats["decades"][song.decade] = stats["decades"].get(song.decade, 0) + 1

        return stats
