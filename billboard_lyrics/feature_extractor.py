"""
Per-song lyric structure and sentiment features.
Combines word counts and lexicon tallies into one feature row per song.
"""

import pandas as pd
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Mapping, Optional
import logging

from .config import config
from .data_loader import SongRecord, UNKNOWN_DECADE, songs_to_frame
from .lexicon import LexiconScorer, SentimentLexicon
from .tokenizer import TokenStream

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["song_id", "word_count", "unique_words"]

FEATURE_COLUMNS = [
    "song_id",
    "word_count",
    "unique_words",
    "positive",
    "negative",
    "sentiment_score",
    "positive_ratio",
    "negative_ratio",
    "unique_ratio",
    "year",
    "decade",
]


@dataclass(frozen=True)
class SongFeature:
    """One row of the final feature table."""

    song_id: int
    word_count: int
    unique_words: int
    positive: int
    negative: int
    sentiment_score: int
    positive_ratio: float
    negative_ratio: float
    unique_ratio: float
    year: Optional[int]
    decade: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SongFeature":
        year = row["year"]
        return cls(
            song_id=int(row["song_id"]),
            word_count=int(row["word_count"]),
            unique_words=int(row["unique_words"]),
            positive=int(row["positive"]),
            negative=int(row["negative"]),
            sentiment_score=int(row["sentiment_score"]),
            positive_ratio=float(row["positive_ratio"]),
            negative_ratio=float(row["negative_ratio"]),
            unique_ratio=float(row["unique_ratio"]),
            year=None if pd.isna(year) else int(year),
            decade=row["decade"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class FeatureAggregator:
    """
    Builds the per-song feature table from token and tally tables.
    """

    def __init__(self, config_obj=None):
        self.config = config_obj or config
        self.logger = logging.getLogger(__name__)

    def summarise_words(
        self, tokens: pd.DataFrame, song_ids: Optional[Iterable[int]] = None
    ) -> pd.DataFrame:
        """
        Count total and distinct words per song.

        Args:
            tokens: Token table with song_id and word columns
            song_ids: All song ids; songs without tokens get word_count 0

        Returns:
            DataFrame with song_id, word_count, unique_words
        """
        if tokens.empty:
            summary = pd.DataFrame(
                {col: pd.Series(dtype="int64") for col in SUMMARY_COLUMNS}
            )
        else:
            summary = (
                tokens.groupby("song_id")
                .agg(word_count=("word", "size"), unique_words=("word", "nunique"))
                .reset_index()
            )

        if song_ids is not None:
            summary = (
                summary.set_index("song_id")
                .reindex(pd.Index(list(song_ids), name="song_id"), fill_value=0)
                .reset_index()
            )

        return summary.astype("int64")[SUMMARY_COLUMNS]

    def aggregate(
        self,
        word_summary: pd.DataFrame,
        tally: pd.DataFrame,
        songs: pd.DataFrame,
    ) -> pd.DataFrame:
        """
        Join word counts, sentiment tallies and song metadata.

        Args:
            word_summary: song_id, word_count, unique_words
            tally: song_id, positive, negative (songs without matches absent)
            songs: song_id, year, decade

        Returns:
            Feature table with FEATURE_COLUMNS, one row per song with words
        """
        features = word_summary.merge(
            tally[["song_id", "positive", "negative"]], on="song_id", how="left"
        )
        features[["positive", "negative"]] = (
            features[["positive", "negative"]].fillna(0).astype("int64")
        )
        features["sentiment_score"] = features["positive"] - features["negative"]

        # Ratios are only defined for songs that kept at least one word
        empty = features["word_count"] <= 0
        if empty.any():
            self.logger.info(f"Dropping {int(empty.sum())} songs with no words")
        features = features.loc[~empty].copy()

        word_count = features["word_count"]
        features["positive_ratio"] = features["positive"] / word_count
        features["negative_ratio"] = features["negative"] / word_count
        features["unique_ratio"] = features["unique_words"] / word_count

        features = features.merge(
            songs[["song_id", "year", "decade"]], on="song_id", how="left"
        )
        features["decade"] = features["decade"].fillna(UNKNOWN_DECADE)

        return features[FEATURE_COLUMNS].reset_index(drop=True)

    @staticmethod
    def to_records(features: pd.DataFrame) -> List[SongFeature]:
        """Convert the feature table into SongFeature objects."""
        return [SongFeature.from_row(row) for row in features.to_dict("records")]


class FeatureExtractor:
    """
    Tokenizes cleaned songs, scores them against the lexicon and aggregates
    the results into the feature table.
    """

    def __init__(self, lexicon: Optional[SentimentLexicon] = None, config_obj=None):
        self.config = config_obj or config
        self.logger = logging.getLogger(__name__)
        self.lexicon = lexicon or SentimentLexicon.from_config(self.config)
        self.scorer = LexiconScorer(self.lexicon)
        self.aggregator = FeatureAggregator(self.config)

    def extract_features(self, songs: List[SongRecord]) -> pd.DataFrame:
        """
        Extract the feature table from cleaned songs.

        Args:
            songs: SongRecord objects whose lyrics are already cleaned

        Returns:
            Feature table with FEATURE_COLUMNS
        """
        self.logger.info(f"Extracting features for {len(songs)} songs...")

        stream = TokenStream(songs)
        tokens = stream.to_frame()
        self.logger.debug(f"Tokenized {len(tokens)} words")

        word_summary = self.aggregator.summarise_words(
            tokens, song_ids=[song.song_id for song in songs]
        )
        tally = self.scorer.score(tokens)
        features = self.aggregator.aggregate(word_summary, tally, songs_to_frame(songs))

        self.logger.info(
            f"Built features for {len(features)} of {len(songs)} songs "
            f"({len(tally)} with lexicon matches)"
        )
        return features
