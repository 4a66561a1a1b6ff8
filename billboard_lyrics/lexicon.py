"""
Sentiment lexicon loading and per-song lexicon scoring.
"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Union
import logging

import pandas as pd

from .config import config
from .tokenizer import TokenStream

logger = logging.getLogger(__name__)

POSITIVE = "positive"
NEGATIVE = "negative"
POLARITIES = (POSITIVE, NEGATIVE)

TALLY_COLUMNS = ["song_id", "positive", "negative"]


class SentimentLexicon(Mapping):
    """
    Read-only word -> polarity mapping.

    Words listed under both polarities are dropped, so every entry maps to
    exactly one class.
    """

    def __init__(self, positive: Iterable[str], negative: Iterable[str]):
        positive = {w.strip().lower() for w in positive if w and w.strip()}
        negative = {w.strip().lower() for w in negative if w and w.strip()}

        self.ambiguous = frozenset(positive & negative)
        if self.ambiguous:
            logger.warning(
                f"Dropping {len(self.ambiguous)} words listed as both positive "
                f"and negative: {sorted(self.ambiguous)[:10]}"
            )

        entries = {word: POSITIVE for word in positive - self.ambiguous}
        entries.update({word: NEGATIVE for word in negative - self.ambiguous})
        self._entries = MappingProxyType(entries)

    def __getitem__(self, word: str) -> str:
        return self._entries[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        counts = self.counts()
        return (
            f"SentimentLexicon(positive={counts[POSITIVE]}, "
            f"negative={counts[NEGATIVE]})"
        )

    def counts(self) -> Dict[str, int]:
        counts = {polarity: 0 for polarity in POLARITIES}
        for polarity in self._entries.values():
            counts[polarity] += 1
        return counts

    def to_frame(self) -> pd.DataFrame:
        """Lexicon as a two-column table (word, sentiment)."""
        return pd.DataFrame(
            list(self._entries.items()), columns=["word", "sentiment"]
        )

    @classmethod
    def from_mapping(cls, mapping: Dict[str, str]) -> "SentimentLexicon":
        """Build a lexicon from a word -> polarity dictionary."""
        unknown = {p for p in mapping.values() if p not in POLARITIES}
        if unknown:
            raise ValueError(f"Unknown sentiment labels: {sorted(unknown)}")
        return cls(
            positive=[w for w, p in mapping.items() if p == POSITIVE],
            negative=[w for w, p in mapping.items() if p == NEGATIVE],
        )

    @classmethod
    def from_csv(cls, path: Union[str, Path]) -> "SentimentLexicon":
        """Load a lexicon from a CSV file with columns word, sentiment."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Lexicon file not found: {path}")

        df = pd.read_csv(path)
        missing = [col for col in ("word", "sentiment") if col not in df.columns]
        if missing:
            raise ValueError(f"Lexicon file is missing columns: {missing}")

        df = df.dropna(subset=["word", "sentiment"])
        sentiment = df["sentiment"].astype(str).str.strip().str.lower()
        unknown = set(sentiment) - set(POLARITIES)
        if unknown:
            raise ValueError(f"Unknown sentiment labels: {sorted(unknown)}")

        words = df["word"].astype(str)
        lexicon = cls(
            positive=words[sentiment == POSITIVE],
            negative=words[sentiment == NEGATIVE],
        )
        logger.info(f"Loaded lexicon from {path}: {lexicon!r}")
        return lexicon

    @classmethod
    def bing(cls, allow_download: bool = True) -> "SentimentLexicon":
        """
        Load the Bing Liu opinion lexicon shipped as an NLTK corpus.

        Args:
            allow_download: Fetch the corpus with ``nltk.download`` when it is
                not installed locally

        Returns:
            SentimentLexicon with the corpus' positive and negative words
        """
        import nltk
        from nltk.corpus import opinion_lexicon

        try:
            positive = opinion_lexicon.positive()
        except LookupError:
            if not allow_download:
                raise
            logger.info("Downloading NLTK opinion_lexicon corpus...")
            nltk.download("opinion_lexicon", quiet=True)
            positive = opinion_lexicon.positive()

        lexicon = cls(positive=positive, negative=opinion_lexicon.negative())
        logger.info(f"Loaded Bing opinion lexicon: {lexicon!r}")
        return lexicon

    @classmethod
    def from_config(cls, config_obj=None) -> "SentimentLexicon":
        """Load the lexicon selected in the configuration."""
        lexicon_config = (config_obj or config).lexicon
        if lexicon_config.source == "csv" or lexicon_config.lexicon_path:
            if not lexicon_config.lexicon_path:
                raise ValueError("lexicon.source is 'csv' but no lexicon_path is set")
            return cls.from_csv(lexicon_config.lexicon_path)
        if lexicon_config.source == "bing":
            return cls.bing(allow_download=lexicon_config.allow_download)
        raise ValueError(f"Unknown lexicon source: {lexicon_config.source}")


class LexiconScorer:
    """
    Counts positive and negative lexicon matches per song.
    """

    def __init__(self, lexicon: SentimentLexicon):
        self.lexicon = lexicon
        self.logger = logging.getLogger(__name__)
        self._lexicon_df = lexicon.to_frame()

    def score(self, tokens: Union[pd.DataFrame, TokenStream]) -> pd.DataFrame:
        """
        Tally lexicon matches per song.

        Args:
            tokens: Token table (song_id, word) or a TokenStream

        Returns:
            DataFrame with song_id, positive, negative; songs without any
            match have no row
        """
        if isinstance(tokens, TokenStream):
            tokens = tokens.to_frame()

        matched = tokens[["song_id", "word"]].merge(
            self._lexicon_df, on="word", how="inner"
        )
        if matched.empty:
            return pd.DataFrame(
                {col: pd.Series(dtype="int64") for col in TALLY_COLUMNS}
            )

        tally = (
            matched.assign(
                positive=(matched["sentiment"] == POSITIVE).astype("int64"),
                negative=(matched["sentiment"] == NEGATIVE).astype("int64"),
            )
            .groupby("song_id", as_index=False)[["positive", "negative"]]
            .sum()
        )

        self.logger.debug(
            f"{len(matched)} lexicon matches across {len(tally)} songs"
        )
        return tally[TALLY_COLUMNS]
