"""
Word tokenization for cleaned lyrics.
"""

import re
from typing import Iterable, Iterator, List, NamedTuple, Tuple

import pandas as pd

from .data_loader import SongRecord

# Letters/digits, keeping apostrophes inside a word ("don't", "rock'n'roll")
WORD_PATTERN = re.compile(r"[^\W_]+(?:'[^\W_]+)*")


class Token(NamedTuple):
    """A single lowercase word tagged with the song it came from."""

    song_id: int
    word: str


def tokenize_text(text: str) -> Iterator[str]:
    """Yield lowercase words from text, stripping all other punctuation."""
    if not text:
        return
    for match in WORD_PATTERN.finditer(text.lower()):
        yield match.group(0)


class TokenStream:
    """
    Lazy, restartable sequence of tokens over a collection of songs.

    Every call to ``iter()`` starts a fresh pass, so the stream can be
    consumed more than once (word summary and lexicon scoring).
    """

    def __init__(self, songs: Iterable[SongRecord]):
        self._sources: List[Tuple[int, str]] = [
            (song.song_id, song.lyrics or "") for song in songs
        ]

    def __iter__(self) -> Iterator[Token]:
        for song_id, text in self._sources:
            for word in tokenize_text(text):
                yield Token(song_id, word)

    def __len__(self) -> int:
        """Number of songs feeding the stream (not the number of tokens)."""
        return len(self._sources)

    def to_frame(self) -> pd.DataFrame:
        """One row per token with columns song_id, word."""
        df = pd.DataFrame(list(self), columns=list(Token._fields))
        return df.astype({"song_id": "int64", "word": "object"})
