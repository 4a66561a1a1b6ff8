"""
Lyrics preprocessing for the Billboard lyrics pipeline.
Handles annotation removal, contraction expansion and ASCII normalization.
"""

import re
import unicodedata
from typing import Callable, Dict, List, Sequence
import logging
from tqdm import tqdm

from .config import config
from .contractions import CONTRACTIONS
from .data_loader import SongRecord

logger = logging.getLogger(__name__)

# Fullwidth and vertical-form brackets fold to ASCII under NFKD, so they are
# removed here too
ANNOTATION_PATTERN = re.compile(r"[\[\uff3b\ufe47].*?[\]\uff3d\ufe48]")

_APOSTROPHES = "'\u2018\u2019"


def _contraction_regex(key: str) -> str:
    return "".join(f"[{_APOSTROPHES}]" if ch == "'" else re.escape(ch) for ch in key)


# Longest keys first so "could've" is never shadowed by a shorter entry
CONTRACTION_PATTERN = re.compile(
    rf"(?<![\w{_APOSTROPHES}])("
    + "|".join(
        _contraction_regex(key) for key in sorted(CONTRACTIONS, key=len, reverse=True)
    )
    + rf")(?![\w{_APOSTROPHES}])",
    re.IGNORECASE,
)

# Typographic characters whose closest ASCII form is not reachable through NFKD
ASCII_PUNCTUATION = str.maketrans(
    {
        "\u2018": "'",
        "\u2019": "'",
        "\u201a": "'",
        "\u201b": "'",
        "\u2032": "'",
        "\u201c": '"',
        "\u201d": '"',
        "\u201e": '"',
        "\u2033": '"',
        "\u2010": "-",
        "\u2011": "-",
        "\u2012": "-",
        "\u2013": "-",
        "\u2014": "-",
        "\u2212": "-",
        "\u2026": "...",
        "\u00a0": " ",
    }
)


def remove_bracketed_annotations(text: str) -> str:
    """Remove section markers such as ``[Chorus]`` or ``[Verse 1: Drake]``."""
    return ANNOTATION_PATTERN.sub("", text)


def _expand(match: "re.Match") -> str:
    word = match.group(0)
    expansion = CONTRACTIONS[re.sub(f"[{_APOSTROPHES}]", "'", word.lower())]
    if word[0].isupper():
        return expansion[0].upper() + expansion[1:]
    return expansion


def expand_contractions(text: str) -> str:
    """Expand known contractions ("don't" -> "do not"); others pass through."""
    return CONTRACTION_PATTERN.sub(_expand, text)


def replace_non_ascii(text: str) -> str:
    """Transliterate to the closest ASCII form, dropping what has none."""
    text = text.translate(ASCII_PUNCTUATION)
    text = unicodedata.normalize("NFKD", text)
    return text.encode("ascii", "ignore").decode("ascii")


CLEANING_STEPS = (
    remove_bracketed_annotations,
    expand_contractions,
    replace_non_ascii,
)


def clean_lyrics(
    text: str, steps: Sequence[Callable[[str], str]] = CLEANING_STEPS
) -> str:
    """Apply the cleaning steps in order, each feeding the next."""
    if not isinstance(text, str):
        return ""
    for step in steps:
        text = step(text)
    return text


class Preprocessor:
    """
    Lyrics preprocessor.
    Cleans each song's lyrics in place before tokenization.
    """

    def __init__(self, config_obj=None):
        self.config = config_obj or config
        self.logger = logging.getLogger(__name__)
        self.steps = self._build_steps()

    def _build_steps(self) -> List[Callable[[str], str]]:
        """Select the enabled cleaning steps, keeping their fixed order."""
        cleaning = self.config.cleaning
        enabled = {
            remove_bracketed_annotations: cleaning.remove_annotations,
            expand_contractions: cleaning.expand_contractions,
            replace_non_ascii: cleaning.replace_non_ascii,
        }
        return [step for step in CLEANING_STEPS if enabled[step]]

    def clean_song(self, song: SongRecord) -> Dict:
        """
        Clean a single song's lyrics in place.

        Args:
            song: SongRecord object

        Returns:
            Dictionary with cleaning metrics
        """
        original_text = song.lyrics or ""
        song.lyrics = clean_lyrics(original_text, self.steps)

        return {
            "song_id": song.song_id,
            "original_length": len(original_text),
            "cleaned_length": len(song.lyrics),
            "annotations_removed": len(ANNOTATION_PATTERN.findall(original_text)),
            "empty_after_cleaning": not song.lyrics.strip(),
        }

    def clean_songs(self, songs: List[SongRecord]) -> List[Dict]:
        """
        Clean every song's lyrics in place.

        Args:
            songs: List of SongRecord objects

        Returns:
            List of per-song cleaning metrics
        """
        self.logger.info(f"Cleaning lyrics for {len(songs)} songs...")

        metrics = [
            self.clean_song(song)
            for song in tqdm(
                songs,
                desc="Cleaning lyrics",
                disable=not self.config.cleaning.progress_bar,
            )
        ]

        empty = sum(1 for m in metrics if m["empty_after_cleaning"])
        annotations = sum(m["annotations_removed"] for m in metrics)
        self.logger.info(
            f"Cleaning complete: {annotations} annotations removed, "
            f"{empty} songs empty after cleaning"
        )
        return metrics
