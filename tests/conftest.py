import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

from billboard_lyrics.config import Config
from billboard_lyrics.lexicon import SentimentLexicon


@pytest.fixture
def lexicon():
    return SentimentLexicon.from_mapping(
        {
            "happy": "positive",
            "love": "positive",
            "good": "positive",
            "sad": "negative",
            "cry": "negative",
            "bad": "negative",
        }
    )


@pytest.fixture
def test_config(tmp_path):
    config_obj = Config()
    config_obj.data.output_dir = str(tmp_path / "output")
    config_obj.data.figures_dir = str(tmp_path / "output" / "figures")
    config_obj.lexicon.allow_download = False
    config_obj.visualization.dpi = 40
    return config_obj


@pytest.fixture
def songs_df():
    return pd.DataFrame(
        {
            "title": ["Happy Song", "Chorus Only", "No Feelings", "Old One", "Mixed", "Late"],
            "year": [2005, 2012, 2015, 1999, "unknown", 2023],
            "lyrics": [
                "I am happy happy sad",
                "[Chorus]\n[Verse 1]",
                "Walking down the street",
                "Love love love, don't cry",
                "Good times and bad times",
                "[Intro] I can't be sad, I’m happy",
            ],
        }
    )


@pytest.fixture
def songs_csv(tmp_path, songs_df):
    path = tmp_path / "songs.csv"
    songs_df.to_csv(path, index=False)
    return path


@pytest.fixture
def lexicon_csv(tmp_path):
    path = tmp_path / "lexicon.csv"
    pd.DataFrame(
        {
            "word": ["happy", "love", "good", "sad", "cry", "bad"],
            "sentiment": ["positive", "positive", "positive", "negative", "negative", "negative"],
        }
    ).to_csv(path, index=False)
    return path


@pytest.fixture
def features_df():
    """Synthetic feature table large enough for PCA and smoothing."""
    rng = np.random.default_rng(42)
    n = 30
    word_count = rng.integers(50, 600, size=n)
    unique_words = np.minimum(word_count, rng.integers(20, 300, size=n))
    positive = rng.integers(0, 30, size=n)
    negative = rng.integers(0, 30, size=n)
    years = np.array([2000 + (i % 24) for i in range(n)])
    decades = np.where(years < 2010, "2000s", np.where(years < 2020, "2010s", "2020s"))

    return pd.DataFrame(
        {
            "song_id": np.arange(1, n + 1),
            "word_count": word_count,
            "unique_words": unique_words,
            "positive": positive,
            "negative": negative,
            "sentiment_score": positive - negative,
            "positive_ratio": positive / word_count,
            "negative_ratio": negative / word_count,
            "unique_ratio": unique_words / word_count,
            "year": pd.array(years, dtype="Int64"),
            "decade": decades,
        }
    )
