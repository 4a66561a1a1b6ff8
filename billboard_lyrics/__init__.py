"""
Billboard Lyrics Analysis Pipeline

Lyric structure and sentiment features for Billboard Hot 100 songs, with the
summary views and figures built on top of them.
"""

from .config import config, Config
from .data_loader import DataLoader, SongRecord, assign_decade
from .preprocessor import Preprocessor, clean_lyrics
from .tokenizer import Token, TokenStream, tokenize_text
from .lexicon import SentimentLexicon, LexiconScorer
from .feature_extractor import FeatureAggregator, FeatureExtractor, SongFeature
from .analyzer import Analyzer, PCAResult
from .visualizer import Visualizer
from .pipeline import Pipeline

__version__ = "1.0.0"

__all__ = [
    "config",
    "Config",
    "DataLoader",
    "SongRecord",
    "assign_decade",
    "Preprocessor",
    "clean_lyrics",
    "Token",
    "TokenStream",
    "tokenize_text",
    "SentimentLexicon",
    "LexiconScorer",
    "FeatureAggregator",
    "FeatureExtractor",
    "SongFeature",
    "Analyzer",
    "PCAResult",
    "Visualizer",
    "Pipeline",
]
