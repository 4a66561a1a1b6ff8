"""
Configuration settings for the Billboard lyrics analysis pipeline.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class DataConfig:
    """Data paths configuration."""

    input_path: str = "data/billboard_24years_lyrics_spotify.csv"
    year_column: str = "year"
    lyrics_column: str = "lyrics"

    # Output paths
    output_dir: str = "output"
    figures_dir: str = "output/figures"

    def ensure_directories(self):
        """Create output directories if they don't exist."""
        for attr_name in dir(self):
            if attr_name.endswith("_dir") and not attr_name.startswith("_"):
                Path(getattr(self, attr_name)).mkdir(parents=True, exist_ok=True)


@dataclass
class CleaningConfig:
    """Lyrics cleaning configuration."""

    remove_annotations: bool = True
    expand_contractions: bool = True
    replace_non_ascii: bool = True
    progress_bar: bool = False


@dataclass
class LexiconConfig:
    """Sentiment lexicon configuration."""

    source: str = "bing"  # bing, csv
    lexicon_path: Optional[str] = None
    allow_download: bool = True


@dataclass
class AnalysisConfig:
    """Derived views (trend series, PCA) configuration."""

    n_components: int = 2
    pca_features: List[str] = None

    def __post_init__(self):
        if self.pca_features is None:
            self.pca_features = [
                "word_count",
                "sentiment_score",
                "positive_ratio",
                "negative_ratio",
                "unique_ratio",
            ]


@dataclass
class VisualizationConfig:
    """Figure rendering configuration."""

    style: str = "seaborn-v0_8"
    dpi: int = 300
    figure_size: List[float] = field(default_factory=lambda: [8.0, 5.5])
    trend_color: str = "#2C7FB8"
    loess_frac: float = 0.6
    decade_colors: Dict[str, str] = None

    def __post_init__(self):
        if self.decade_colors is None:
            self.decade_colors = {
                "2000s": "#A6CEE3",
                "2010s": "#B2DF8A",
                "2020s": "#FDBF6F",
                "unknown": "#95A5A6",
            }


class Config:
    """Main configuration class."""

    def __init__(self):
        self.data = DataConfig()
        self.cleaning = CleaningConfig()
        self.lexicon = LexiconConfig()
        self.analysis = AnalysisConfig()
        self.visualization = VisualizationConfig()

    @classmethod
    def from_file(cls, config_path: str) -> "Config":
        """Load configuration from file."""
        import json

        config = cls()
        if os.path.exists(config_path):
            with open(config_path, "r") as f:
                data = json.load(f)
                # Update configuration with loaded data
                for section, values in data.items():
                    if hasattr(config, section):
                        section_obj = getattr(config, section)
                        for key, value in values.items():
                            if hasattr(section_obj, key):
                                setattr(section_obj, key, value)

        return config

    def save(self, config_path: str):
        """Save configuration to file."""
        import json

        data = {
            "data": self.data.__dict__,
            "cleaning": self.cleaning.__dict__,
            "lexicon": self.lexicon.__dict__,
            "analysis": self.analysis.__dict__,
            "visualization": self.visualization.__dict__,
        }

        with open(config_path, "w") as f:
            json.dump(data, f, indent=2)


# Global configuration instance
config = Config()
