"""
Main pipeline orchestrator for the Billboard lyrics analysis.
Runs load -> clean -> tokenize/score/aggregate -> analyze -> visualize.
"""

import pandas as pd
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging
from datetime import datetime

from .config import config
from .analyzer import Analyzer, PCAResult
from .data_loader import DataLoader, SongRecord
from .feature_extractor import FeatureExtractor
from .lexicon import SentimentLexicon
from .preprocessor import Preprocessor
from .visualizer import Visualizer

logger = logging.getLogger(__name__)


class Pipeline:
    """
    End-to-end lyrics feature pipeline.

    1. Load the song table and assign ids and decades
    2. Clean lyrics (annotations, contractions, non-ASCII)
    3. Tokenize, score against the sentiment lexicon and aggregate per song
    4. Derive the year trend and PCA views
    5. Render the summary figures
    """

    def __init__(self, config_obj=None, lexicon: Optional[SentimentLexicon] = None):
        self.config = config_obj or config
        self.logger = logging.getLogger(__name__)

        # Initialize components
        self.data_loader = DataLoader(self.config)
        self.preprocessor = Preprocessor(self.config)
        self.analyzer = Analyzer(self.config)
        self._lexicon = lexicon
        self._feature_extractor = None

        # Pipeline state
        self.songs: List[SongRecord] = []
        self.features_df: Optional[pd.DataFrame] = None
        self.trend_df: Optional[pd.DataFrame] = None
        self.pca_result: Optional[PCAResult] = None
        self.analysis_results: Dict[str, Any] = {}

    @property
    def feature_extractor(self) -> FeatureExtractor:
        # Lexicon is loaded on first use
        if self._feature_extractor is None:
            self._feature_extractor = FeatureExtractor(self._lexicon, self.config)
        return self._feature_extractor

    def build_features(self, input_path: str = None) -> pd.DataFrame:
        """
        Run the feature pipeline only (no figures).

        Args:
            input_path: Song table path (defaults to the configured input)

        Returns:
            Song feature table
        """
        self.logger.info("Step 1: Loading songs...")
        self.songs = self.data_loader.load_songs(input_path)
        stats = self.data_loader.get_dataset_statistics(self.songs)
        self.logger.info(f"Dataset statistics: {stats}")

        self.logger.info("Step 2: Cleaning lyrics...")
        self.preprocessor.clean_songs(self.songs)

        self.logger.info("Step 3: Extracting features...")
        self.features_df = self.feature_extractor.extract_features(self.songs)
        return self.features_df

    def run_full_pipeline(
        self, input_path: str = None, output_dir: str = None, render: bool = True
    ) -> Dict[str, Any]:
        """
        Run the complete pipeline.

        Args:
            input_path: Song table path (defaults to the configured input)
            output_dir: Directory for figures (defaults to the configured one)
            render: Whether to draw the figures

        Returns:
            Dictionary with pipeline results
        """
        if output_dir is None:
            output_dir = self.config.data.figures_dir
            if render:
                self.config.data.ensure_directories()

        self.logger.info("Starting lyrics pipeline execution...")
        start_time = datetime.now()

        # Results from a previous run on this instance
        self.trend_df = None
        self.pca_result = None
        self.analysis_results = {}

        try:
            self.build_features(input_path)

            self.logger.info("Step 4: Analyzing features...")
            self.trend_df = self.analyzer.average_word_count_by_year(self.features_df)
            if len(self.features_df) >= 2:
                self.pca_result = self.analyzer.compute_pca(self.features_df)
            self.analysis_results = self.analyzer.analyze_dataset(
                self.features_df, self.pca_result
            )

            figures = {}
            if render:
                self.logger.info("Step 5: Creating visualizations...")
                figures = Visualizer(self.config).create_all(
                    self.features_df, self.trend_df, self.pca_result, output_dir
                )

        except Exception as e:
            self.logger.error(f"Pipeline failed: {e}")
            raise

        duration = datetime.now() - start_time
        self.logger.info(f"Pipeline completed successfully in {duration}")

        return {
            "status": "success",
            "duration": str(duration),
            "songs_loaded": len(self.songs),
            "songs_with_features": len(self.features_df),
            "figures": {name: str(path) for name, path in figures.items()},
            "output_directory": str(Path(output_dir)) if render else None,
            "analysis": self.analysis_results,
        }
