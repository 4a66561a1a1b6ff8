"""
Analysis module for the Billboard lyrics pipeline.
Derives the year trend series, per-decade summaries and the PCA projection
consumed by the visualizer.
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from sklearn.decomposition import PCA
from sklearn.preprocessing import StandardScaler

from .config import config
from .data_loader import DECADES, UNKNOWN_DECADE

logger = logging.getLogger(__name__)


@dataclass
class PCAResult:
    """Projection of the songs onto the leading principal components."""

    scores: pd.DataFrame  # song_id, PC1..PCk, decade
    variance_percent: np.ndarray  # every component, in percent
    loadings: pd.DataFrame  # features x kept components

    @property
    def components(self) -> List[str]:
        return [col for col in self.scores.columns if col.startswith("PC")]

    def axis_label(self, index: int) -> str:
        """Axis label such as 'PC1 (41.2% variance explained)' (1-based)."""
        percent = round(float(self.variance_percent[index - 1]), 1)
        return f"PC{index} ({percent}% variance explained)"


def _to_native(obj):
    """Convert numpy/pandas values into JSON-friendly Python types."""
    if isinstance(obj, dict):
        return {str(k): _to_native(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_native(v) for v in obj]
    if isinstance(obj, np.ndarray):
        return [_to_native(v) for v in obj.tolist()]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if obj is pd.NA:
        return None
    return obj


class Analyzer:
    """
    Derived, descriptive views over the song feature table.
    """

    def __init__(self, config_obj=None):
        self.config = config_obj or config
        self.logger = logging.getLogger(__name__)

    def average_word_count_by_year(self, features: pd.DataFrame) -> pd.DataFrame:
        """
        Average lyrics length per chart year.

        Songs without a year are left out of the series.

        Returns:
            DataFrame with year, avg_word_count sorted by year
        """
        trend = (
            features.dropna(subset=["year"])
            .groupby("year")["word_count"]
            .mean()
            .reset_index(name="avg_word_count")
            .sort_values("year")
            .reset_index(drop=True)
        )
        trend["year"] = trend["year"].astype("int64")
        return trend

    def summarise_by_decade(self, features: pd.DataFrame) -> pd.DataFrame:
        """Song count, mean and median lyrics length and sentiment per decade."""
        summary = features.groupby("decade").agg(
            songs=("song_id", "size"),
            mean_word_count=("word_count", "mean"),
            median_word_count=("word_count", "median"),
            mean_sentiment_score=("sentiment_score", "mean"),
            median_sentiment_score=("sentiment_score", "median"),
        )
        order = [d for d in (*DECADES, UNKNOWN_DECADE) if d in summary.index]
        return summary.loc[order].reset_index()

    def compute_pca(self, features: pd.DataFrame) -> PCAResult:
        """
        Centered and scaled PCA of the numeric lyric features.

        Variance explained is each component's eigenvalue divided by the sum
        of all eigenvalues.

        Args:
            features: Song feature table

        Returns:
            PCAResult with the leading components' scores
        """
        columns = list(self.config.analysis.pca_features)
        if len(features) < 2:
            raise ValueError(
                f"PCA needs at least two songs, got {len(features)}"
            )

        X = features[columns].astype(float).to_numpy()

        # Standardize features
        X_scaled = StandardScaler().fit_transform(X)

        pca = PCA()
        X_pca = pca.fit_transform(X_scaled)

        eigenvalues = pca.explained_variance_
        total = eigenvalues.sum()
        if total > 0:
            variance_percent = eigenvalues / total * 100
        else:
            variance_percent = np.zeros_like(eigenvalues)

        n_keep = min(self.config.analysis.n_components, X_pca.shape[1])
        pc_names = [f"PC{i + 1}" for i in range(n_keep)]

        scores = pd.DataFrame(X_pca[:, :n_keep], columns=pc_names)
        scores.insert(0, "song_id", features["song_id"].to_numpy())
        scores["decade"] = features["decade"].to_numpy()

        loadings = pd.DataFrame(
            pca.components_[:n_keep].T, columns=pc_names, index=columns
        )

        self.logger.info(
            "PCA variance explained: "
            + ", ".join(
                f"{name} {pct:.1f}%" for name, pct in zip(pc_names, variance_percent)
            )
        )
        return PCAResult(
            scores=scores, variance_percent=variance_percent, loadings=loadings
        )

    def analyze_dataset(
        self, features: pd.DataFrame, pca_result: Optional[PCAResult] = None
    ) -> Dict[str, Any]:
        """
        Bundle the descriptive views into one JSON-serialisable summary.

        Args:
            features: Song feature table
            pca_result: Previously computed PCA, reused instead of refitting

        Returns:
            Dictionary with dataset statistics, trend, decade summary and PCA
        """
        self.logger.info("Analyzing feature table...")

        results = {
            "timestamp": datetime.now().isoformat(),
            "dataset_stats": {
                "total_songs": len(features),
                "mean_word_count": features["word_count"].mean(),
                "mean_unique_ratio": features["unique_ratio"].mean(),
                "mean_sentiment_score": features["sentiment_score"].mean(),
                "songs_without_matches": int(
                    ((features["positive"] == 0) & (features["negative"] == 0)).sum()
                ),
            },
            "trend": self.average_word_count_by_year(features).to_dict("records"),
            "decade_summary": self.summarise_by_decade(features).to_dict("records"),
        }

        if pca_result is None and len(features) >= 2:
            pca_result = self.compute_pca(features)

        if pca_result is not None:
            results["pca"] = {
                "variance_percent": pca_result.variance_percent,
                "loadings": pca_result.loadings.to_dict(),
            }
        else:
            self.logger.warning("Skipping PCA: fewer than two songs with features")

        return _to_native(results)
