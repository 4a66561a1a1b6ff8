"""
Visualization module for the Billboard lyrics pipeline.
Renders the four summary figures from the song feature table.
"""

import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.ticker import StrMethodFormatter
import seaborn as sns
from pathlib import Path
from typing import Dict, List, Optional
import logging

from statsmodels.nonparametric.smoothers_lowess import lowess

from .analyzer import PCAResult
from .config import config
from .data_loader import DECADES, UNKNOWN_DECADE

logger = logging.getLogger(__name__)


class Visualizer:
    """
    Figure suite for lyric length and sentiment features.
    """

    def __init__(self, config_obj=None):
        self.config = config_obj or config
        self.logger = logging.getLogger(__name__)

        # Set style
        plt.style.use(self.config.visualization.style)
        self.decade_colors = self.config.visualization.decade_colors

    def _decade_order(self, decades: pd.Series) -> List[str]:
        present = set(decades.dropna())
        return [d for d in (*DECADES, UNKNOWN_DECADE) if d in present]

    def _save(self, fig, output_dir: str, filename: str) -> Path:
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)
        path = output_path / filename
        fig.savefig(path, dpi=self.config.visualization.dpi, bbox_inches="tight")
        plt.close(fig)
        self.logger.info(f"Saved figure to {path}")
        return path

    def create_trend_plot(self, trend_df: pd.DataFrame, output_dir: str) -> Path:
        """
        Line chart of the average lyrics length per year.

        Args:
            trend_df: DataFrame with year and avg_word_count
            output_dir: Directory to save the figure
        """
        color = self.config.visualization.trend_color
        fig, ax = plt.subplots(figsize=self.config.visualization.figure_size)

        ax.plot(trend_df["year"], trend_df["avg_word_count"], color=color, linewidth=2)
        ax.scatter(trend_df["year"], trend_df["avg_word_count"], color=color, s=20)
        ax.set_title("Average Lyrics Length of Billboard Hot 100 Songs (2000–2023)")
        ax.set_xlabel("Year")
        ax.set_ylabel("Average lyrics length (word count)")
        sns.despine(ax=ax)

        return self._save(fig, output_dir, "avg_word_count_by_year.png")

    def create_decade_boxplot(
        self, features_df: pd.DataFrame, output_dir: str
    ) -> Optional[Path]:
        """
        Boxplot of sentiment scores grouped by decade.

        Args:
            features_df: Song feature table
            output_dir: Directory to save the figure
        """
        if features_df.empty:
            self.logger.warning("No songs to plot, skipping decade boxplot")
            return None

        order = self._decade_order(features_df["decade"])
        fig, ax = plt.subplots(figsize=self.config.visualization.figure_size)

        sns.boxplot(
            data=features_df,
            x="decade",
            y="sentiment_score",
            hue="decade",
            order=order,
            hue_order=order,
            palette=self.decade_colors,
            boxprops={"alpha": 0.7},
            legend=False,
            ax=ax,
        )
        ax.set_title("Distribution of Sentiment Scores of Song Lyrics by Decade")
        ax.set_xlabel("Decade")
        ax.set_ylabel("Sentiment score")
        sns.despine(ax=ax)

        return self._save(fig, output_dir, "sentiment_by_decade_boxplot.png")

    def create_length_sentiment_scatter(
        self, features_df: pd.DataFrame, output_dir: str
    ) -> Optional[Path]:
        """
        Word count against sentiment score, coloured by decade, with a LOESS
        curve per decade.

        Args:
            features_df: Song feature table
            output_dir: Directory to save the figure
        """
        if features_df.empty:
            self.logger.warning("No songs to plot, skipping length/sentiment scatter")
            return None

        frac = self.config.visualization.loess_frac
        fig, ax = plt.subplots(figsize=self.config.visualization.figure_size)

        for decade in self._decade_order(features_df["decade"]):
            group = features_df[features_df["decade"] == decade]
            color = self.decade_colors.get(decade, "#95A5A6")

            ax.scatter(
                group["word_count"],
                group["sentiment_score"],
                color=color,
                alpha=0.6,
                label=decade,
            )

            if len(group) < 5 or group["word_count"].nunique() < 3:
                self.logger.debug(f"Too few songs to smooth {decade}")
                continue

            smoothed = lowess(
                group["sentiment_score"].astype(float),
                group["word_count"].astype(float),
                frac=frac,
            )
            ax.plot(smoothed[:, 0], smoothed[:, 1], color=color, linewidth=2)

        ax.xaxis.set_major_formatter(StrMethodFormatter("{x:,.0f}"))
        ax.set_title("Lyrics length and sentiment score across different decades")
        ax.set_xlabel("Lyrics length (word count)")
        ax.set_ylabel("Sentiment score")
        ax.legend(title="Decade")

        return self._save(fig, output_dir, "length_vs_sentiment.png")

    def create_pca_plot(self, pca_result: PCAResult, output_dir: str) -> Path:
        """
        Songs in PC1-PC2 space coloured by decade.

        Args:
            pca_result: Output of Analyzer.compute_pca
            output_dir: Directory to save the figure
        """
        scores = pca_result.scores
        fig, ax = plt.subplots(figsize=self.config.visualization.figure_size)

        for decade in self._decade_order(scores["decade"]):
            group = scores[scores["decade"] == decade]
            ax.scatter(
                group["PC1"],
                group["PC2"],
                color=self.decade_colors.get(decade, "#95A5A6"),
                alpha=0.7,
                s=20,
                label=decade,
            )

        ax.set_title("PCA of Lyrics Features by Decade")
        ax.set_xlabel(pca_result.axis_label(1))
        ax.set_ylabel(pca_result.axis_label(2))
        ax.legend(title="Decade")

        return self._save(fig, output_dir, "pca_by_decade.png")

    def create_all(
        self,
        features_df: pd.DataFrame,
        trend_df: pd.DataFrame,
        pca_result: Optional[PCAResult],
        output_dir: str,
    ) -> Dict[str, Path]:
        """
        Render every figure.

        Returns:
            Mapping of figure name to saved path
        """
        self.logger.info("Creating visualizations...")

        figures = {
            "trend": self.create_trend_plot(trend_df, output_dir),
            "decade_boxplot": self.create_decade_boxplot(features_df, output_dir),
            "length_sentiment": self.create_length_sentiment_scatter(
                features_df, output_dir
            ),
        }
        if pca_result is not None and len(pca_result.components) >= 2:
            figures["pca"] = self.create_pca_plot(pca_result, output_dir)
        else:
            self.logger.warning("No two-component PCA available, skipping PCA plot")

        return {name: path for name, path in figures.items() if path is not None}
