#!/usr/bin/env python3
"""
Example usage of the Billboard lyrics pipeline.
This script demonstrates running the pipeline step by step on a CSV file.
"""

import logging
import sys
from pathlib import Path

from billboard_lyrics import (
    Analyzer,
    DataLoader,
    FeatureExtractor,
    Preprocessor,
    Visualizer,
    config,
)

# Set up logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    """Main example function."""
    print("Billboard Lyrics Pipeline - Example Usage")
    print("=" * 50)

    input_path = Path(sys.argv[1] if len(sys.argv) > 1 else config.data.input_path)
    if not input_path.exists():
        print(f"\nInput file not found: {input_path}")
        print("Expected a CSV with at least the columns: year, lyrics")
        return

    print("\n1. Loading songs...")
    songs = DataLoader().load_songs(input_path)
    print(f"   Loaded {len(songs)} songs")

    print("\n2. Cleaning lyrics...")
    Preprocessor().clean_songs(songs)

    print("\n3. Extracting features...")
    features = FeatureExtractor().extract_features(songs)
    print(features.head())

    print("\n4. Deriving trend and PCA views...")
    analyzer = Analyzer()
    trend = analyzer.average_word_count_by_year(features)
    pca_result = analyzer.compute_pca(features)
    print(f"   {pca_result.axis_label(1)}")
    print(f"   {pca_result.axis_label(2)}")

    print("\n5. Rendering figures...")
    figures = Visualizer().create_all(features, trend, pca_result, config.data.figures_dir)
    for name, path in figures.items():
        print(f"   {name}: {path}")


if __name__ == "__main__":
    main()
