from billboard_lyrics.analyzer import Analyzer
from billboard_lyrics.visualizer import Visualizer


def test_create_all_writes_four_figures(features_df, test_config, tmp_path):
    analyzer = Analyzer(test_config)
    trend = analyzer.average_word_count_by_year(features_df)
    pca_result = analyzer.compute_pca(features_df)

    figures = Visualizer(test_config).create_all(
        features_df, trend, pca_result, str(tmp_path / "figs")
    )

    assert set(figures) == {"trend", "decade_boxplot", "length_sentiment", "pca"}
    for path in figures.values():
        assert path.exists()
        assert path.stat().st_size > 0


def test_unknown_decade_is_plotted(features_df, test_config, tmp_path):
    features = features_df.copy()
    features.loc[:2, "decade"] = "unknown"

    path = Visualizer(test_config).create_decade_boxplot(features, str(tmp_path))

    assert path.exists()


def test_empty_table_skips_feature_plots(features_df, test_config, tmp_path):
    empty = features_df.head(0)
    visualizer = Visualizer(test_config)

    figures = visualizer.create_all(
        empty, Analyzer(test_config).average_word_count_by_year(empty), None, str(tmp_path)
    )

    assert set(figures) == {"trend"}
