import json

import numpy as np
import pandas as pd
import pytest

from billboard_lyrics.analyzer import Analyzer


def test_average_word_count_by_year():
    features = pd.DataFrame(
        {
            "song_id": [1, 2, 3, 4],
            "word_count": [100, 300, 50, 999],
            "year": pd.array([2001, 2001, 2002, None], dtype="Int64"),
        }
    )

    trend = Analyzer().average_word_count_by_year(features)

    assert trend["year"].tolist() == [2001, 2002]
    assert trend["avg_word_count"].tolist() == [200.0, 50.0]


def test_summarise_by_decade_orders_decades(features_df):
    features = features_df.copy()
    features.loc[0, "decade"] = "unknown"

    summary = Analyzer().summarise_by_decade(features)

    assert summary["decade"].tolist() == ["2000s", "2010s", "2020s", "unknown"]
    assert summary["songs"].sum() == len(features)


def test_pca_variance_percentages(features_df):
    result = Analyzer().compute_pca(features_df)

    assert len(result.variance_percent) == 5
    assert (result.variance_percent >= 0).all()
    assert result.variance_percent.sum() <= 100 + 1e-9
    assert result.variance_percent.sum() == pytest.approx(100)
    assert list(result.variance_percent) == sorted(result.variance_percent, reverse=True)


def test_pca_scores_keep_two_components(features_df):
    result = Analyzer().compute_pca(features_df)

    assert list(result.scores.columns) == ["song_id", "PC1", "PC2", "decade"]
    assert result.components == ["PC1", "PC2"]
    assert len(result.scores) == len(features_df)
    assert result.scores["decade"].tolist() == features_df["decade"].tolist()
    # Scores of a centred decomposition are centred too
    np.testing.assert_allclose(result.scores[["PC1", "PC2"]].mean(), 0, atol=1e-9)
    assert list(result.loadings.index) == [
        "word_count",
        "sentiment_score",
        "positive_ratio",
        "negative_ratio",
        "unique_ratio",
    ]


def test_pca_axis_label(features_df):
    result = Analyzer().compute_pca(features_df)
    expected = round(float(result.variance_percent[0]), 1)

    assert result.axis_label(1) == f"PC1 ({expected}% variance explained)"


def test_pca_needs_two_songs(features_df):
    with pytest.raises(ValueError):
        Analyzer().compute_pca(features_df.head(1))


def test_pca_with_constant_column(features_df):
    features = features_df.assign(unique_ratio=0.5)

    result = Analyzer().compute_pca(features)

    assert np.isfinite(result.variance_percent).all()
    assert result.variance_percent.sum() <= 100 + 1e-9


def test_analyze_dataset_is_json_serialisable(features_df):
    results = Analyzer().analyze_dataset(features_df)

    payload = json.loads(json.dumps(results))
    assert payload["dataset_stats"]["total_songs"] == len(features_df)
    assert len(payload["pca"]["variance_percent"]) == 5
    assert payload["trend"][0]["year"] == 2000


def test_analyze_dataset_skips_pca_for_single_song(features_df):
    results = Analyzer().analyze_dataset(features_df.head(1))

    assert "pca" not in results
