import json

from billboard_lyrics.config import Config


def test_defaults():
    config_obj = Config()

    assert config_obj.data.year_column == "year"
    assert config_obj.lexicon.source == "bing"
    assert config_obj.analysis.n_components == 2
    assert config_obj.analysis.pca_features == [
        "word_count",
        "sentiment_score",
        "positive_ratio",
        "negative_ratio",
        "unique_ratio",
    ]
    assert config_obj.visualization.decade_colors["2000s"] == "#A6CEE3"


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "config.json"
    config_obj = Config()
    config_obj.cleaning.expand_contractions = False
    config_obj.lexicon.lexicon_path = "lexicon.csv"

    config_obj.save(str(path))
    loaded = Config.from_file(str(path))

    assert loaded.cleaning.expand_contractions is False
    assert loaded.lexicon.lexicon_path == "lexicon.csv"


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"data": {"bogus": 1, "year_column": "yr"}, "nope": {}}))

    loaded = Config.from_file(str(path))

    assert loaded.data.year_column == "yr"
    assert not hasattr(loaded.data, "bogus")


def test_missing_file_gives_defaults(tmp_path):
    loaded = Config.from_file(str(tmp_path / "absent.json"))

    assert loaded.data.lyrics_column == "lyrics"


def test_ensure_directories(tmp_path):
    config_obj = Config()
    config_obj.data.output_dir = str(tmp_path / "out")
    config_obj.data.figures_dir = str(tmp_path / "out" / "figs")

    config_obj.data.ensure_directories()

    assert (tmp_path / "out" / "figs").is_dir()
