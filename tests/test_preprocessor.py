import pytest

from billboard_lyrics.data_loader import SongRecord
from billboard_lyrics.preprocessor import (
    Preprocessor,
    clean_lyrics,
    expand_contractions,
    remove_bracketed_annotations,
    replace_non_ascii,
)

SAMPLES = [
    "[Chorus]\nI don't know [x2]",
    "Café del Mar — naïve “quotes”",
    "[Verse 1: Artist]\nYou’re the one… [Bridge] ok",
    "unbalanced [bracket stays",
    "]odd[ order ] here",
    "［Chorus］ hello",
    "﹇Hook﹈ again",
    "",
]


def test_removes_bracketed_annotations_non_greedy():
    assert remove_bracketed_annotations("[Chorus] keep [x2] this") == " keep  this"


def test_annotations_do_not_span_lines():
    text = "[open\nclose]"
    assert remove_bracketed_annotations(text) == text


def test_expands_known_contractions():
    assert expand_contractions("don't stop") == "do not stop"
    assert expand_contractions("I'm here, you're there") == "I am here, you are there"
    assert expand_contractions("Can't") == "Cannot"


def test_expands_curly_apostrophes():
    assert expand_contractions("won’t") == "will not"


def test_unknown_contractions_pass_through():
    assert expand_contractions("y'know rock'n'roll") == "y'know rock'n'roll"


def test_contractions_need_whole_words():
    assert expand_contractions("isn'tt") == "isn'tt"


def test_replace_non_ascii_transliterates():
    assert replace_non_ascii("café naïve") == "cafe naive"
    assert replace_non_ascii("it’s “fine” — ok…") == "it's \"fine\" - ok..."


def test_replace_non_ascii_drops_unmappable():
    assert replace_non_ascii("love ❤ 爱") == "love  "


def test_clean_lyrics_applies_steps_in_order():
    assert clean_lyrics("[Intro] I’m Beyoncé") == " I am Beyonce"


def test_clean_lyrics_handles_non_strings():
    assert clean_lyrics(None) == ""


@pytest.mark.parametrize("text", SAMPLES)
def test_cleaning_is_idempotent(text):
    once = clean_lyrics(text)
    assert clean_lyrics(once) == once
    assert remove_bracketed_annotations(remove_bracketed_annotations(text)) == (
        remove_bracketed_annotations(text)
    )
    assert replace_non_ascii(replace_non_ascii(text)) == replace_non_ascii(text)


def test_clean_song_mutates_lyrics_in_place():
    song = SongRecord(song_id=7, year=2010, decade="2010s", raw_lyrics="[Hook] Don't go")

    metrics = Preprocessor().clean_song(song)

    assert song.lyrics == " Do not go"
    assert song.raw_lyrics == "[Hook] Don't go"
    assert metrics["annotations_removed"] == 1
    assert metrics["empty_after_cleaning"] is False


def test_clean_songs_flags_empty_results():
    songs = [
        SongRecord(song_id=1, year=2001, decade="2000s", raw_lyrics="[Chorus]"),
        SongRecord(song_id=2, year=2001, decade="2000s", raw_lyrics="words"),
    ]

    metrics = Preprocessor().clean_songs(songs)

    assert [m["empty_after_cleaning"] for m in metrics] == [True, False]


def test_disabled_steps_are_skipped(test_config):
    test_config.cleaning.expand_contractions = False
    song = SongRecord(song_id=1, year=2001, decade="2000s", raw_lyrics="[x] don’t")

    Preprocessor(test_config).clean_song(song)

    assert song.lyrics == " don't"


def test_removes_fullwidth_annotations():
    assert remove_bracketed_annotations("［Chorus］ hello") == " hello"
    assert clean_lyrics("［Chorus］ hello") == " hello"
