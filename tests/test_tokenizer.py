from billboard_lyrics.data_loader import SongRecord
from billboard_lyrics.tokenizer import Token, TokenStream, tokenize_text


def _song(song_id, lyrics):
    return SongRecord(song_id=song_id, year=2010, decade="2010s", raw_lyrics=lyrics)


def test_tokenize_lowercases_and_strips_punctuation():
    words = list(tokenize_text("Hello, World! It's ME... (yeah) - 99 problems"))
    assert words == ["hello", "world", "it's", "me", "yeah", "99", "problems"]


def test_tokenize_splits_on_hyphens_and_underscores():
    assert list(tokenize_text("one-two three_four")) == ["one", "two", "three", "four"]


def test_empty_text_yields_nothing():
    assert list(tokenize_text("")) == []
    assert list(tokenize_text("  \n ... !!")) == []


def test_stream_tags_tokens_with_song_id():
    stream = TokenStream([_song(1, "a b"), _song(2, ""), _song(3, "C")])

    assert list(stream) == [Token(1, "a"), Token(1, "b"), Token(3, "c")]


def test_stream_is_restartable():
    stream = TokenStream([_song(1, "la la land"), _song(2, "oh")])

    assert list(stream) == list(stream)
    assert len(list(stream)) == 4


def test_stream_is_lazy():
    stream = TokenStream([_song(1, "first second")])
    iterator = iter(stream)

    assert next(iterator) == Token(1, "first")


def test_stream_to_frame():
    df = TokenStream([_song(5, "Sad sad song")]).to_frame()

    assert list(df.columns) == ["song_id", "word"]
    assert df["word"].tolist() == ["sad", "sad", "song"]
    assert df["song_id"].tolist() == [5, 5, 5]


def test_empty_stream_to_frame_keeps_columns():
    df = TokenStream([_song(1, "")]).to_frame()

    assert df.empty
    assert list(df.columns) == ["song_id", "word"]

