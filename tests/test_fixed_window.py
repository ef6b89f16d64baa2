import pytest

from vectormind.exceptions import InvalidArgumentError
from vectormind.splitters import chunk_text, validate_window


def test_windows_overlap_and_last_window_is_shorter():
    chunks = chunk_text("abcdefghij", 4, 1)

    assert chunks == ["abcd", "defg", "ghij", "j"]


def test_no_overlap_partitions_text():
    chunks = chunk_text("abcdefghij", 3)

    assert chunks == ["abc", "def", "ghi", "j"]
    assert "".join(chunks) == "abcdefghij"


def test_empty_text_yields_no_windows():
    assert chunk_text("", 5, 2) == []


def test_text_shorter_than_window():
    assert chunk_text("abc", 10, 3) == ["abc"]


def test_every_window_within_chunk_size():
    text = "lorem ipsum dolor sit amet " * 20
    for chunk in chunk_text(text, 17, 5):
        assert 0 < len(chunk) <= 17


def test_windows_cover_the_whole_text():
    text = "The quick brown fox jumps over the lazy dog"
    chunk_size, overlap = 10, 3
    chunks = chunk_text(text, chunk_size, overlap)

    rebuilt = chunks[0] + "".join(chunk[overlap:] for chunk in chunks[1:])
    assert rebuilt == text


def test_multibyte_characters_are_never_split():
    text = "héllo wörld ☃☃☃ 日本語"
    chunks = chunk_text(text, 4)

    assert "".join(chunks) == text
    assert all(len(chunk) <= 4 for chunk in chunks)


@pytest.mark.parametrize("chunk_size,overlap", [(0, 0), (-1, 0), (5, -1), (5, 5), (5, 7)])
def test_invalid_window_is_rejected(chunk_size, overlap):
    with pytest.raises(InvalidArgumentError):
        chunk_text("some text", chunk_size, overlap)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError, match="overlap"):
        validate_window(4, 4)
