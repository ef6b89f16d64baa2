import pytest

from vectormind.exceptions import InvalidArgumentError
from vectormind.splitters import subdivide


def test_piece_within_limit_is_returned_unchanged():
    assert subdivide("short piece", 20, header="HEADER") == ["short piece"]


def test_piece_exactly_at_limit_is_not_split():
    assert subdivide("x" * 10, 10) == ["x" * 10]


def test_oversize_piece_without_header():
    chunks = subdivide("abcdefghij", 4)

    assert chunks == ["abcd", "efgh", "ij"]


def test_header_is_prepended_to_later_windows_only():
    piece = "# Title\n" + "y" * 20
    chunks = subdivide(piece, 10, header="# Title")

    assert chunks[0] == piece[:10]
    for chunk in chunks[1:]:
        assert chunk.startswith("# Title\n\n")


def test_windows_fit_before_header_prepend():
    piece = "z" * 35
    chunks = subdivide(piece, 10, header="HDR")

    bodies = [chunks[0]] + [chunk[len("HDR\n\n"):] for chunk in chunks[1:]]
    assert all(len(body) <= 10 for body in bodies)
    assert "".join(bodies) == piece
    # prepending may push a window past the limit again
    assert max(len(chunk) for chunk in chunks) > 10


def test_invalid_size_limit():
    with pytest.raises(InvalidArgumentError):
        subdivide("text", 0)
