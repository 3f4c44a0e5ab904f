import io

from wirestack.lines import iter_lines


def test_keeps_newlines_and_last_partial_line():
    stream = io.StringIO("sa\npb\nra")
    assert list(iter_lines(stream)) == ["sa\n", "pb\n", "ra"]


def test_keep_newline_reads_past_empty_lines():
    stream = io.StringIO("sa\n\nrr\n")
    assert list(iter_lines(stream, keep_newline=True)) == ["sa\n", "\n", "rr\n"]


def test_strip_newlines():
    stream = io.StringIO("0 1 2\n3 4 5\n")
    assert list(iter_lines(stream, keep_newline=False)) == ["0 1 2", "3 4 5"]


def test_strip_stops_at_empty_line():
    stream = io.StringIO("a\n\nb\n")
    assert list(iter_lines(stream, keep_newline=False)) == ["a"]


def test_binary_stream():
    stream = io.BytesIO(b"pa\nrrr\n")
    assert list(iter_lines(stream)) == [b"pa\n", b"rrr\n"]
    stream = io.BytesIO(b"pa\nrrr")
    assert list(iter_lines(stream, keep_newline=False)) == [b"pa", b"rrr"]


def test_empty_stream_yields_nothing():
    assert list(iter_lines(io.StringIO(""))) == []
    assert list(iter_lines(io.StringIO(""), keep_newline=False)) == []


def test_round_trip_joins_back():
    text = "1 2\n3 4\n5 6"
    assert "".join(iter_lines(io.StringIO(text))) == text