import pytest

from routeart.csvio import read_edges, read_matched, read_points, read_segments, read_trace
from routeart.geometry import Edge, Point


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_read_edges_parses_commas_and_spaces(tmp_path):
    path = _write(tmp_path, "edges.csv", "1,0,0,2,0\n2 0.5 1.5 3 4\n")
    assert read_edges(path) == [
        Edge(1, Point(0.0, 0.0), Point(2.0, 0.0)),
        Edge(2, Point(0.5, 1.5), Point(3.0, 4.0)),
    ]


def test_read_edges_skips_header_and_short_lines(tmp_path):
    path = _write(tmp_path, "edges.csv", "id,ax,ay,bx,by\n7,1,2,3\n\n8,1,2,3,4\n")
    assert read_edges(path) == [Edge(8, Point(1.0, 2.0), Point(3.0, 4.0))]


def test_read_edges_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_edges(tmp_path / "absent.csv")


def test_read_trace_round_trip(tmp_path):
    points = [Point(0.25, 1.0), Point(-3.5, 2.75), Point(10.0, 0.0)]
    text = "".join(f"{p.x},{p.y}\n" for p in points)
    path = _write(tmp_path, "trace.csv", text)
    assert read_trace(path) == points


def test_read_trace_skips_bad_lines(tmp_path):
    path = _write(tmp_path, "trace.csv", "x,y\n1,2\nfoo\n3\n4,5,6\n")
    assert read_trace(path) == [Point(1.0, 2.0), Point(4.0, 5.0)]


def test_read_trace_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_trace(tmp_path / "absent.csv")


def test_read_points_matches_trace(tmp_path):
    path = _write(tmp_path, "trace.csv", "1,2\n3 4\n")
    assert read_points(path) == read_trace(path)
    assert read_points(path)[1] == Point(3.0, 4.0)


def test_read_segments_round_trip(tmp_path):
    segments = [(Point(0.0, 0.0), Point(0.5, 0.0)), (Point(1.0, 1.0), Point(1.0, 1.5))]
    text = "".join(f"{a.x},{a.y},{b.x},{b.y}\n" for a, b in segments)
    path = _write(tmp_path, "edges.csv", text)
    assert read_segments(path) == segments


def test_read_segments_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_segments(tmp_path / "absent.csv")


def test_read_matched_reads_pairs_across_lines(tmp_path):
    path = _write(tmp_path, "matched.txt", "1.00 2.00\n3.00\n4.00 5 6\n")
    assert read_matched(path) == [Point(1.0, 2.0), Point(3.0, 4.0), Point(5.0, 6.0)]


def test_read_matched_stops_at_first_bad_value(tmp_path):
    path = _write(tmp_path, "matched.txt", "1 2\nbad 3\n4 5\n")
    assert read_matched(path) == [Point(1.0, 2.0)]


def test_read_matched_ignores_trailing_odd_value(tmp_path):
    path = _write(tmp_path, "matched.txt", "1 2 3")
    assert read_matched(path) == [Point(1.0, 2.0)]


def test_read_matched_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_matched(tmp_path / "absent.txt")