import pytest

from routeart.geometry import Point
from routeart.svg import BoundingBox, bounding_box, main, render_svg


def test_bounding_box_extremes():
    box = bounding_box([Point(3, -1), Point(-2, 4), Point(0, 0)])
    assert box == BoundingBox(-2, -1, 3, 4)


def test_bounding_box_empty_raises():
    with pytest.raises(ValueError):
        bounding_box([])


def test_padded_grows_by_longer_side():
    box = BoundingBox(0, 0, 10, 5).padded(0.1)
    assert box == BoundingBox(-1, -1, 11, 6)


def test_padded_zero_is_identity():
    box = BoundingBox(1, 2, 3, 4)
    assert box.padded(0.0) == box


def test_render_counts_and_format():
    segments = [(Point(0, 0), Point(1, 0)), (Point(0, 0), Point(0, 1))]
    trace = [Point(0.1, 0.1), Point(0.5, 0.2), Point(0.9, 0.1)]
    matched = [Point(0.1, 0), Point(0.5, 0)]
    doc = render_svg(segments, trace, matched)
    assert doc.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="')
    assert doc.endswith("</svg>\n")
    assert doc.count('stroke="black" stroke-width="0.030"') == 2
    assert doc.count('stroke="red" stroke-width="0.050"') == 2
    assert doc.count('r="0.080" fill="blue"') == 2
    assert '<line x1="0.000" y1="0.000" x2="1.000" y2="0.000"' in doc


def test_render_empty_raises():
    with pytest.raises(ValueError):
        render_svg([], [], [])


def test_main_writes_file(tmp_path, capsys):
    (tmp_path / "edges.csv").write_text("0,0,1,0\n")
    (tmp_path / "trace.csv").write_text("0.2,0.3\n0.8,0.1\n")
    (tmp_path / "matched.txt").write_text("0.20 0.00\n0.80 0.00\n")
    out = tmp_path / "map.svg"
    code = main([
        "--edges", str(tmp_path / "edges.csv"),
        "--trace", str(tmp_path / "trace.csv"),
        "--matched", str(tmp_path / "matched.txt"),
        "--output", str(out),
    ])
    assert code == 0
    text = out.read_text()
    assert text.count("<circle") == 2
    assert text.count("<line") == 2
    assert "Generated" in capsys.readouterr().out


def test_main_missing_input(tmp_path, capsys):
    assert main(["--edges", str(tmp_path / "none.csv")]) == 1
    assert "Could not open file" in capsys.readouterr().err