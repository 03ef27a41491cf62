import pytest

from conjure_visualizer.layout import MonospaceMetrics


def test_monospace_lines_are_stacked():
    metrics = MonospaceMetrics(char_width_ratio=0.5, line_height_ratio=1.25)
    lines = metrics("ab\nabcd", 8.0)
    assert [line.width for line in lines] == [8.0, 16.0]
    assert [line.height for line in lines] == [10.0, 10.0]
    assert [line.offset.tolist() for line in lines] == [[0.0, 0.0], [0.0, -10.0]]


def test_empty_text_gives_one_empty_line():
    lines = MonospaceMetrics()("", 10.0)
    assert len(lines) == 1
    assert lines[0].width == 0.0
    assert lines[0].height == pytest.approx(12.0)
