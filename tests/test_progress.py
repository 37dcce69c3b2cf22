import io
import pytest

from syspulse.progress import ScanProgressReporter


def test_render_empty_and_full():
    r = ScanProgressReporter(io.StringIO())
    assert r.render(0, 7) == "[" + " " * 50 + "] 0%"
    assert r.render(7, 7) == "[" + "#" * 50 + "] 100%"


def test_render_half():
    r = ScanProgressReporter(io.StringIO())
    assert r.render(25, 50) == "[" + "#" * 25 + " " * 25 + "] 50%"


def test_render_rounds_down():
    r = ScanProgressReporter(io.StringIO())
    line = r.render(1, 3)
    assert line.count("#") == 16
    assert line.endswith("] 33%")
    assert r.render(2, 3).endswith("] 66%")


def test_render_zero_total_rejected():
    with pytest.raises(ValueError):
        ScanProgressReporter(io.StringIO()).render(0, 0)


def test_report_redraws_single_line():
    out = io.StringIO()
    r = ScanProgressReporter(out)
    for i in range(1, 4):
        r(i, 3)
    text = out.getvalue()
    assert "\n" not in text
    assert text.count("\rScanning folders: [") == 3
    assert text.endswith("] 100%")
    r.finish()
    assert out.getvalue().endswith("100%\n")


def test_finish_without_report_writes_nothing():
    out = io.StringIO()
    ScanProgressReporter(out).finish()
    assert out.getvalue() == ""
