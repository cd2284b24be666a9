# tests/test_report.py

import io
import math

import pytest

from trigulp.aggregate import MicroSummary, RangeSummary
from trigulp.core.errors import ReportFormatError
from trigulp.core.types import Function
from trigulp.evaluator import Diagnostic
from trigulp.report import format_diagnostic, format_range, read_report, write_report


def _summary(lo=0.5, hi=0.75):
    return RangeSummary(
        limits=(lo, hi),
        improvements=MicroSummary(3, 7, math.inf, math.inf),
        worsenings=MicroSummary(0, 0, 0.0, math.nan),
        mean=math.inf,
    )


def test_diagnostic_line():
    d = Diagnostic(
        verdict="better",
        x=0.5,
        fn=Function.OMC,
        about="Mantissas differ in  1 bits",
        distance=1,
        old=0.25,
        new=0.125,
        accurate=0.125,
    )
    line = format_diagnostic(d)
    assert line.startswith("better  5.00000000000000000000e-01 omc:    Mantissas differ in  1 bits ")
    fields = line.split()
    assert fields[8] == "1"
    assert [float(f) for f in fields[9:]] == [0.25, 0.125, 0.125]


def test_range_block():
    lines = format_range(_summary()).splitlines()
    assert len(lines) == 4
    assert lines[0].split() == ["5.00000000000000000000e-01", "7.50000000000000000000e-01"]
    assert lines[1].split()[:2] == ["3", "7"]
    assert lines[2].split()[3] == "nan"
    assert lines[3].strip() == "inf"


def test_layout_and_read_back():
    out = io.StringIO()
    write_report(out, 32, {Function.SIN: [_summary()], Function.COS: [], Function.OMC: [_summary(-1.0, -0.5)]})
    text = out.getvalue()
    assert text.startswith("\n\nPointsInOneRange:    32\n\n\nsin:\n")
    assert "cos:\n\n\nomc:\n" in text

    points, summaries = read_report("ignored diagnostic line\n" + text)
    assert points == 32
    assert summaries[Function.COS] == []
    (s,) = summaries[Function.SIN]
    assert s.limits == (0.5, 0.75)
    assert s.improvements.count == 3
    assert s.improvements.max_fscore == math.inf
    assert math.isnan(s.worsenings.quadratic_mean)
    assert summaries[Function.OMC][0].limits == (-1.0, -0.5)


def test_missing_header():
    with pytest.raises(ReportFormatError, match="PointsInOneRange"):
        read_report("sin:\n")


def test_truncated_block():
    text = "PointsInOneRange: 32\nsin:\n1.0 2.0\n1 1 1.0 1.0\n\n"
    with pytest.raises(ReportFormatError, match="expected 4"):
        read_report(text)


def test_block_before_function_name():
    text = "PointsInOneRange: 32\n1.0 2.0\n1 1 1.0 1.0\n0 0 0.0 nan\n1.0\n"
    with pytest.raises(ReportFormatError, match="before any function"):
        read_report(text)


def test_range_plot_series():
    np = pytest.importorskip("numpy")
    from trigulp.diagnostics.range_plot import build_series, totals

    reports = [_summary(0.0, 1.0), _summary(2.0, 3.0)]
    mid, better, worse, mean = build_series(np, reports)
    assert list(mid) == [0.5, 2.5]
    assert list(better) == [3, 3]
    assert list(worse) == [0, 0]
    assert all(math.isnan(m) for m in mean)
    assert totals({Function.SIN: reports, Function.COS: []}) == {Function.SIN: (6, 0), Function.COS: (0, 0)}
