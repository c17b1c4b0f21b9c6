import io
import math
from report import ExtrapolationReport, format_row, HEADER, RULE, ROW_FORMAT


def test_header_layout():
    assert HEADER == "  x + h      approximation    f(x + h)     error"
    assert RULE == "------------------------------------------------"


def test_format_row_widths():
    line = format_row(5.0, 38.0, 38.0)
    assert line == "  5.000" + " " * 13 + "38.000" + " " * 6 + "38.000" + " " * 5 + "0.000"
    assert len(line) == 7 + 19 + 12 + 10


def test_format_row_keeps_sign_of_tiny_error():
    assert format_row(5.001, 38.012002, 38.012001).endswith("    -0.000")


def test_format_row_wide_values_overflow_field():
    line = format_row(12345.678, 1.0, 2.0)
    assert line.startswith("12345.678")


def test_row_format_fields():
    assert ROW_FORMAT == "%7.3f%19.3f%12.3f%10.3f"
    assert format_row(1.5, -2.25, 3.0) == ROW_FORMAT % (1.5, -2.25, 3.0, 5.25)


def test_format_row_non_finite():
    # inf - inf gives the default NaN, which has its sign bit set on x86
    line = format_row(0.0, math.inf, math.inf)
    assert line.split() == ["0.000", "inf", "inf", "-nan"]
    assert len(line) == 7 + 19 + 12 + 10


def test_format_row_nan_sign():
    negative = format_row(0.0, math.copysign(math.nan, -1.0), 1.0)
    positive = format_row(0.0, math.copysign(math.nan, 1.0), 1.0)
    assert negative[7:26] == "-nan".rjust(19)
    assert positive[7:26] == "nan".rjust(19)
    assert positive[26:38] == "%12.3f" % 1.0


def test_header_written_once():
    buf = io.StringIO()
    report = ExtrapolationReport(buf)
    assert report.first_call
    for i in range(5):
        report.write(float(i), 1.0, 2.0)
    assert not report.first_call

    lines = buf.getvalue().splitlines()
    assert lines[0] == HEADER
    assert lines[1] == RULE
    assert len(lines) == 7
    assert lines.count(HEADER) == 1


def test_write_returns_row_and_computes_error():
    buf = io.StringIO()
    line = ExtrapolationReport(buf).write(1.0, 2.5, 2.0)
    assert line == format_row(1.0, 2.5, 2.0)
    assert line.split()[-1] == "-0.500"


def test_separate_reports_have_separate_headers():
    first, second = io.StringIO(), io.StringIO()
    ExtrapolationReport(first).write(0.0, 0.0, 0.0)
    ExtrapolationReport(second).write(0.0, 0.0, 0.0)
    assert first.getvalue() == second.getvalue()
    assert second.getvalue().startswith(HEADER)


def test_default_stream_is_stdout(capsys):
    ExtrapolationReport().write(0.0, 0.0, 0.0)
    out = capsys.readouterr().out
    assert out == f"{HEADER}\n{RULE}\n{format_row(0.0, 0.0, 0.0)}\n"
