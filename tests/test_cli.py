"""Tests for the easel-layout command line."""

import pandas as pd
import pytest

import main

pytestmark = pytest.mark.usefixtures("quiet_logging")


def test_layout_default_preset(capsys):
    assert main.main(["layout"]) == main.EXIT_OK

    out = capsys.readouterr().out
    assert "Paper:  10 x 8 in" in out
    assert "Print:  9.00 x 6.00 in" in out
    assert "Borders: left 0.50  right 0.50  top 1.00  bottom 1.00" in out
    assert "Easel:  8x10 (standard)" in out


def test_layout_reports_fallback_warning(capsys):
    assert main.main(["layout", "--portrait", "--border", "4.5"]) == main.EXIT_OK

    out = capsys.readouterr().out
    assert "! Minimum border too large; using 0.5." in out
    assert "Print:  7.00 x 4.67 in" in out


def test_layout_custom_paper(capsys):
    assert main.main(["layout", "--custom-paper", "13x10", "--portrait"]) == main.EXIT_OK

    out = capsys.readouterr().out
    assert "Print:  12.00 x 8.00 in" in out
    assert "(non-standard)" in out


def test_layout_with_offsets(capsys):
    args = ["layout", "--offset-v", "0.4", "--ignore-min-border"]
    assert main.main(args) == main.EXIT_OK

    out = capsys.readouterr().out
    assert "top 0.60  bottom 1.40" in out


def test_unknown_paper_is_input_error(capsys):
    assert main.main(["layout", "--paper", "bogus"]) == main.EXIT_INPUT_ERROR

    err = capsys.readouterr().err
    assert "Invalid settings - Unknown paper size 'bogus'" in err


def test_snap_finds_quarter_inch_border(capsys):
    assert main.main(["snap", "--portrait"]) == main.EXIT_OK

    out = capsys.readouterr().out
    assert "Use a 0.625 in minimum border for a 6.75 x 4.50 in print." in out


def test_snap_already_aligned(capsys):
    assert main.main(["snap"]) == main.EXIT_OK
    assert "already falls on quarter inches" in capsys.readouterr().out


def test_snap_no_solution(capsys):
    assert main.main(["snap", "--ratio", "65:24"]) == main.EXIT_NO_RESULT
    assert "No quarter-inch print size found" in capsys.readouterr().out


def test_classify(capsys):
    assert main.main(["classify", "9x9"]) == main.EXIT_OK

    out = capsys.readouterr().out
    assert "9 x 9 in: non-standard" in out
    assert "Slot:  11x14 (11 x 14 in)" in out
    assert "aligned left" in out


def test_classify_rejects_malformed_size():
    with pytest.raises(SystemExit) as excinfo:
        main.main(["classify", "nine"])
    assert excinfo.value.code == 2


def test_chart_to_stdout(capsys):
    args = ["chart", "--papers", "8x10", "--ratios", "3:2,1:1"]
    assert main.main(args) == main.EXIT_OK

    out = capsys.readouterr().out
    assert "easel_slot" in out
    assert "landscape" in out


def test_chart_to_excel(tmp_path, capsys):
    output = tmp_path / "chart.xlsx"
    args = ["chart", "--papers", "8x10,11x14", "--ratios", "3:2", "--output", str(output)]
    assert main.main(args) == main.EXIT_OK

    assert "Wrote 2 rows" in capsys.readouterr().out
    assert len(pd.read_excel(output)) == 2


def test_chart_without_valid_rows(capsys):
    args = ["chart", "--papers", "8x10", "--ratios", "1:1", "--borders", "4.5"]
    assert main.main(args) == main.EXIT_NO_RESULT

    out = capsys.readouterr().out
    assert "no valid layout" in out


def test_sizes(capsys):
    assert main.main(["sizes"]) == main.EXIT_OK

    out = capsys.readouterr().out
    assert "even-borders" in out
    assert "20x24" in out


def test_no_command_prints_help(capsys):
    assert main.main([]) == main.EXIT_INPUT_ERROR
    assert "usage: easel-layout" in capsys.readouterr().out
