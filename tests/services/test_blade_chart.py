"""Tests for blade chart generation and export writing."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pandas as pd
import pytest

from services.export import CHART_COLUMNS, ExportWriter, build_blade_chart, infer_format
from services.export.blade_chart import default_paper_keys, default_ratio_keys


@pytest.fixture
def small_chart() -> pd.DataFrame:
    return build_blade_chart(["8x10", "11x14"], ["3:2", "1:1"], [0.5])


class TestBuildBladeChart:
    """Tests for build_blade_chart."""

    def test_one_row_per_combination(self, small_chart):
        assert list(small_chart.columns) == CHART_COLUMNS
        assert len(small_chart) == 4
        assert small_chart.attrs["errors"] == []

    def test_row_values(self, small_chart):
        row = small_chart[
            (small_chart["paper"] == "8x10") & (small_chart["aspect_ratio"] == "3:2")
        ].iloc[0]

        assert row["orientation"] == "landscape"
        assert (row["print_width"], row["print_height"]) == (9.0, 6.0)
        assert (row["left_blade"], row["top_blade"]) == (0.5, 1.0)
        assert row["easel_slot"] == "8x10"
        assert bool(row["standard_paper"])
        # 9x6 is already on quarter inches
        assert pd.isna(row["quarter_inch_border"])

    def test_quarter_inch_suggestion(self, small_chart):
        row = small_chart[
            (small_chart["paper"] == "11x14") & (small_chart["aspect_ratio"] == "3:2")
        ].iloc[0]

        assert row["print_width"] == 13.0
        assert row["quarter_inch_border"] == pytest.approx(0.625)

    def test_portrait_orientation(self):
        df = build_blade_chart(["8x10"], ["3:2"], [0.5], landscape=False)

        assert df.iloc[0]["orientation"] == "portrait"
        assert df.iloc[0]["print_height"] == 4.67

    def test_infeasible_combination_is_skipped(self):
        df = build_blade_chart(["8x10", "20x24"], ["1:1"], [4.5])

        assert list(df["paper"]) == ["20x24"]
        assert len(df.attrs["errors"]) == 1
        assert "8x10 / 1:1 / 4.5 in" in df.attrs["errors"][0]

    def test_summary_logged_with_timings(self, caplog):
        caplog.set_level(logging.INFO, logger="services.export.blade_chart")

        build_blade_chart(["8x10"], ["3:2"], [0.5])

        record = [r for r in caplog.records if r.name == "services.export.blade_chart"][-1]
        assert record.rows == 1
        assert record.duration >= 0
        assert record.phase_timings

    def test_unknown_key_is_collected(self):
        df = build_blade_chart(["8x10", "9x12"], ["3:2"], [0.5])

        assert len(df) == 1
        assert any("LayoutInputError" in error for error in df.attrs["errors"])

    def test_defaults_cover_every_fixed_size(self):
        assert "custom" not in default_paper_keys()
        assert "custom" not in default_ratio_keys()
        assert "even-borders" in default_ratio_keys()


class TestExportWriter:
    """Tests for ExportWriter."""

    @pytest.mark.parametrize(
        "name, expected",
        [("chart.xlsx", "excel"), ("chart.XLSM", "excel"), ("chart.csv", "csv"), ("chart", "csv")],
    )
    def test_infer_format(self, name, expected):
        assert infer_format(Path(name)) == expected

    def test_write_csv(self, small_chart, tmp_path):
        path = ExportWriter().write_dataset(small_chart, tmp_path / "out" / "chart.csv")

        assert path.exists()
        written = pd.read_csv(path)
        assert list(written.columns) == CHART_COLUMNS
        assert len(written) == len(small_chart)

    def test_write_excel(self, small_chart, tmp_path):
        path = ExportWriter().write_dataset(small_chart, tmp_path / "chart.xlsx")

        written = pd.read_excel(path, sheet_name="Blade Chart")
        assert len(written) == len(small_chart)
        assert written.loc[0, "paper"] == small_chart.loc[0, "paper"]

    def test_progress_callback(self, small_chart, tmp_path):
        progress = MagicMock()
        ExportWriter(progress).write_dataset(small_chart, tmp_path / "chart.csv")

        assert progress.call_count == 2
        progress.assert_called_with("Export complete!", 2, 2)

    def test_unknown_format(self, small_chart, tmp_path):
        with pytest.raises(ValueError):
            ExportWriter().write_dataset(small_chart, tmp_path / "chart.csv", format="json")
