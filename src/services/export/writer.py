"""Excel/CSV writing for exported tables."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pandas as pd

EXPORT_FORMATS = ("csv", "excel")


def infer_format(output_path: Path) -> str:
    """'excel' for .xlsx/.xlsm paths, 'csv' otherwise."""
    return "excel" if Path(output_path).suffix.lower() in {".xlsx", ".xlsm"} else "csv"


class ExportWriter:
    """Writes a DataFrame to Excel or CSV with a simple progress callback."""

    def __init__(self, progress_callback: Optional[Callable[[str, int, int], None]] = None):
        self.progress_callback = progress_callback or (lambda msg, curr, total: None)

    def write_dataset(
        self,
        df: pd.DataFrame,
        output_path: Path,
        format: Optional[str] = None,
        sheet_name: str = "Blade Chart",
    ) -> Path:
        output_path = Path(output_path)
        format = format or infer_format(output_path)
        if format not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported export format '{format}'")

        total_steps = 2
        self.progress_callback("Writing file...", 1, total_steps)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if format == "excel":
            df.to_excel(output_path, index=False, sheet_name=sheet_name, engine="openpyxl")
        else:
            df.to_csv(output_path, index=False)

        self.progress_callback("Export complete!", total_steps, total_steps)
        return output_path
