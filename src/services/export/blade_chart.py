"""Tabulate blade settings for many paper/ratio/border combinations."""

from __future__ import annotations

import logging
from itertools import product
from typing import Iterable, Optional, Sequence

import pandas as pd

from config.paper_catalog import ASPECT_RATIOS, PAPER_SIZES
from utils.error_handling import ErrorCollector
from utils.timing import PhaseTimer

from ..layout_service import BorderLayoutService, BorderSettings

logger = logging.getLogger(__name__)

CHART_COLUMNS = [
    "paper",
    "aspect_ratio",
    "orientation",
    "min_border",
    "paper_width",
    "paper_height",
    "print_width",
    "print_height",
    "left_border",
    "right_border",
    "top_border",
    "bottom_border",
    "left_blade",
    "right_blade",
    "top_blade",
    "bottom_blade",
    "easel_slot",
    "standard_paper",
    "quarter_inch_border",
]


def default_paper_keys() -> list[str]:
    return [spec.key for spec in PAPER_SIZES if not spec.is_custom]


def default_ratio_keys() -> list[str]:
    return [spec.key for spec in ASPECT_RATIOS if not spec.is_custom]


def build_blade_chart(
    paper_keys: Optional[Sequence[str]] = None,
    ratio_keys: Optional[Sequence[str]] = None,
    min_borders: Iterable[float] = (0.5,),
    landscape: bool = True,
    service: Optional[BorderLayoutService] = None,
) -> pd.DataFrame:
    """One row per (paper, ratio, border) combination with a valid layout.

    Combinations without a layout, or with settings the service rejects, are
    skipped; their messages are kept in ``df.attrs["errors"]``.
    """
    service = service or BorderLayoutService()
    papers = list(paper_keys) if paper_keys else default_paper_keys()
    ratios = list(ratio_keys) if ratio_keys else default_ratio_keys()
    borders = list(min_borders)

    collector = ErrorCollector("blade chart")
    timer = PhaseTimer({"combinations": len(papers) * len(ratios) * len(borders)})
    rows = []

    with timer.measure("calculate"):
        for paper, ratio, border in product(papers, ratios, borders):
            context = f"{paper} / {ratio} / {border:g} in"
            with collector.catch(context):
                settings = BorderSettings(
                    paper_size=paper,
                    aspect_ratio=ratio,
                    min_border=border,
                    last_valid_min_border=border,
                    is_landscape=landscape,
                )
                calc = service.calculate(settings)
                if not calc.is_feasible:
                    collector.add_error(f"{context}: no valid layout")
                    continue

                snap = service.snap_to_quarter_inch(settings)
                rows.append(
                    {
                        "paper": paper,
                        "aspect_ratio": ratio,
                        "orientation": "landscape" if landscape else "portrait",
                        "min_border": border,
                        "paper_width": calc.paper_width,
                        "paper_height": calc.paper_height,
                        "print_width": calc.print_width,
                        "print_height": calc.print_height,
                        "left_border": calc.left_border,
                        "right_border": calc.right_border,
                        "top_border": calc.top_border,
                        "bottom_border": calc.bottom_border,
                        "left_blade": calc.left_blade_reading,
                        "right_blade": calc.right_blade_reading,
                        "top_blade": calc.top_blade_reading,
                        "bottom_blade": calc.bottom_blade_reading,
                        "easel_slot": calc.easel_size_label,
                        "standard_paper": not calc.is_non_standard_paper_size,
                        "quarter_inch_border": snap.min_border if snap.found else None,
                    }
                )

    with timer.measure("assemble"):
        df = pd.DataFrame(rows, columns=CHART_COLUMNS)
        df.attrs["errors"] = list(collector.errors)

    logger.info(
        collector.get_summary(),
        extra={
            "rows": len(df),
            "phase_timings": timer.as_list(),
            "duration": timer.total(),
        },
    )
    return df
