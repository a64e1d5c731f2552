"""Search for a minimum border whose print lands on quarter-inch increments.

Easel scales are marked in quarter inches, so a print of 7 x 4.67 in cannot be
set precisely. ``search_quarter_inch_min_border`` walks whole multiples of the
aspect ratio's quarter-inch unit cell, largest first, and asks the geometry
solver what print each candidate border really produces.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from config.layout_constants import LIMITS, TOLERANCES

from .layout_models import QuarterInchResult, QuarterInchStatus
from .precision import all_finite, all_positive, is_quarter_increment, round_display
from .print_geometry import fit_print_size

logger = logging.getLogger(__name__)


def search_quarter_inch_min_border(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    current_min_border: float,
    print_w: float,
    print_h: float,
) -> QuarterInchResult:
    """Tagged search result distinguishing "already aligned" from "no solution"."""
    if not all_positive(paper_w, paper_h, ratio_w, ratio_h, print_w, print_h):
        return QuarterInchResult(QuarterInchStatus.INVALID_INPUT)
    if not all_finite(current_min_border):
        return QuarterInchResult(QuarterInchStatus.INVALID_INPUT)

    if is_quarter_increment(print_w) and is_quarter_increment(print_h):
        return QuarterInchResult(
            QuarterInchStatus.ALREADY_ALIGNED,
            print_width=print_w,
            print_height=print_h,
        )

    eps = TOLERANCES.search
    quarter = LIMITS.quarter_inch
    unit_w = ratio_w * quarter
    unit_h = ratio_h * quarter

    multiplier = min(
        math.floor((print_w + eps) / unit_w),
        math.floor((print_h + eps) / unit_h),
    )

    def evaluate(candidate: float) -> Optional[QuarterInchResult]:
        if not math.isfinite(candidate) or candidate < current_min_border - eps:
            return None

        size = fit_print_size(paper_w, paper_h, ratio_w, ratio_h, candidate)
        if not size.is_feasible:
            return None
        if size.print_width > print_w + quarter or size.print_height > print_h + quarter:
            return None
        if not (
            is_quarter_increment(size.print_width)
            and is_quarter_increment(size.print_height)
        ):
            return None
        if abs(candidate - current_min_border) < eps:
            return None

        return QuarterInchResult(
            QuarterInchStatus.FOUND,
            min_border=max(candidate, 0.0),
            print_width=size.print_width,
            print_height=size.print_height,
        )

    while multiplier > 0:
        width_candidate = (paper_w - unit_w * multiplier) / 2
        found = evaluate(width_candidate)
        if found is not None:
            logger.debug(
                "Quarter-inch border found on width axis",
                extra={"multiplier": multiplier, "min_border": found.min_border},
            )
            return found

        height_candidate = (paper_h - unit_h * multiplier) / 2
        if abs(height_candidate - width_candidate) > eps:
            found = evaluate(height_candidate)
            if found is not None:
                logger.debug(
                    "Quarter-inch border found on height axis",
                    extra={"multiplier": multiplier, "min_border": found.min_border},
                )
                return found

        multiplier -= 1

    return QuarterInchResult(QuarterInchStatus.NO_SOLUTION)


def find_quarter_inch_min_border(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    current_min_border: float,
    print_w: float,
    print_h: float,
) -> Optional[float]:
    """Alternative minimum border at full precision, or None.

    None covers invalid input, an already aligned print and no solution alike;
    use ``search_quarter_inch_min_border`` to tell them apart.
    """
    result = search_quarter_inch_min_border(
        paper_w, paper_h, ratio_w, ratio_h, current_min_border, print_w, print_h
    )
    return result.min_border if result.found else None


def calculate_optimal_min_border(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    start: float,
) -> float:
    """Border near ``start`` whose four centered borders sit closest to quarter inches.

    Scans ``start`` +/- the configured span. Ties go to the smallest border.
    Returns ``start`` unchanged when the ratio or paper is unusable.
    """
    if not all_positive(paper_w, paper_h, ratio_w, ratio_h) or not all_finite(start):
        return start

    ratio = ratio_w / ratio_h
    lower = max(LIMITS.snap_lower_bound, start - LIMITS.snap_search_span)
    upper = start + LIMITS.snap_search_span
    step = max(LIMITS.snap_search_step, (upper - lower) / LIMITS.snap_step_divisor)

    count = int(math.floor((upper - lower) / step + 1e-9)) + 1
    candidates = lower + step * np.arange(count)

    available_w = paper_w - 2 * candidates
    available_h = paper_h - 2 * candidates
    valid = (available_w > 0) & (available_h > 0)
    if not valid.any():
        return round_display(start)

    with np.errstate(divide="ignore", invalid="ignore"):
        wider = available_w / available_h > ratio
    print_w = np.where(wider, available_h * ratio, available_w)
    print_h = np.where(wider, available_h, available_w / ratio)

    quarter = LIMITS.quarter_inch
    score = np.zeros(count)
    for border in ((paper_w - print_w) / 2, (paper_h - print_h) / 2):
        remainder = np.mod(border, quarter)
        # Each axis has two equal borders
        score += 2 * np.minimum(remainder, quarter - remainder)
    score[~valid] = np.inf

    best = int(np.flatnonzero(score <= score.min() + 1e-9)[0])
    return round_display(float(candidates[best]))
