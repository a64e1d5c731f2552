"""Largest aspect-preserving print that fits inside a minimum border."""

from __future__ import annotations

from .layout_models import BorderCalculation, PrintSize
from .precision import all_finite, all_positive, round_display

NO_PRINT = PrintSize(0.0, 0.0)


def fit_print_size(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    min_border: float,
) -> PrintSize:
    """Full-precision print size, or a 0x0 print when the layout is infeasible.

    The binding axis is the one with the smaller available/ratio quotient; both
    print edges are derived from that single scale factor so the aspect ratio
    is exact.
    """
    if not all_positive(paper_w, paper_h, ratio_w, ratio_h):
        return NO_PRINT
    if not all_finite(min_border) or min_border < 0:
        return NO_PRINT
    if 2 * min_border >= min(paper_w, paper_h):
        return NO_PRINT

    available_w = paper_w - 2 * min_border
    available_h = paper_h - 2 * min_border
    scale = min(available_w / ratio_w, available_h / ratio_h)

    return PrintSize(ratio_w * scale, ratio_h * scale)


def compute_print_size(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    min_border: float,
) -> PrintSize:
    """Print size rounded to display precision."""
    size = fit_print_size(paper_w, paper_h, ratio_w, ratio_h, min_border)
    return PrintSize(round_display(size.print_width), round_display(size.print_height))


def compute_borders(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    min_border: float,
) -> BorderCalculation:
    """Centered layout without offsets or blade readings.

    Infeasible input gives a calculation with a 0x0 print and zero borders.
    """
    size = fit_print_size(paper_w, paper_h, ratio_w, ratio_h, min_border)

    if not size.is_feasible:
        return BorderCalculation(
            paper_width=paper_w,
            paper_height=paper_h,
            ratio_width=ratio_w,
            ratio_height=ratio_h,
            min_border=min_border,
            print_width=0.0,
            print_height=0.0,
            left_border=0.0,
            right_border=0.0,
            top_border=0.0,
            bottom_border=0.0,
        )

    border_w = round_display((paper_w - size.print_width) / 2)
    border_h = round_display((paper_h - size.print_height) / 2)

    return BorderCalculation(
        paper_width=paper_w,
        paper_height=paper_h,
        ratio_width=ratio_w,
        ratio_height=ratio_h,
        min_border=min_border,
        print_width=round_display(size.print_width),
        print_height=round_display(size.print_height),
        left_border=border_w,
        right_border=border_w,
        top_border=border_h,
        bottom_border=border_h,
    )
