"""Resolve calculator settings into engine calls.

Turns named paper sizes and aspect ratios, orientation flags and a possibly
out-of-range minimum border into the plain numbers the engine works on, then
attaches the resulting warnings to the ``BorderCalculation``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from config.layout_constants import ADVISORY, DEFAULTS, LIMITS
from config.paper_catalog import get_aspect_ratio, get_paper_size
from processing import (
    EASEL_CATALOG,
    BorderCalculation,
    QuarterInchResult,
    calculate_optimal_min_border,
    compute_border_calculation,
    fit_print_size,
    search_quarter_inch_min_border,
)
from processing.precision import all_finite, all_positive, round_display
from utils.error_handling import timed

logger = logging.getLogger(__name__)


CLOSE_BLADE_WARNING = "Blade positions may be too close to paper edge for reliable trimming."


class LayoutInputError(ValueError):
    """Settings that cannot be turned into a layout (unknown key, bad custom size)."""


@dataclass
class BorderSettings:
    """Everything the calculator form holds. Dimensions in inches."""

    paper_size: str = "8x10"
    aspect_ratio: str = "3:2"
    custom_paper_width: float = DEFAULTS.custom_paper_width
    custom_paper_height: float = DEFAULTS.custom_paper_height
    custom_aspect_width: float = DEFAULTS.custom_aspect_width
    custom_aspect_height: float = DEFAULTS.custom_aspect_height
    min_border: float = DEFAULTS.min_border
    last_valid_min_border: float = DEFAULTS.min_border
    enable_offset: bool = False
    ignore_min_border: bool = False
    horizontal_offset: float = 0.0
    vertical_offset: float = 0.0
    is_landscape: bool = True
    is_ratio_flipped: bool = False


# 35mm on 8x10, 6x9in
DEFAULT_BORDER_SETTINGS = BorderSettings()


@dataclass(frozen=True)
class ResolvedLayout:
    """Oriented numeric inputs for the engine plus pre-calculation warnings."""

    paper_width: float
    paper_height: float
    ratio_width: float
    ratio_height: float
    min_border: float
    is_custom_paper: bool = False
    exceeds_easel: bool = False
    min_border_warning: Optional[str] = None
    paper_size_warning: Optional[str] = None


def resolve_paper(settings: BorderSettings) -> Tuple[float, float, bool]:
    """Unoriented paper (width, height, is_custom)."""
    spec = get_paper_size(settings.paper_size)
    if spec is None:
        raise LayoutInputError(f"Unknown paper size '{settings.paper_size}'")

    if spec.is_custom:
        width, height = settings.custom_paper_width, settings.custom_paper_height
        if not all_positive(width, height):
            raise LayoutInputError(
                f"Custom paper size must be positive, got {width}x{height}"
            )
        return float(width), float(height), True

    return spec.width, spec.height, False


def resolve_ratio(
    settings: BorderSettings, paper_w: float, paper_h: float
) -> Tuple[float, float]:
    """Aspect ratio for already oriented paper, with the flip applied."""
    spec = get_aspect_ratio(settings.aspect_ratio)
    if spec is None:
        raise LayoutInputError(f"Unknown aspect ratio '{settings.aspect_ratio}'")

    if spec.is_even_borders:
        return paper_w, paper_h

    if spec.is_custom:
        width, height = settings.custom_aspect_width, settings.custom_aspect_height
        if not all_positive(width, height):
            raise LayoutInputError(
                f"Custom aspect ratio must be positive, got {width}:{height}"
            )
    else:
        width, height = spec.width, spec.height

    if settings.is_ratio_flipped:
        return float(height), float(width)
    return float(width), float(height)


def validate_min_border(
    min_border: float, last_valid: float, paper_w: float, paper_h: float
) -> Tuple[float, Optional[str]]:
    """Accept the border or fall back to the last valid one with a warning.

    An accepted border below the trimming threshold keeps a cautionary warning.
    """
    max_border = min(paper_w, paper_h) / 2

    if not all_finite(min_border):
        return last_valid, f"Border is not a number; using {last_valid}."
    if min_border < LIMITS.border_min:
        return last_valid, f"Border cannot be negative; using {last_valid}."
    if min_border > LIMITS.border_max or (max_border > 0 and min_border >= max_border):
        return last_valid, f"Minimum border too large; using {last_valid}."
    if min_border < ADVISORY.min_trim_border:
        return min_border, (
            f"Minimum border below {ADVISORY.min_trim_border:g} in may result in "
            f"difficult trimming."
        )
    return min_border, None


def resolve_layout(settings: BorderSettings) -> ResolvedLayout:
    paper_w, paper_h, is_custom = resolve_paper(settings)

    paper_size_warning = None
    max_edge = EASEL_CATALOG.max_dimension
    exceeds_easel = is_custom and (paper_w > max_edge or paper_h > max_edge)
    if exceeds_easel:
        paper_size_warning = (
            f"Custom paper ({paper_w:g}x{paper_h:g}) exceeds largest standard easel "
            f"({EASEL_CATALOG.largest.label})."
        )
    elif is_custom and min(paper_w, paper_h) < ADVISORY.min_paper_edge:
        paper_size_warning = "Paper size may be too small for practical use."

    if settings.is_landscape:
        paper_w, paper_h = paper_h, paper_w

    ratio_w, ratio_h = resolve_ratio(settings, paper_w, paper_h)
    min_border, min_border_warning = validate_min_border(
        settings.min_border, settings.last_valid_min_border, paper_w, paper_h
    )

    return ResolvedLayout(
        paper_width=paper_w,
        paper_height=paper_h,
        ratio_width=ratio_w,
        ratio_height=ratio_h,
        min_border=min_border,
        is_custom_paper=is_custom,
        exceeds_easel=exceeds_easel,
        min_border_warning=min_border_warning,
        paper_size_warning=paper_size_warning,
    )


class BorderLayoutService:
    """Settings-level entry point used by the CLI and the blade chart export."""

    @timed
    def calculate(self, settings: BorderSettings) -> BorderCalculation:
        layout = resolve_layout(settings)

        offset_h = settings.horizontal_offset if settings.enable_offset else 0.0
        offset_v = settings.vertical_offset if settings.enable_offset else 0.0

        calc = compute_border_calculation(
            layout.paper_width,
            layout.paper_height,
            layout.ratio_width,
            layout.ratio_height,
            layout.min_border,
            offset_h,
            offset_v,
            honor_min_border=not settings.ignore_min_border,
        )
        calc = replace(
            calc,
            # An oversize custom sheet is reported through the warning instead
            is_non_standard_paper_size=(
                calc.is_non_standard_paper_size and not layout.exceeds_easel
            ),
            min_border_warning=layout.min_border_warning,
            paper_size_warning=layout.paper_size_warning,
        )
        if calc.is_feasible and calc.blade_warning is None and any(
            reading < ADVISORY.min_blade_reading
            for reading in calc.blade_readings().values()
        ):
            calc = replace(calc, blade_warning=CLOSE_BLADE_WARNING)

        logger.debug(
            "Border calculation",
            extra={
                "paper": f"{layout.paper_width:g}x{layout.paper_height:g}",
                "ratio": f"{layout.ratio_width:g}:{layout.ratio_height:g}",
                "min_border": layout.min_border,
                "print": f"{calc.print_width}x{calc.print_height}",
                "feasible": calc.is_feasible,
            },
        )
        for warning in calc.warnings:
            logger.info(warning, extra={"event": "layout_warning"})

        return calc

    @timed
    def snap_to_quarter_inch(self, settings: BorderSettings) -> QuarterInchResult:
        """Quarter-inch search on the resolved (oriented, validated) geometry."""
        layout = resolve_layout(settings)
        size = fit_print_size(
            layout.paper_width,
            layout.paper_height,
            layout.ratio_width,
            layout.ratio_height,
            layout.min_border,
        )
        result = search_quarter_inch_min_border(
            layout.paper_width,
            layout.paper_height,
            layout.ratio_width,
            layout.ratio_height,
            layout.min_border,
            round_display(size.print_width),
            round_display(size.print_height),
        )
        logger.debug(
            "Quarter-inch search",
            extra={"status": result.status.value, "min_border": result.min_border},
        )
        return result

    def optimal_min_border(self, settings: BorderSettings) -> float:
        """Border near the current one whose borders snap to quarter inches."""
        layout = resolve_layout(settings)
        return calculate_optimal_min_border(
            layout.paper_width,
            layout.paper_height,
            layout.ratio_width,
            layout.ratio_height,
            layout.min_border,
        )
