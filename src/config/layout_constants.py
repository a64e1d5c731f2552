"""Tolerances, precision and limits shared by the border layout engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutTolerances:
    """Explicit epsilons for every "is this equal/aligned" comparison."""

    alignment: float = 1e-3
    """Max distance (in) from a quarter-inch multiple that still counts as aligned"""

    search: float = 1e-4
    """Slack for multiplier truncation and candidate border comparisons"""

    catalog: float = 1e-3
    """Max difference (in) for a paper edge to match an easel slot edge"""

    aspect: float = 1e-6
    """Relative tolerance for aspect ratio preservation checks"""


@dataclass(frozen=True)
class LayoutLimits:
    """Physical increments and input ranges."""

    quarter_inch: float = 0.25
    decimal_places: int = 2

    offset_min: float = -3.0
    offset_max: float = 3.0

    # Accepted minimum border; larger values fall back to the last valid one
    border_min: float = 0.0
    border_max: float = 6.0

    # Optimal border scan (border snapping around a starting value)
    snap_search_span: float = 0.5
    snap_search_step: float = 0.01
    snap_step_divisor: int = 100
    snap_lower_bound: float = 0.01


@dataclass(frozen=True)
class AdvisoryThresholds:
    """Below these a layout still works but gets a cautionary warning."""

    min_blade_reading: float = 0.125
    """Blades closer than this to the paper edge trim unreliably"""

    min_trim_border: float = 0.25

    min_paper_edge: float = 4.0
    """Smallest practical custom paper edge"""


@dataclass(frozen=True)
class BorderDefaults:
    """Starting values for a fresh calculator session."""

    min_border: float = 0.5
    custom_paper_width: float = 13.0
    custom_paper_height: float = 10.0
    custom_aspect_width: float = 2.0
    custom_aspect_height: float = 3.0


TOLERANCES = LayoutTolerances()
LIMITS = LayoutLimits()
ADVISORY = AdvisoryThresholds()
DEFAULTS = BorderDefaults()

# 0.01 quantum for Decimal rounding, derived from LIMITS.decimal_places
DISPLAY_QUANTUM = f"1e-{LIMITS.decimal_places}"
