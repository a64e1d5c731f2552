"""Offsets and easel blade readings for a computed layout.

Paper always sits flush against the slot's left and top reference edges, so a
blade reading is the distance from the slot edge to the print edge. For a
standard size the slot is the paper and readings equal the borders; for a
smaller sheet the right/bottom readings also include the empty slot strip.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional

from config.layout_constants import LIMITS, TOLERANCES

from .easel_catalog import classify_paper_size, orient_slot_to_paper
from .layout_models import BorderCalculation, EaselSlot, Offset, OffsetClamp
from .precision import nearly_equal, round_display
from .print_geometry import fit_print_size

OFFSET_RANGE_WARNING = "Offset limited to the easel's adjustment range."
OFFSET_MIN_BORDER_WARNING = "Offset adjusted to honour min-border."
OFFSET_PAPER_WARNING = "Offset adjusted to keep print on paper."


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_offsets(
    paper_w: float,
    paper_h: float,
    print_w: float,
    print_h: float,
    min_border: float,
    horizontal: float,
    vertical: float,
    honor_min_border: bool = False,
) -> OffsetClamp:
    """Limit offsets to the configured range, then to what the paper allows."""
    half_w = (paper_w - print_w) / 2
    half_h = (paper_h - print_h) / 2

    requested_h = horizontal if math.isfinite(horizontal) else 0.0
    requested_v = vertical if math.isfinite(vertical) else 0.0

    ranged_h = _clamp(requested_h, LIMITS.offset_min, LIMITS.offset_max)
    ranged_v = _clamp(requested_v, LIMITS.offset_min, LIMITS.offset_max)

    reserve = min_border if honor_min_border else 0.0
    max_h = max(half_w - reserve, 0.0)
    max_v = max(half_h - reserve, 0.0)

    h = _clamp(ranged_h, -max_h, max_h)
    v = _clamp(ranged_v, -max_v, max_v)

    warning = None
    if not (nearly_equal(h, ranged_h) and nearly_equal(v, ranged_v)):
        warning = OFFSET_MIN_BORDER_WARNING if honor_min_border else OFFSET_PAPER_WARNING
    elif not (
        nearly_equal(ranged_h, horizontal) and nearly_equal(ranged_v, vertical)
    ):
        warning = OFFSET_RANGE_WARNING

    return OffsetClamp(half_w, half_h, h, v, warning)


def _readings(slot_size: float, print_size: float, leading_border: float):
    """Readings for the near and far blade along one axis."""
    centered_gap = (slot_size - print_size) / 2
    # How far the print centre sits before (left of / above) the slot centre
    delta = slot_size / 2 - (leading_border + print_size / 2)
    return centered_gap - delta, centered_gap + delta


def apply_offset_and_blades(
    calc: BorderCalculation,
    offset: Offset,
    easel: Optional[EaselSlot] = None,
    honor_min_border: bool = False,
) -> BorderCalculation:
    """Return a new calculation with offset borders and four blade readings.

    When no slot is given the easel catalog resolves one from the paper size; a
    given slot is turned to the paper and is standard when it matches it in
    either orientation.

    Infeasible layouts come back with slot information only.
    """
    if easel is None:
        classification = classify_paper_size(calc.paper_width, calc.paper_height)
        slot = classification.slot
        is_standard = classification.is_standard
        label = classification.label
    else:
        slot, is_standard = orient_slot_to_paper(easel, calc.paper_width, calc.paper_height)
        label = slot.label if is_standard else f"Position paper in {slot.label} slot, aligned left"

    calc = replace(
        calc,
        is_non_standard_paper_size=not is_standard,
        easel_slot_width=slot.width,
        easel_slot_height=slot.height,
        easel_size_label=label,
    )
    if not calc.is_feasible:
        return calc

    size = fit_print_size(
        calc.paper_width,
        calc.paper_height,
        calc.ratio_width,
        calc.ratio_height,
        calc.min_border,
    )
    clamp = clamp_offsets(
        calc.paper_width,
        calc.paper_height,
        size.print_width,
        size.print_height,
        calc.min_border,
        offset.horizontal,
        offset.vertical,
        honor_min_border,
    )

    left = max(clamp.half_width - clamp.horizontal, 0.0)
    right = max(clamp.half_width + clamp.horizontal, 0.0)
    top = max(clamp.half_height - clamp.vertical, 0.0)
    bottom = max(clamp.half_height + clamp.vertical, 0.0)

    left_reading, right_reading = _readings(slot.width, size.print_width, left)
    top_reading, bottom_reading = _readings(slot.height, size.print_height, top)

    blade_warning = None
    readings = (left_reading, right_reading, top_reading, bottom_reading)
    if any(r < -TOLERANCES.catalog for r in readings):
        blade_warning = (
            f"Paper overhangs the {slot.label} slot; readings past the slot edge are shown as 0."
        )
    left_reading, right_reading, top_reading, bottom_reading = (
        max(r, 0.0) for r in readings
    )

    return replace(
        calc,
        left_border=round_display(left),
        right_border=round_display(right),
        top_border=round_display(top),
        bottom_border=round_display(bottom),
        left_blade_reading=round_display(left_reading),
        right_blade_reading=round_display(right_reading),
        top_blade_reading=round_display(top_reading),
        bottom_blade_reading=round_display(bottom_reading),
        clamped_horizontal_offset=round_display(clamp.horizontal),
        clamped_vertical_offset=round_display(clamp.vertical),
        offset_warning=clamp.warning,
        blade_warning=blade_warning,
    )
