"""One-call layout: geometry, easel classification, offsets and blades."""

from __future__ import annotations

from .blade_translator import apply_offset_and_blades
from .layout_models import BorderCalculation, Offset
from .print_geometry import compute_borders


def compute_border_calculation(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    min_border: float,
    offset_h: float = 0.0,
    offset_v: float = 0.0,
    honor_min_border: bool = False,
) -> BorderCalculation:
    """Compute the full layout for one set of inputs.

    The easel slot comes from the catalog. Check ``is_feasible`` on the result
    before reading borders or blades.
    """
    calc = compute_borders(paper_w, paper_h, ratio_w, ratio_h, min_border)
    return apply_offset_and_blades(
        calc,
        Offset(offset_h, offset_v),
        honor_min_border=honor_min_border,
    )
