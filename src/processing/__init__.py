"""Border layout engine.

This package contains:
- Easel catalog classification of paper sizes
- Print geometry solver (print size and centered borders)
- Offset clamping and easel blade readings
- Quarter-inch minimum border search

Every function here is pure apart from DEBUG logging in the search: no I/O,
no shared mutable state. Invalid or infeasible input comes back as sentinel
values (0x0 print, None, or an INVALID_INPUT/NO_SOLUTION status), never as an
exception.
"""

from .blade_translator import apply_offset_and_blades, clamp_offsets
from .border_calculator import compute_border_calculation
from .easel_catalog import EASEL_CATALOG, EaselCatalog, classify_paper_size
from .layout_models import (
    BorderCalculation,
    EaselSlot,
    Offset,
    OffsetClamp,
    PaperClassification,
    PrintSize,
    QuarterInchResult,
    QuarterInchStatus,
)
from .print_geometry import compute_borders, compute_print_size, fit_print_size
from .quarter_inch_search import (
    calculate_optimal_min_border,
    find_quarter_inch_min_border,
    search_quarter_inch_min_border,
)

__all__ = [
    "BorderCalculation",
    "EASEL_CATALOG",
    "EaselCatalog",
    "EaselSlot",
    "Offset",
    "OffsetClamp",
    "PaperClassification",
    "PrintSize",
    "QuarterInchResult",
    "QuarterInchStatus",
    "apply_offset_and_blades",
    "calculate_optimal_min_border",
    "clamp_offsets",
    "classify_paper_size",
    "compute_border_calculation",
    "compute_borders",
    "compute_print_size",
    "find_quarter_inch_min_border",
    "fit_print_size",
    "search_quarter_inch_min_border",
]
