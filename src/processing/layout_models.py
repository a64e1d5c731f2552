"""Value objects produced by the border layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class PrintSize:
    print_width: float
    print_height: float

    @property
    def is_feasible(self) -> bool:
        return self.print_width > 0 and self.print_height > 0


@dataclass(frozen=True)
class Offset:
    """Requested shift of the print inside its borders (inches).

    Positive horizontal narrows the left border, positive vertical narrows
    the top border.
    """

    horizontal: float = 0.0
    vertical: float = 0.0


@dataclass(frozen=True)
class EaselSlot:
    """Physical slot, oriented to match the paper it holds."""

    label: str
    width: float
    height: float


@dataclass(frozen=True)
class PaperClassification:
    """Outcome of matching a paper size against the easel catalog."""

    is_standard: bool
    slot: EaselSlot
    label: str
    fits: bool = True
    """False when the paper is larger than every slot in the catalog"""

    @property
    def slot_width(self) -> float:
        return self.slot.width

    @property
    def slot_height(self) -> float:
        return self.slot.height


@dataclass(frozen=True)
class OffsetClamp:
    """Offsets after range and feasibility clamping."""

    half_width: float
    half_height: float
    horizontal: float
    vertical: float
    warning: Optional[str] = None


@dataclass(frozen=True)
class BorderCalculation:
    """Complete layout for one set of inputs. Never mutated after creation."""

    paper_width: float
    paper_height: float
    ratio_width: float
    ratio_height: float
    min_border: float

    print_width: float
    print_height: float

    left_border: float
    right_border: float
    top_border: float
    bottom_border: float

    left_blade_reading: float = 0.0
    right_blade_reading: float = 0.0
    top_blade_reading: float = 0.0
    bottom_blade_reading: float = 0.0

    clamped_horizontal_offset: float = 0.0
    clamped_vertical_offset: float = 0.0

    is_non_standard_paper_size: bool = False
    easel_slot_width: float = 0.0
    easel_slot_height: float = 0.0
    easel_size_label: str = ""

    offset_warning: Optional[str] = None
    blade_warning: Optional[str] = None
    min_border_warning: Optional[str] = None
    paper_size_warning: Optional[str] = None

    @property
    def is_feasible(self) -> bool:
        """False means "no valid layout"; readings must not be used."""
        return self.print_width > 0 and self.print_height > 0

    @property
    def warnings(self) -> list[str]:
        return [
            w
            for w in (
                self.paper_size_warning,
                self.min_border_warning,
                self.offset_warning,
                self.blade_warning,
            )
            if w
        ]

    def borders(self) -> dict[str, float]:
        return {
            "left": self.left_border,
            "right": self.right_border,
            "top": self.top_border,
            "bottom": self.bottom_border,
        }

    def blade_readings(self) -> dict[str, float]:
        return {
            "left": self.left_blade_reading,
            "right": self.right_blade_reading,
            "top": self.top_blade_reading,
            "bottom": self.bottom_blade_reading,
        }


class QuarterInchStatus(str, Enum):
    ALREADY_ALIGNED = "already_aligned"
    FOUND = "found"
    NO_SOLUTION = "no_solution"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class QuarterInchResult:
    """Tagged outcome of the quarter-inch border search."""

    status: QuarterInchStatus
    min_border: Optional[float] = None
    print_width: Optional[float] = None
    print_height: Optional[float] = None

    @property
    def found(self) -> bool:
        return self.status == QuarterInchStatus.FOUND
