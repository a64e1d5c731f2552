"""Standard/non-standard paper classification against the easel slot table."""

from __future__ import annotations

from typing import Optional, Tuple

from config.layout_constants import TOLERANCES
from config.paper_catalog import EASEL_SLOTS, EaselSlotSpec

from .layout_models import EaselSlot, PaperClassification
from .precision import all_positive


def _orient(spec: EaselSlotSpec, landscape: bool) -> EaselSlot:
    short, long_ = sorted((spec.width, spec.height))
    if landscape:
        return EaselSlot(spec.label, long_, short)
    return EaselSlot(spec.label, short, long_)


def _same(a: float, b: float) -> bool:
    return abs(a - b) <= TOLERANCES.catalog


class EaselCatalog:
    """Read-only lookups over a fixed tuple of easel slots."""

    def __init__(self, slots: Tuple[EaselSlotSpec, ...]):
        if not slots:
            raise ValueError("Easel catalog needs at least one slot")
        self._slots = tuple(sorted(slots, key=lambda s: s.area))

    @property
    def slots(self) -> Tuple[EaselSlotSpec, ...]:
        return self._slots

    @property
    def largest(self) -> EaselSlotSpec:
        return self._slots[-1]

    @property
    def max_dimension(self) -> float:
        return max(max(s.width, s.height) for s in self._slots)

    def find_exact(self, width: float, height: float) -> Optional[EaselSlotSpec]:
        """Slot matching the paper in either orientation, if any."""
        for spec in self._slots:
            if (_same(spec.width, width) and _same(spec.height, height)) or (
                _same(spec.height, width) and _same(spec.width, height)
            ):
                return spec
        return None

    def find_smallest_containing(
        self, width: float, height: float
    ) -> Optional[EaselSlot]:
        """Smallest slot (by area) holding the paper, oriented to hold it.

        The paper's own orientation is tried first, then the rotated slot.
        """
        landscape = width > height
        for spec in self._slots:
            for slot in (_orient(spec, landscape), _orient(spec, not landscape)):
                if slot.width >= width and slot.height >= height:
                    return slot
        return None

    def classify(self, width: float, height: float) -> PaperClassification:
        largest = self.largest

        if not all_positive(width, height):
            return PaperClassification(
                is_standard=False,
                slot=_orient(largest, False),
                label=f"Invalid paper size; position manually in {largest.label} slot, aligned left",
                fits=False,
            )

        landscape = width > height
        exact = self.find_exact(width, height)
        if exact is not None:
            return PaperClassification(
                is_standard=True,
                slot=_orient(exact, landscape),
                label=exact.label,
            )

        slot = self.find_smallest_containing(width, height)
        if slot is not None:
            return PaperClassification(
                is_standard=False,
                slot=slot,
                label=f"Position paper in {slot.label} slot, aligned left",
            )

        return PaperClassification(
            is_standard=False,
            slot=_orient(largest, landscape),
            label=(
                f"Paper exceeds the largest easel; position manually in "
                f"{largest.label} slot, aligned left"
            ),
            fits=False,
        )


def orient_slot_to_paper(slot: EaselSlot, width: float, height: float) -> Tuple[EaselSlot, bool]:
    """Turn a given slot to the paper's orientation.

    The flag is True when the slot matches the paper, in either orientation.
    """
    oriented = _orient(EaselSlotSpec(slot.label, slot.width, slot.height), width > height)
    return oriented, _same(oriented.width, width) and _same(oriented.height, height)


EASEL_CATALOG = EaselCatalog(EASEL_SLOTS)


def classify_paper_size(width: float, height: float) -> PaperClassification:
    """Classify a paper size against the standard easel catalog. Never fails."""
    return EASEL_CATALOG.classify(width, height)
