"""Static tables of easel slots, paper sizes and aspect ratios (inches)."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

CUSTOM_KEY = "custom"
EVEN_BORDERS_KEY = "even-borders"


@dataclass(frozen=True)
class EaselSlotSpec:
    """A dedicated easel slot the blade scale is calibrated against."""

    label: str
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class PaperSizeSpec:
    """Selectable paper size. Custom has no fixed dimensions."""

    key: str
    label: str
    width: float = 0.0
    height: float = 0.0

    @property
    def is_custom(self) -> bool:
        return self.key == CUSTOM_KEY


@dataclass(frozen=True)
class AspectRatioSpec:
    """Selectable negative/print aspect ratio."""

    key: str
    label: str
    width: Optional[float] = None
    height: Optional[float] = None

    @property
    def is_custom(self) -> bool:
        return self.key == CUSTOM_KEY

    @property
    def is_even_borders(self) -> bool:
        return self.key == EVEN_BORDERS_KEY


# Portrait orientation (width <= height); matching is orientation-insensitive.
EASEL_SLOTS: Tuple[EaselSlotSpec, ...] = (
    EaselSlotSpec("4x5", 4.0, 5.0),
    EaselSlotSpec("5x7", 5.0, 7.0),
    EaselSlotSpec("8x10", 8.0, 10.0),
    EaselSlotSpec("11x14", 11.0, 14.0),
    EaselSlotSpec("16x20", 16.0, 20.0),
    EaselSlotSpec("20x24", 20.0, 24.0),
)

PAPER_SIZES: Tuple[PaperSizeSpec, ...] = (
    PaperSizeSpec("5x7", "5x7", 5.0, 7.0),
    PaperSizeSpec("3.875x5.875", "3⅞x5⅞ (postcard)", 3.875, 5.875),
    PaperSizeSpec("4x5", "4x5", 4.0, 5.0),
    PaperSizeSpec("8x10", "8x10", 8.0, 10.0),
    PaperSizeSpec("11x14", "11x14", 11.0, 14.0),
    PaperSizeSpec("16x20", "16x20", 16.0, 20.0),
    PaperSizeSpec("20x24", "20x24", 20.0, 24.0),
    PaperSizeSpec(CUSTOM_KEY, "Custom Paper Size"),
)

ASPECT_RATIOS: Tuple[AspectRatioSpec, ...] = (
    AspectRatioSpec("3:2", "35mm standard frame, 6x9 (3:2)", 3.0, 2.0),
    AspectRatioSpec(EVEN_BORDERS_KEY, "Even borders (match paper)"),
    AspectRatioSpec("65:24", "XPan Pano (65:24)", 65.0, 24.0),
    AspectRatioSpec("4:3", "6x4.5/6x8/35mm Half Frame (4:3)", 4.0, 3.0),
    AspectRatioSpec("1:1", "6x6/Square (1:1)", 1.0, 1.0),
    AspectRatioSpec("7:6", "6x7", 7.0, 6.0),
    AspectRatioSpec("5:4", "4x5", 5.0, 4.0),
    AspectRatioSpec("7:5", "5x7", 7.0, 5.0),
    AspectRatioSpec("16:9", "HDTV (16:9)", 16.0, 9.0),
    AspectRatioSpec("1.37:1", "Academy Ratio (1.37:1)", 1.37, 1.0),
    AspectRatioSpec("1.85:1", "Widescreen (1.85:1)", 1.85, 1.0),
    AspectRatioSpec("2:1", "Univisium (2:1)", 2.0, 1.0),
    AspectRatioSpec("2.39:1", "CinemaScope (2.39:1)", 2.39, 1.0),
    AspectRatioSpec("2.76:1", "Ultra Panavision (2.76:1)", 2.76, 1.0),
    AspectRatioSpec(CUSTOM_KEY, "Custom Ratio"),
)

PAPER_SIZE_MAP: Dict[str, PaperSizeSpec] = {spec.key: spec for spec in PAPER_SIZES}
ASPECT_RATIO_MAP: Dict[str, AspectRatioSpec] = {spec.key: spec for spec in ASPECT_RATIOS}


def get_paper_size(key: Optional[str]) -> Optional[PaperSizeSpec]:
    """Paper size for a key, ignoring case and surrounding whitespace; None if unknown."""
    if not key:
        return None
    return PAPER_SIZE_MAP.get(key.strip().lower())


def get_aspect_ratio(key: Optional[str]) -> Optional[AspectRatioSpec]:
    """Aspect ratio for a key such as "3:2" or "even-borders"; None if unknown."""
    if not key:
        return None
    return ASPECT_RATIO_MAP.get(key.strip().lower())
