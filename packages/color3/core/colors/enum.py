"""Color family enumeration and display lookups."""

from __future__ import annotations

from enum import Enum


class ColorFamily(str, Enum):
    """Coarse hue/achromatic bucket a chosen color is reduced to.

    Declaration order is the canonical enumeration order; ranking ties are
    broken by it.
    """

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    GRAY = "gray"
    BLACK = "black"
    WHITE = "white"

    @property
    def label(self) -> str:
        """Human-readable label (e.g. "Red")."""
        return family_label(self)

    @property
    def representative(self) -> str:
        """Representative display hex for this family."""
        return family_representative(self)


# Position of each family in declaration order.
FAMILY_ORDER: dict[ColorFamily, int] = {family: i for i, family in enumerate(ColorFamily)}

_LABELS: dict[ColorFamily, str] = {family: family.value.capitalize() for family in ColorFamily}

# Display swatches. Each one classifies back to its own family.
_REPRESENTATIVES: dict[ColorFamily, str] = {
    ColorFamily.RED: "#DC2626",
    ColorFamily.ORANGE: "#EA580C",
    ColorFamily.YELLOW: "#FACC15",
    ColorFamily.GREEN: "#16A34A",
    ColorFamily.CYAN: "#06B6D4",
    ColorFamily.BLUE: "#2563EB",
    ColorFamily.PURPLE: "#9333EA",
    ColorFamily.PINK: "#EC4899",
    ColorFamily.GRAY: "#6B7280",
    ColorFamily.BLACK: "#111827",
    ColorFamily.WHITE: "#F3F4F6",
}


def family_label(family: ColorFamily | str) -> str:
    """Return the human-readable label for a color family."""
    return _LABELS[ColorFamily(family)]


def family_representative(family: ColorFamily | str) -> str:
    """Return the representative display hex for a color family."""
    return _REPRESENTATIVES[ColorFamily(family)]
