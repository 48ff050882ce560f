"""Color classification: hex → HSL → color family."""

from color3.core.colors.classifier import (
    classify,
    hex_to_hsl,
    is_valid_hex,
    normalize_hex,
    parse_hex,
)
from color3.core.colors.enum import (
    FAMILY_ORDER,
    ColorFamily,
    family_label,
    family_representative,
)
from color3.core.colors.models import ColorValue

__all__ = [
    "FAMILY_ORDER",
    "ColorFamily",
    "ColorValue",
    "classify",
    "family_label",
    "family_representative",
    "hex_to_hsl",
    "is_valid_hex",
    "normalize_hex",
    "parse_hex",
]
