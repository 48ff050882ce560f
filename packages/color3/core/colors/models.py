"""Color value model: a chosen hex paired with its derived family."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from color3.core.colors.classifier import classify, normalize_hex
from color3.core.colors.enum import ColorFamily


class ColorValue(BaseModel):
    """A user-chosen color and the family it classifies to.

    The hex is normalized to uppercase '#RRGGBB'. The family is always the
    classification of the hex: when omitted it is derived, when supplied it
    must agree.

    Example:
        >>> ColorValue.from_hex("#2563eb")
        ColorValue(hex='#2563EB', family=<ColorFamily.BLUE: 'blue'>)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hex: str = Field(description="Uppercase '#RRGGBB' hex color.")
    family: ColorFamily = Field(description="Family derived from the hex.")

    @model_validator(mode="before")
    @classmethod
    def _derive_family(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("hex"), str):
            data = dict(data)
            data["hex"] = normalize_hex(data["hex"])
            if data.get("family") is None:
                data["family"] = classify(data["hex"])
        return data

    @model_validator(mode="after")
    def _check_family(self) -> Self:
        expected = classify(self.hex)
        if self.family != expected:
            raise ValueError(
                f"Family {self.family.value!r} does not match {self.hex} (expected {expected.value!r})"
            )
        return self

    @classmethod
    def from_hex(cls, hex_color: str) -> ColorValue:
        """Create a ColorValue, classifying the hex."""
        return cls(hex=hex_color)
