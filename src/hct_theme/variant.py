# variant.py – closed sets of scheme options

from __future__ import annotations

from enum import Enum


class Variant(str, Enum):
    """How palettes are derived from the source color."""

    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    TONAL_SPOT = "tonal-spot"
    VIBRANT = "vibrant"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    CONTENT = "content"
    RAINBOW = "rainbow"
    FRUIT_SALAD = "fruit-salad"

    @classmethod
    def parse(cls, text: str | None, default: Variant | None = None) -> Variant:
        """Accept 'tonal-spot', 'tonal_spot' or 'TONAL_SPOT'."""
        if text is None or not text.strip():
            if default is None:
                raise ValueError("variant is required")
            return default
        key = text.strip().lower().replace("_", "-")
        for variant in cls:
            if variant.value == key:
                return variant
        raise ValueError(f"unknown variant '{text}'")


class Platform(str, Enum):
    PHONE = "phone"
    WATCH = "watch"


class SpecVersion(str, Enum):
    SPEC_2021 = "2021"


__all__ = ["Platform", "SpecVersion", "Variant"]
