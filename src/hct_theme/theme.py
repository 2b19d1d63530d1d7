# theme.py – UI-facing theme: a seed color and its resolved Material roles
#   MaterialTheme is the value the cache hands out and the web layer serializes

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Mapping

from . import color_spec
from .color_utils import (
    Argb,
    alpha_from_argb,
    argb_from_rgb,
    argb_from_rgb_hex,
    argb_from_rgba_hex,
    blue_from_argb,
    green_from_argb,
    red_from_argb,
)
from .dynamic_scheme import DynamicScheme
from .hct import Hct
from .variant import Variant

log = logging.getLogger(__name__)

DEFAULT_SEED_HEX = "#769CDF"


class MaterialContrast(Enum):
    STANDARD = 0.0
    MEDIUM = 0.5
    HIGH = 1.0

    @property
    def level(self) -> float:
        return self.value

    @classmethod
    def parse(cls, raw: Any) -> MaterialContrast:
        """
        Name ('medium'), level (0.5) or member; anything else is STANDARD.
        """
        if isinstance(raw, cls):
            return raw
        if raw is None or raw == "":
            return cls.STANDARD
        if isinstance(raw, str):
            key = raw.strip().upper()
            if key in cls.__members__:
                return cls[key]
            try:
                raw = float(key)
            except ValueError:
                log.warning("unknown contrast %r, using standard", raw)
                return cls.STANDARD
        for member in cls:
            if member.value == raw:
                return member
        log.warning("unknown contrast %r, using standard", raw)
        return cls.STANDARD


# --- colors ------------------------------------------------------------------


@dataclass(frozen=True)
class MaterialColor:
    """A resolved ARGB color with byte and normalized channel views."""

    value: Argb

    @property
    def alpha(self) -> int:
        return alpha_from_argb(self.value)

    @property
    def red(self) -> int:
        return red_from_argb(self.value)

    @property
    def green(self) -> int:
        return green_from_argb(self.value)

    @property
    def blue(self) -> int:
        return blue_from_argb(self.value)

    @property
    def alpha_f(self) -> float:
        return self.alpha / 255.0

    @property
    def red_f(self) -> float:
        return self.red / 255.0

    @property
    def green_f(self) -> float:
        return self.green / 255.0

    @property
    def blue_f(self) -> float:
        return self.blue / 255.0

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    def to_rgb_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def to_rgba_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}{self.alpha:02X}"

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.red_f:.3f} {self.green_f:.3f} {self.blue_f:.3f} {self.alpha_f:.3f}"


# --- theme -------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class MaterialTheme:
    """
    Seed color plus every Material role resolved for one mode and contrast.

    Roles read as attributes: ``theme.primary``, ``theme.on_surface_variant``.
    """

    seed_color: MaterialColor
    is_dark_mode: bool
    contrast: MaterialContrast
    variant: Variant
    colors: Mapping[str, MaterialColor]
    _scheme: DynamicScheme = field(repr=False)

    DEFAULT: ClassVar[MaterialTheme]

    # ---- construction ----

    @classmethod
    def create(
        cls,
        seed: int,
        is_dark_mode: bool = False,
        contrast: MaterialContrast = MaterialContrast.STANDARD,
        variant: Variant = Variant.TONAL_SPOT,
    ) -> MaterialTheme:
        """Build a theme from a packed 32-bit seed; alpha is forced opaque."""
        seed = int(seed)
        if not 0 <= seed <= 0xFFFFFFFF:
            raise ValueError(f"seed color out of range: {seed:#x}")
        seed |= 0xFF000000
        contrast = MaterialContrast.parse(contrast)
        scheme = DynamicScheme.create(
            Hct.from_argb(seed), Variant(variant), is_dark_mode, contrast.level
        )
        return cls._from_scheme(seed, scheme, contrast)

    @classmethod
    def create_from_rgb(
        cls,
        r: int,
        g: int,
        b: int,
        is_dark_mode: bool = False,
        contrast: MaterialContrast = MaterialContrast.STANDARD,
        variant: Variant = Variant.TONAL_SPOT,
    ) -> MaterialTheme:
        for name, channel in (("red", r), ("green", g), ("blue", b)):
            if not 0 <= channel <= 255:
                raise ValueError(f"{name} channel out of range: {channel}")
        return cls.create(argb_from_rgb(r, g, b), is_dark_mode, contrast, variant)

    @classmethod
    def create_from_rgba_hex(
        cls,
        text: str,
        is_dark_mode: bool = False,
        contrast: MaterialContrast = MaterialContrast.STANDARD,
        variant: Variant = Variant.TONAL_SPOT,
    ) -> MaterialTheme:
        """'#RRGGBBAA' or '#RRGGBB'; the alpha digits are ignored."""
        return cls.create(argb_from_rgba_hex(text), is_dark_mode, contrast, variant)

    @classmethod
    def create_from_rgb_hex(
        cls,
        text: str,
        is_dark_mode: bool = False,
        contrast: MaterialContrast = MaterialContrast.STANDARD,
        variant: Variant = Variant.TONAL_SPOT,
    ) -> MaterialTheme:
        """'#RRGGBB' only; use `create_from_rgba_hex` for input with alpha digits."""
        return cls.create(argb_from_rgb_hex(text), is_dark_mode, contrast, variant)

    @classmethod
    def _from_scheme(
        cls, seed: Argb, scheme: DynamicScheme, contrast: MaterialContrast
    ) -> MaterialTheme:
        colors = {name: MaterialColor(argb) for name, argb in scheme.colors.items()}
        return cls(
            seed_color=MaterialColor(seed),
            is_dark_mode=scheme.is_dark,
            contrast=contrast,
            variant=scheme.variant,
            colors=colors,
            _scheme=scheme,
        )

    # ---- views ----

    @property
    def light(self) -> MaterialTheme:
        if not self.is_dark_mode:
            return self
        return MaterialTheme.create(self.seed_color.value, False, self.contrast, self.variant)

    @property
    def dark(self) -> MaterialTheme:
        if self.is_dark_mode:
            return self
        return MaterialTheme.create(self.seed_color.value, True, self.contrast, self.variant)

    def with_contrast(self, contrast: MaterialContrast) -> MaterialTheme:
        """Re-resolve every role at another contrast, reusing this theme's palettes."""
        contrast = MaterialContrast.parse(contrast)
        if contrast is self.contrast:
            return self
        scheme = self._scheme.with_contrast(contrast.level)
        return MaterialTheme._from_scheme(self.seed_color.value, scheme, contrast)

    @property
    def standard_contrast(self) -> MaterialTheme:
        return self.with_contrast(MaterialContrast.STANDARD)

    @property
    def medium_contrast(self) -> MaterialTheme:
        return self.with_contrast(MaterialContrast.MEDIUM)

    @property
    def high_contrast(self) -> MaterialTheme:
        return self.with_contrast(MaterialContrast.HIGH)

    # ---- access ----

    def __getattr__(self, name: str) -> MaterialColor:
        if name.startswith("_") or name not in color_spec.ROLE_NAMES:
            raise AttributeError(name)
        return self.__dict__["colors"][name]

    def to_dict(self) -> dict[str, str]:
        """Role name → '#rrggbb'."""
        return {name: color.to_rgb_hex().lower() for name, color in self.colors.items()}


MaterialTheme.DEFAULT = MaterialTheme.create_from_rgb_hex(DEFAULT_SEED_HEX)


__all__ = ["DEFAULT_SEED_HEX", "MaterialColor", "MaterialContrast", "MaterialTheme"]
