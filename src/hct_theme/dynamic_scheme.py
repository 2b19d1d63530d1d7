# dynamic_scheme.py – the six palettes and display settings roles resolve against

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property

from . import color_spec
from .color_utils import Argb
from .hct import Hct
from .palettes import TonalPalette
from .variant import Platform, SpecVersion, Variant

log = logging.getLogger(__name__)


@dataclass(eq=False)
class DynamicScheme:
    """
    Everything a role needs to pick its tone: source color, variant, mode,
    contrast level and the derived palettes.

    contrast_level runs from -1.0 (reduced) through 0.0 (standard) to 1.0 (high).
    """

    source_color_hct: Hct
    variant: Variant
    is_dark: bool
    contrast_level: float
    platform: Platform
    spec_version: SpecVersion
    primary_palette: TonalPalette
    secondary_palette: TonalPalette
    tertiary_palette: TonalPalette
    neutral_palette: TonalPalette
    neutral_variant_palette: TonalPalette
    error_palette: TonalPalette

    @classmethod
    def create(
        cls,
        source_color_hct: Hct,
        variant: Variant,
        is_dark: bool,
        contrast_level: float,
        spec_version: SpecVersion = SpecVersion.SPEC_2021,
        platform: Platform = Platform.PHONE,
    ) -> DynamicScheme:
        if not -1.0 <= contrast_level <= 1.0:
            raise ValueError(f"contrast level must be in [-1, 1], got {contrast_level}")
        spec = color_spec.get(spec_version)
        variant = Variant(variant)
        log.debug(
            "building %s %s scheme for %s at contrast %.2f",
            variant.value,
            "dark" if is_dark else "light",
            source_color_hct,
            contrast_level,
        )
        return cls(
            source_color_hct=source_color_hct,
            variant=variant,
            is_dark=is_dark,
            contrast_level=contrast_level,
            platform=Platform(platform),
            spec_version=spec.spec_version,
            primary_palette=spec.primary_palette(variant, source_color_hct),
            secondary_palette=spec.secondary_palette(variant, source_color_hct),
            tertiary_palette=spec.tertiary_palette(variant, source_color_hct),
            neutral_palette=spec.neutral_palette(variant, source_color_hct),
            neutral_variant_palette=spec.neutral_variant_palette(variant, source_color_hct),
            error_palette=spec.error_palette(variant, source_color_hct),
        )

    def with_contrast(self, contrast_level: float) -> DynamicScheme:
        """Same palettes, another contrast level."""
        if not -1.0 <= contrast_level <= 1.0:
            raise ValueError(f"contrast level must be in [-1, 1], got {contrast_level}")
        return DynamicScheme(
            source_color_hct=self.source_color_hct,
            variant=self.variant,
            is_dark=self.is_dark,
            contrast_level=contrast_level,
            platform=self.platform,
            spec_version=self.spec_version,
            primary_palette=self.primary_palette,
            secondary_palette=self.secondary_palette,
            tertiary_palette=self.tertiary_palette,
            neutral_palette=self.neutral_palette,
            neutral_variant_palette=self.neutral_variant_palette,
            error_palette=self.error_palette,
        )

    @property
    def spec(self) -> color_spec.ColorSpec2021:
        return color_spec.get(self.spec_version)

    @property
    def source_color_argb(self) -> Argb:
        return self.source_color_hct.argb

    @cached_property
    def colors(self) -> dict[str, Argb]:
        """Every role of the color spec resolved to ARGB."""
        return {name: role.get_argb(self) for name, role in self.spec.roles().items()}

    def get_argb(self, role_name: str) -> Argb:
        if role_name not in color_spec.ROLE_NAMES:
            raise ValueError(f"unknown color role '{role_name}'")
        return getattr(self.spec, role_name).get_argb(self)


__all__ = ["DynamicScheme"]
