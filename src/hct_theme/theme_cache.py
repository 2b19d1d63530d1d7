# theme_cache.py – memoized standard-contrast themes keyed by seed and mode
#   medium/high contrast is derived from the stored theme on each call, never stored

from __future__ import annotations

import logging

from .color_utils import Argb, argb_from_rgba_hex
from .theme import MaterialContrast, MaterialTheme

log = logging.getLogger(__name__)


class ThemeCache:
    """
    Light and dark theme maps keyed by the raw 32-bit seed.

    Not thread-safe; callers sharing one cache across threads must serialize.
    """

    def __init__(self) -> None:
        self._light: dict[Argb, MaterialTheme] | None = {}
        self._dark: dict[Argb, MaterialTheme] | None = {}

    def _table(self, is_dark: bool) -> dict[Argb, MaterialTheme]:
        table = self._dark if is_dark else self._light
        if table is None:
            raise RuntimeError("theme cache is closed")
        return table

    def get(
        self,
        seed: Argb,
        is_dark: bool = False,
        contrast: MaterialContrast | str | float = MaterialContrast.STANDARD,
    ) -> MaterialTheme:
        table = self._table(is_dark)
        contrast = MaterialContrast.parse(contrast)

        base = table.get(seed)
        if base is None:
            log.debug("theme cache miss for %08X (%s)", seed, "dark" if is_dark else "light")
            base = MaterialTheme.create(seed, is_dark, MaterialContrast.STANDARD)
            table[seed] = base

        if contrast is MaterialContrast.STANDARD:
            return base
        return base.with_contrast(contrast)

    def get_from_rgba_hex(
        self,
        text: str,
        is_dark: bool = False,
        contrast: MaterialContrast | str | float = MaterialContrast.STANDARD,
    ) -> MaterialTheme:
        return self.get(argb_from_rgba_hex(text), is_dark, contrast)

    def clear(self) -> None:
        self._table(False).clear()
        self._table(True).clear()

    def close(self) -> None:
        if self._light is None:
            return
        log.debug("closing theme cache with %d entries", len(self))
        self._light = None
        self._dark = None

    @property
    def closed(self) -> bool:
        return self._light is None

    def __len__(self) -> int:
        if self._light is None or self._dark is None:
            return 0
        return len(self._light) + len(self._dark)

    def __contains__(self, key: object) -> bool:
        """`(seed, is_dark)` in cache."""
        if self._light is None or self._dark is None:
            return False
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        seed, is_dark = key
        return seed in (self._dark if is_dark else self._light)

    def __enter__(self) -> ThemeCache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["ThemeCache"]
